from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from dealscreen.classification.models import (
    BinaryVerdict,
    ClassificationState,
    ConfidenceAssessment,
    HardRejectionResult,
    RejectionReason,
    SignalScore,
)
from dealscreen.extraction.models import DocumentText


@dataclass(frozen=True)
class StageRejection:
    """Terminal exit recorded by a step that rejects the document."""

    state: ClassificationState
    confidence: float
    reasoning: str
    reason: RejectionReason


@dataclass(slots=True)
class ClassificationContext:
    document: DocumentText
    hard_rejection: HardRejectionResult | None = None
    signals: SignalScore | None = None
    binary_verdict: BinaryVerdict | None = None
    confidence: ConfidenceAssessment | None = None
    rejection: StageRejection | None = None


class ClassificationStep(ABC):
    """One state of the classification machine.

    A step either falls through (leaves ``context.rejection`` unset) or
    records a StageRejection, which ends the run.
    """

    state: ClassVar[ClassificationState]

    @abstractmethod
    def run(self, context: ClassificationContext) -> ClassificationContext:
        raise NotImplementedError
