from dataclasses import dataclass, field
from enum import StrEnum


class DocumentType(StrEnum):
    BRAND_DEAL_CONTRACT = "brand_deal_contract"
    NOT_BRAND_DEAL = "not_brand_deal"


class ClassificationState(StrEnum):
    """States of the classification machine, in evaluation order."""

    LENGTH_CHECK = "length_check"
    HARD_REJECTION = "hard_rejection"
    SIGNAL_SCORING = "signal_scoring"
    BINARY_CLASSIFIER = "binary_classifier"
    CONFIDENCE_CHECK = "confidence_check"
    ACCEPT = "accept"


# Rejection reasons. Diagnostic only: never surfaced to end users verbatim.


@dataclass(frozen=True)
class TextTooShort:
    length: int
    minimum: int


@dataclass(frozen=True)
class HardReject:
    pattern: str
    reason: str


@dataclass(frozen=True)
class MissingSignals:
    missing: tuple[str, ...]
    found: tuple[str, ...] = ()


@dataclass(frozen=True)
class LlmRejected:
    raw_response: str


@dataclass(frozen=True)
class ConfidenceFailed:
    fallback_score: int | None


RejectionReason = TextTooShort | HardReject | MissingSignals | LlmRejected | ConfidenceFailed


@dataclass(frozen=True)
class HardRejectionResult:
    """Outcome of the deterministic hard-rejection filter."""

    rejected: bool
    reason: str | None = None
    matched_pattern: str | None = None


@dataclass(frozen=True)
class SignalScore:
    """Brand-deal signal groups found in a document."""

    passed: bool
    found_signals: tuple[str, ...] = ()
    missing_signals: tuple[str, ...] = ()
    has_rupee_amount: bool = False


@dataclass(frozen=True)
class BinaryVerdict:
    """Interpreted YES/NO reply of the binary classifier model call."""

    is_valid: bool
    raw_response: str
    error: str | None = None


@dataclass(frozen=True)
class ConfidenceAssessment:
    """Model self-assessment plus the deterministic fallback score."""

    confident: bool
    passed: bool
    raw_response: str
    fallback_score: int | None = None
    error: str | None = None


@dataclass(frozen=True)
class ClassificationResult:
    """Final accept/reject decision for one document."""

    type: DocumentType
    confidence: float
    reasoning: str
    rejection: RejectionReason | None = field(default=None, compare=False)

    @property
    def is_brand_deal(self) -> bool:
        return self.type is DocumentType.BRAND_DEAL_CONTRACT
