from collections.abc import Sequence

from dealscreen.classification.binary_classifier import BinaryClassifierStage
from dealscreen.classification.confidence import ConfidenceStage
from dealscreen.classification.hard_rejection import HardRejectionFilter
from dealscreen.classification.models import ClassificationResult, DocumentType
from dealscreen.classification.pipeline import ClassificationContext, ClassificationStep
from dealscreen.classification.signals import SignalScorer
from dealscreen.classification.steps import (
    BinaryClassifierStep,
    ConfidenceCheckStep,
    HardRejectionStep,
    LengthCheckStep,
    SignalScoringStep,
)
from dealscreen.config.settings import Settings
from dealscreen.extraction.models import DocumentText
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.retry import RetryPolicy
from dealscreen.logging.logger import Log

ACCEPT_CONFIDENCE = 0.95


class ClassificationOrchestrator:
    """Runs the classification states in order and stops at the first rejection.

    States: length check -> hard rejection -> signal scoring ->
    binary classifier -> confidence check -> accept.
    """

    def __init__(self, steps: Sequence[ClassificationStep]) -> None:
        self._steps = tuple(steps)

    def classify(self, document: DocumentText) -> ClassificationResult:
        context = ClassificationContext(document=document)
        for step in self._steps:
            context = step.run(context)
            rejection = context.rejection
            if rejection is not None:
                Log.warning(
                    f"Document rejected at {rejection.state}: {rejection.reasoning}",
                    reason=rejection.reason,
                )
                return ClassificationResult(
                    type=DocumentType.NOT_BRAND_DEAL,
                    confidence=rejection.confidence,
                    reasoning=rejection.reasoning,
                    rejection=rejection.reason,
                )

        Log.info(
            "All classification stages passed, accepting document",
            signals=list(context.signals.found_signals) if context.signals else [],
        )
        return ClassificationResult(
            type=DocumentType.BRAND_DEAL_CONTRACT,
            confidence=ACCEPT_CONFIDENCE,
            reasoning=(
                "Passed all 4 stages: hard rejection filter, brand deal signals, "
                "LLM binary classifier, confidence check"
            ),
        )


def build_orchestrator(
    gateway: BaseModelGateway,
    *,
    retry_policy: RetryPolicy | None = None,
    min_text_length: int = 100,
    classifier_max_chars: int = 6000,
) -> ClassificationOrchestrator:
    """Wire the default state sequence around *gateway*."""
    policy = retry_policy or RetryPolicy()
    return ClassificationOrchestrator(
        steps=[
            LengthCheckStep(min_length=min_text_length),
            HardRejectionStep(HardRejectionFilter()),
            SignalScoringStep(SignalScorer()),
            BinaryClassifierStep(
                BinaryClassifierStage(
                    gateway=gateway,
                    retry_policy=policy,
                    max_chars=classifier_max_chars,
                )
            ),
            ConfidenceCheckStep(
                ConfidenceStage(
                    gateway=gateway,
                    retry_policy=policy,
                    max_chars=classifier_max_chars,
                )
            ),
        ]
    )


def build_orchestrator_from_settings(
    settings: Settings,
    gateway: BaseModelGateway,
) -> ClassificationOrchestrator:
    return build_orchestrator(
        gateway,
        retry_policy=RetryPolicy.from_settings(settings),
        min_text_length=settings.min_text_length,
        classifier_max_chars=settings.classifier_max_chars,
    )
