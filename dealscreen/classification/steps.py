from dealscreen.classification.binary_classifier import BinaryClassifierStage
from dealscreen.classification.confidence import ConfidenceStage
from dealscreen.classification.hard_rejection import HardRejectionFilter
from dealscreen.classification.models import (
    ClassificationState,
    ConfidenceFailed,
    HardReject,
    LlmRejected,
    MissingSignals,
    TextTooShort,
)
from dealscreen.classification.patterns import FALLBACK_CHECKS
from dealscreen.classification.pipeline import (
    ClassificationContext,
    ClassificationStep,
    StageRejection,
)
from dealscreen.classification.signals import SignalScorer
from dealscreen.logging.logger import Log


class LengthCheckStep(ClassificationStep):
    state = ClassificationState.LENGTH_CHECK
    confidence = 0.0

    def __init__(self, min_length: int = 100) -> None:
        self._min_length = min_length

    def run(self, context: ClassificationContext) -> ClassificationContext:
        length = len(context.document.text)
        if length < self._min_length:
            context.rejection = StageRejection(
                state=self.state,
                confidence=self.confidence,
                reasoning=f"Text too short (< {self._min_length} characters)",
                reason=TextTooShort(length=length, minimum=self._min_length),
            )
        return context


class HardRejectionStep(ClassificationStep):
    state = ClassificationState.HARD_REJECTION
    confidence = 0.0

    def __init__(self, hard_filter: HardRejectionFilter) -> None:
        self._filter = hard_filter

    def run(self, context: ClassificationContext) -> ClassificationContext:
        result = self._filter.evaluate(context.document)
        context.hard_rejection = result
        if result.rejected:
            context.rejection = StageRejection(
                state=self.state,
                confidence=self.confidence,
                reasoning=f"Hard rejection: {result.reason}",
                reason=HardReject(
                    pattern=result.matched_pattern or "",
                    reason=result.reason or "",
                ),
            )
        else:
            Log.info("Hard rejection filter passed")
        return context


class SignalScoringStep(ClassificationStep):
    state = ClassificationState.SIGNAL_SCORING
    confidence = 0.2

    def __init__(self, scorer: SignalScorer) -> None:
        self._scorer = scorer

    def run(self, context: ClassificationContext) -> ClassificationContext:
        score = self._scorer.score(context.document)
        context.signals = score
        if not score.passed:
            found = ", ".join(score.found_signals) or "none"
            context.rejection = StageRejection(
                state=self.state,
                confidence=self.confidence,
                reasoning=f"Missing required brand deal signals. Found: {found}. Need at least 2.",
                reason=MissingSignals(
                    missing=score.missing_signals,
                    found=score.found_signals,
                ),
            )
        else:
            Log.info(
                f"Signal scoring passed with {len(score.found_signals)} groups",
                signals=list(score.found_signals),
                rupee_amount=score.has_rupee_amount,
            )
        return context


class BinaryClassifierStep(ClassificationStep):
    state = ClassificationState.BINARY_CLASSIFIER
    confidence = 0.3

    def __init__(self, classifier: BinaryClassifierStage) -> None:
        self._classifier = classifier

    def run(self, context: ClassificationContext) -> ClassificationContext:
        verdict = self._classifier.classify(context.document)
        context.binary_verdict = verdict
        if not verdict.is_valid:
            context.rejection = StageRejection(
                state=self.state,
                confidence=self.confidence,
                reasoning="Model classification did not confirm a brand deal contract",
                reason=LlmRejected(raw_response=verdict.raw_response),
            )
        else:
            Log.info("Binary classifier returned YES")
        return context


class ConfidenceCheckStep(ClassificationStep):
    state = ClassificationState.CONFIDENCE_CHECK
    confidence = 0.4

    def __init__(self, confidence_stage: ConfidenceStage) -> None:
        self._confidence_stage = confidence_stage

    def run(self, context: ClassificationContext) -> ClassificationContext:
        assessment = self._confidence_stage.assess(context.document)
        context.confidence = assessment
        if not assessment.passed:
            context.rejection = StageRejection(
                state=self.state,
                confidence=self.confidence,
                reasoning=(
                    f"Confidence check failed. Fallback score: "
                    f"{assessment.fallback_score}/{len(FALLBACK_CHECKS)} "
                    f"(need >= {self._confidence_stage.fallback_threshold})"
                ),
                reason=ConfidenceFailed(fallback_score=assessment.fallback_score),
            )
        elif assessment.confident:
            Log.info("Confidence check passed: model confident")
        else:
            Log.info(
                "Confidence check passed on fallback score",
                fallback_score=assessment.fallback_score,
            )
        return context
