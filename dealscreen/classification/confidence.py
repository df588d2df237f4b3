import re
from pathlib import Path

from dealscreen.classification.models import ConfidenceAssessment
from dealscreen.classification.patterns import FALLBACK_CHECKS
from dealscreen.extraction.models import DocumentText
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import ProviderError
from dealscreen.gateway.retry import RetryPolicy
from dealscreen.logging.logger import Log
from dealscreen.prompts.prompt_loader import load_prompt_template

_WORD = re.compile(r"[A-Z]+")
# Negations and hedges that turn a CONFIDENT reply into an equivocal one.
_HEDGE_WORDS = frozenset({"NOT", "NO", "UN", "LESS", "SOMEWHAT", "FAIRLY", "PARTIALLY"})


class ConfidenceStage:
    """Second model call asking for certainty, backed by a keyword fallback.

    When the model is not confident or unavailable, the stage passes only if
    at least ``fallback_threshold`` of the four fallback checks match.
    """

    def __init__(
        self,
        *,
        gateway: BaseModelGateway,
        retry_policy: RetryPolicy | None = None,
        max_chars: int = 6000,
        fallback_threshold: int = 3,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._gateway = gateway
        self._retry_policy = retry_policy or RetryPolicy()
        self._max_chars = max_chars
        self._fallback_threshold = fallback_threshold
        self._prompt_template = load_prompt_template("confidence", prompt_template_path)

    @property
    def fallback_threshold(self) -> int:
        return self._fallback_threshold

    def assess(self, document: DocumentText) -> ConfidenceAssessment:
        prompt = self._prompt_template.format(document_text=document.head(self._max_chars))
        Log.debug(f"Confidence check prompt:\n{prompt}")
        error: str | None = None
        raw = ""
        try:
            raw = self._retry_policy.complete(self._gateway, prompt)
        except ProviderError as exc:
            Log.error(f"Confidence check call failed, using fallback score: {exc}", code=exc.code)
            error = str(exc)
        else:
            Log.debug(f"Confidence check raw response:\n{raw}")
            if is_confident(raw):
                return ConfidenceAssessment(
                    confident=True, passed=True, raw_response=raw.strip().upper()
                )

        score = fallback_score(document)
        Log.info(
            f"Model not confident, fallback score {score}/{len(FALLBACK_CHECKS)}",
            threshold=self._fallback_threshold,
        )
        return ConfidenceAssessment(
            confident=False,
            passed=score >= self._fallback_threshold,
            raw_response=raw.strip().upper(),
            fallback_score=score,
            error=error,
        )


def is_confident(raw: str) -> bool:
    """True only for an unhedged CONFIDENT reply.

    Anything equivocal (``NOT_CONFIDENT``, ``UNCONFIDENT``, "less confident")
    counts as not confident so the fallback score decides.
    """
    words = _WORD.findall(raw.upper())
    if words == ["CONFIDENT"]:
        return True
    return "CONFIDENT" in words and _HEDGE_WORDS.isdisjoint(words)


def fallback_score(document: DocumentText) -> int:
    """Count how many of the four fallback keyword checks match."""
    return sum(1 for _, pattern in FALLBACK_CHECKS if pattern.search(document.text))
