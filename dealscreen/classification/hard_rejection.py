from dealscreen.classification.models import HardRejectionResult
from dealscreen.classification.patterns import (
    ALLOWED_TAX_CONTEXTS,
    HARD_REJECT_PATTERNS,
    HardRejectPattern,
)
from dealscreen.extraction.models import DocumentText


class HardRejectionFilter:
    """Disqualifies documents that obviously belong to an unrelated category.

    Pure and provider-free. Tax-identifier patterns are skipped when the
    text also carries an allowed GST/TDS clause, since those appear inside
    genuine brand-deal contracts.
    """

    def __init__(
        self,
        patterns: tuple[HardRejectPattern, ...] = HARD_REJECT_PATTERNS,
    ) -> None:
        self._patterns = patterns

    def evaluate(self, document: DocumentText) -> HardRejectionResult:
        text = document.text
        for entry in self._patterns:
            if not entry.pattern.search(text):
                continue
            if entry.tax_identifier and self._has_allowed_tax_context(text):
                continue
            return HardRejectionResult(
                rejected=True,
                reason=entry.reason,
                matched_pattern=entry.pattern.pattern,
            )
        return HardRejectionResult(rejected=False)

    @staticmethod
    def _has_allowed_tax_context(text: str) -> bool:
        return any(allowed.search(text) for allowed in ALLOWED_TAX_CONTEXTS)
