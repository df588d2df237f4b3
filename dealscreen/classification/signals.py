import re

from dealscreen.classification.models import SignalScore
from dealscreen.classification.patterns import RUPEE_AMOUNT, SIGNAL_GROUPS
from dealscreen.extraction.models import DocumentText


class SignalScorer:
    """Counts independent brand-deal signal groups present in a document."""

    def __init__(
        self,
        groups: tuple[tuple[str, re.Pattern[str]], ...] = SIGNAL_GROUPS,
        min_groups: int = 2,
    ) -> None:
        self._groups = groups
        self._min_groups = min_groups

    def score(self, document: DocumentText) -> SignalScore:
        found: list[str] = []
        missing: list[str] = []
        for name, pattern in self._groups:
            (found if pattern.search(document.text) else missing).append(name)
        return SignalScore(
            passed=len(found) >= self._min_groups,
            found_signals=tuple(found),
            missing_signals=tuple(missing),
            has_rupee_amount=RUPEE_AMOUNT.search(document.text) is not None,
        )
