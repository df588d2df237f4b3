"""Rule-based negotiation power score for an analysed contract."""

from collections.abc import Iterable

from dealscreen.analysis.models import (
    AnalysisResult,
    Issue,
    NegotiationPowerLabel,
    Severity,
    VerifiedClause,
)

NEUTRAL_SCORE = 50
_IP_CATEGORIES = ("ip", "intellectual property")

CREATOR_DOMINANT = NegotiationPowerLabel(
    label="Creator Dominant Deal", description="You control this deal"
)
BALANCED = NegotiationPowerLabel(
    label="Balanced Negotiation", description="Fairly balanced"
)
BRAND_DOMINATES = NegotiationPowerLabel(
    label="Brand Dominates", description="Brand has the upper hand"
)


def calculate_negotiation_power_score(result: AnalysisResult) -> int:
    """Score how much leverage the creator holds, from 0 to 100."""
    score = NEUTRAL_SCORE
    score += _payment_adjustment(result)

    if _any_matches(
        result.verified, _IP_CATEGORIES, ("creator owns", "creator retains")
    ):
        score += 15
    if _any_matches(result.issues, _IP_CATEGORIES, ("brand owns", "brand retains")):
        score -= 15

    if _any_matches(result.verified, ("termination",), ("termination",)):
        score += 10
    if any(_is_termination_issue(issue) for issue in result.issues):
        score -= 10

    if _any_matches(result.issues, ("exclusivity",), ("exclusive", "non-compete")):
        score -= 15
    if _any_matches(result.issues, ("deliverable",), ("deliverable",)):
        score -= 10
    if _any_matches(result.issues, ("liability",), ("liability", "indemnification")):
        score -= 10

    score += _duration_adjustment(result)
    return max(0, min(100, score))


def negotiation_power_label(score: int) -> NegotiationPowerLabel:
    if score > 65:
        return CREATOR_DOMINANT
    if score >= 40:
        return BALANCED
    return BRAND_DOMINATES


def _payment_adjustment(result: AnalysisResult) -> int:
    text = (result.key_terms.payment or result.key_terms.payment_schedule or "").lower()
    if any(term in text for term in ("7 days", "10 days", "14 days")):
        return 10
    if "30 days" in text or "net 30" in text:
        return 5
    if any(term in text for term in ("45", "60", "90")):
        return -15
    return 0


def _duration_adjustment(result: AnalysisResult) -> int:
    text = (result.key_terms.duration or "").lower()
    if any(term in text for term in ("month", "30 days", "60 days")):
        return 5
    if "year" in text:
        return -5
    return 0


def _any_matches(
    items: Iterable[Issue | VerifiedClause],
    categories: tuple[str, ...],
    titles: tuple[str, ...],
) -> bool:
    for item in items:
        category = item.category.lower()
        title = item.title.lower()
        if any(term in category for term in categories):
            return True
        if any(term in title for term in titles):
            return True
    return False


def _is_termination_issue(issue: Issue) -> bool:
    if "termination" in issue.category.lower():
        return True
    return "termination" in issue.title.lower() and issue.severity is Severity.HIGH
