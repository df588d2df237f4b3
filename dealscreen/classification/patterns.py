"""Keyword and pattern tables used by the deterministic classification stages."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class HardRejectPattern:
    domain: str
    pattern: re.Pattern[str]
    reason: str
    tax_identifier: bool = False


def _rx(expression: str) -> re.Pattern[str]:
    return re.compile(expression, re.IGNORECASE)


# Order matters: the first match wins.
HARD_REJECT_PATTERNS: tuple[HardRejectPattern, ...] = (
    # court / legal
    HardRejectPattern("legal", _rx(r"\bcourt\b"), "Court document detected"),
    HardRejectPattern("legal", _rx(r"\blegal notice\b"), "Legal notice detected"),
    HardRejectPattern("legal", _rx(r"\bsummons\b"), "Summons document detected"),
    HardRejectPattern("legal", _rx(r"\bpetition\b"), "Petition document detected"),
    HardRejectPattern("legal", _rx(r"\bplaintiff\b"), "Court case document (plaintiff)"),
    HardRejectPattern("legal", _rx(r"\bdefendant\b"), "Court case document (defendant)"),
    HardRejectPattern("legal", _rx(r"\bfir\b"), "FIR document detected"),
    # invoices / receipts
    HardRejectPattern("invoice", _rx(r"\binvoice\b.*\bnumber\b"), "Invoice document detected"),
    HardRejectPattern("invoice", _rx(r"\btax invoice\b"), "Tax invoice detected"),
    HardRejectPattern("invoice", _rx(r"\bbill no\b"), "Bill document detected"),
    HardRejectPattern("invoice", _rx(r"\bpayment receipt\b"), "Payment receipt detected"),
    # government IDs
    HardRejectPattern("government_id", _rx(r"\baadhaar\b"), "Aadhaar card document detected"),
    HardRejectPattern("government_id", _rx(r"\bpan card\b"), "PAN card document detected"),
    HardRejectPattern(
        "government_id",
        _rx(r"\bgst certificate\b"),
        "GST certificate detected",
        tax_identifier=True,
    ),
    # insurance
    HardRejectPattern("insurance", _rx(r"\bpolicy number\b"), "Insurance policy detected"),
    HardRejectPattern(
        "insurance", _rx(r"\binsurance claim\b"), "Insurance claim document detected"
    ),
    # vehicle rental
    HardRejectPattern("rental", _rx(r"\bzoomcar\b"), "Vehicle rental (Zoomcar) detected"),
    HardRejectPattern("rental", _rx(r"\bvehicle rental\b"), "Vehicle rental agreement detected"),
    HardRejectPattern("rental", _rx(r"\brc number\b"), "Vehicle RC document detected"),
    # employment
    HardRejectPattern("employment", _rx(r"\bjob offer\b"), "Job offer letter detected"),
    HardRejectPattern(
        "employment", _rx(r"\bsalary\b.*\bemployment\b"), "Employment agreement detected"
    ),
    HardRejectPattern(
        "employment", _rx(r"\bemployment agreement\b"), "Employment contract detected"
    ),
    # loans / property
    HardRejectPattern("loan", _rx(r"\bemi\b"), "Loan/EMI document detected"),
    HardRejectPattern("loan", _rx(r"\bmortgage\b"), "Mortgage document detected"),
    HardRejectPattern("loan", _rx(r"\bloan agreement\b"), "Loan agreement detected"),
)

# GST/TDS clauses that legitimately appear inside brand-deal contracts.
ALLOWED_TAX_CONTEXTS: tuple[re.Pattern[str], ...] = (
    _rx(r"\bgst.*deduction\b"),
    _rx(r"\bgst inclusive\b"),
    _rx(r"\btds.*applicable\b"),
    _rx(r"\btds.*deduction\b"),
)

# Each group counts at most once toward the signal threshold.
SIGNAL_GROUPS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "Content Platform",
        _rx(r"\b(instagram|youtube|reels|shorts|story|content|tiktok|snapchat|facebook)\b"),
    ),
    ("Influencer/Creator", _rx(r"\b(influencer|creator|content creator)\b")),
    ("Brand/Sponsor", _rx(r"\b(brand|sponsor|campaign)\b")),
    (
        "Payment/Compensation",
        _rx(r"\b(payment|fee|compensation|amount payable|remuneration)\b"),
    ),
    ("Deliverables", _rx(r"\b(deliverables|posting schedule|posts|videos|reels)\b")),
)

RUPEE_AMOUNT = _rx(r"₹|\brs\.|\brupees\b|\binr\b")

# Confidence fallback: four yes/no checks, one point each.
FALLBACK_CHECKS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("payment", _rx(r"\b(payment|fee|compensation|amount)\b")),
    ("deliverable", _rx(r"\b(deliverables|posts|reels|videos|content)\b")),
    ("brand", _rx(r"\b(brand|sponsor|campaign)\b")),
    ("creator", _rx(r"\b(influencer|creator|content creator)\b")),
)
