from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Severity(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    WARNING = "warning"


class ContractCategory(StrEnum):
    BRAND_DEAL = "brand_deal"
    NDA = "nda"
    MOU = "mou"
    BARTER = "barter"
    SPONSORSHIP = "sponsorship"
    OTHER = "other"


@dataclass(frozen=True)
class Issue:
    """A risky or unfavourable clause found in the contract."""

    severity: Severity
    category: str
    title: str
    description: str
    recommendation: str
    clause: str | None = None


@dataclass(frozen=True)
class VerifiedClause:
    """A clause confirmed to protect the creator."""

    category: str
    title: str
    description: str
    clause: str | None = None


@dataclass(frozen=True)
class KeyTerms:
    deal_value: str | None = None
    duration: str | None = None
    deliverables: str | None = None
    payment_schedule: str | None = None
    exclusivity: str | None = None
    payment: str | None = None
    brand_name: str | None = None


@dataclass(frozen=True)
class Parties:
    brand_name: str | None = None
    influencer_name: str | None = None


@dataclass(frozen=True)
class ExtractedTerms:
    payment_terms: str | None = None
    deliverables: str | None = None
    usage_rights: str | None = None
    exclusivity: str | None = None
    termination: str | None = None


@dataclass(frozen=True)
class NegotiationPowerLabel:
    label: str
    description: str


@dataclass(frozen=True)
class AnalysisResult:
    """Normalized contract risk analysis.

    ``negotiation_power_score`` is None until the engine attaches it.
    """

    protection_score: int
    overall_risk: RiskLevel
    issues: tuple[Issue, ...] = ()
    verified: tuple[VerifiedClause, ...] = ()
    key_terms: KeyTerms = field(default_factory=KeyTerms)
    recommendations: tuple[str, ...] = ()
    negotiation_power_score: int | None = None
    document_type: str | None = None
    contract_category: ContractCategory | None = None
    brand_detected: bool | None = None
    parties: Parties = field(default_factory=Parties)
    extracted_terms: ExtractedTerms = field(default_factory=ExtractedTerms)
    negotiation_points: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape the analysis prompt asks for."""
        return {
            "protectionScore": self.protection_score,
            "negotiationPowerScore": self.negotiation_power_score,
            "overallRisk": self.overall_risk.value,
            "issues": [
                {
                    "severity": issue.severity.value,
                    "category": issue.category,
                    "title": issue.title,
                    "description": issue.description,
                    "clause": issue.clause,
                    "recommendation": issue.recommendation,
                }
                for issue in self.issues
            ],
            "verified": [
                {
                    "category": item.category,
                    "title": item.title,
                    "description": item.description,
                    "clause": item.clause,
                }
                for item in self.verified
            ],
            "keyTerms": {
                "dealValue": self.key_terms.deal_value,
                "duration": self.key_terms.duration,
                "deliverables": self.key_terms.deliverables,
                "paymentSchedule": self.key_terms.payment_schedule,
                "exclusivity": self.key_terms.exclusivity,
                "payment": self.key_terms.payment,
                "brandName": self.key_terms.brand_name,
            },
            "recommendations": list(self.recommendations),
            "documentType": self.document_type,
            "detectedContractCategory": (
                self.contract_category.value if self.contract_category else None
            ),
            "brandDetected": self.brand_detected,
            "parties": {
                "brandName": self.parties.brand_name,
                "influencerName": self.parties.influencer_name,
            },
            "extractedTerms": {
                "paymentTerms": self.extracted_terms.payment_terms,
                "deliverables": self.extracted_terms.deliverables,
                "usageRights": self.extracted_terms.usage_rights,
                "exclusivity": self.extracted_terms.exclusivity,
                "termination": self.extracted_terms.termination,
            },
            "negotiationPoints": list(self.negotiation_points),
        }
