"""Turns a raw model reply into a validated AnalysisResult.

Every field is validated and defaulted on its own, so one malformed field
never discards the rest of the analysis.
"""

import json
import math
from enum import StrEnum
from typing import Any, TypeVar

from dealscreen.analysis.exceptions import ParseError
from dealscreen.analysis.models import (
    AnalysisResult,
    ContractCategory,
    ExtractedTerms,
    Issue,
    KeyTerms,
    Parties,
    RiskLevel,
    Severity,
    VerifiedClause,
)
from dealscreen.logging.logger import Log

StrEnumT = TypeVar("StrEnumT", bound=StrEnum)

DEFAULT_PROTECTION_SCORE = 75
DEFAULT_RECOMMENDATIONS = (
    "Review identified issues with your legal advisor",
    "Negotiate better terms before signing",
)
DEFAULT_CATEGORY = "General"
DEFAULT_ISSUE_TITLE = "Issue"
DEFAULT_VERIFIED_TITLE = "Verified"
DEFAULT_ISSUE_RECOMMENDATION = "Review with legal advisor"

_KEY_TERM_FIELDS = {
    "dealValue": "deal_value",
    "duration": "duration",
    "deliverables": "deliverables",
    "paymentSchedule": "payment_schedule",
    "exclusivity": "exclusivity",
    "payment": "payment",
    "brandName": "brand_name",
}
_EXTRACTED_TERM_FIELDS = {
    "paymentTerms": "payment_terms",
    "deliverables": "deliverables",
    "usageRights": "usage_rights",
    "exclusivity": "exclusivity",
    "termination": "termination",
}
_PARTY_FIELDS = {
    "brandName": "brand_name",
    "influencerName": "influencer_name",
}


class ResponseNormalizer:
    """Parses and normalizes structured-analysis replies."""

    def normalize(self, raw: str) -> AnalysisResult:
        return self.normalize_payload(self.parse(raw))

    @staticmethod
    def parse(raw: str) -> dict[str, Any]:
        """Decode the first JSON object in ``raw``.

        Raises:
            ParseError: when no valid JSON object can be recovered.
        """
        cleaned = _strip_code_fences(raw)
        candidate = _first_balanced_object(cleaned)
        if candidate is None:
            candidate = cleaned

        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ParseError("JSON response must be an object")
        return parsed

    @staticmethod
    def normalize_payload(data: dict[str, Any]) -> AnalysisResult:
        issues = tuple(
            _build_issue(item) for item in _object_items(data.get("issues"), "issues")
        )
        verified = tuple(
            _build_verified(item)
            for item in _object_items(data.get("verified"), "verified")
        )
        recommendations = _string_list(data.get("recommendations"))
        if recommendations is None:
            recommendations = DEFAULT_RECOMMENDATIONS
        negotiation_points = _string_list(data.get("negotiationPoints"))
        if negotiation_points is None:
            negotiation_points = recommendations

        return AnalysisResult(
            protection_score=_protection_score(data.get("protectionScore")),
            overall_risk=_overall_risk(data.get("overallRisk")),
            issues=issues,
            verified=verified,
            key_terms=KeyTerms(**_string_fields(data.get("keyTerms"), _KEY_TERM_FIELDS)),
            recommendations=recommendations,
            negotiation_power_score=_optional_score(data.get("negotiationPowerScore")),
            document_type=_optional_string(data.get("documentType")),
            contract_category=_contract_category(data.get("detectedContractCategory")),
            brand_detected=(
                data["brandDetected"]
                if isinstance(data.get("brandDetected"), bool)
                else None
            ),
            parties=Parties(**_string_fields(data.get("parties"), _PARTY_FIELDS)),
            extracted_terms=ExtractedTerms(
                **_string_fields(data.get("extractedTerms"), _EXTRACTED_TERM_FIELDS)
            ),
            negotiation_points=negotiation_points,
        )


def _strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned


def _first_balanced_object(text: str) -> str | None:
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    # Unbalanced: hand the tail to json.loads so the error names the position.
    return text[start:]


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _protection_score(value: Any) -> int:
    if not _is_number(value):
        if value is not None:
            Log.warning("Invalid protectionScore, using default", value=value)
        return DEFAULT_PROTECTION_SCORE
    return max(0, min(100, round(value)))


def _optional_score(value: Any) -> int | None:
    if not _is_number(value):
        return None
    return max(0, min(100, round(value)))


def _enum_member(enum_cls: type[StrEnumT], value: Any) -> StrEnumT | None:
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return None


def _overall_risk(value: Any) -> RiskLevel:
    return _enum_member(RiskLevel, value) or RiskLevel.MEDIUM


def _severity(value: Any) -> Severity:
    return _enum_member(Severity, value) or Severity.MEDIUM


def _contract_category(value: Any) -> ContractCategory | None:
    return _enum_member(ContractCategory, value)


def _object_items(value: Any, name: str) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        if value is not None:
            Log.warning(f"'{name}' is not a list, ignoring it")
        return []
    return [item for item in value if isinstance(item, dict)]


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _optional_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _string_list(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    return tuple(item for item in value if isinstance(item, str))


def _string_fields(raw: Any, fields: dict[str, str]) -> dict[str, str]:
    """Map camelCase keys to field names, keeping strings and stringified numbers."""
    if not isinstance(raw, dict):
        return {}
    values: dict[str, str] = {}
    for key, attr in fields.items():
        value = raw.get(key)
        if isinstance(value, str):
            values[attr] = value
        elif _is_number(value):
            values[attr] = str(value)
    return values


def _build_issue(raw: dict[str, Any]) -> Issue:
    return Issue(
        severity=_severity(raw.get("severity")),
        category=_text(raw.get("category"), DEFAULT_CATEGORY),
        title=_text(raw.get("title"), DEFAULT_ISSUE_TITLE),
        description=_optional_string(raw.get("description")) or "",
        clause=_optional_string(raw.get("clause")),
        recommendation=_text(raw.get("recommendation"), DEFAULT_ISSUE_RECOMMENDATION),
    )


def _build_verified(raw: dict[str, Any]) -> VerifiedClause:
    return VerifiedClause(
        category=_text(raw.get("category"), DEFAULT_CATEGORY),
        title=_text(raw.get("title"), DEFAULT_VERIFIED_TITLE),
        description=_optional_string(raw.get("description")) or "",
        clause=_optional_string(raw.get("clause")),
    )
