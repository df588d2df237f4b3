from dealscreen.analysis.engine import AnalysisEngine
from dealscreen.analysis.exceptions import ParseError
from dealscreen.analysis.models import AnalysisResult
from dealscreen.analysis.negotiation import (
    calculate_negotiation_power_score,
    negotiation_power_label,
)
from dealscreen.analysis.normalizer import ResponseNormalizer

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "ParseError",
    "ResponseNormalizer",
    "calculate_negotiation_power_score",
    "negotiation_power_label",
]
