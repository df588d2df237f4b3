from dealscreen.classification.models import ClassificationResult, DocumentType
from dealscreen.classification.orchestrator import (
    ClassificationOrchestrator,
    build_orchestrator,
)

__all__ = [
    "ClassificationOrchestrator",
    "ClassificationResult",
    "DocumentType",
    "build_orchestrator",
]
