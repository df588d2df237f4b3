from dealscreen.pipeline.exceptions import DocumentValidationError
from dealscreen.pipeline.pipeline import (
    ContractReviewPipeline,
    ReviewOutcome,
    build_pipeline,
)

__all__ = [
    "ContractReviewPipeline",
    "DocumentValidationError",
    "ReviewOutcome",
    "build_pipeline",
]
