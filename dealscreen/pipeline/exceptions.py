from dealscreen.classification.models import ClassificationResult


class DocumentValidationError(Exception):
    """Raised when a document is not accepted for contract analysis.

    Carries the ClassificationResult when classification ran.
    """

    def __init__(
        self, message: str, classification: ClassificationResult | None = None
    ) -> None:
        super().__init__(message)
        self.classification = classification
