from abc import ABC, abstractmethod

from dealscreen.extraction.models import DocumentText


class BaseDocumentReader(ABC):
    """Contract for format-specific text readers (PDF, DOCX)."""

    @abstractmethod
    def read(self, document_bytes: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            document_bytes: Raw file content.

        Returns:
            Extracted text as a single string (may be empty).

        Raises:
            ExtractionError: if the bytes cannot be parsed.
        """


class BaseTextExtractor(ABC):
    """Contract for the text source feeding the review pipeline."""

    @abstractmethod
    def extract(self, document_bytes: bytes, source_url: str | None = None) -> DocumentText:
        """Return the document's plain text and detected format.

        Raises:
            UnsupportedFormatError: for formats that cannot be read.
            ExtractionError: when no text could be obtained.
        """
