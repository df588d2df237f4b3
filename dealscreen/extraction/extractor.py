from dealscreen.extraction.base import BaseDocumentReader, BaseTextExtractor
from dealscreen.extraction.exceptions import ExtractionError, UnsupportedFormatError
from dealscreen.extraction.format_detection import detect_format
from dealscreen.extraction.models import DocumentText, FormatHint
from dealscreen.logging.logger import Log


class DocumentTextExtractor(BaseTextExtractor):
    """Detects the format of a submitted file and dispatches to a reader.

    Unknown formats are attempted as PDF, the most common upload.
    """

    def __init__(
        self,
        *,
        pdf_reader: BaseDocumentReader,
        docx_reader: BaseDocumentReader,
    ) -> None:
        self._pdf_reader = pdf_reader
        self._docx_reader = docx_reader

    def extract(self, document_bytes: bytes, source_url: str | None = None) -> DocumentText:
        format_hint = detect_format(document_bytes, source_url)
        Log.info(f"Detected document format: {format_hint}", bytes=len(document_bytes))

        if format_hint is FormatHint.DOC:
            raise UnsupportedFormatError(
                "DOC files (old Microsoft Word format) are not supported. "
                "Please convert the document to DOCX or PDF."
            )
        if format_hint is FormatHint.DOCX:
            text = self._docx_reader.read(document_bytes)
        else:
            text = self._pdf_reader.read(document_bytes)

        if not text.strip():
            raise ExtractionError(
                f"No text could be extracted from {format_hint} document. "
                "It may contain only images."
            )
        Log.info(f"Extracted {len(text)} chars", format=str(format_hint))
        return DocumentText(text=text, format_hint=format_hint)
