from abc import abstractmethod
from typing import ClassVar

from dealscreen.extraction.base import BaseDocumentReader
from dealscreen.extraction.exceptions import ExtractionError
from dealscreen.logging.logger import Log

PAGE_SEPARATOR = "\n\n"


class BasePdfReader(BaseDocumentReader):
    """Page loop shared by the PDF engines.

    Subclasses only list the raw text of each page. Pages without a text
    layer (scans, images) are dropped so they do not pad the document.
    """

    engine: ClassVar[str]

    def read(self, document_bytes: bytes) -> str:
        if not document_bytes:
            raise ExtractionError("PDF buffer is empty")
        try:
            pages = self._page_texts(document_bytes)
        except Exception as exc:
            raise ExtractionError(f"Invalid PDF structure ({self.engine}): {exc}") from exc

        texts = [page.strip() for page in pages]
        blank = texts.count("")
        if blank:
            Log.debug(
                f"{blank} of {len(texts)} PDF pages have no text layer",
                engine=self.engine,
            )
        return PAGE_SEPARATOR.join(text for text in texts if text)

    @abstractmethod
    def _page_texts(self, document_bytes: bytes) -> list[str]:
        """Return the raw text of every page, in order."""
