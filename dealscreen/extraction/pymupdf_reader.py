import pymupdf

from dealscreen.extraction.pdf_reader import BasePdfReader


class PyMuPdfReader(BasePdfReader):
    """PyMuPDF engine; blocks are sorted into reading order per page."""

    engine = "pymupdf"

    def _page_texts(self, document_bytes: bytes) -> list[str]:
        with pymupdf.open(stream=document_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            return [page.get_text(sort=True) for page in doc]
