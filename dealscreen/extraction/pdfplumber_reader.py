import io

import pdfplumber

from dealscreen.extraction.pdf_reader import BasePdfReader


class PdfPlumberReader(BasePdfReader):
    engine = "pdfplumber"

    def _page_texts(self, document_bytes: bytes) -> list[str]:
        with pdfplumber.open(io.BytesIO(document_bytes)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
