import io

import docx

from dealscreen.extraction.base import BaseDocumentReader
from dealscreen.extraction.exceptions import ExtractionError


class DocxReader(BaseDocumentReader):
    """Reads DOCX paragraphs and table cells using python-docx."""

    def read(self, document_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(document_bytes))
        except Exception as exc:
            raise ExtractionError(f"Failed to open DOCX: {exc}") from exc

        lines = [p.text for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(" | ".join(cells))
        return "\n".join(lines).strip()
