from dealscreen.extraction.models import FormatHint

_PDF_MAGIC = b"%PDF"
_ZIP_MAGIC = b"PK"
_OLE_MAGIC = b"\xd0\xcf\x11\xe0"

_EXTENSIONS: dict[str, FormatHint] = {
    ".pdf": FormatHint.PDF,
    ".docx": FormatHint.DOCX,
    ".doc": FormatHint.DOC,
}


def detect_format(document_bytes: bytes, source_url: str | None = None) -> FormatHint:
    """Detect the document format from magic bytes, then the URL extension."""
    head = document_bytes[:8]
    if head.startswith(_PDF_MAGIC):
        return FormatHint.PDF
    if head.startswith(_ZIP_MAGIC):
        return FormatHint.DOCX
    if head.startswith(_OLE_MAGIC):
        return FormatHint.DOC
    if source_url:
        path = source_url.split("?", 1)[0].lower()
        for extension, hint in _EXTENSIONS.items():
            if path.endswith(extension):
                return hint
    return FormatHint.UNKNOWN
