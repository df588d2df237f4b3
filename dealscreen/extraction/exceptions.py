class ExtractionError(Exception):
    """Raised when plain text cannot be obtained from a submitted document."""


class UnsupportedFormatError(ExtractionError):
    """Raised when the document format cannot be read (e.g. legacy binary .doc)."""
