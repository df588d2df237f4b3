from dealscreen.extraction.base import BaseTextExtractor
from dealscreen.extraction.exceptions import ExtractionError, UnsupportedFormatError
from dealscreen.extraction.factory import TextExtractorFactory
from dealscreen.extraction.models import DocumentText, FormatHint

__all__ = [
    "BaseTextExtractor",
    "DocumentText",
    "ExtractionError",
    "FormatHint",
    "TextExtractorFactory",
    "UnsupportedFormatError",
]
