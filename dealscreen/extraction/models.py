from dataclasses import dataclass
from enum import StrEnum


class FormatHint(StrEnum):
    """Coarse document format detected for a submitted file."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DocumentText:
    """Extracted plain text of one document plus its format hint."""

    text: str
    format_hint: FormatHint = FormatHint.UNKNOWN

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("DocumentText.text must be non-empty")

    def head(self, max_chars: int) -> str:
        """Return at most the first *max_chars* characters of the text."""
        return self.text[:max_chars]
