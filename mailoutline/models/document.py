"""Document-related model and data structure."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

class SourceFormat(str, Enum):
    """Supported input formats."""
    TEXT = "text"
    MARKDOWN = "markdown"
    PDF = "pdf"

    @classmethod
    def from_path(cls, path) -> "SourceFormat":
        """Determine the format from a file extension, defaulting to plain text."""
        suffix = Path(path).suffix.lower()
        if suffix == ".pdf":
            return cls.PDF
        if suffix in (".md", ".markdown"):
            return cls.MARKDOWN
        return cls.TEXT

@dataclass(frozen=True)
class Document:
    """Represents an extracted source document."""
    title: str
    raw_text: str
    source_format: SourceFormat = SourceFormat.TEXT
