"""Format-specific decoders turning an input file into raw text."""

import html
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Type

import markdown
import pdfplumber

from ..models.document import SourceFormat

TAG_PATTERN = re.compile(r"<[^>]*>")

class Decoder(ABC):
    """Abstract base class for document decoders."""

    @abstractmethod
    def decode(self, path: Path) -> str:
        """Read the file at `path` and return its raw text.

        Args:
            path: Path to the input file

        Returns:
            Raw text content
        """
        pass

class TextDecoder(Decoder):
    """Decoder for plain UTF-8 text files."""

    def decode(self, path: Path) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

class MarkdownDecoder(Decoder):
    """Decoder for Markdown files.

    The Markdown is rendered to HTML first and every tag is then removed, which
    leaves the visible text with the markup syntax (emphasis markers, link
    brackets, heading hashes) gone.
    """

    def decode(self, path: Path) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
        rendered = markdown.markdown(source)
        return html.unescape(TAG_PATTERN.sub("", rendered))

class PdfDecoder(Decoder):
    """Decoder for PDF files using pdfplumber."""

    def decode(self, path: Path) -> str:
        with pdfplumber.open(path) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
        return "\n".join(page for page in pages if page)

DECODERS: Dict[SourceFormat, Type[Decoder]] = {
    SourceFormat.TEXT: TextDecoder,
    SourceFormat.MARKDOWN: MarkdownDecoder,
    SourceFormat.PDF: PdfDecoder,
}

def get_decoder(source_format: SourceFormat) -> Decoder:
    """Return a decoder instance for the given format."""
    return DECODERS[source_format]()
