"""Text extraction from input documents."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_TITLE
from ..exceptions import ExtractionError
from ..models.document import Document, SourceFormat
from .decoders import Decoder, get_decoder

logger = logging.getLogger(__name__)

def derive_title(raw_text: str) -> str:
    """Return the first non-blank trimmed line of the text, or the default title."""
    for line in raw_text.split("\n"):
        line = line.strip()
        if line:
            return line
    return DEFAULT_TITLE

class TextExtractor:
    """Loads an input document and normalizes it into raw text and a title."""

    def __init__(self, decoder: Optional[Decoder] = None):
        """Initialize the extractor.

        Args:
            decoder: Optional decoder to use for every file instead of picking
                one from the file extension
        """
        self.decoder = decoder

    def extract(self, file_path: Union[str, Path]) -> Document:
        """Extract a document from a file.

        Args:
            file_path: Path to a .txt, .md or .pdf file

        Returns:
            Extracted document

        Raises:
            ExtractionError: If the file cannot be read or decoded
        """
        path = Path(file_path)
        source_format = SourceFormat.from_path(path)
        decoder = self.decoder or get_decoder(source_format)

        logger.info(f"Extracting {source_format.value} document from {path}")
        try:
            raw_text = decoder.decode(path)
        except Exception as e:
            logger.error(f"Extraction error: {str(e)}")
            raise ExtractionError(f"Failed to extract text from {path}: {str(e)}") from e

        title = derive_title(raw_text)
        logger.debug(f"Extracted {len(raw_text)} characters, title: {title!r}")
        return Document(title=title, raw_text=raw_text, source_format=source_format)
