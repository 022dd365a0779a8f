"""Parsing of model responses into outlines."""

import json
import logging
import re
from typing import Any, List, Optional

from .config import DEFAULT_TITLE, SUBJECT_SECTION_TITLE
from .exceptions import MalformedOutlineError
from .models.section import Section
from .storage import OutputWriter

logger = logging.getLogger(__name__)

OPENING_FENCE = re.compile(r"^```[\w+-]*")
CLOSING_FENCE = re.compile(r"```$")

def strip_code_fences(raw_text: str) -> str:
    """Remove surrounding ``` / ```json markers and whitespace from a response."""
    text = raw_text.strip()
    text = OPENING_FENCE.sub("", text, count=1)
    text = CLOSING_FENCE.sub("", text, count=1)
    return text.strip()

def subject_section(extracted_title: Optional[str]) -> Section:
    """Return the section that always leads an outline."""
    return Section(title=SUBJECT_SECTION_TITLE, content=extracted_title or DEFAULT_TITLE)

def _to_section(index: int, item: Any, raw_text: str) -> Section:
    if not isinstance(item, dict):
        logger.error(f"Section {index} of the model response is not an object: {raw_text}")
        raise MalformedOutlineError(
            f"Section {index} is a {type(item).__name__}, expected an object",
            raw_text
        )
    return Section.model_validate(item)

def parse_outline(raw_text: str, extracted_title: Optional[str]) -> List[Section]:
    """Parse a model response into an outline.

    The first element is always replaced with the subject section built from
    `extracted_title`, whatever the model produced there. A response holding
    a single section therefore yields only the subject section, and an empty
    array yields a one-element outline.

    Args:
        raw_text: Raw model response
        extracted_title: Title extracted from the source document

    Returns:
        Ordered list of sections, never empty

    Raises:
        MalformedOutlineError: If the response is not a JSON array of objects
    """
    text = strip_code_fences(raw_text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Model response is not valid JSON: {raw_text}")
        raise MalformedOutlineError(f"Model response is not valid JSON: {str(e)}", raw_text) from e

    if not isinstance(data, list):
        logger.error(f"Model response is not a JSON array: {raw_text}")
        raise MalformedOutlineError(
            f"Model response is a JSON {type(data).__name__}, expected an array",
            raw_text
        )

    sections = [subject_section(extracted_title)]
    sections.extend(_to_section(i, item, raw_text) for i, item in enumerate(data[1:], start=1))
    return sections

class OutlineParser:
    """Parses model responses and persists the resulting outline."""

    def __init__(self, writer: Optional[OutputWriter] = None):
        """Initialize the parser.

        Args:
            writer: Sink receiving the outline as JSON; nothing is persisted
                when None
        """
        self.writer = writer

    def parse(self, raw_text: str, extracted_title: Optional[str]) -> List[Section]:
        """Parse `raw_text`, persist the outline and return it."""
        sections = parse_outline(raw_text, extracted_title)
        logger.info(f"Parsed outline with {len(sections)} sections")
        if self.writer is not None:
            self.writer.write_outline(sections)
        return sections
