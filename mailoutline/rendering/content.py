"""Conversion of section content into HTML fragments.

Section content comes straight from the model and may be a string, a list or
a mapping, nested to any depth. Strings are segmented into paragraphs and
lists; lists and mappings become unordered lists whose items are rendered
recursively. Every piece of text is HTML-escaped before it is interpolated.
"""

import re
from html import escape
from typing import Any, List, Mapping, Optional

BULLET_PATTERN = re.compile(r"^[-*]\s+")
NUMBERED_PATTERN = re.compile(r"^\d+\.\s+")
SUBHEADING_PATTERN = re.compile(r"^\*\*(.+?)\*\*\s*(.*)$")

def _text(value: Any) -> str:
    return escape(str(value), quote=False)

def _classify(line: str):
    """Return (list tag, item text) for a list line, or (None, line)."""
    match = BULLET_PATTERN.match(line)
    if match:
        return "ul", line[match.end():]
    match = NUMBERED_PATTERN.match(line)
    if match:
        return "ol", line[match.end():]
    return None, line

def segment_text(text: str) -> str:
    """Convert freeform multi-line text into paragraphs and lists.

    Lines starting with "- " or "* " become items of a <ul>, lines starting
    with "1. " style numbers become items of an <ol>, and every other
    non-blank line becomes its own <p>. A plain line closes the open list.
    When the marker type changes between consecutive list lines the open
    list is closed and one of the new type is opened.

    Args:
        text: Text to segment

    Returns:
        HTML fragment
    """
    lines = [line.strip() for line in text.split("\n")]
    parts: List[str] = []
    open_list: Optional[str] = None

    for line in lines:
        if not line:
            continue
        tag, item = _classify(line)
        if tag is None:
            if open_list:
                parts.append(f"</{open_list}>")
                open_list = None
            parts.append(f"<p>{_text(line)}</p>")
            continue
        if open_list != tag:
            if open_list:
                parts.append(f"</{open_list}>")
            parts.append(f"<{tag}>")
            open_list = tag
        parts.append(f"<li>{_text(item)}</li>")

    if open_list:
        parts.append(f"</{open_list}>")
    return "".join(parts)

def segment_subheadings(text: str) -> str:
    """Segment text where "**Heading**" lines introduce sub-sections.

    A line that starts with a bold marker becomes an <h4>; anything after the
    marker on the same line opens the sub-section body. Bold text inside list
    items or further along a line is left alone. The text between headings is
    segmented with `segment_text`.
    """
    parts: List[str] = []
    body: List[str] = []
    for line in text.split("\n"):
        match = SUBHEADING_PATTERN.match(line.strip())
        if match is None:
            body.append(line)
            continue
        parts.append(segment_text("\n".join(body)))
        parts.append(f"<h4>{_text(match.group(1).strip())}</h4>")
        body = [match.group(2)]
    parts.append(segment_text("\n".join(body)))
    return "".join(parts)

class ContentRenderer:
    """Renders section content of any supported shape as HTML."""

    def __init__(self, subheadings: bool = False):
        """Initialize the renderer.

        Args:
            subheadings: Render "**Heading**" markers in strings as <h4>
                sub-sections
        """
        self.subheadings = subheadings

    def render(self, content: Any) -> str:
        """Render content as an HTML fragment.

        Strings are segmented, lists and mappings become <ul> blocks, and any
        other value (None, numbers, booleans) renders as an empty string.
        """
        if isinstance(content, str):
            return segment_subheadings(content) if self.subheadings else segment_text(content)
        if isinstance(content, (list, tuple)):
            items = "".join(f"<li>{self.render(item)}</li>" for item in content)
            return f"<ul>{items}</ul>"
        if isinstance(content, Mapping):
            items = "".join(
                f"<li><strong>{_text(key)}:</strong> {self.render(value)}</li>"
                for key, value in content.items()
            )
            return f"<ul>{items}</ul>"
        return ""

def render_content(content: Any, subheadings: bool = False) -> str:
    """Render section content with a default renderer."""
    return ContentRenderer(subheadings=subheadings).render(content)
