"""Rendering of a full outline as a standalone HTML email document."""

import logging
from html import escape
from typing import List, Optional

from ..exceptions import RenderError
from ..models.section import Section
from .content import ContentRenderer

logger = logging.getLogger(__name__)

STYLESHEET = """
      body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: #f0f2f5; padding: 20px; color: #333; }
      .container { background: #ffffff; max-width: 700px; margin: auto; padding: 40px; border-radius: 12px; box-shadow: 0 4px 20px rgba(0, 0, 0, 0.1); }
      h2 { font-size: 28px; color: #1a73e8; text-align: center; margin-bottom: 30px; }
      h3 { font-size: 20px; color: #0d47a1; margin-top: 25px; margin-bottom: 10px; border-left: 4px solid #1a73e8; padding-left: 10px; }
      h4 { font-size: 18px; color: #3367d6; margin-top: 20px; }
      .section-content { margin-bottom: 20px; padding-bottom: 15px; border-bottom: 1px solid #e0e0e0; }
      p { margin-bottom: 1em; line-height: 1.6; }
      ul, ol { padding-left: 20px; margin-top: 0.5em; }
      li { margin-bottom: 0.5em; }
      @media (max-width: 768px) { .container { padding: 20px; } }
"""

def _heading_text(content) -> str:
    return content if isinstance(content, str) else ""

class DocumentRenderer:
    """Assembles an outline into an HTML document with a fixed stylesheet."""

    def __init__(self, content_renderer: Optional[ContentRenderer] = None):
        self.content_renderer = content_renderer or ContentRenderer()

    def render(self, sections: List[Section]) -> str:
        """Render an outline.

        The first section's content is used as the document title and top
        heading; every following section becomes a titled content block.

        Args:
            sections: Outline whose first element is the subject section

        Returns:
            Complete HTML document

        Raises:
            RenderError: If the outline is empty
        """
        if not sections:
            raise RenderError("Cannot render an empty outline")

        subject = _heading_text(sections[0].content)
        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"  <title>{escape(subject or 'Document')}</title>",
            f"  <style>{STYLESHEET}  </style>",
            "</head>",
            "<body>",
            '  <div class="container">',
            f"    <h2>{escape(subject or 'Email Title')}</h2>",
        ]
        for section in sections[1:]:
            parts.append('    <div class="section-content">')
            parts.append(f"      <h3>{escape(section.title)}</h3>")
            parts.append(f"      <div>{self.content_renderer.render(section.content)}</div>")
            parts.append("    </div>")
        parts.extend(["  </div>", "</body>", "</html>", ""])

        logger.debug(f"Rendered {len(sections) - 1} sections")
        return "\n".join(parts)

def render_document(sections: List[Section], subheadings: bool = False) -> str:
    """Render an outline with a default renderer."""
    return DocumentRenderer(ContentRenderer(subheadings=subheadings)).render(sections)
