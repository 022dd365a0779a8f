"""Rendering package turning outlines into HTML."""

from .content import ContentRenderer, render_content, segment_text, segment_subheadings
from .document import DocumentRenderer, render_document, STYLESHEET

__all__ = [
    'ContentRenderer',
    'render_content',
    'segment_text',
    'segment_subheadings',
    'DocumentRenderer',
    'render_document',
    'STYLESHEET'
]
