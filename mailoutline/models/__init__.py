"""Models package for shared data structures."""

from .document import Document, SourceFormat
from .section import Section, SectionContent

__all__ = ['Document', 'SourceFormat', 'Section', 'SectionContent']
