"""
Document to email outline package.
"""

from .exceptions import (
    OutlineError,
    ConfigurationError,
    ExtractionError,
    GenerationError,
    MalformedOutlineError,
    RenderError
)
from .models import Document, SourceFormat, Section
from .outline import OutlineParser, parse_outline
from .pipeline import OutlinePipeline, PipelineResult

__all__ = [
    'OutlineError',
    'ConfigurationError',
    'ExtractionError',
    'GenerationError',
    'MalformedOutlineError',
    'RenderError',
    'Document',
    'SourceFormat',
    'Section',
    'OutlineParser',
    'parse_outline',
    'OutlinePipeline',
    'PipelineResult'
]
