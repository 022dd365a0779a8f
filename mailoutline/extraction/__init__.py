"""Extraction package turning input files into documents."""

from .decoders import Decoder, TextDecoder, MarkdownDecoder, PdfDecoder, get_decoder
from .extractor import TextExtractor, derive_title

__all__ = [
    'Decoder',
    'TextDecoder',
    'MarkdownDecoder',
    'PdfDecoder',
    'get_decoder',
    'TextExtractor',
    'derive_title'
]
