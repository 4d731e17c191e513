"""
Text acquisition: documents in, ordered visual lines out.
"""
from .base import TextExtractor
from .pdf_text_extractor import PDFTextExtractor, group_words_into_lines
from .text_extractor import PlainTextExtractor

__all__ = [
    'TextExtractor',
    'PDFTextExtractor',
    'PlainTextExtractor',
    'group_words_into_lines',
]
