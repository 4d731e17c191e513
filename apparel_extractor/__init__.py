"""
Apparel Specification Extractor
===============================

Recovers fabric and trim inventories (items, suppliers, costs, lead times
and material attributes) from apparel specification documents.

Main Components:
- extractors: PDF and plain-text line acquisition
- parsers: Line classification, item windowing, field and supplier extraction
- models: Data models for type safety
- services: Extraction orchestration and confidence scoring
- exporters: CSV serialization
- utils: Helper functions
"""

__version__ = "1.0.0"

# Convenience imports for common use cases
from apparel_extractor.extractors import PDFTextExtractor, PlainTextExtractor
from apparel_extractor.parsers import SpecificationParser
from apparel_extractor.services import ExtractionServiceFactory

__all__ = [
    'PDFTextExtractor',
    'PlainTextExtractor',
    'SpecificationParser',
    'ExtractionServiceFactory',
]
