"""
Service classes for orchestrating specification extraction workflows.
"""
from .confidence import ConfidenceValidator, DESCRIPTION_WARNING
from .extraction_service import (
    ExtractionStrategy,
    SpecificationExtractionStrategy,
    ExtractionService,
    ExtractionServiceFactory,
)

__all__ = [
    'ConfidenceValidator',
    'DESCRIPTION_WARNING',
    'ExtractionStrategy',
    'SpecificationExtractionStrategy',
    'ExtractionService',
    'ExtractionServiceFactory',
]
