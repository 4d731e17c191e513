"""
Data models for specification extraction results.
Imports all models for easy access.
"""
from .base import (
    Statistics,
    PageInfo,
)
from .specification import (
    UNASSIGNED,
    TBD,
    DEFAULT_UNIT_OF_MEASURE,
    UNITS_OF_MEASURE,
    placeholder_description,
    Category,
    Supplier,
    Item,
    ValidationWarning,
    ValidationReport,
    ExtractionResult,
)

__all__ = [
    # Base models
    'Statistics',
    'PageInfo',
    # Sentinels
    'UNASSIGNED',
    'TBD',
    'DEFAULT_UNIT_OF_MEASURE',
    'UNITS_OF_MEASURE',
    'placeholder_description',
    # Specification models
    'Category',
    'Supplier',
    'Item',
    'ValidationWarning',
    'ValidationReport',
    'ExtractionResult',
]
