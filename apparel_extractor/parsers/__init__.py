"""
Parsers for extracting fabric and trim records from specification text.
"""
from .boundary import (
    ContextBlock,
    ItemBoundaryResolver,
    ItemCandidate,
    detect_item_number,
)
from .categorizer import ItemCategorizer, deduplicate_items
from .fields import FieldExtractor, ItemFields
from .line_classifier import LineClassifier, LineKind, SectionState
from .specification import ParsedInventory, SpecificationParser
from .suppliers import (
    AliasMatcher,
    NameMatcher,
    ShapeMatcher,
    SupplierBlockParser,
    SupplierNameResolver,
)

__all__ = [
    'ContextBlock',
    'ItemBoundaryResolver',
    'ItemCandidate',
    'detect_item_number',
    'ItemCategorizer',
    'deduplicate_items',
    'FieldExtractor',
    'ItemFields',
    'LineClassifier',
    'LineKind',
    'SectionState',
    'ParsedInventory',
    'SpecificationParser',
    'AliasMatcher',
    'NameMatcher',
    'ShapeMatcher',
    'SupplierBlockParser',
    'SupplierNameResolver',
]
