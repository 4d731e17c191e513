"""
Category assignment and deduplication of extracted items.
"""
import re
from typing import Iterable, List

from apparel_extractor.models import Category, Item
from .fields import ItemFields
from .line_classifier import SectionState
from .vocabulary import FABRIC_KEYWORDS, FABRIC_UNITS, TRIM_UNITS


class ItemCategorizer:
    """Assign items to the fabric or trim inventory."""

    def __init__(self):
        self.fabric_keywords = re.compile('|'.join(FABRIC_KEYWORDS), re.IGNORECASE)

    def categorize(self, fields: ItemFields, state: SectionState) -> Category:
        """
        Decide the category of an item.

        Priority: the section the item was found in, then the resolved unit
        of measure (a defaulted ``ea`` counts as trim), then description
        keywords for units outside both sets.
        """
        if state.in_fabric_section:
            return Category.FABRIC
        if state.in_trim_section:
            return Category.TRIM

        if fields.unit_of_measure in FABRIC_UNITS:
            return Category.FABRIC
        if fields.unit_of_measure in TRIM_UNITS:
            return Category.TRIM

        if self.fabric_keywords.search(fields.description):
            return Category.FABRIC
        return Category.TRIM


def deduplicate_items(items: Iterable[Item]) -> List[Item]:
    """Keep the first item for each item number."""
    seen = set()
    unique = []
    for item in items:
        if item.number in seen:
            continue
        seen.add(item.number)
        unique.append(item)
    return unique
