"""
Specification parser: turns document lines into fabric and trim inventories.

Lines are classified one at a time; every accepted item-number line gets a
context block, a field bag, a supplier list and a category. The set of item
numbers already seen is owned by a single ``parse`` call.
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence

from apparel_extractor.config import ExtractionSettings
from apparel_extractor.models import Category, Item
from .boundary import ItemBoundaryResolver, ItemCandidate
from .categorizer import ItemCategorizer, deduplicate_items
from .fields import FieldExtractor
from .line_classifier import LineClassifier, LineKind, SectionState
from .suppliers import SupplierBlockParser

logger = logging.getLogger(__name__)


@dataclass
class ParsedInventory:
    """Fabric and trim lists produced by one parse."""

    fabrics: List[Item] = field(default_factory=list)
    trims: List[Item] = field(default_factory=list)

    @property
    def items(self) -> List[Item]:
        return [*self.fabrics, *self.trims]


class SpecificationParser:
    """Parse apparel specification lines into items."""

    def __init__(self, settings: Optional[ExtractionSettings] = None):
        settings = settings or ExtractionSettings()
        self.classifier = LineClassifier()
        self.resolver = ItemBoundaryResolver(
            lookback=settings.lookback,
            max_window=settings.max_window,
        )
        self.field_extractor = FieldExtractor()
        self.supplier_parser = SupplierBlockParser(scan_lines=settings.supplier_scan_lines)
        self.categorizer = ItemCategorizer()

    def parse_text(self, text: str) -> ParsedInventory:
        """Parse a whole document given as one string."""
        return self.parse(text.split('\n'))

    def parse(self, lines: Sequence[str]) -> ParsedInventory:
        """
        Extract items from ordered document lines.

        Args:
            lines: One string per visual line, top to bottom

        Returns:
            ParsedInventory with deduplicated fabric and trim lists
        """
        lines = [line.strip() for line in lines]
        fabrics = []
        trims = []
        state = SectionState()
        seen: FrozenSet[str] = frozenset()

        for index, line in enumerate(lines):
            kind, state = self.classifier.classify(line, state)
            if kind != LineKind.ITEM_CANDIDATE:
                continue

            candidate = self.resolver.resolve(lines, index, seen)
            if candidate is None:
                continue

            item = self.build_item(candidate, state)
            if item is None:
                logger.debug("Line %d: dropped %s, no description", index + 1, candidate.number)
                continue

            seen = self.resolver.mark_seen(seen, item.number)
            if item.category == Category.FABRIC:
                fabrics.append(item)
            else:
                trims.append(item)

        inventory = ParsedInventory(
            fabrics=deduplicate_items(fabrics),
            trims=deduplicate_items(trims),
        )
        logger.info(
            "Parsed %d lines: %d fabrics, %d trims",
            len(lines), len(inventory.fabrics), len(inventory.trims)
        )
        return inventory

    def build_item(self, candidate: ItemCandidate, state: SectionState) -> Optional[Item]:
        """Extract fields and suppliers for a candidate; None when it is a false positive."""
        fields = self.field_extractor.extract(candidate.block, candidate.number)
        if not fields.description_found:
            return None

        suppliers = self.supplier_parser.parse(
            candidate.block,
            candidate.number,
            description=fields.description,
        )
        category = self.categorizer.categorize(fields, state)
        logger.debug(
            "Line %d: item %s (%s, section=%s, unit=%s%s) %r with %d supplier(s)",
            candidate.line_index + 1, candidate.number, category.value,
            self.classifier.section_label(state), fields.unit_of_measure,
            '' if fields.unit_found else ' default', fields.description, len(suppliers),
        )

        return Item(
            number=fields.number,
            description=fields.description,
            unit_of_measure=fields.unit_of_measure,
            colors=fields.colors,
            content_code=fields.content_code,
            care_code=fields.care_code,
            fiber_content=fields.fiber_content,
            material_finish=fields.material_finish,
            category=category,
            suppliers=suppliers,
        )
