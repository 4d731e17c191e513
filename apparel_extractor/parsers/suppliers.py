"""
Supplier block parsing.

Supplier names are resolved in two stages: a curated alias table of known
suppliers first, then generic name-shape patterns. Cost, lead times, country
and article number are read from the supplier's line and the line after it.
"""
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from apparel_extractor.models import TBD, UNASSIGNED, Supplier
from .boundary import ContextBlock, starts_with_item_number
from .vocabulary import (
    COMPANY_FORMS,
    COMPANY_SUFFIXES,
    COUNTRIES,
    NON_SUPPLIER_LABELS,
    SUPPLIER_ALIASES,
)

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 5
MAX_NAME_LENGTH = 100

MIN_COST = 0.001
MAX_COST = 100.0
MIN_LEAD_TIME = 1
MAX_LEAD_TIME = 120


class NameMatcher(ABC):
    """Finds a supplier name on a line."""

    @abstractmethod
    def match(self, line: str) -> Optional[str]:
        pass


class AliasMatcher(NameMatcher):
    """Known supplier: any hit resolves to the canonical name."""

    def __init__(self, pattern: str, canonical_name: str):
        self.pattern = re.compile(pattern, re.IGNORECASE)
        self.canonical_name = canonical_name

    def match(self, line: str) -> Optional[str]:
        if self.pattern.search(line):
            return self.canonical_name
        return None


class ShapeMatcher(NameMatcher):
    """Generic company-name shape anchored at the start of the line."""

    def __init__(self, pattern: str):
        self.pattern = re.compile(pattern)

    def match(self, line: str) -> Optional[str]:
        match = self.pattern.match(line)
        if not match:
            return None
        name = ' '.join(match.group(1).split())
        return name.rstrip(' ,-&(')


def default_alias_matchers() -> List[NameMatcher]:
    return [AliasMatcher(pattern, name) for pattern, name in SUPPLIER_ALIASES]


def default_shape_matchers() -> List[NameMatcher]:
    suffixes = '|'.join(COMPANY_SUFFIXES)
    forms = '|'.join(COMPANY_FORMS)
    return [
        # "Shanghai Global", "Pacific Trading Ltd."
        ShapeMatcher(rf"^([A-Z][A-Za-z\s\-()&.,']{{4,}}(?i:{suffixes}))(?![A-Za-z])"),
        # "Acme Co.", "Sunrise Textiles"
        ShapeMatcher(rf"^([A-Z][A-Za-z\s\-()&.,']+(?i:{forms}))(?![A-Za-z])"),
        # Two or more capitalized words
        ShapeMatcher(r'^([A-Z][A-Za-z]+(?:\s+[A-Z][A-Za-z]+)+)'),
    ]


class SupplierNameResolver:
    """Alias table first, shape patterns second."""

    def __init__(
        self,
        aliases: Optional[Sequence[NameMatcher]] = None,
        shapes: Optional[Sequence[NameMatcher]] = None,
        rejected_labels: Optional[Sequence[str]] = None
    ):
        self.aliases = list(aliases) if aliases is not None else default_alias_matchers()
        self.shapes = list(shapes) if shapes is not None else default_shape_matchers()
        labels = rejected_labels if rejected_labels is not None else NON_SUPPLIER_LABELS
        self.label_pattern = re.compile(
            r'^(?:' + '|'.join(re.escape(label) for label in labels) + r')\b',
            re.IGNORECASE
        )
        self.percentage_pattern = re.compile(r'\d\s*%')

    def resolve(self, line: str, exclude_text: str = '') -> Optional[str]:
        """
        Resolve the supplier named on a line.

        Args:
            line: Line to inspect
            exclude_text: Text a shape-matched name must not be part of
                (the item's own description)

        Returns:
            Supplier name or None
        """
        for matcher in self.aliases:
            name = matcher.match(line)
            if name:
                return name

        # Fiber composition lines ("BWO Shell 65% Polyester") are not supplier lines
        if self.percentage_pattern.search(line):
            return None

        for matcher in self.shapes:
            candidate = matcher.match(line)
            if candidate and self.is_plausible(candidate, exclude_text):
                return candidate

        return None

    def is_plausible(self, candidate: str, exclude_text: str = '') -> bool:
        if not MIN_NAME_LENGTH <= len(candidate) < MAX_NAME_LENGTH:
            return False
        if self.label_pattern.match(candidate):
            return False
        if exclude_text and candidate.lower() in exclude_text.lower():
            return False
        return True


class SupplierBlockParser:
    """Extract supplier records from an item's context block."""

    def __init__(self, resolver: Optional[SupplierNameResolver] = None, scan_lines: int = 15):
        self.resolver = resolver or SupplierNameResolver()
        self.scan_lines = scan_lines
        self.number_token = re.compile(r'\d+(?:\.\d*)?')
        self.article_pattern = re.compile(r'(?<![\d.])(\d{6})(?![\d.])|\b(TBD)\b|\b(n/a)(?![\w/])', re.IGNORECASE)
        self.country_patterns = [
            (re.compile(rf'\b{re.escape(country)}\b', re.IGNORECASE), country)
            for country in COUNTRIES
        ]

    def parse(self, block: ContextBlock, item_number: str, description: str = '') -> List[Supplier]:
        """
        Scan the block from the item-number line forward for supplier lines.

        Args:
            block: Context block of the item
            item_number: The item's number (never taken as an article number)
            description: The item's description (never taken as a supplier name)

        Returns:
            Suppliers in order of appearance, each name at most once
        """
        suppliers = []
        seen_names = set()
        lines = block.lines
        anchor = block.anchor_index
        stop = min(len(lines), anchor + self.scan_lines)

        for i in range(anchor, stop):
            line = lines[i].strip()

            if i > anchor and starts_with_item_number(line):
                break
            if not line:
                continue

            name = self.resolver.resolve(line, exclude_text=description)
            if not name or name in seen_names:
                continue
            seen_names.add(name)

            next_line = lines[i + 1].strip() if i + 1 < len(lines) else ''
            combined = f"{line} {next_line}"
            supplier = self.build_supplier(name, combined, item_number)
            logger.debug(
                "Item %s: supplier %r cost=%s lead=%s/%s country=%s",
                item_number, supplier.name, supplier.standard_cost,
                supplier.lead_time_with_greige, supplier.lead_time_without_greige,
                supplier.country,
            )
            suppliers.append(supplier)

        return suppliers

    def build_supplier(self, name: str, text: str, item_number: str = '') -> Supplier:
        cost = self.extract_cost(text)
        with_greige, without_greige = self.extract_lead_times(text)
        return Supplier(
            name=name,
            article_number=self.extract_article_number(text, item_number),
            country=self.extract_country(text),
            standard_cost=cost,
            purchase_cost=0.0,
            lead_time_with_greige=with_greige,
            lead_time_without_greige=without_greige,
        )

    def extract_cost(self, text: str) -> float:
        """First decimal-bearing token within the cost range, else 0."""
        for token in self.number_token.findall(text):
            if '.' not in token:
                continue
            value = float(token)
            if MIN_COST <= value <= MAX_COST:
                return value
        return 0.0

    def extract_lead_times(self, text: str) -> Tuple[int, int]:
        """
        Lead times are the trailing pair of small integers: with greige, then
        without greige. A single candidate fills the with-greige slot only.
        """
        candidates = []
        for token in self.number_token.findall(text):
            if '.' in token or len(token) > 3:
                continue
            value = int(token)
            if MIN_LEAD_TIME <= value <= MAX_LEAD_TIME:
                candidates.append(value)

        if len(candidates) >= 2:
            return candidates[-2], candidates[-1]
        if candidates:
            return candidates[0], 0
        return 0, 0

    def extract_country(self, text: str) -> str:
        for pattern, country in self.country_patterns:
            if pattern.search(text):
                return country
        return UNASSIGNED

    def extract_article_number(self, text: str, item_number: str = '') -> str:
        for match in self.article_pattern.finditer(text):
            digits, tbd, not_available = match.groups()
            if digits:
                if digits != item_number:
                    return digits
                continue
            if tbd:
                return TBD
            if not_available:
                return 'n/a'
        return TBD
