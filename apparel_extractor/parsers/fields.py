"""
Field extraction over an item's context block.

Every rule is independent and best-effort: a field that cannot be found
falls back to its sentinel value instead of failing the item.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from apparel_extractor.models import (
    DEFAULT_UNIT_OF_MEASURE,
    UNASSIGNED,
    placeholder_description,
)
from .boundary import ContextBlock
from .vocabulary import (
    COLOR_NAMES,
    COMPONENT_PREFIXES,
    FIBER_NAMES,
    FINISH_PHRASES,
    UNIT_OF_MEASURE_TOKENS,
)

MIN_DESCRIPTION_LENGTH = 3


@dataclass
class ItemFields:
    """Raw field bag recovered from one context block."""

    number: str
    description: str
    description_found: bool
    unit_of_measure: str = DEFAULT_UNIT_OF_MEASURE
    unit_found: bool = False
    colors: List[str] = field(default_factory=list)
    content_code: str = ''
    care_code: str = ''
    fiber_content: str = UNASSIGNED
    material_finish: str = UNASSIGNED


class FieldExtractor:
    """Extract description, colors, codes, unit and fiber data from a context block."""

    def __init__(self):
        colors = '|'.join(COLOR_NAMES)
        units = '|'.join(UNIT_OF_MEASURE_TOKENS)
        fibers = '|'.join(FIBER_NAMES)

        self.canonical_colors = {name.lower(): name for name in COLOR_NAMES}
        self.color_pattern = re.compile(
            rf'\b({colors})\b(?:\s*,\s*\b({colors})\b)?', re.IGNORECASE
        )
        # Text following the item number ends at a unit, a color or N/A
        self.description_stop = rf'\s+(?:{units}|{colors}|N/A)(?![\w/])'
        self.sku_prefix = re.compile(r'^\d+-')
        self.component_prefix = re.compile(
            r'^(?:' + '|'.join(re.escape(p) for p in COMPONENT_PREFIXES) + r')\s+\w+\s+'
        )
        self.trailing_colors = re.compile(r',\s*\w+,\s*\w+$')

        self.content_code_pattern = re.compile(r'\b([A-Z]{2,4})\b[^\n]*?\b(?i:shell)\b[^\n]*?%')
        self.care_code_pattern = re.compile(r'(?<![\d.])(\d{4})(?![\d.])')
        self.unit_pattern = re.compile(rf'\b({units})\b', re.IGNORECASE)

        self.shell_fiber_pattern = re.compile(
            r'Shell:[ \t]*([\d%\w][\d%\w \t,/]*)', re.IGNORECASE
        )
        fiber_pair = rf'\d{{1,3}}%[ \t]*(?:[A-Za-z]+[ \t]+)*?(?:{fibers})\b'
        self.percent_fiber_pattern = re.compile(
            rf'({fiber_pair}(?:[ \t,/]+{fiber_pair})*)', re.IGNORECASE
        )
        self.finish_patterns = [re.compile(rf'\b({p})\b', re.IGNORECASE) for p in FINISH_PHRASES]

    def extract(self, block: ContextBlock, number: str) -> ItemFields:
        """
        Run every field rule over a context block.

        Args:
            block: Context block anchored at the item-number line
            number: The item number found on the anchor line

        Returns:
            ItemFields with sentinels for anything not found
        """
        item_line = block.anchor_line
        text = block.text

        description, description_found = self.extract_description(item_line, number)
        colors = self.extract_colors(item_line)
        unit, unit_found = self.extract_unit_of_measure(text)

        return ItemFields(
            number=number,
            description=description,
            description_found=description_found,
            unit_of_measure=unit,
            unit_found=unit_found,
            colors=colors,
            content_code=self.extract_content_code(text),
            care_code=self.extract_care_code(text, number),
            fiber_content=self.extract_fiber_content(text),
            material_finish=self.extract_material_finish(text, colors),
        )

    def extract_description(self, item_line: str, number: str) -> Tuple[str, bool]:
        """
        Extract the description around the item number.

        Returns:
            (description, found). ``found`` is False when neither the text before
            nor the text after the number yielded anything; the description is
            then the placeholder. Text that was found but cleans down to fewer
            than 3 characters also becomes the placeholder, with ``found`` True.
        """
        escaped = re.escape(number)
        patterns = [
            re.compile(rf'^(.+?)\s+{escaped}\b'),
            re.compile(rf'\b{escaped}[\s:]+(.+?)(?:{self.description_stop}|$)', re.IGNORECASE),
        ]

        found = False
        for pattern in patterns:
            match = pattern.search(item_line)
            if not match or not match.group(1).strip():
                continue
            found = True
            description = self._clean_description(match.group(1))
            if len(description) >= MIN_DESCRIPTION_LENGTH:
                return description, True

        return placeholder_description(number), found

    def _clean_description(self, text: str) -> str:
        text = text.strip()
        text = self.sku_prefix.sub('', text)
        text = self.component_prefix.sub('', text)
        text = self.trailing_colors.sub('', text)
        return ' '.join(text.split())

    def extract_colors(self, item_line: str) -> List[str]:
        """Recognized colors on the item line, first-seen order, no duplicates."""
        colors = []
        for match in self.color_pattern.finditer(item_line):
            for value in match.groups():
                if not value:
                    continue
                name = self.canonical_colors[value.lower()]
                if name not in colors:
                    colors.append(name)
        return colors

    def extract_content_code(self, text: str) -> str:
        match = self.content_code_pattern.search(text)
        return match.group(1) if match else ''

    def extract_care_code(self, text: str, number: str) -> str:
        for match in self.care_code_pattern.finditer(text):
            if match.group(1) != number:
                return match.group(1)
        return ''

    def extract_unit_of_measure(self, text: str) -> Tuple[str, bool]:
        """First unit token in the block, or the default with found=False."""
        match = self.unit_pattern.search(text)
        if match:
            return match.group(1).lower(), True
        return DEFAULT_UNIT_OF_MEASURE, False

    def extract_fiber_content(self, text: str) -> str:
        match = self.shell_fiber_pattern.search(text)
        if match:
            composition = match.group(1).strip(' \t,')
            if composition:
                return composition

        match = self.percent_fiber_pattern.search(text)
        if match:
            return ' '.join(match.group(1).split())

        return UNASSIGNED

    def extract_material_finish(self, text: str, colors: List[str]) -> str:
        if colors:
            return ', '.join(colors)
        return self.extract_finish_phrase(text) or UNASSIGNED

    def extract_finish_phrase(self, text: str) -> Optional[str]:
        for pattern in self.finish_patterns:
            match = pattern.search(text)
            if match:
                return match.group(1)
        return None
