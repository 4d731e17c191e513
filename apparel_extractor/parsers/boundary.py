"""
Item-number detection and context-block windowing.
"""
import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Pattern, Sequence, Tuple


# Ordered by priority: the first matcher that hits decides the item number.
# Longer runs are unambiguous; a 6-digit run at line start beats one embedded
# in the middle of a line.
ITEM_NUMBER_MATCHERS: List[Tuple[str, Pattern]] = [
    ('nine_digit', re.compile(r'\b(\d{9})\b')),
    ('eight_digit', re.compile(r'\b(\d{8})\b')),
    ('six_digit_leading', re.compile(r'^\s*(\d{6})[\s:]+')),
    ('six_digit', re.compile(r'\b(\d{6})\b')),
]

NUMBER_RUN_PATTERN = re.compile(r'\b\d{6,9}\b')
LEADING_NUMBER_PATTERN = re.compile(r'^\s*\d{6,9}\b')

# More runs than this on one line marks a summary/list row
MAX_NUMBER_RUNS_PER_ITEM_LINE = 2


def detect_item_number(line: str) -> Optional[str]:
    """Return the item number signature of a line, or None."""
    for _name, pattern in ITEM_NUMBER_MATCHERS:
        match = pattern.search(line)
        if match:
            return match.group(1)
    return None


def count_number_runs(line: str) -> int:
    """Count 6-9 digit runs on a line."""
    return len(NUMBER_RUN_PATTERN.findall(line))


def starts_with_item_number(line: str) -> bool:
    return bool(LEADING_NUMBER_PATTERN.match(line))


@dataclass(frozen=True)
class ContextBlock:
    """Lines [start, end) of the document that belong to one item."""

    lines: Tuple[str, ...]
    start: int
    end: int
    anchor_index: int

    @property
    def anchor_line(self) -> str:
        if self.anchor_index < len(self.lines):
            return self.lines[self.anchor_index]
        return ''

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)


@dataclass(frozen=True)
class ItemCandidate:
    """An accepted item-number sighting and its context block."""

    number: str
    line_index: int
    block: ContextBlock


class ItemBoundaryResolver:
    """Decide whether a line starts a new item and which lines belong to it."""

    def __init__(self, lookback: int = 3, max_window: int = 25):
        self.lookback = lookback
        self.max_window = max_window

    def resolve(
        self,
        lines: Sequence[str],
        index: int,
        seen: FrozenSet[str]
    ) -> Optional[ItemCandidate]:
        """
        Resolve the item starting at ``lines[index]``.

        Args:
            lines: All document lines (stripped)
            index: Index of the line to examine
            seen: Item numbers already accepted in this document

        Returns:
            ItemCandidate, or None when the line does not start a new item
        """
        line = lines[index]
        number = detect_item_number(line)
        if number is None:
            return None

        if number in seen:
            return None

        if count_number_runs(line) > MAX_NUMBER_RUNS_PER_ITEM_LINE:
            return None

        return ItemCandidate(
            number=number,
            line_index=index,
            block=self.context_block(lines, index),
        )

    def context_block(self, lines: Sequence[str], index: int) -> ContextBlock:
        """Window of lines around an item-number line, ending before the next item."""
        start = max(0, index - self.lookback)
        limit = min(len(lines), start + self.max_window)
        end = max(limit, index + 1)

        for i in range(index + 1, limit):
            if detect_item_number(lines[i]) is not None:
                end = i
                break

        return ContextBlock(
            lines=tuple(lines[start:end]),
            start=start,
            end=end,
            anchor_index=index - start,
        )

    @staticmethod
    def mark_seen(seen: FrozenSet[str], number: str) -> FrozenSet[str]:
        """Return a new seen-set that includes ``number``."""
        return seen | {number}
