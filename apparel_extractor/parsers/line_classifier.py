"""
Line classification for specification documents.

Each line is tagged as blank, noise, section marker, item candidate or plain
text. Section markers switch the running fabric/trim section state.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .boundary import detect_item_number
from .vocabulary import BOILERPLATE_PATTERNS


class LineKind(str, Enum):
    BLANK = "blank"
    NOISE = "noise"
    SECTION_MARKER = "section_marker"
    ITEM_CANDIDATE = "item_candidate"
    TEXT = "text"


@dataclass(frozen=True)
class SectionState:
    """Which inventory section the parser is currently inside (at most one)."""

    in_fabric_section: bool = False
    in_trim_section: bool = False

    @classmethod
    def fabric(cls) -> 'SectionState':
        return cls(in_fabric_section=True, in_trim_section=False)

    @classmethod
    def trim(cls) -> 'SectionState':
        return cls(in_fabric_section=False, in_trim_section=True)


class LineClassifier:
    """Tag lines and track the fabric/trim section state."""

    def __init__(self):
        self.noise_patterns = [re.compile(p, re.IGNORECASE) for p in BOILERPLATE_PATTERNS]
        self.fabric_marker = re.compile(r'^Fabric(?:\s|$)', re.IGNORECASE)
        self.fabric_marker_exclusions = re.compile(r'Width|Content', re.IGNORECASE)
        self.trim_marker = re.compile(r'^Trim(?:\s|$)', re.IGNORECASE)
        self.trim_marker_exclusions = re.compile(r'Specific', re.IGNORECASE)

    def classify(self, line: str, state: SectionState) -> Tuple[LineKind, SectionState]:
        """
        Classify one line.

        Args:
            line: Line of text (surrounding whitespace is ignored)
            state: Section state in effect before this line

        Returns:
            Tuple of (line kind, section state in effect after this line)
        """
        line = line.strip()
        if not line:
            return LineKind.BLANK, state

        if any(pattern.search(line) for pattern in self.noise_patterns):
            return LineKind.NOISE, state

        if self.fabric_marker.search(line) and not self.fabric_marker_exclusions.search(line):
            return LineKind.SECTION_MARKER, SectionState.fabric()

        if self.trim_marker.search(line) and not self.trim_marker_exclusions.search(line):
            return LineKind.SECTION_MARKER, SectionState.trim()

        if detect_item_number(line) is not None:
            return LineKind.ITEM_CANDIDATE, state

        return LineKind.TEXT, state

    def section_label(self, state: SectionState) -> Optional[str]:
        if state.in_fabric_section:
            return "fabric"
        if state.in_trim_section:
            return "trim"
        return None
