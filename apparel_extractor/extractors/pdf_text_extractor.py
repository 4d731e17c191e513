"""
PDF text acquisition using pdfplumber.

Words are grouped into visual rows by their vertical position, ordered
left to right inside a row, and rows are ordered top to bottom.
"""
import logging
import math
import re
from pathlib import Path
from typing import Any, Dict, List

import pdfplumber

from apparel_extractor.errors import AcquisitionFailure, ReadFailure
from .base import TextExtractor

logger = logging.getLogger(__name__)

_ALNUM_END = re.compile(r'[A-Za-z0-9]$')
_ALNUM_START = re.compile(r'^[A-Za-z0-9]')


def group_words_into_lines(
    words: List[Dict[str, Any]],
    row_tolerance: float = 0.5,
    gap_threshold: float = 5.0
) -> List[str]:
    """
    Rebuild visual lines from positioned words.

    Args:
        words: Word dicts with 'text', 'x0', 'x1' and 'top' keys (pdfplumber shape)
        row_tolerance: Words whose 'top' rounds to the same multiple of this share a row
        gap_threshold: Horizontal gap above which a space is inserted

    Returns:
        Lines of text, top to bottom
    """
    rows: Dict[float, List[Dict[str, Any]]] = {}
    for word in words:
        if not str(word.get('text', '')).strip():
            continue
        key = math.floor(float(word['top']) / row_tolerance + 0.5) * row_tolerance
        rows.setdefault(key, []).append(word)

    lines = []
    for key in sorted(rows):
        row = sorted(rows[key], key=lambda w: float(w['x0']))
        parts = []
        for current, following in zip(row, row[1:] + [None]):
            parts.append(current['text'])
            if following is None:
                continue
            gap = float(following['x0']) - float(current['x1'])
            crosses_word = bool(
                _ALNUM_END.search(current['text']) and _ALNUM_START.search(following['text'])
            )
            if gap > gap_threshold or crosses_word:
                parts.append(' ')
        line = ''.join(parts).strip()
        if line:
            lines.append(line)
    return lines


class PDFTextExtractor(TextExtractor):
    """Extract visual lines from PDF files with pdfplumber."""

    source_kind = 'pdf'

    def __init__(self, row_tolerance: float = 0.5, gap_threshold: float = 5.0):
        """
        Initialize the PDF extractor.

        Args:
            row_tolerance: Vertical rounding step for grouping words into rows
            gap_threshold: Horizontal gap that forces a space between words
        """
        self.row_tolerance = row_tolerance
        self.gap_threshold = gap_threshold

    def extract_pages(self, path: str | Path, show_progress: bool = False) -> List[Dict[str, Any]]:
        """
        Extract lines from every page.

        Args:
            path: Path to PDF file
            show_progress: If True, print one progress line per page

        Returns:
            List of page dictionaries with 'page_num', 'lines', 'width' and 'height' keys

        Raises:
            ReadFailure: The file does not exist or cannot be read
            AcquisitionFailure: The PDF cannot be parsed or holds no text
        """
        path = Path(path)
        if not path.is_file():
            raise ReadFailure(f"PDF file not found: {path}")

        pages_data = []
        try:
            with pdfplumber.open(path) as pdf:
                total_pages = len(pdf.pages)
                for page_num, page in enumerate(pdf.pages, start=1):
                    words = page.extract_words(keep_blank_chars=False) or []
                    lines = group_words_into_lines(
                        words,
                        row_tolerance=self.row_tolerance,
                        gap_threshold=self.gap_threshold,
                    )
                    if not lines:
                        logger.warning("Page %d of %s has no extractable text", page_num, path.name)
                    pages_data.append({
                        'page_num': page_num,
                        'lines': lines,
                        'width': page.width,
                        'height': page.height,
                    })
                    if show_progress:
                        print(f"  ✓ Processed page {page_num}/{total_pages}", flush=True)
        except OSError as exc:
            raise ReadFailure(f"Failed to read PDF {path}: {exc}") from exc
        except Exception as exc:
            raise AcquisitionFailure(f"Failed to extract text from PDF {path}: {exc}") from exc

        if not any(page['lines'] for page in pages_data):
            raise AcquisitionFailure(
                f"No extractable text in {path.name} (image-only PDFs are not supported)"
            )

        logger.info("Extracted %d page(s) from %s", len(pages_data), path.name)
        return pages_data
