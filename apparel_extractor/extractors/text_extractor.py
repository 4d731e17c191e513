"""
Plain-text acquisition.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List

from apparel_extractor.errors import ReadFailure
from .base import TextExtractor

logger = logging.getLogger(__name__)


class PlainTextExtractor(TextExtractor):
    """Read a UTF-8 text file as a single page of lines."""

    source_kind = 'text'

    def __init__(self, encoding: str = 'utf-8-sig'):
        self.encoding = encoding

    def extract_pages(self, path: str | Path, show_progress: bool = False) -> List[Dict[str, Any]]:
        path = Path(path)
        try:
            text = path.read_bytes().decode(self.encoding)
        except OSError as exc:
            raise ReadFailure(f"Failed to read {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ReadFailure(f"{path} is not valid {self.encoding} text: {exc}") from exc

        lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
        if show_progress:
            print(f"  ✓ Read {len(lines)} lines", flush=True)
        logger.info("Read %d line(s) from %s", len(lines), path.name)
        return [{'page_num': 1, 'lines': lines}]
