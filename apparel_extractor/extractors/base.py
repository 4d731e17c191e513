"""
Common interface for text acquisition.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List


class TextExtractor(ABC):
    """Produces the ordered visual lines of a document, page by page."""

    source_kind: str = 'text'

    @abstractmethod
    def extract_pages(self, path: str | Path, show_progress: bool = False) -> List[Dict[str, Any]]:
        """
        Extract lines from a document.

        Returns:
            List of page dictionaries, each with 'page_num' and 'lines' keys
        """
        pass
