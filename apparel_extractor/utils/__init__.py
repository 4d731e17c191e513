"""
Utility functions and helpers for specification extraction.
"""
from .helpers import (
    save_json,
    combine_pages_lines,
    get_statistics,
)

__all__ = [
    'save_json',
    'combine_pages_lines',
    'get_statistics',
]
