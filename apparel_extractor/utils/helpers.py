"""
Utility functions and helpers for specification extraction.
"""
import json
from pathlib import Path
from typing import List, Dict, Any


def save_json(data: Dict[str, Any], output_path: str | Path) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save
        output_path: Path to output JSON file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def combine_pages_lines(pages_data: List[Dict[str, Any]]) -> List[str]:
    """
    Flatten page lines into one document, with a blank line between pages.

    Args:
        pages_data: List of page dictionaries with 'lines' key

    Returns:
        Ordered document lines
    """
    lines: List[str] = []
    for index, page in enumerate(pages_data):
        if index:
            lines.append('')
        lines.extend(page.get('lines', []))
    return lines


def get_statistics(pages_data: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Calculate statistics for extracted pages.

    Args:
        pages_data: List of page dictionaries

    Returns:
        Dictionary with statistics
    """
    lines = [line for page in pages_data for line in page.get('lines', [])]

    return {
        'total_pages': len(pages_data),
        'total_lines': len(lines),
        'non_blank_lines': sum(1 for line in lines if line.strip()),
        'total_characters': sum(len(line) for line in lines),
        'total_words': sum(len(line.split()) for line in lines),
    }
