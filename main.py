#!/usr/bin/env python3
"""
Main entry point for the apparel specification extractor.
Reads a specification PDF or text file and writes the fabric/trim inventory
as JSON, with optional CSV and label-template exports.
"""
import argparse
import logging
import sys
from pathlib import Path

from apparel_extractor.config import load_settings
from apparel_extractor.errors import ExtractionError
from apparel_extractor.exporters import items_to_csv, items_to_template_csv, write_csv
from apparel_extractor.services import ExtractionServiceFactory
from apparel_extractor.utils import save_json


def generate_output_filename(input_path: str) -> str:
    """
    Generate a meaningful output filename based on input filename.

    Args:
        input_path: Path to input document

    Returns:
        Output filename (e.g., spec.pdf -> spec_extracted.json)
    """
    return f"{Path(input_path).stem}_extracted.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extract fabric and trim items from apparel specification documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  specx tech_pack.pdf
  specx tech_pack.pdf -o inventory.json --csv items.csv
  specx bom.txt --template template_filled.csv

  # Or if not installed:
  python main.py tech_pack.pdf
        """
    )
    parser.add_argument('input', type=str, help='Input PDF or text file (required)')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Output JSON file path (optional, auto-generated if not provided)')
    parser.add_argument('--csv', type=str, default=None,
                        help='Also write one row per item/supplier pair to this CSV file')
    parser.add_argument('--template', type=str, default=None,
                        help='Also write the 21-column label template CSV to this file')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: APPAREL_EXTRACTOR_LOG_LEVEL or WARNING)')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level or settings.log_level, logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    if args.output is None:
        args.output = generate_output_filename(args.input)

    print(f"📄 Processing: {args.input}", flush=True)
    print("🔄 Step 1/3: Reading document text...", flush=True)

    service = ExtractionServiceFactory.create_for_path(input_path, settings)
    try:
        result = service.extract(input_path, show_progress=True)
    except ExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("🔄 Step 2/3: Extracting items and suppliers... ✓", flush=True)

    print("🔄 Step 3/3: Saving results...", end="", flush=True)
    save_json(result.model_dump(mode='json'), args.output)
    if args.csv:
        write_csv(items_to_csv(result.items), args.csv)
    if args.template:
        write_csv(items_to_template_csv(result.items), args.template)
    print(" ✓", flush=True)
    print(f"\n✅ Done! Results saved to: {args.output}")

    summary = service.get_summary(result)
    print("\n📊 Extraction Summary:")
    print(f"  - Total items found: {summary['total_items']}")
    print(f"  - Fabrics: {summary['fabrics']}")
    print(f"  - Trims: {summary['trims']}")
    print(f"  - Items with suppliers: {summary['items_with_suppliers']}")
    print(f"  - Confidence: {summary['confidence_score']}%")
    if summary['warnings']:
        print(f"  - Warnings: {summary['warnings']}")
        for warning in result.validation.warnings:
            print(f"      {warning.item_number}: {warning.issue} ({warning.severity})")

    return 0


if __name__ == '__main__':
    sys.exit(main())
