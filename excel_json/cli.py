#!/usr/bin/env python3
"""
Command-line interface for the excel_json package.
Usage:
  python -m excel_json to-json <excel_file> [options]
  python -m excel_json to-excel <json_file> [options]
  python -m excel_json gui
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .config import load_config
from .converter import default_json_output, ensure_excel_extension, excel_to_json, json_to_excel
from .engines import ENGINES
from .errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Convert the first sheet of an Excel file to JSON records and back')
	parser.add_argument('--engine', choices=list(ENGINES), help='Backend engine to use (default: xlwings on Windows, openpyxl elsewhere)')
	parser.add_argument('--config', '-c', help='Path to a YAML config file')
	parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')
	sub = parser.add_subparsers(dest='command', required=True)

	p_json = sub.add_parser('to-json', help='Convert an Excel file to a JSON array of records')
	p_json.add_argument('excel_file', help='Path to Excel file (.xlsx)')
	p_json.add_argument('--output', '-o', help='Output JSON path (default: output.json next to the Excel file)')
	p_json.add_argument('--indent', type=int, help='JSON indentation (default: 2)')

	p_excel = sub.add_parser('to-excel', help='Convert a JSON array of records to an Excel file')
	p_excel.add_argument('json_file', help='Path to JSON file (.json)')
	p_excel.add_argument('--output', '-o', help='Output Excel path; .xlsx is appended when missing (default: JSON file name with .xlsx)')

	sub.add_parser('gui', help='Open the converter window')
	return parser


def _run(args: argparse.Namespace, config: Dict[str, Any]) -> str:
	engine = args.engine or config["engine"]
	if args.command == 'to-json':
		output_file = args.output or default_json_output(args.excel_file, config["json_output_name"])
		indent = args.indent if args.indent is not None else config["indent"]
		return excel_to_json(args.excel_file, output_file, engine=engine, indent=indent)

	if args.output:
		output_file = ensure_excel_extension(args.output)
	else:
		output_file = os.path.splitext(args.json_file)[0] + ".xlsx"
	return json_to_excel(args.json_file, output_file, engine=engine)


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	try:
		config = load_config(args.config)
	except ValueError as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1

	if args.command == 'gui':
		from .gui import run_gui
		run_gui(engine=args.engine or config["engine"], config=config)
		return 0

	try:
		output_file = _run(args, config)
	except ConversionError as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1

	print("\nConversion completed successfully!")
	print(f"Output file: {output_file}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
