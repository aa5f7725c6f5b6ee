#!/usr/bin/env python3
"""
Conversion between the first worksheet of an Excel workbook and a JSON array
of flat records.

Row 1 of the sheet holds the field names; every later row becomes one record
mapping field name to cell text. The reverse direction writes the records of a
JSON array back into a single-sheet workbook.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Union

from openpyxl.utils import get_column_letter

from .engines import get_workbook_class
from .errors import (
	EmptyDocument,
	ExtensionMismatch,
	InsufficientRows,
	OpenFailure,
	RowReadFailure,
	WriteFailure,
)
from .permissions import check_write_permission
from .records import Record, RecordSet, decode_records, encode_records

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

JSON_EXTENSION = ".json"
EXCEL_EXTENSION = ".xlsx"
DEFAULT_JSON_OUTPUT_NAME = "output.json"


def rows_to_records(rows: Sequence[Sequence[str]]) -> RecordSet:
	"""
	Zip every data row with the header row.

	Cells beyond the header are dropped. A row shorter than the header gives a
	record without the trailing keys, they are not filled with empty strings.
	"""
	headers = rows[0]
	records: RecordSet = []
	for row in rows[1:]:
		record: Record = {}
		for i, cell in enumerate(row):
			if i < len(headers):
				record[headers[i]] = cell
		records.append(record)
	return records


def derive_header(records: RecordSet) -> List[str]:
	"""
	Column order for the output sheet: the keys of the first record.

	Keys that only appear in later records are not part of the header and
	their values are not written.
	"""
	if not records:
		return []
	return list(records[0].keys())


def cell_coordinate(column: int, row: int) -> str:
	"""A1-style coordinate for 1-based ``column`` and ``row``."""
	return f"{get_column_letter(column)}{row}"


def default_json_output(input_path: PathLike, name: str = DEFAULT_JSON_OUTPUT_NAME) -> str:
	"""Destination used when none is given: ``name`` next to the input workbook."""
	return os.path.join(os.path.dirname(os.path.abspath(input_path)), name)


def ensure_excel_extension(path: PathLike) -> str:
	path = os.fspath(path)
	if Path(path).suffix != EXCEL_EXTENSION:
		path += EXCEL_EXTENSION
	return path


def _open_workbook(workbook_cls, input_path: str):
	workbook = workbook_cls(input_path)
	try:
		workbook.open_workbook()
	except Exception as e:
		raise OpenFailure(f"Failed to open Excel file: {e}") from e
	return workbook


def read_first_sheet(input_path: PathLike, engine: Optional[str] = None) -> List[List[str]]:
	"""
	Read the rows of the first worksheet as text.

	Raises:
		OpenFailure: The workbook is missing or corrupt
		EmptyDocument: The workbook has no worksheet
		RowReadFailure: Reading the rows failed
		InsufficientRows: Fewer than a header row and one data row
	"""
	return _read_first_sheet(get_workbook_class(engine), input_path)


def _read_first_sheet(workbook_cls, input_path: PathLike) -> List[List[str]]:
	workbook = _open_workbook(workbook_cls, os.fspath(input_path))
	try:
		sheet_names = workbook.sheet_names()
		if not sheet_names:
			raise EmptyDocument("No valid worksheet found in the Excel file")
		sheet_name = sheet_names[0]
		try:
			rows = workbook.read_rows(sheet_name)
		except Exception as e:
			raise RowReadFailure(f"Failed to read row data: {e}") from e
	finally:
		workbook.close_workbook()

	if len(rows) < 2:
		raise InsufficientRows(f"Worksheet '{sheet_name}' contains no valid data")
	logger.debug("Read %d rows from sheet '%s'", len(rows), sheet_name)
	return rows


def excel_to_json(input_path: PathLike, output_path: PathLike, engine: Optional[str] = None, indent: int = 2) -> str:
	"""
	Convert the first worksheet of an Excel file to a JSON array of records.

	The destination is checked for write permission before the workbook is
	read, so nothing is written when any check fails.

	Args:
		input_path: Path to the .xlsx file
		output_path: Path of the JSON file to create or overwrite
		engine (str, optional): "openpyxl" or "xlwings"; platform default if None
		indent (int): JSON indentation width

	Returns:
		The output path
	"""
	output_path = os.fspath(output_path)
	# an unknown engine fails before the destination is touched
	workbook_cls = get_workbook_class(engine)
	check_write_permission(output_path)

	rows = _read_first_sheet(workbook_cls, input_path)
	records = rows_to_records(rows)
	text = encode_records(records, indent=indent)

	try:
		with open(output_path, "w", encoding="utf-8") as f:
			f.write(text)
	except OSError as e:
		raise WriteFailure(f"Failed to save JSON file: {e}") from e

	logger.info("Converted %d records from %s to %s", len(records), input_path, output_path)
	return output_path


def load_records(input_path: PathLike) -> RecordSet:
	"""Read and decode a JSON record file, rejecting other extensions before reading."""
	input_path = os.fspath(input_path)
	if Path(input_path).suffix != JSON_EXTENSION:
		raise ExtensionMismatch("Please select a valid JSON file")
	try:
		with open(input_path, "rb") as f:
			data = f.read()
	except OSError as e:
		raise OpenFailure(f"Failed to read JSON file: {e}") from e
	return decode_records(data)


def write_records(workbook, sheet_name: str, records: RecordSet) -> None:
	"""Write the header to row 1 and record ``i`` to row ``i + 2``."""
	header = derive_header(records)
	for j, field in enumerate(header, start=1):
		workbook.set_cell(sheet_name, cell_coordinate(j, 1), field)
	for i, record in enumerate(records):
		for j, field in enumerate(header, start=1):
			workbook.set_cell(sheet_name, cell_coordinate(j, i + 2), record.get(field, ""))


def json_to_excel(input_path: PathLike, output_path: PathLike, engine: Optional[str] = None) -> str:
	"""
	Convert a JSON array of records to a single-sheet Excel file.

	No write-permission probe is made before saving. Callers are expected to
	pass an output path that already carries the .xlsx extension
	(see ``ensure_excel_extension``).

	Returns:
		The output path
	"""
	output_path = os.fspath(output_path)
	records = load_records(input_path)

	workbook_cls = get_workbook_class(engine)
	try:
		with workbook_cls() as workbook:
			write_records(workbook, workbook.default_sheet_name(), records)
			workbook.save(output_path)
	except Exception as e:
		raise WriteFailure(f"Failed to save Excel file: {e}") from e

	logger.info("Converted %d records from %s to %s", len(records), input_path, output_path)
	return output_path
