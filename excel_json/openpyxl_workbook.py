#!/usr/bin/env python3
"""
OpenPyXL-based workbook access for cross-platform environments without local Excel.
Provides the same API as XlwingsWorkbook using openpyxl.
Limitations:
- No live calculation engine; formula cells yield the value cached by the last Excel save
- Cell values are rendered as plain text, number formats are not applied
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.worksheet.worksheet import Worksheet

from .cells import cell_to_text, trim_rows

logger = logging.getLogger(__name__)


class OpenpyxlWorkbook:
	"""Read and write .xlsx workbooks using openpyxl (cross-platform)."""

	def __init__(self, excel_file_path: Optional[str] = None):
		self.excel_file_path = Path(excel_file_path) if excel_file_path else None
		self.workbook: Optional[Workbook] = None

	def __enter__(self):
		if self.excel_file_path is not None:
			self.open_workbook()
		else:
			self.new_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		if self.excel_file_path is None or not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {self.excel_file_path}")
		# data_only=True returns the cached result of formula cells, not the formula text
		self.workbook = load_workbook(filename=str(self.excel_file_path), data_only=True, read_only=False)
		logger.debug("Opened %s", self.excel_file_path.name)

	def new_workbook(self) -> None:
		self.workbook = Workbook()

	def close_workbook(self) -> None:
		if self.workbook is not None:
			self.workbook.close()
			self.workbook = None

	def sheet_names(self) -> List[str]:
		return [ws.title for ws in self.workbook.worksheets]

	def default_sheet_name(self) -> str:
		return self.workbook.active.title

	def _sheet(self, sheet_name: str) -> Worksheet:
		return self.workbook[sheet_name]

	def read_rows(self, sheet_name: str) -> List[List[str]]:
		ws = self._sheet(sheet_name)
		rows: List[List[str]] = []
		for row in ws.iter_rows(min_row=1, max_row=ws.max_row, max_col=ws.max_column, values_only=True):
			rows.append([cell_to_text(v) for v in row])
		return trim_rows(rows)

	def set_cell(self, sheet_name: str, coordinate: str, text: str) -> None:
		# control characters are not allowed in worksheet XML
		text = ILLEGAL_CHARACTERS_RE.sub("", text)
		if text == "":
			return
		cell = self._sheet(sheet_name)[coordinate]
		cell.value = text
		# keep "=..." values as literal text instead of formulas
		cell.data_type = "s"

	def save(self, output_path: str) -> None:
		self.workbook.save(output_path)
		logger.debug("Saved workbook to %s", output_path)
