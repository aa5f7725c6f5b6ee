#!/usr/bin/env python3
"""
Workbook access using xlwings
Drives a hidden local Excel instance to read and write worksheets
Used by default on Windows where Excel is normally installed
"""

import logging
from pathlib import Path
from typing import List, Optional

import xlwings as xw

from .cells import cell_to_text, trim_rows

logger = logging.getLogger(__name__)


class XlwingsWorkbook:
	"""Read and write Excel workbooks through a local Excel application"""

	def __init__(self, excel_file_path: Optional[str] = None):
		"""
		Initialize the workbook wrapper

		Args:
			excel_file_path (str, optional): Path to an existing workbook to open.
				If None, a new blank workbook is created on entry.
		"""
		self.excel_file_path = Path(excel_file_path) if excel_file_path else None
		self.app = None
		self.workbook = None

	def __enter__(self):
		"""Context manager entry"""
		if self.excel_file_path is not None:
			self.open_workbook()
		else:
			self.new_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close_workbook()

	def _start_app(self):
		self.app = xw.App(visible=False, add_book=False)

	def open_workbook(self):
		"""Open the Excel workbook using xlwings"""
		if self.excel_file_path is None or not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {self.excel_file_path}")
		self._start_app()
		try:
			self.workbook = self.app.books.open(str(self.excel_file_path))
		except Exception:
			self.close_workbook()
			raise
		logger.debug("Successfully opened: %s", self.excel_file_path.name)

	def new_workbook(self):
		"""Create a blank workbook with Excel's default single sheet"""
		self._start_app()
		try:
			self.workbook = self.app.books.add()
		except Exception:
			self.close_workbook()
			raise

	def close_workbook(self):
		"""Close the workbook and Excel application"""
		try:
			if self.workbook:
				self.workbook.close()
			if self.app:
				self.app.quit()
		except Exception as e:
			logger.warning("Error closing workbook: %s", e)
		finally:
			self.workbook = None
			self.app = None

	def sheet_names(self) -> List[str]:
		return [sheet.name for sheet in self.workbook.sheets]

	def default_sheet_name(self) -> str:
		return self.workbook.sheets[0].name

	def read_rows(self, sheet_name: str) -> List[List[str]]:
		"""
		Read all used rows of a worksheet as text

		Args:
			sheet_name (str): Name of the worksheet

		Returns:
			List of rows, each a list of cell texts starting at column A.
			Trailing empty cells and trailing empty rows are removed.
		"""
		sheet = self.workbook.sheets[sheet_name]
		used_range = sheet.used_range
		values = used_range.options(ndim=2).value or []

		# The used range does not necessarily start at A1
		col_offset = used_range.column - 1
		rows: List[List[str]] = [[] for _ in range(used_range.row - 1)]
		for row in values:
			rows.append([""] * col_offset + [cell_to_text(v) for v in row])
		return trim_rows(rows)

	def set_cell(self, sheet_name: str, coordinate: str, text: str) -> None:
		if text == "":
			return
		cell = self.workbook.sheets[sheet_name].range(coordinate)
		# Text format stops Excel from turning "007" into 7 or "=A1" into a formula
		cell.number_format = "@"
		cell.value = text

	def save(self, output_path: str) -> None:
		self.workbook.save(output_path)
		logger.debug("Data exported to: %s", output_path)
