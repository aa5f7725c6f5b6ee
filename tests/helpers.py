"""Workbook and JSON helpers shared by the test modules."""

import json

from openpyxl import Workbook, load_workbook


def write_workbook(path, rows, title="Data"):
	"""Save ``rows`` (list of lists, None = empty cell) to a one-sheet workbook."""
	wb = Workbook()
	ws = wb.active
	ws.title = title
	for r, row in enumerate(rows, start=1):
		for c, value in enumerate(row, start=1):
			if value is not None:
				ws.cell(row=r, column=c, value=value)
	wb.save(path)
	wb.close()
	return str(path)


def read_sheet_values(path):
	"""Return (sheet titles, rows of values) of a saved workbook."""
	wb = load_workbook(path)
	ws = wb.worksheets[0]
	titles = wb.sheetnames
	rows = [list(row) for row in ws.iter_rows(values_only=True)]
	wb.close()
	return titles, rows


def read_json(path):
	with open(path, "r", encoding="utf-8") as f:
		return json.load(f)
