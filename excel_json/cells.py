#!/usr/bin/env python3
from datetime import date, datetime, time
from typing import Any, List, Sequence


def cell_to_text(value: Any) -> str:
	"""Render a typed cell value as the text stored in a record."""
	if value is None:
		return ""
	if isinstance(value, str):
		return value
	if isinstance(value, bool):
		return "TRUE" if value else "FALSE"
	if isinstance(value, int):
		return str(value)
	if isinstance(value, float):
		if value.is_integer():
			return str(int(value))
		return repr(value)
	if isinstance(value, datetime):
		if value.time() == time(0, 0):
			return value.date().isoformat()
		return value.isoformat()
	if isinstance(value, (date, time)):
		return value.isoformat()
	return str(value)


def trim_row(row: Sequence[str]) -> List[str]:
	"""Drop trailing empty cells."""
	end = len(row)
	while end > 0 and row[end - 1] == "":
		end -= 1
	return list(row[:end])


def trim_rows(rows: Sequence[Sequence[str]]) -> List[List[str]]:
	"""Trim every row and drop fully empty rows at the end of the sheet."""
	trimmed = [trim_row(r) for r in rows]
	while trimmed and not trimmed[-1]:
		trimmed.pop()
	return trimmed
