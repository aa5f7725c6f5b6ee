#!/usr/bin/env python3
import platform
from typing import Optional

ENGINES = ("openpyxl", "xlwings")


def default_engine() -> str:
	# xlwings needs a local Excel, which is normally only present on Windows
	return 'xlwings' if platform.system().lower().startswith('win') else 'openpyxl'


def get_workbook_class(engine: Optional[str] = None):
	"""Return the workbook class for ``engine`` (platform default when None)."""
	engine = engine or default_engine()
	if engine == "openpyxl":
		from .openpyxl_workbook import OpenpyxlWorkbook
		return OpenpyxlWorkbook
	if engine == "xlwings":
		from .xlwings_workbook import XlwingsWorkbook
		return XlwingsWorkbook
	raise ValueError(f"Unknown engine '{engine}', expected one of: {', '.join(ENGINES)}")
