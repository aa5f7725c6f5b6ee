#!/usr/bin/env python3
"""
Desktop window for the Excel <-> JSON converter.

Two buttons:
  * Import Excel to JSON - pick an .xlsx file, output.json is written next to it
  * Export JSON to Excel - pick a .json file, then choose where to save the .xlsx

The conversions themselves run through ``import_excel`` / ``export_json`` which
need no display and return what the window should show.
"""

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox
from typing import Any, Dict, Optional

from .config import DEFAULTS
from .converter import JSON_EXTENSION, default_json_output, ensure_excel_extension, excel_to_json, json_to_excel
from .errors import ConversionError

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Excel ⇄ JSON Converter"
WINDOW_SIZE = "500x300"

EXCEL_FILETYPES = [("Excel files", "*.xlsx")]
JSON_FILETYPES = [("JSON files", "*.json")]


class ConversionOutcome:
	"""Result of one conversion as shown to the user."""

	def __init__(self, ok: bool, title: str, message: str, output_path: str):
		self.ok = ok
		self.title = title
		self.message = message
		self.output_path = output_path

	def __repr__(self) -> str:
		return f"ConversionOutcome(ok={self.ok!r}, output_path={self.output_path!r})"


def import_excel(input_path: str, engine: Optional[str] = None, indent: int = 2,
				 output_name: str = DEFAULTS["json_output_name"]) -> ConversionOutcome:
	output_path = default_json_output(input_path, output_name)
	try:
		excel_to_json(input_path, output_path, engine=engine, indent=indent)
	except ConversionError as e:
		logger.warning("Excel to JSON failed for %s: %s", input_path, e)
		return ConversionOutcome(False, "Error", str(e), output_path)
	return ConversionOutcome(True, "Success", f"Excel to JSON succeeded! Saved to: {output_path}", output_path)


def export_json(input_path: str, output_path: str, engine: Optional[str] = None) -> ConversionOutcome:
	output_path = ensure_excel_extension(output_path)
	try:
		json_to_excel(input_path, output_path, engine=engine)
	except ConversionError as e:
		logger.warning("JSON to Excel failed for %s: %s", input_path, e)
		return ConversionOutcome(False, "Error", str(e), output_path)
	return ConversionOutcome(True, "Success", f"JSON to Excel succeeded! Saved to: {output_path}", output_path)


class ConverterApp:
	def __init__(self, root, engine: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
		self.root = root
		self.engine = engine
		self.config = dict(DEFAULTS, **(config or {}))

		root.title(WINDOW_TITLE)
		root.geometry(WINDOW_SIZE)

		self.import_label = tk.Label(root, text="Import path: not selected", anchor="w", wraplength=480, justify="left")
		self.import_button = tk.Button(root, text="Import Excel to JSON", command=self.on_import)
		self.export_label = tk.Label(root, text="Export path: not selected", anchor="w", wraplength=480, justify="left")
		self.export_button = tk.Button(root, text="Export JSON to Excel", command=self.on_export)

		for widget in (self.import_label, self.import_button, self.export_label, self.export_button):
			widget.pack(fill="x", padx=10, pady=6)

	def _show(self, outcome: ConversionOutcome) -> None:
		if outcome.ok:
			messagebox.showinfo(outcome.title, outcome.message, parent=self.root)
		else:
			messagebox.showerror(outcome.title, outcome.message, parent=self.root)

	def on_import(self) -> None:
		input_path = filedialog.askopenfilename(
			parent=self.root,
			initialdir=str(Path.home()),
			filetypes=EXCEL_FILETYPES,
		)
		if not input_path:
			return
		self.import_label.config(text=f"Import path: {input_path}")
		self._show(import_excel(
			input_path,
			engine=self.engine,
			indent=self.config["indent"],
			output_name=self.config["json_output_name"],
		))

	def on_export(self) -> None:
		input_path = filedialog.askopenfilename(parent=self.root, filetypes=JSON_FILETYPES)
		if not input_path:
			return
		if Path(input_path).suffix != JSON_EXTENSION:
			messagebox.showerror("Error", "Please select a valid JSON file", parent=self.root)
			return
		self.export_label.config(text=f"Input path: {input_path}")

		output_path = filedialog.asksaveasfilename(parent=self.root, filetypes=EXCEL_FILETYPES)
		if not output_path:
			return
		outcome = export_json(input_path, output_path, engine=self.engine)
		self.export_label.config(text=f"Export path: {outcome.output_path}")
		self._show(outcome)


def run_gui(engine: Optional[str] = None, config: Optional[Dict[str, Any]] = None) -> None:
	root = tk.Tk()
	ConverterApp(root, engine=engine, config=config)
	root.mainloop()
