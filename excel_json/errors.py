#!/usr/bin/env python3
"""
Errors raised by the Excel <-> JSON conversions.
Every failure is terminal for the current call and carries a single
human-readable message meant to be shown to the user as-is.
"""


class ConversionError(Exception):
	"""Base class for all conversion failures."""

	kind = "ConversionError"

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message

	def __str__(self) -> str:
		return self.message


class PermissionDenied(ConversionError):
	"""The destination directory does not accept file creation/deletion."""

	kind = "PermissionDenied"


class OpenFailure(ConversionError):
	"""The input file is missing, unreadable, or not a valid document."""

	kind = "OpenFailure"


class EmptyDocument(ConversionError):
	"""The workbook has no worksheets."""

	kind = "EmptyDocument"


class InsufficientRows(ConversionError):
	"""The first worksheet has no data row below the header."""

	kind = "InsufficientRows"


class RowReadFailure(ConversionError):
	kind = "RowReadFailure"


class SerializationFailure(ConversionError):
	kind = "SerializationFailure"


class WriteFailure(ConversionError):
	"""Saving the output file failed."""

	kind = "WriteFailure"


class ExtensionMismatch(ConversionError):
	"""The input path does not carry the expected extension."""

	kind = "ExtensionMismatch"


class DecodeFailure(ConversionError):
	"""The input text is not a JSON array of flat string-valued objects."""

	kind = "DecodeFailure"
