#!/usr/bin/env python3
"""
JSON encoding and decoding of record sets.

A record set is a JSON array of flat objects whose values are all strings:

	[
	  {"Name": "Alice", "Age": "30"},
	  {"Name": "Bob"}
	]

Key order inside each object is preserved in both directions.
"""

import json
from typing import Any, Dict, List, Union

from .errors import DecodeFailure, SerializationFailure

Record = Dict[str, str]
RecordSet = List[Record]


def encode_records(records: RecordSet, indent: int = 2) -> str:
	"""Serialize ``records`` as an indented JSON array."""
	try:
		return json.dumps(list(records), indent=indent, ensure_ascii=False)
	except (TypeError, ValueError) as e:
		raise SerializationFailure(f"JSON encoding failed: {e}") from e


def _decode_record(index: int, item: Any) -> Record:
	# null elements decode to an empty record
	if item is None:
		return {}
	if not isinstance(item, dict):
		raise DecodeFailure(
			f"Failed to parse JSON data: element {index} is {type(item).__name__}, expected an object"
		)
	record: Record = {}
	for key, value in item.items():
		if value is None:
			record[key] = ""
		elif isinstance(value, str):
			record[key] = value
		else:
			raise DecodeFailure(
				f"Failed to parse JSON data: element {index} field '{key}' is {type(value).__name__}, expected a string"
			)
	return record


def decode_records(data: Union[bytes, str]) -> RecordSet:
	"""
	Parse a JSON array of flat string-valued objects.

	A top-level ``null`` decodes to an empty record set, ``null`` elements to
	empty records and ``null`` values to empty strings.

	Args:
		data (bytes | str): Raw JSON document

	Returns:
		List of records in document order

	Raises:
		DecodeFailure: If the document is not valid JSON or has the wrong shape
	"""
	try:
		parsed = json.loads(data)
	except ValueError as e:
		raise DecodeFailure(f"Failed to parse JSON data: {e}") from e
	if parsed is None:
		return []
	if not isinstance(parsed, list):
		raise DecodeFailure(
			f"Failed to parse JSON data: expected an array of objects, got {type(parsed).__name__}"
		)
	return [_decode_record(i, item) for i, item in enumerate(parsed)]
