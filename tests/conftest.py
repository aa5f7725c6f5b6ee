"""
Pytest configuration and shared fixtures.
"""

import json

import pytest

from helpers import write_workbook


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
	"""Configure custom markers."""
	config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Workbook Fixtures
# ============================================================================


@pytest.fixture
def people_rows():
	return [
		["Name", "Age", "City"],
		["Alice", "30", "Paris"],
		["Bob", "25", "Berlin"],
		["Chloé", "41", "Zürich"],
	]


@pytest.fixture
def people_xlsx(tmp_path, people_rows):
	return write_workbook(tmp_path / "people.xlsx", people_rows)


@pytest.fixture
def ragged_xlsx(tmp_path):
	"""One short row and one row wider than the header."""
	return write_workbook(tmp_path / "ragged.xlsx", [
		["id", "name", "email"],
		["1", "Ann"],
		["2", "Ben", "ben@example.com", "extra", "more"],
	])


@pytest.fixture
def header_only_xlsx(tmp_path):
	return write_workbook(tmp_path / "header_only.xlsx", [["a", "b"]])


@pytest.fixture
def empty_xlsx(tmp_path):
	return write_workbook(tmp_path / "empty.xlsx", [])


# ============================================================================
# JSON Fixtures
# ============================================================================


@pytest.fixture
def records_json(tmp_path):
	"""Record 0 fixes the columns; "Extra" only appears later."""
	path = tmp_path / "records.json"
	path.write_text(json.dumps([
		{"Name": "Alice", "Age": "30"},
		{"Name": "Bob"},
		{"Age": "7", "Name": "Cy", "Extra": "dropped"},
	]), encoding="utf-8")
	return str(path)


@pytest.fixture
def out_dir(tmp_path):
	d = tmp_path / "out"
	d.mkdir()
	return d
