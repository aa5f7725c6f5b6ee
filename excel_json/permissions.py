#!/usr/bin/env python3
import logging
import os

from .errors import PermissionDenied

logger = logging.getLogger(__name__)

MARKER_SUFFIX = ".permission_test"


def check_write_permission(path: str) -> None:
	"""
	Verify that a file can be created and removed next to ``path``.

	A marker file named ``<path>.permission_test`` is created and deleted
	immediately. Concurrent probes on the same path are not supported.

	Args:
		path (str): The destination file that is about to be written

	Raises:
		PermissionDenied: If the marker cannot be created or removed
	"""
	marker = f"{path}{MARKER_SUFFIX}"
	try:
		with open(marker, "w"):
			pass
	except OSError as e:
		raise PermissionDenied(f"No write permission, cannot create file: {e}") from e
	try:
		os.remove(marker)
	except OSError as e:
		raise PermissionDenied(f"Cannot remove test file, permission problem: {e}") from e
	logger.debug("Write permission confirmed for %s", path)


def can_write(path: str) -> bool:
	try:
		check_write_permission(path)
	except PermissionDenied:
		return False
	return True
