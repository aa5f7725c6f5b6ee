from .converter import ensure_excel_extension, excel_to_json, json_to_excel
from .errors import (
	ConversionError,
	DecodeFailure,
	EmptyDocument,
	ExtensionMismatch,
	InsufficientRows,
	OpenFailure,
	PermissionDenied,
	RowReadFailure,
	SerializationFailure,
	WriteFailure,
)
from .permissions import check_write_permission

__all__ = [
	"excel_to_json",
	"json_to_excel",
	"ensure_excel_extension",
	"check_write_permission",
	"ConversionError",
	"PermissionDenied",
	"OpenFailure",
	"EmptyDocument",
	"InsufficientRows",
	"RowReadFailure",
	"SerializationFailure",
	"WriteFailure",
	"ExtensionMismatch",
	"DecodeFailure",
]

__version__ = "0.1.0"
