"""Diagnostics."""

from pprintpy.diagnostics.codes import (
    DOC_NEGATIVE_INDENT,
    DOC_TEXT_CONTAINS_NEWLINE,
    DOC_UNSUPPORTED_VALUE,
    PRINTER_INVALID_OPTION,
    DiagnosticSpec,
)
from pprintpy.diagnostics.errors import DocumentError

__all__ = [
    "DOC_NEGATIVE_INDENT",
    "DOC_TEXT_CONTAINS_NEWLINE",
    "DOC_UNSUPPORTED_VALUE",
    "PRINTER_INVALID_OPTION",
    "DiagnosticSpec",
    "DocumentError",
]
