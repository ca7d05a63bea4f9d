"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    category: str | None = None


DOC_TEXT_CONTAINS_NEWLINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_TEXT_CONTAINS_NEWLINE",
    message="Text leaves must be single-line.",
    hint="Split the string with `lines(...)` or join pieces with `hardline()`.",
    category="doc",
)

DOC_NEGATIVE_INDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_NEGATIVE_INDENT",
    message="Nesting drives the indentation level below zero.",
    hint="Balance every `dedent(...)` with an enclosing `indent(...)`.",
    category="doc",
)

DOC_UNSUPPORTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_UNSUPPORTED_VALUE",
    message="Value cannot be converted to a document.",
    hint="Implement `__pretty__()` returning a Doc on the value's type.",
    category="doc",
)

PRINTER_INVALID_OPTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_INVALID_OPTION",
    message="Invalid printer option.",
    hint="`max_width` must be positive and `indent_width` non-negative.",
    category="printer",
)
