"""Layout engine."""

from pprintpy.printer.options import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_MAX_WIDTH,
    Mode,
    PrinterOptions,
)
from pprintpy.printer.render import render

__all__ = [
    "DEFAULT_INDENT_WIDTH",
    "DEFAULT_MAX_WIDTH",
    "Mode",
    "PrinterOptions",
    "render",
]
