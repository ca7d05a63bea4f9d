"""Printer modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from pprintpy.diagnostics import PRINTER_INVALID_OPTION, DocumentError

DEFAULT_MAX_WIDTH: Final[int] = 32
DEFAULT_INDENT_WIDTH: Final[int] = 4


class Mode(StrEnum):
    """Layout decision taken by a group."""

    FLAT = "flat"
    BREAK = "break"


@dataclass(frozen=True, slots=True)
class PrinterOptions:
    """Width budget and indentation style for one or many render calls."""

    max_width: int = DEFAULT_MAX_WIDTH
    indent_width: int = DEFAULT_INDENT_WIDTH
    use_tabs: bool = False
    break_long_text: bool = False

    def __post_init__(self) -> None:
        if self.max_width <= 0:
            raise DocumentError(PRINTER_INVALID_OPTION, f"max_width={self.max_width}")
        if self.indent_width < 0:
            raise DocumentError(PRINTER_INVALID_OPTION, f"indent_width={self.indent_width}")

    def indentation(self, level: int) -> str:
        """Whitespace emitted after a line break at nesting `level`."""
        if self.use_tabs:
            return "\t" * level
        return " " * (level * self.indent_width)

    def indent_columns(self, level: int) -> int:
        """Columns taken by the indentation at `level`; a tab counts as one block."""
        return level * self.indent_width
