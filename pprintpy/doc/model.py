"""Doc tree: immutable layout IR with optional line breaks."""

from __future__ import annotations

from dataclasses import dataclass

from pprintpy.diagnostics import DOC_TEXT_CONTAINS_NEWLINE, DocumentError


class DocNode:
    """Shared behaviour of every Doc variant."""

    __slots__ = ()

    def __add__(self, other: object) -> Doc:
        from pprintpy.doc.builders import concat

        return concat(self, other)

    def __radd__(self, other: object) -> Doc:
        from pprintpy.doc.builders import concat

        return concat(other, self)


@dataclass(frozen=True, slots=True)
class Nil(DocNode):
    """Renders as nothing."""


@dataclass(frozen=True, slots=True)
class Text(DocNode):
    """Atomic single-line leaf."""

    s: str

    def __post_init__(self) -> None:
        if "\n" in self.s or "\r" in self.s:
            raise DocumentError(DOC_TEXT_CONTAINS_NEWLINE, repr(self.s))


@dataclass(frozen=True, slots=True)
class Hardline(DocNode):
    """Always breaks when rendered."""


@dataclass(frozen=True, slots=True)
class Softline(DocNode):
    """Breaks in 'break' mode; a single space (or nothing) in 'flat' mode."""

    zero_width: bool = False

    @property
    def flat_text(self) -> str:
        return "" if self.zero_width else " "


@dataclass(frozen=True, slots=True)
class Concat(DocNode):
    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Nest(DocNode):
    """Shift indentation by `delta` levels for line breaks within child."""

    delta: int
    child: Doc


@dataclass(frozen=True, slots=True)
class Group(DocNode):
    """Try to render child in 'flat' mode if it fits; else 'break' mode."""

    child: Doc


@dataclass(frozen=True, slots=True)
class IfBreak(DocNode):
    """Pick `flat` or `broken` by the mode of the nearest enclosing group."""

    flat: Doc
    broken: Doc


type Doc = Nil | Text | Hardline | Softline | Concat | Nest | Group | IfBreak

NIL = Nil()
HARDLINE = Hardline()
SOFTLINE = Softline()
SOFTBREAK = Softline(zero_width=True)
