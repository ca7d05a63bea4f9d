"""Flat measurement of Doc trees."""

from __future__ import annotations

from pprintpy.doc.model import (
    Concat,
    Doc,
    Group,
    Hardline,
    IfBreak,
    Nest,
    Softline,
    Text,
)
from pprintpy.text import text_width


def flat_text(doc: Doc) -> str | None:
    """Render `doc` on a single line, or None if it holds a hard line."""
    out: list[str] = []
    stack: list[Doc] = [doc]

    while stack:
        d = stack.pop()

        if isinstance(d, Text):
            out.append(d.s)
        elif isinstance(d, Concat):
            stack.extend(reversed(d.parts))
        elif isinstance(d, Softline):
            out.append(d.flat_text)
        elif isinstance(d, Hardline):
            return None
        elif isinstance(d, (Nest, Group)):
            stack.append(d.child)
        elif isinstance(d, IfBreak):
            stack.append(d.flat)

    return "".join(out)


def flat_width(doc: Doc) -> int | None:
    """Columns `doc` occupies rendered flat, or None if it cannot be flat."""
    text = flat_text(doc)
    return None if text is None else text_width(text)
