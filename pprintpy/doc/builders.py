"""Doc constructors and combinators."""

from __future__ import annotations

from collections.abc import Iterable
import re

from pprintpy.doc.convert import DocLike, to_doc
from pprintpy.doc.measure import flat_text
from pprintpy.doc.model import (
    HARDLINE,
    NIL,
    SOFTBREAK,
    SOFTLINE,
    Concat,
    Doc,
    Group,
    IfBreak,
    Nest,
    Nil,
    Text,
)
from pprintpy.justify import justify_breaks
from pprintpy.printer.options import PrinterOptions
from pprintpy.text import text_width

_LINE_TERMINATOR_RE = re.compile(r"\r\n|\r|\n")


def nil() -> Doc:
    return NIL


def text(s: str) -> Doc:
    return Text(s)


def hardline() -> Doc:
    return HARDLINE


def softline() -> Doc:
    return SOFTLINE


def softbreak() -> Doc:
    """Softline that vanishes instead of becoming a space in flat mode."""
    return SOFTBREAK


def concat(*parts: DocLike) -> Doc:
    flat: list[Doc] = []
    for p in parts:
        d = to_doc(p)
        if isinstance(d, Concat):
            flat.extend(d.parts)
        elif not isinstance(d, Nil):
            flat.append(d)

    if not flat:
        return NIL
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def nest(delta: int, d: DocLike) -> Doc:
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise TypeError(f"Nest delta must be an int, got {type(delta).__name__}")
    return Nest(delta, to_doc(d))


def indent(d: DocLike) -> Doc:
    return nest(1, d)


def dedent(d: DocLike) -> Doc:
    return nest(-1, d)


def group(d: DocLike) -> Doc:
    return Group(to_doc(d))


def if_break(flat: DocLike, broken: DocLike) -> Doc:
    return IfBreak(to_doc(flat), to_doc(broken))


def join(sep: DocLike, parts: Iterable[DocLike]) -> Doc:
    sep_doc = to_doc(sep)
    out: list[Doc] = []
    first = True
    for p in parts:
        if first:
            first = False
        else:
            out.append(sep_doc)
        out.append(to_doc(p))
    return concat(*out)


def wrap(opening: DocLike, closing: DocLike, d: DocLike) -> Doc:
    """Surround `d` with `opening` and `closing`."""
    return concat(opening, d, closing)


def bracket(opening: DocLike, d: DocLike, closing: DocLike) -> Doc:
    """Group `opening d closing`; when broken, `d` moves to its own indented lines."""
    return group(concat(opening, indent(concat(SOFTBREAK, d)), SOFTBREAK, closing))


def lines(s: str) -> Doc:
    """Multi-line string as text leaves separated by hard lines."""
    return join(HARDLINE, [Text(line) for line in _LINE_TERMINATOR_RE.split(s)])


def smart_join(
    sep: DocLike,
    parts: Iterable[DocLike],
    options: PrinterOptions | None = None,
    *,
    level: int = 0,
    prefix_width: int = 0,
    width: int | None = None,
) -> Doc:
    """Join `parts` on `sep`, breaking lines where the justifier balances them.

    Break positions are chosen before layout, so the caller states where the
    block will sit. `level` is the nesting level it renders at (one per
    enclosing `indent`) and `prefix_width` the columns already taken on its
    first line after that indentation. Each line gets
    `options.max_width - options.indent_columns(level)` columns, or `width`
    columns when given explicitly (indentation already deducted). The result
    holds hard lines at the chosen positions and is otherwise ordinary
    content.
    """
    sep_doc = to_doc(sep)
    docs = [to_doc(p) for p in parts]
    if not docs:
        return NIL

    sep_text = flat_text(sep_doc)
    if sep_text is None:
        # The separator always breaks: nothing left to balance.
        return join(sep_doc, docs)

    if width is not None:
        budget = width
    elif options is not None:
        budget = options.max_width - options.indent_columns(level)
    else:
        raise TypeError("smart_join needs printer options or an explicit width")
    # Deep indentation may leave no room: every part then sits on its own line.
    budget = max(budget, 1)

    sep_width = text_width(sep_text)
    # Trailing whitespace of a separator ending a line is trimmed on output.
    trail_width = text_width(sep_text.rstrip(" \t"))

    widths: list[int] = []
    for i, d in enumerate(docs):
        text_value = flat_text(d)
        w = budget if text_value is None else text_width(text_value)
        if i < len(docs) - 1:
            w += trail_width
        widths.append(w)
    widths[0] += max(prefix_width, 0)

    ends = justify_breaks(widths, budget, sep_width - trail_width)
    line_starts = set(ends[:-1])

    out: list[Doc] = []
    for i, d in enumerate(docs):
        if i > 0:
            out.append(sep_doc)
            if i in line_starts:
                out.append(HARDLINE)
        out.append(d)
    return concat(*out)
