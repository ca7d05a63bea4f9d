"""Doc renderer: Wadler/Lindig layout over an explicit work stack."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from pprintpy.diagnostics import DOC_NEGATIVE_INDENT, DocumentError
from pprintpy.doc.convert import DocLike, to_doc
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
from pprintpy.printer.options import Mode, PrinterOptions
from pprintpy.text import split_long_text, text_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Frame:
    indent: int
    # None while no group encloses the doc: breaks are taken, IfBreak is flat.
    mode: Mode | None
    doc: Doc


def render(doc: DocLike, options: PrinterOptions | None = None) -> str:
    """Render doc into a string, fitting groups within `options.max_width`.

    Any doc-like value is accepted and converted with `to_doc` first.

    Raises `DocumentError` when nesting drives indentation below zero; no
    partial output is produced in that case.
    """
    opts = options or PrinterOptions()
    out: list[str] = []
    col = 0

    stack: list[_Frame] = [_Frame(indent=0, mode=None, doc=to_doc(doc))]

    while stack:
        frame = stack.pop()
        ind, mode, d = frame.indent, frame.mode, frame.doc

        if isinstance(d, Text):
            if opts.break_long_text and col + text_width(d.s) > opts.max_width:
                col = _emit_long_text(out, d.s, ind, col, opts)
            else:
                out.append(d.s)
                col += text_width(d.s)
            continue

        if isinstance(d, Concat):
            # push in reverse so first part is processed first
            for p in reversed(d.parts):
                stack.append(_Frame(ind, mode, p))
            continue

        if isinstance(d, Hardline):
            col = _newline(out, ind, opts)
            continue

        if isinstance(d, Softline):
            if mode == Mode.FLAT:
                out.append(d.flat_text)
                col += text_width(d.flat_text)
            else:
                col = _newline(out, ind, opts)
            continue

        if isinstance(d, Nest):
            level = ind + d.delta
            if level < 0:
                raise DocumentError(DOC_NEGATIVE_INDENT, f"level {ind} shifted by {d.delta}")
            stack.append(_Frame(level, mode, d.child))
            continue

        if isinstance(d, Group):
            flat = _Frame(ind, Mode.FLAT, d.child)
            if mode == Mode.FLAT or _fits(opts.max_width - col, stack, flat):
                stack.append(flat)
            else:
                stack.append(_Frame(ind, Mode.BREAK, d.child))
            continue

        if isinstance(d, IfBreak):
            stack.append(_Frame(ind, mode, d.broken if mode == Mode.BREAK else d.flat))
            continue

    result = "".join(out)
    logger.debug("rendered %d characters at max_width=%d", len(result), opts.max_width)
    return result


def _fits(remaining: int, rest: list[_Frame], first: _Frame) -> bool:
    """
    Lookahead: simulate rendering (without producing output) `first`, then the
    pending work in `rest`, until:
    - we exceed the remaining width => doesn't fit
    - we hit a hard line in flat mode => doesn't fit (a flat group is one line)
    - we hit any line break in break mode, or run out of input => fits
    """
    if remaining < 0:
        return False

    probe: list[_Frame] = [first]
    rest_index = len(rest)

    while True:
        if not probe:
            if rest_index == 0:
                return True
            rest_index -= 1
            probe.append(rest[rest_index])

        fr = probe.pop()
        d = fr.doc
        flat = fr.mode == Mode.FLAT

        if isinstance(d, Text):
            remaining -= text_width(d.s)
            if remaining < 0:
                return False
            continue

        if isinstance(d, Concat):
            for p in reversed(d.parts):
                probe.append(_Frame(fr.indent, fr.mode, p))
            continue

        if isinstance(d, Hardline):
            return not flat

        if isinstance(d, Softline):
            if not flat:
                return True
            remaining -= text_width(d.flat_text)
            if remaining < 0:
                return False
            continue

        if isinstance(d, Nest):
            probe.append(_Frame(fr.indent + d.delta, fr.mode, d.child))
            continue

        if isinstance(d, Group):
            # Pending groups are undecided; their breaks still end the line.
            probe.append(_Frame(fr.indent, fr.mode, d.child))
            continue

        if isinstance(d, IfBreak):
            probe.append(_Frame(fr.indent, fr.mode, d.broken if fr.mode == Mode.BREAK else d.flat))
            continue


def _newline(out: list[str], level: int, options: PrinterOptions) -> int:
    """Emit a line break plus indentation; return the new column."""
    _trim_trailing_whitespace(out)
    out.append("\n")
    out.append(options.indentation(level))
    return options.indent_columns(level)


def _trim_trailing_whitespace(out: list[str]) -> None:
    while out:
        stripped = out[-1].rstrip(" \t")
        if stripped:
            out[-1] = stripped
            return
        out.pop()


def _emit_long_text(out: list[str], s: str, level: int, col: int, options: PrinterOptions) -> int:
    pieces = split_long_text(
        s,
        options.max_width - col,
        options.max_width - options.indent_columns(level),
    )
    for i, piece in enumerate(pieces):
        if i > 0:
            col = _newline(out, level, options)
        out.append(piece)
        col += text_width(piece)
    return col
