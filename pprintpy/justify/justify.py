"""Minimum-raggedness line justification.

Distributes fragments over lines so that the sum of the cubed slack of every
line is minimal, which favours evenly filled lines over a greedy fill that
leaves one short ragged line behind. Classic dynamic program over break
positions (Knuth/Plass without stretchable glue).
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

from pprintpy.text import text_width

logger = logging.getLogger(__name__)


def line_badness(line_width: int, max_width: int) -> int:
    """Cost of one line: cube of its unused width (zero when overfull)."""
    slack = max_width - line_width
    return slack**3 if slack > 0 else 0


def justify_breaks(widths: Sequence[int], max_width: int, separator_width: int) -> list[int]:
    """Return the exclusive end index of each line.

    A line holding two or more fragments must fit `max_width`. A single
    fragment wider than `max_width` takes a line of its own and overflows.
    """
    if max_width <= 0:
        raise ValueError("max_width must be positive")
    if separator_width < 0:
        raise ValueError("separator_width cannot be negative")

    n = len(widths)
    # best[i]: minimal total badness of laying out widths[i:]
    best = [0] * (n + 1)
    line_end = [n] * (n + 1)

    for i in range(n - 1, -1, -1):
        line_width = 0
        best_cost = -1
        for j in range(i, n):
            line_width += widths[j]
            if j > i:
                line_width += separator_width
                # Wider lines only get wider: stop at the first infeasible one.
                if line_width > max_width:
                    break
            cost = line_badness(line_width, max_width) + best[j + 1]
            if best_cost < 0 or cost < best_cost:
                best_cost = cost
                line_end[i] = j + 1
        best[i] = best_cost

    ends: list[int] = []
    i = 0
    while i < n:
        i = line_end[i]
        ends.append(i)

    logger.debug("justified %d fragments into %d lines (badness %d)", n, len(ends), best[0])
    return ends


def justify(
    fragments: Sequence[str],
    max_width: int,
    separator_width: int = 1,
    *,
    separator: str | None = None,
) -> list[str]:
    """Join `fragments` into balanced lines no wider than `max_width`.

    Fragments on one line are joined with `separator`, which defaults to
    `separator_width` spaces.
    """
    if separator is None:
        separator = " " * separator_width

    ends = justify_breaks([text_width(f) for f in fragments], max_width, separator_width)
    lines: list[str] = []
    start = 0
    for end in ends:
        lines.append(separator.join(fragments[start:end]))
        start = end
    return lines
