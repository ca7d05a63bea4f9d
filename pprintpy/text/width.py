"""Column measurement for text leaves."""

from typing import Final

SPACE: Final[str] = " "


def text_width(text: str) -> int:
    """Columns occupied by `text`: one per character."""
    return len(text)


def split_long_text(text: str, first_budget: int, budget: int) -> list[str]:
    """Word-wrap `text` into pieces for `break_long_text` rendering.

    The first piece must fit `first_budget` columns (the rest of the current
    line), later pieces `budget` columns (a fresh indented line). Pieces are
    cut at the last space keeping them within budget. When not even the first
    word fits the current line but a fresh line has more room, the first
    piece is empty so the word starts on the next line. A word wider than
    `budget` on its own is kept whole and overflows.
    """
    pieces: list[str] = []
    rest = text
    limit = max(first_budget, 0)
    fresh = max(budget, 0)

    while rest and text_width(rest) > limit:
        cut = rest.rfind(SPACE, 0, limit + 1)
        head = rest[:cut].rstrip(SPACE) if cut > 0 else ""
        if not head and limit < fresh:
            pieces.append("")
            rest = rest.lstrip(SPACE)
            limit = fresh
            continue
        if not head:
            leading = len(rest) - len(rest.lstrip(SPACE))
            cut = rest.find(SPACE, leading)
            if cut == -1:
                break
            head = rest[:cut]
        pieces.append(head)
        rest = rest[cut:].lstrip(SPACE)
        limit = fresh

    if rest or not pieces:
        pieces.append(rest)
    return pieces
