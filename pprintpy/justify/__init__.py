"""Line justification."""

from pprintpy.justify.justify import justify, justify_breaks, line_badness

__all__ = [
    "justify",
    "justify_breaks",
    "line_badness",
]
