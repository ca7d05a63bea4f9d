"""Text measurement helpers."""

from pprintpy.text.width import split_long_text, text_width

__all__ = [
    "split_long_text",
    "text_width",
]
