"""The `to_doc` seam: anything printable becomes a Doc."""

from __future__ import annotations

from typing import Final, Protocol

from pprintpy.diagnostics import DOC_UNSUPPORTED_VALUE
from pprintpy.doc.model import Doc, DocNode, Text
from pprintpy.dtoa import format_f32, format_f64


class Pretty(Protocol):
    """Values that know how to describe themselves as a Doc."""

    def __pretty__(self) -> DocLike: ...


type DocLike = Doc | Pretty | str | int | float | bool | None

MAX_PRETTY_STEPS: Final[int] = 1000


def to_doc(value: DocLike, *, trim_float_trailing_zero: bool = True) -> Doc:
    """Convert a doc-like value into a Doc.

    Scalars become text leaves (floats through the shortest round-trip
    formatter); other objects must implement `__pretty__`. A chain of
    `__pretty__` calls that has not reached a Doc after
    `MAX_PRETTY_STEPS` steps is taken to be a cycle and raises `TypeError`.
    """
    steps = 0
    while not isinstance(value, DocNode):
        if isinstance(value, str):
            return Text(value)
        if value is None or isinstance(value, bool):
            return Text(str(value))
        if isinstance(value, int):
            return Text(str(value))
        if isinstance(value, float):
            return float_text(value, trim_trailing_zero=trim_float_trailing_zero)

        pretty = getattr(type(value), "__pretty__", None)
        if pretty is None:
            raise TypeError(
                f"{DOC_UNSUPPORTED_VALUE.code}: {DOC_UNSUPPORTED_VALUE.message} "
                f"(got {type(value).__name__})"
            )
        converted = pretty(value)
        if converted is value:
            raise TypeError(f"{type(value).__name__}.__pretty__ returned its own instance")
        steps += 1
        if steps > MAX_PRETTY_STEPS:
            raise TypeError(
                f"{type(value).__name__}.__pretty__ did not reach a Doc "
                f"after {MAX_PRETTY_STEPS} conversions"
            )
        value = converted
    return value


def float_text(x: float, *, trim_trailing_zero: bool = True) -> Text:
    """Numeric leaf for a binary64 float.

    Pass `trim_trailing_zero=False` to keep floats visibly float-typed
    (`1.0` rather than `1`).
    """
    return Text(format_f64(x, trim_trailing_zero=trim_trailing_zero))


def float32_text(x: float, *, trim_trailing_zero: bool = True) -> Text:
    return Text(format_f32(x, trim_trailing_zero=trim_trailing_zero))
