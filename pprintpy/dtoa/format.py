"""Float-to-text conversion with a fixed notation policy."""

from __future__ import annotations

import math
from typing import Final

from pprintpy.dtoa.count import count_digits
from pprintpy.dtoa.shortest import (
    BINARY32,
    BINARY64,
    FloatFormat,
    decompose,
    round_to_format,
    shortest_digits,
    to_bits,
)

FIXED_EXPONENT_MIN: Final[int] = -4
"""Smallest scientific exponent still printed in fixed notation."""

FIXED_EXPONENT_MAX: Final[int] = 21
"""Scientific exponents from here upward switch to `d.ddde±N` notation."""

NAN_TEXT: Final[str] = "NaN"
INFINITY_TEXT: Final[str] = "inf"
ZERO_TEXT: Final[str] = "0.0"


def format_f64(x: float, *, trim_trailing_zero: bool = True) -> str:
    """Shortest round-trip text for a binary64 float.

    Integral values print without a fractional part unless
    `trim_trailing_zero` is False. Zeros always keep `.0` and their sign.
    """
    return _format_float(x, BINARY64, trim_trailing_zero)


def format_f32(x: float, *, trim_trailing_zero: bool = True) -> str:
    """Shortest text that round-trips through binary32.

    `x` is first rounded to the nearest binary32 value; magnitudes beyond the
    binary32 range format as `inf` / `-inf`.
    """
    return _format_float(round_to_format(x, BINARY32), BINARY32, trim_trailing_zero)


def _format_float(x: float, fmt: FloatFormat, trim_trailing_zero: bool) -> str:
    if math.isnan(x):
        return NAN_TEXT
    if math.isinf(x):
        return INFINITY_TEXT if x > 0 else f"-{INFINITY_TEXT}"
    if x == 0:
        return f"-{ZERO_TEXT}" if math.copysign(1.0, x) < 0 else ZERO_TEXT

    value = decompose(to_bits(x, fmt), fmt)
    digits, exponent = shortest_digits(value)
    body = render_decimal(digits, exponent, trim_trailing_zero=trim_trailing_zero)
    return f"-{body}" if value.negative else body


def render_decimal(digits: int, exponent: int, *, trim_trailing_zero: bool = True) -> str:
    """Lay out `digits * 10**exponent` in fixed or scientific notation."""
    text = str(digits)
    point = count_digits(digits) + exponent
    scientific_exponent = point - 1

    if FIXED_EXPONENT_MIN <= scientific_exponent < FIXED_EXPONENT_MAX:
        if exponent >= 0:
            integral = text + "0" * exponent
            return integral if trim_trailing_zero else f"{integral}.0"
        if point > 0:
            return f"{text[:point]}.{text[point:]}"
        return "0." + "0" * -point + text

    mantissa = text if len(text) == 1 else f"{text[0]}.{text[1:]}"
    return f"{mantissa}e{scientific_exponent}"
