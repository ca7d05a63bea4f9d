"""Shortest round-trip float formatting."""

from pprintpy.dtoa.count import count_digits
from pprintpy.dtoa.format import (
    FIXED_EXPONENT_MAX,
    FIXED_EXPONENT_MIN,
    format_f32,
    format_f64,
    render_decimal,
)
from pprintpy.dtoa.shortest import (
    BINARY32,
    BINARY64,
    DecomposedFloat,
    FloatFormat,
    decompose,
    shortest_digits,
    to_bits,
)

__all__ = [
    "BINARY32",
    "BINARY64",
    "FIXED_EXPONENT_MAX",
    "FIXED_EXPONENT_MIN",
    "DecomposedFloat",
    "FloatFormat",
    "count_digits",
    "decompose",
    "format_f32",
    "format_f64",
    "render_decimal",
    "shortest_digits",
    "to_bits",
]
