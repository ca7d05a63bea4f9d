import math
import struct
import sys

import pytest

from pprintpy.dtoa import (
    BINARY32,
    BINARY64,
    count_digits,
    decompose,
    format_f32,
    format_f64,
    render_decimal,
    shortest_digits,
    to_bits,
)
from pprintpy.dtoa.shortest import round_to_format
from tests._shared_cases import (
    FLOAT_CASES,
    FloatCase,
    float_case_id,
    random_finite_floats,
    significant_digits,
)


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


@pytest.mark.parametrize("case", FLOAT_CASES, ids=float_case_id)
def test_format_f64_known_values(case: FloatCase) -> None:
    assert format_f64(case.value) == case.expected


@pytest.mark.parametrize("case", FLOAT_CASES, ids=float_case_id)
def test_format_f64_round_trips_bit_for_bit(case: FloatCase) -> None:
    if math.isnan(case.value):
        assert math.isnan(float(format_f64(case.value)))
        return
    assert _bits(float(format_f64(case.value))) == _bits(case.value)


def test_format_f64_round_trips_random_bit_patterns() -> None:
    for value in random_finite_floats(2000):
        rendered = format_f64(value)
        assert _bits(float(rendered)) == _bits(value), rendered


def test_format_f64_is_as_short_as_shortest_repr() -> None:
    # repr() is itself a shortest round-trip formatter: no digit string
    # shorter than its own parses back to the same float.
    for value in [*random_finite_floats(2000, seed=7), 0.1, 5e-324, sys.float_info.max]:
        ours = significant_digits(format_f64(value))
        assert len(ours) == len(significant_digits(repr(value))), (value, ours)


def test_format_f64_picks_closest_candidate_among_shortest() -> None:
    # 5e-324 is ~4.94e-324; 4e-324 and 6e-324 also round-trip but are farther away.
    assert format_f64(5e-324) == "5e-324"
    assert float("4e-324") == 5e-324
    assert format_f64(2.0**-1074) == "5e-324"


def test_format_f64_keeps_trailing_zero_when_requested() -> None:
    assert format_f64(1.0, trim_trailing_zero=False) == "1.0"
    assert format_f64(-42.0, trim_trailing_zero=False) == "-42.0"
    assert format_f64(1e20, trim_trailing_zero=False) == "100000000000000000000.0"
    assert format_f64(1.5, trim_trailing_zero=False) == "1.5"
    assert format_f64(1e21, trim_trailing_zero=False) == "1e21"
    assert format_f64(0.0, trim_trailing_zero=True) == "0.0"


def test_shortest_digits_strips_trailing_zeros() -> None:
    assert shortest_digits(decompose(to_bits(0.1))) == (1, -1)
    assert shortest_digits(decompose(to_bits(1500.0))) == (15, 2)
    assert shortest_digits(decompose(to_bits(-7.25))) == (725, -2)


def test_decompose_reports_binade_boundaries() -> None:
    one = decompose(to_bits(1.0))
    assert one.mantissa == 1 << 52
    assert one.exponent == -52
    assert one.lower_gap_halved is True
    assert one.negative is False

    subnormal = decompose(to_bits(-5e-324))
    assert subnormal.mantissa == 1
    assert subnormal.exponent == -1074
    assert subnormal.lower_gap_halved is False
    assert subnormal.negative is True


def test_decompose_rejects_non_finite_and_zero() -> None:
    with pytest.raises(ValueError, match="not finite"):
        decompose(to_bits(math.inf))
    with pytest.raises(ValueError, match="is zero"):
        decompose(to_bits(0.0), BINARY64)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.1, "0.1"),
        (1.0, "1"),
        (16777216.0, "16777216"),
        (3.4028234663852886e38, "3.4028235e38"),
        (1.401298464324817e-45, "1e-45"),
        (-0.0, "-0.0"),
    ],
)
def test_format_f32_shortest_for_binary32(value: float, expected: str) -> None:
    rendered = format_f32(value)
    assert rendered == expected
    assert round_to_format(float(rendered), BINARY32) == round_to_format(value, BINARY32)


def test_format_f32_overflows_to_infinity() -> None:
    assert format_f32(1e39) == "inf"
    assert format_f32(-1e39) == "-inf"
    assert format_f32(sys.float_info.max) == "inf"
    assert round_to_format(-1e300, BINARY32) == -math.inf
    # Still rounds down to the largest finite binary32 value.
    assert format_f32(3.4028235e38) == "3.4028235e38"


def test_render_decimal_switches_notation_at_fixed_bounds() -> None:
    assert render_decimal(1, -4) == "0.0001"
    assert render_decimal(1, -5) == "1e-5"
    assert render_decimal(12345, -2) == "123.45"
    assert render_decimal(5, 21) == "5e21"
    assert render_decimal(5, 20) == "500000000000000000000"
    assert render_decimal(5, 19) == "50000000000000000000"
    assert render_decimal(123, 30) == "1.23e32"


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, 1),
        (9, 1),
        (10, 2),
        (-10, 3),
        (99, 2),
        (100, 3),
        (2**64 - 1, 20),
        (-(2**63), 20),
        (10**40, 41),
        (10**40 - 1, 40),
    ],
)
def test_count_digits_matches_decimal_length(n: int, expected: int) -> None:
    assert count_digits(n) == expected
    assert count_digits(n) == len(str(n))
