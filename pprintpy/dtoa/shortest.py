"""Shortest round-trip decimal digits for IEEE 754 binary floats.

The rounding interval of a float (every real number that parses back to it)
is scaled to integers, then searched for the coarsest power-of-ten grid that
still has a point inside it. Only integer arithmetic is used, so no step can
introduce rounding error of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import struct
from typing import Final

_LOG10_2: Final[float] = math.log10(2)


@dataclass(frozen=True, slots=True)
class FloatFormat:
    """Bit layout of an IEEE 754 binary interchange format."""

    name: str
    mantissa_bits: int
    exponent_bits: int
    float_code: str
    bits_code: str

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def exponent_mask(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def mantissa_mask(self) -> int:
        return (1 << self.mantissa_bits) - 1


BINARY64: Final[FloatFormat] = FloatFormat(
    name="binary64",
    mantissa_bits=52,
    exponent_bits=11,
    float_code="<d",
    bits_code="<Q",
)

BINARY32: Final[FloatFormat] = FloatFormat(
    name="binary32",
    mantissa_bits=23,
    exponent_bits=8,
    float_code="<f",
    bits_code="<I",
)


@dataclass(frozen=True, slots=True)
class DecomposedFloat:
    """Finite non-zero float as `mantissa * 2**exponent`."""

    negative: bool
    mantissa: int
    exponent: int
    # The float sits on a binade boundary: the gap to its lower neighbour is
    # half the gap to its upper one.
    lower_gap_halved: bool


def to_bits(x: float, fmt: FloatFormat = BINARY64) -> int:
    """Raw bit pattern of `x` encoded in `fmt` (rounding to nearest)."""
    return struct.unpack(fmt.bits_code, struct.pack(fmt.float_code, x))[0]


def round_to_format(x: float, fmt: FloatFormat) -> float:
    """Round `x` to the nearest value representable in `fmt`.

    Magnitudes that round past the largest finite value become infinities of
    the same sign, as IEEE 754 round-to-nearest overflow does.
    """
    try:
        packed = struct.pack(fmt.float_code, x)
    except OverflowError:
        return math.copysign(math.inf, x)
    return struct.unpack(fmt.float_code, packed)[0]


def decompose(bits: int, fmt: FloatFormat = BINARY64) -> DecomposedFloat:
    """Split a finite, non-zero bit pattern into sign, mantissa and exponent."""
    negative = bool(bits >> (fmt.mantissa_bits + fmt.exponent_bits))
    biased = (bits >> fmt.mantissa_bits) & fmt.exponent_mask
    fraction = bits & fmt.mantissa_mask

    if biased == fmt.exponent_mask:
        raise ValueError(f"{fmt.name} bit pattern {bits:#x} is not finite")
    if biased == 0 and fraction == 0:
        raise ValueError(f"{fmt.name} bit pattern {bits:#x} is zero")

    if biased == 0:
        # Subnormal: no implicit leading bit, fixed minimum exponent.
        return DecomposedFloat(
            negative=negative,
            mantissa=fraction,
            exponent=1 - fmt.bias - fmt.mantissa_bits,
            lower_gap_halved=False,
        )

    return DecomposedFloat(
        negative=negative,
        mantissa=fraction | (1 << fmt.mantissa_bits),
        exponent=biased - fmt.bias - fmt.mantissa_bits,
        lower_gap_halved=fraction == 0 and biased > 1,
    )


def shortest_digits(value: DecomposedFloat) -> tuple[int, int]:
    """Return `(digits, exponent)` with `digits * 10**exponent` round-tripping.

    `digits` has the fewest significant digits of any decimal inside the
    rounding interval, never ends in zero, and is the candidate closest to the
    exact binary value (ties go to the even digit).
    """
    m = value.mantissa
    # Interval endpoints are halfway to the neighbouring floats; scaling by 4
    # keeps the quarter-step lower endpoint of binade boundaries integral.
    scale_exponent = value.exponent - 2
    mid = 4 * m
    high = mid + 2
    low = mid - (1 if value.lower_gap_halved else 2)
    # Round-half-even parsing maps an exact midpoint onto an even mantissa.
    inclusive = m % 2 == 0

    # 10**q exceeds the upper endpoint, so the grid at q has no point inside.
    q = math.floor((high.bit_length() + scale_exponent) * _LOG10_2) + 2
    while True:
        found = _closest_on_grid(low, mid, high, scale_exponent, q, inclusive)
        if found is not None:
            return found, q
        q -= 1


def _closest_on_grid(
    low: int,
    mid: int,
    high: int,
    scale_exponent: int,
    q: int,
    inclusive: bool,
) -> int | None:
    """Integer `d` with `d * 10**q` in the interval nearest to `mid`, if any."""
    numerator_scale = 1
    denominator = 1
    if scale_exponent >= 0:
        numerator_scale <<= scale_exponent
    else:
        denominator <<= -scale_exponent
    if q >= 0:
        denominator *= 10**q
    else:
        numerator_scale *= 10**-q

    low_n = low * numerator_scale
    mid_n = mid * numerator_scale
    high_n = high * numerator_scale

    if inclusive:
        first = -(-low_n // denominator)
        last = high_n // denominator
    else:
        first = low_n // denominator + 1
        last = -(-high_n // denominator) - 1
    if first > last:
        return None

    nearest, remainder = divmod(mid_n, denominator)
    twice = 2 * remainder
    if twice > denominator or (twice == denominator and nearest % 2 == 1):
        nearest += 1
    return min(max(nearest, first), last)
