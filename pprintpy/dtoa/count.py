"""Decimal digit counting for integers."""


def count_digits(n: int) -> int:
    """Number of characters in the decimal form of `n`, sign included.

    Estimates `log10` from the bit length and corrects upward, so the integer
    is never converted to a string.
    """
    sign = 1 if n < 0 else 0
    n = abs(n)
    if n == 0:
        return 1

    # 1233 / 4096 is just below log10(2): the estimate never overshoots.
    digits = (n.bit_length() * 1233) >> 12
    while n >= 10**digits:
        digits += 1
    return sign + digits
