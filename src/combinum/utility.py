# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

from decimal import Decimal
from numbers import Integral, Real
from typing import Any


class UserInputError(Exception):
    pass


class InvalidArgument(UserInputError, ValueError):
    """Raised when an operand violates a precondition (non-numeric or negative)."""


def typename(x: Any) -> str:
    return type(x).__name__


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str(); handles n >= 0."""
    n = abs(n)
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2))
    bl = n.bit_length()
    est = int((bl * 30103) // 100000)
    p10 = 10 ** est
    if n < p10:
        while n < p10:
            est -= 1
            p10 //= 10
    else:
        while n >= p10 * 10:
            est += 1
            p10 *= 10
    return est + 1


def as_integer(value: Any, name: str) -> int:
    """
    Normalize a numeric operand to int.

    Accepts ints, integral floats/Decimals and decimal integer strings ("12").
    Anything else (bool, None, "x", 2.5, nan) raises InvalidArgument.
    """
    if isinstance(value, bool):
        raise InvalidArgument(f"The [{name}] parameter MUST be a number, got {typename(value)}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        body = s[1:] if s[:1] in "+-" else s
        if not body.isdigit() or not body.isascii():
            raise InvalidArgument(f"The [{name}] parameter MUST be a number, got {value!r}")
        return int(s)
    if isinstance(value, (Real, Decimal)):
        try:
            is_whole = value == int(value)
        except (OverflowError, ValueError):
            is_whole = False
        if not is_whole:
            raise InvalidArgument(f"The [{name}] parameter MUST be a whole number, got {value!r}")
        return int(value)
    raise InvalidArgument(f"The [{name}] parameter MUST be a number, got {typename(value)}")


def validate_operand(value: Any, name: str = "wanted") -> int:
    """Return value as a non-negative int or raise InvalidArgument."""
    n = as_integer(value, name)
    if n < 0:
        raise InvalidArgument(f"The [{name}] parameter MUST be a positive number, got {n}")
    return n
