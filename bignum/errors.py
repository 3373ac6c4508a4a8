"""Error classes for bignum arithmetic.

Each error also derives from the matching builtin so callers can catch
either ``DivisionByZero`` or ``ZeroDivisionError``.
"""


class BigNumError(Exception):
    """Base error for bignum operations."""

    pass


class InvalidFormat(BigNumError, ValueError):
    """Text is not a valid decimal integer or rational literal."""

    pass


class DivisionByZero(BigNumError, ZeroDivisionError):
    """Division, modulo or Rational construction with a zero divisor."""

    pass
