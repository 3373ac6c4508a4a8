"""Arbitrary-precision signed integers.

This module provides BigInt, an immutable signed integer stored as base-10^9
limbs plus a sign flag:
- Every operator returns a new, trimmed value
- Zero is never negative, so 0 == -0
- Division and modulo by zero raise DivisionByZero
- Malformed decimal text raises InvalidFormat

Usage pattern:
    from bignum.bigint import BigInt, B

    a = B("5050505050505050505050505050505")
    product = a * -5          # BigInt x int scalar
    quotient = product / B(7)  # truncates toward zero
    print(quotient)
"""

from __future__ import annotations

import math
import re

import structlog

from bignum.errors import DivisionByZero, InvalidFormat
from bignum.math import limbs as lm

logger = structlog.get_logger()

_DECIMAL_PATTERN = re.compile(r"-?[0-9]+")


class BigInt:
    """Signed integer of unbounded magnitude.

    The magnitude is a little-endian list of limbs in [0, 10^9); the sign
    lives in a separate flag. The limb list is always trimmed, and the
    canonical zero ([0]) is always non-negative.

    Binary operators accept a plain int on either side. Division (``/`` and
    ``//``) truncates toward zero, and ``%`` returns a remainder with the
    sign of the dividend, so ``b * (a / b) + a % b == a`` always holds.

    Attributes:
        limbs: The magnitude, least-significant limb first (read-only)
        is_negative: True for values below zero (read-only)
    """

    __slots__ = ("_limbs", "_negative")
    _limbs: list[int]
    _negative: bool

    def __init__(self, value: int | str | BigInt = 0) -> None:
        """Create a BigInt from an int, a decimal string, or another BigInt.

        Args:
            value: Integer to decompose, text matching ``-?[0-9]+``, or a
                BigInt to copy

        Raises:
            InvalidFormat: If a string is not a decimal integer
            TypeError: If value is not an int, str or BigInt, or is a bool
        """
        if isinstance(value, BigInt):
            self._limbs = list(value._limbs)
            self._negative = value._negative
        elif isinstance(value, bool):
            raise TypeError("BigInt does not accept bool")
        elif isinstance(value, int):
            self._limbs = lm.from_magnitude(-value if value < 0 else value)
            self._negative = value < 0
        elif isinstance(value, str):
            self._negative, self._limbs = _parse_decimal(value)
        else:
            raise TypeError(f"BigInt requires int, str or BigInt, got {type(value).__name__}")

    @classmethod
    def _from_parts(cls, limbs: list[int], negative: bool) -> BigInt:
        """Build from a magnitude and sign, restoring the canonical form."""
        result = cls.__new__(cls)
        result._limbs = lm.trim(limbs)
        result._negative = negative and not lm.is_zero(result._limbs)
        return result

    @property
    def limbs(self) -> tuple[int, ...]:
        """The magnitude, least-significant limb first."""
        return tuple(self._limbs)

    @property
    def is_negative(self) -> bool:
        return self._negative

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        return hash(int(self))

    def to_string(self) -> str:
        """Render as decimal text; the exact inverse of parsing."""
        digits = lm.render(self._limbs)
        return "-" + digits if self._negative else digits

    # --- Arithmetic operations ---

    def __add__(self, other: BigInt | int) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _signed_add(self._limbs, self._negative, rhs._limbs, rhs._negative)

    def __radd__(self, other: int) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: BigInt | int) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _signed_add(self._limbs, self._negative, rhs._limbs, not rhs._negative)

    def __rsub__(self, other: int) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other: BigInt | int) -> BigInt:
        """Multiply by a BigInt (schoolbook) or an int scalar (single pass)."""
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, BigInt):
            product = lm.mul(self._limbs, other._limbs)
            return BigInt._from_parts(product, self._negative != other._negative)
        if isinstance(other, int):
            product = lm.mul_small(self._limbs, -other if other < 0 else other)
            return BigInt._from_parts(product, self._negative != (other < 0))
        return NotImplemented

    def __rmul__(self, other: int) -> BigInt:
        return self.__mul__(other)

    def __truediv__(self, other: BigInt | int) -> BigInt:
        """Integer division, truncating toward zero.

        A BigInt divisor uses long division with a binary search per
        quotient digit; an int divisor uses single-pass scalar division.

        Raises:
            DivisionByZero: If other is zero
        """
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, BigInt):
            if not other:
                raise _division_by_zero(self, "/")
            quotient = lm.div_long(self._limbs, other._limbs)
            return BigInt._from_parts(quotient, self._negative != other._negative)
        if isinstance(other, int):
            if other == 0:
                raise _division_by_zero(self, "/")
            quotient = lm.div_small(self._limbs, -other if other < 0 else other)
            return BigInt._from_parts(quotient, self._negative != (other < 0))
        return NotImplemented

    def __rtruediv__(self, other: int) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__truediv__(self)

    # ``//`` is the same truncating division (not floor division as for int)
    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: BigInt | int) -> BigInt:
        """Remainder ``a - b * (a / b)``, carrying the sign of ``a``.

        Returns ``a`` unchanged when ``|a| < |b|``.

        Raises:
            DivisionByZero: If other is zero
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not rhs:
            raise _division_by_zero(self, "%")
        if lm.compare(self._limbs, rhs._limbs) < 0:
            return self
        return self - rhs * (self / rhs)

    def __rmod__(self, other: int) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__mod__(self)

    def __divmod__(self, other: BigInt | int) -> tuple[BigInt, BigInt]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        quotient = self / rhs
        return quotient, self - rhs * quotient

    def __rdivmod__(self, other: int) -> tuple[BigInt, BigInt]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__divmod__(self)

    def __neg__(self) -> BigInt:
        return BigInt._from_parts(list(self._limbs), not self._negative)

    def __pos__(self) -> BigInt:
        return self

    def __abs__(self) -> BigInt:
        return BigInt._from_parts(list(self._limbs), False)

    def increment(self) -> BigInt:
        """Return self + 1."""
        return self + _ONE

    def decrement(self) -> BigInt:
        """Return self - 1."""
        return self - _ONE

    # --- Comparison operations ---

    def _compare(self, other: BigInt) -> int:
        """Three-way compare: sign first, then limb count, then limbs."""
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = lm.compare(self._limbs, other._limbs)
        return -order if self._negative else order

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not lm.is_zero(self._limbs)

    def __int__(self) -> int:
        """Exact conversion to int."""
        magnitude = lm.to_magnitude(self._limbs)
        return -magnitude if self._negative else magnitude

    def __index__(self) -> int:
        return self.__int__()

    def __float__(self) -> float:
        """Approximate conversion to float.

        Limbs are accumulated most-significant first, so the result is exact
        only up to 2^53 and becomes inf for magnitudes beyond the float range.
        Never raises.
        """
        value = lm.to_float(self._limbs)
        if math.isinf(value):
            logger.warning("float_conversion_overflow", limb_count=len(self._limbs))
        return -value if self._negative else value

    # --- Named constructors ---

    @classmethod
    def from_int(cls, value: int) -> BigInt:
        """Create from an int.

        Raises:
            TypeError: If value is not an int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInt.from_int requires int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_str(cls, text: str) -> BigInt:
        """Parse decimal text with an optional leading '-'.

        Raises:
            InvalidFormat: If text does not match ``-?[0-9]+``
        """
        if not isinstance(text, str):
            raise TypeError(f"BigInt.from_str requires str, got {type(text).__name__}")
        return cls(text)

    @classmethod
    def zero(cls) -> BigInt:
        """Create a BigInt with value 0."""
        return cls(0)

    @classmethod
    def one(cls) -> BigInt:
        """Create a BigInt with value 1."""
        return cls(1)


def _parse_decimal(text: str) -> tuple[bool, list[int]]:
    """Split decimal text into (negative, limbs).

    Raises:
        InvalidFormat: If text does not match ``-?[0-9]+``
    """
    if _DECIMAL_PATTERN.fullmatch(text) is None:
        logger.debug("invalid_format", text=text[:40])
        raise InvalidFormat(f"Invalid decimal integer: {text!r}")
    negative = text.startswith("-")
    limbs = lm.parse_digits(text[1:] if negative else text)
    return negative and not lm.is_zero(limbs), limbs


def _signed_add(a: list[int], a_negative: bool, b: list[int], b_negative: bool) -> BigInt:
    """Add two signed magnitudes.

    Equal signs add magnitudes and keep the sign. Differing signs subtract
    the smaller magnitude from the larger and take the larger one's sign.
    """
    if a_negative == b_negative:
        return BigInt._from_parts(lm.add(a, b), a_negative)
    if lm.compare(a, b) >= 0:
        return BigInt._from_parts(lm.sub(a, b), a_negative)
    return BigInt._from_parts(lm.sub(b, a), b_negative)


def _coerce(x: object) -> BigInt | None:
    """Return x as a BigInt, or None when it is not an int (bool excluded) or BigInt."""
    if isinstance(x, BigInt):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return BigInt(x)
    return None


def _division_by_zero(dividend: BigInt, operation: str) -> DivisionByZero:
    logger.debug("division_by_zero", dividend=dividend.to_string(), operation=operation)
    verb = "Modulo" if operation == "%" else "Division"
    return DivisionByZero(f"{verb} by zero: {dividend} {operation} 0")


_ONE = BigInt(1)

# Convenience alias for concise code
B = BigInt
