"""Exact rational numbers over BigInt.

A Rational is a numerator/denominator pair kept in canonical form after
every construction:
- the denominator is positive (zero denominators raise DivisionByZero)
- the sign lives on the numerator
- gcd(|numerator|, denominator) == 1, so zero is always 0/1

Arithmetic never defers reduction: each result goes back through the
canonicalizing constructor.

Example:
    >>> Rational(1, 3).as_decimal(5)
    '0.33333'
    >>> str(Rational(6, -8))
    '-3/4'
"""

from __future__ import annotations

import structlog

from bignum.bigint import BigInt
from bignum.errors import DivisionByZero

logger = structlog.get_logger()


def gcd(a: BigInt, b: BigInt) -> BigInt:
    """Greatest common divisor of |a| and |b| by the Euclidean algorithm.

    The larger working value is replaced by its remainder modulo the smaller
    until one reaches zero; the survivor is the sum of both. gcd(0, b) is
    |b|, and gcd(0, 0) is 0.
    """
    x, y = abs(a), abs(b)
    while x and y:
        if x > y:
            x = x % y
        else:
            y = y % x
    return x + y


class Rational:
    """Exact fraction of two BigInt values, always in lowest terms.

    Binary operators accept Rational, BigInt or int operands on either side.

    Attributes:
        numerator: Signed numerator (read-only)
        denominator: Positive denominator (read-only)
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: BigInt
    _denominator: BigInt

    def __init__(
        self,
        numerator: int | str | BigInt | Rational = 0,
        denominator: int | str | BigInt | None = None,
    ) -> None:
        """Create a Rational and reduce it to canonical form.

        Args:
            numerator: Numerator as int, decimal string or BigInt; a Rational
                is copied when no denominator is given
            denominator: Denominator (default 1); may be negative

        Raises:
            DivisionByZero: If the denominator is zero
            InvalidFormat: If a string part is not a decimal integer
            TypeError: If a part has an unsupported type
        """
        if isinstance(numerator, Rational):
            if denominator is not None:
                raise TypeError("Rational numerator cannot be a Rational when a denominator is given")
            self._numerator = numerator._numerator
            self._denominator = numerator._denominator
            return
        num = _to_bigint(numerator)
        if denominator is None:
            # n/1 is already in lowest terms
            self._numerator, self._denominator = num, BigInt.one()
            return
        self._numerator, self._denominator = _canonicalize(num, _to_bigint(denominator))

    @classmethod
    def _from_canonical(cls, numerator: BigInt, denominator: BigInt) -> Rational:
        """Wrap parts that are already in canonical form."""
        result = cls.__new__(cls)
        result._numerator = numerator
        result._denominator = denominator
        return result

    @classmethod
    def from_str(cls, text: str) -> Rational:
        """Parse ``"n"`` or ``"n/d"`` as produced by to_string().

        Raises:
            InvalidFormat: If either part is not a decimal integer
            DivisionByZero: If the denominator is zero
        """
        numerator, sep, denominator = text.partition("/")
        if not sep:
            return cls(BigInt.from_str(numerator))
        return cls(BigInt.from_str(numerator), BigInt.from_str(denominator))

    @property
    def numerator(self) -> BigInt:
        return self._numerator

    @property
    def denominator(self) -> BigInt:
        return self._denominator

    @property
    def is_negative(self) -> bool:
        return self._numerator.is_negative

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # --- Rendering ---

    def to_string(self) -> str:
        """Render as ``"n"`` when the denominator is 1, else ``"n/d"``."""
        if self._denominator == 1:
            return self._numerator.to_string()
        return f"{self._numerator}/{self._denominator}"

    def as_decimal(self, precision: int = 0) -> str:
        """Render as a decimal truncated to ``precision`` fractional digits.

        The absolute numerator is scaled by 10^precision and divided by the
        denominator; the quotient is left-padded to at least ``precision``
        digits and split around the decimal point. A negative value keeps
        its '-' even when every rendered digit is zero.

        Args:
            precision: Number of digits after the point; 0 yields the
                truncated integer quotient with no point

        Returns:
            Decimal text such as ``"0.33333"`` or ``"-2.50"``

        Raises:
            ValueError: If precision is negative
        """
        if precision < 0:
            raise ValueError(f"Precision cannot be negative: {precision}")
        if precision == 0:
            return (self._numerator / self._denominator).to_string()

        scaled = abs(self._numerator) * BigInt(10**precision)
        digits = (scaled / self._denominator).to_string().zfill(precision)
        integer_part = digits[:-precision] or "0"
        sign = "-" if self.is_negative else ""
        return f"{sign}{integer_part}.{digits[-precision:]}"

    # --- Arithmetic operations ---

    def __add__(self, other: Rational | BigInt | int) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __radd__(self, other: BigInt | int) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: Rational | BigInt | int) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator - rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __rsub__(self, other: BigInt | int) -> Rational:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other: Rational | BigInt | int) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __rmul__(self, other: BigInt | int) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: Rational | BigInt | int) -> Rational:
        """Multiply by the reciprocal of other.

        Raises:
            DivisionByZero: If other is zero
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not rhs:
            logger.debug("division_by_zero", dividend=self.to_string(), operation="/")
            raise DivisionByZero(f"Division by zero: {self} / 0")
        return Rational(
            self._numerator * rhs._denominator,
            self._denominator * rhs._numerator,
        )

    def __rtruediv__(self, other: BigInt | int) -> Rational:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__truediv__(self)

    def __neg__(self) -> Rational:
        return Rational._from_canonical(-self._numerator, self._denominator)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational._from_canonical(abs(self._numerator), self._denominator)

    # --- Comparison operations ---

    def _compare(self, other: Rational) -> int:
        """Three-way compare.

        Signs decide first. Two negative values compare as -other vs -self.
        Otherwise, with both non-zero, the quotient self / other is formed
        and its numerator is compared against its denominator.
        """
        if self.is_negative != other.is_negative:
            return -1 if self.is_negative else 1
        if self.is_negative:
            return (-other)._compare(-self)
        if not other:
            return 1 if self else 0
        if not self:
            return -1
        quotient = self / other
        if quotient._numerator < quotient._denominator:
            return -1
        if quotient._numerator > quotient._denominator:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        # Canonical form makes equal values field-identical
        return self._numerator == rhs._numerator and self._denominator == rhs._denominator

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Rational | BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: Rational | BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: Rational | BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: Rational | BigInt | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return bool(self._numerator)

    def __float__(self) -> float:
        """Approximate value as float(numerator) / float(denominator).

        Lossy; both parts are converted separately, so values whose parts
        overflow the float range come out as inf or nan.
        """
        return float(self._numerator) / float(self._denominator)


def _to_bigint(value: object) -> BigInt:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return BigInt(value)
    raise TypeError(f"Rational parts must be int, str or BigInt, got {type(value).__name__}")


def _canonicalize(numerator: BigInt, denominator: BigInt) -> tuple[BigInt, BigInt]:
    """Move the sign to the numerator and divide both parts by their gcd.

    Raises:
        DivisionByZero: If the denominator is zero
    """
    if not denominator:
        logger.debug("division_by_zero", dividend=numerator.to_string(), operation="rational")
        raise DivisionByZero(f"Rational with zero denominator: {numerator}/0")
    if denominator.is_negative:
        numerator, denominator = -numerator, -denominator
    divisor = gcd(numerator, denominator)
    return numerator / divisor, denominator / divisor


def _coerce(x: object) -> Rational | None:
    """Return x as a Rational, or None for unsupported types."""
    if isinstance(x, Rational):
        return x
    if isinstance(x, (BigInt, int)) and not isinstance(x, bool):
        return Rational._from_canonical(BigInt(x), BigInt.one())
    return None
