"""Limb-level kernels for the BigInt engine.

A magnitude is a little-endian list of limbs, each in [0, LIMB_BASE).
Every function here is sign-agnostic and returns a freshly built, trimmed
list; callers never observe a shared list.

The algorithms are schoolbook:
- add/sub: single carry or borrow pass
- mul: double accumulation into position i + j
- div_long: long division by limb, each quotient digit found by binary search
"""

from __future__ import annotations

from bignum.constants import LIMB_BASE, LIMB_WIDTH

__all__ = [
    "trim",
    "is_zero",
    "from_magnitude",
    "to_magnitude",
    "to_float",
    "parse_digits",
    "render",
    "compare",
    "add",
    "sub",
    "mul",
    "mul_small",
    "div_small",
    "shift_in",
    "quotient_digit",
    "div_long",
]


# =============================================================================
# Representation helpers
# =============================================================================


def trim(limbs: list[int]) -> list[int]:
    """Drop most-significant zero limbs in place, keeping at least one limb.

    Returns:
        The same list, in canonical form ([0] for zero)
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero(limbs: list[int]) -> bool:
    """True for the canonical zero magnitude."""
    return len(limbs) == 1 and limbs[0] == 0


def from_magnitude(n: int) -> list[int]:
    """Decompose a non-negative int into limbs, least-significant first."""
    if n < 0:
        raise ValueError(f"Magnitude cannot be negative: {n}")
    limbs = []
    while n:
        n, limb = divmod(n, LIMB_BASE)
        limbs.append(limb)
    return limbs or [0]


def to_magnitude(limbs: list[int]) -> int:
    """Recompose limbs into an exact int."""
    value = 0
    for limb in reversed(limbs):
        value = value * LIMB_BASE + limb
    return value


def to_float(limbs: list[int]) -> float:
    """Accumulate limbs into a float, most-significant first.

    Lossy above 2^53 and overflows to inf for huge magnitudes.
    """
    value = 0.0
    for limb in reversed(limbs):
        value = value * LIMB_BASE + limb
    return value


def parse_digits(digits: str) -> list[int]:
    """Group an ASCII digit string into limbs of LIMB_WIDTH digits.

    Chunks are taken from the least-significant end, so only the most
    significant limb may be shorter than LIMB_WIDTH. The caller validates
    that ``digits`` is non-empty and contains only 0-9.
    """
    limbs = []
    for end in range(len(digits), 0, -LIMB_WIDTH):
        limbs.append(int(digits[max(0, end - LIMB_WIDTH) : end]))
    return trim(limbs)


def render(limbs: list[int]) -> str:
    """Render limbs as a decimal string, zero-padding all but the top limb."""
    head = str(limbs[-1])
    tail = "".join(str(limb).zfill(LIMB_WIDTH) for limb in reversed(limbs[:-1]))
    return head + tail


# =============================================================================
# Magnitude arithmetic
# =============================================================================


def compare(a: list[int], b: list[int]) -> int:
    """Compare two magnitudes.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def add(a: list[int], b: list[int]) -> list[int]:
    """Add two magnitudes with a single carry pass."""
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i, limb in enumerate(a):
        total = limb + carry + (b[i] if i < len(b) else 0)
        if total >= LIMB_BASE:
            total -= LIMB_BASE
            carry = 1
        else:
            carry = 0
        result.append(total)
    if carry:
        result.append(carry)
    return trim(result)


def sub(a: list[int], b: list[int]) -> list[int]:
    """Subtract magnitude b from a, borrowing a full LIMB_BASE where needed.

    Raises:
        ValueError: If b > a
    """
    if compare(a, b) < 0:
        raise ValueError("Magnitude subtraction requires minuend >= subtrahend")
    result = []
    borrow = 0
    for i, limb in enumerate(a):
        diff = limb - borrow - (b[i] if i < len(b) else 0)
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return trim(result)


def mul(a: list[int], b: list[int]) -> list[int]:
    """Schoolbook product of two magnitudes, O(len(a) * len(b))."""
    if is_zero(a) or is_zero(b):
        return [0]
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, LIMB_BASE)
        # Position i + len(b) is untouched by earlier rows
        result[i + len(b)] += carry
    return trim(result)


def mul_small(a: list[int], n: int) -> list[int]:
    """Multiply a magnitude by a non-negative int with a running carry."""
    if n < 0:
        raise ValueError(f"Scalar must be non-negative: {n}")
    if n == 0 or is_zero(a):
        return [0]
    result = []
    carry = 0
    for limb in a:
        carry, digit = divmod(limb * n + carry, LIMB_BASE)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, LIMB_BASE)
        result.append(digit)
    return trim(result)


def div_small(a: list[int], n: int) -> list[int]:
    """Long-divide a magnitude by a positive int, truncating.

    Raises:
        ZeroDivisionError: If n is zero
    """
    if n <= 0:
        if n == 0:
            raise ZeroDivisionError("Magnitude division by zero")
        raise ValueError(f"Scalar divisor must be positive: {n}")
    quotient = [0] * len(a)
    rest = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], rest = divmod(rest * LIMB_BASE + a[i], n)
    return trim(quotient)


def shift_in(cur: list[int], limb: int) -> list[int]:
    """Return cur * LIMB_BASE + limb."""
    return trim([limb, *cur])


def quotient_digit(cur: list[int], divisor: list[int]) -> int:
    """Largest q in [0, LIMB_BASE] with divisor * q <= cur.

    The upper bound is inclusive; LIMB_BASE itself is only reachable when
    cur >= divisor * LIMB_BASE, which long division never produces.
    """
    lo, hi = 0, LIMB_BASE
    digit = 0
    while lo <= hi:
        mid = (lo + hi) >> 1
        if compare(mul_small(divisor, mid), cur) <= 0:
            digit = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return digit


def _carry(limbs: list[int]) -> list[int]:
    """Propagate carries so every limb is below LIMB_BASE."""
    carry = 0
    for i, limb in enumerate(limbs):
        carry, limbs[i] = divmod(limb + carry, LIMB_BASE)
    while carry:
        carry, digit = divmod(carry, LIMB_BASE)
        limbs.append(digit)
    return trim(limbs)


def div_long(a: list[int], b: list[int]) -> list[int]:
    """Truncating long division of magnitude a by non-zero magnitude b.

    Dividend limbs are consumed most-significant first. The running
    remainder is shifted up one limb per step, the next limb is brought in,
    and the quotient digit is the binary-search result of quotient_digit.
    O(len(a) * len(b) * log(LIMB_BASE)).

    Raises:
        ZeroDivisionError: If b is zero
    """
    if is_zero(b):
        raise ZeroDivisionError("Magnitude division by zero")
    if compare(b, a) > 0:
        return [0]
    quotient = [0] * len(a)
    cur = [0]
    for i in range(len(a) - 1, -1, -1):
        cur = shift_in(cur, a[i])
        digit = quotient_digit(cur, b)
        if digit:
            cur = sub(cur, mul_small(b, digit))
        quotient[i] = digit
    return _carry(quotient)
