"""Factory functions for creating test values.

Usage:
    from tests.helpers import random_int, random_pairs

    rng = random.Random(RANDOM_SEED)
    a = random_int(rng, max_limbs=4)
"""

import random

from bignum.constants import LIMB_WIDTH


def random_int(rng: random.Random, max_limbs: int = 4, allow_negative: bool = True) -> int:
    """Create a random int spanning up to max_limbs limbs.

    Values are biased toward limb-boundary digits (runs of 0s and 9s) so
    carry and borrow paths get exercised.

    Args:
        rng: Random source
        max_limbs: Upper bound on the number of limbs (default: 4)
        allow_negative: Whether the result may be negative (default: True)

    Returns:
        A Python int usable as an oracle for BigInt results
    """
    digits = rng.randint(1, max_limbs * LIMB_WIDTH)
    style = rng.random()
    if style < 0.2:
        text = "9" * digits
    elif style < 0.4:
        text = "1" + "0" * (digits - 1)
    else:
        text = "".join(rng.choice("0123456789") for _ in range(digits))
    value = int(text)
    if allow_negative and rng.random() < 0.5:
        value = -value
    return value


def random_pairs(
    rng: random.Random,
    count: int,
    max_limbs: int = 4,
    nonzero_rhs: bool = False,
) -> list[tuple[int, int]]:
    """Create count (lhs, rhs) int pairs.

    Args:
        rng: Random source
        count: Number of pairs
        max_limbs: Upper bound on limbs per operand (default: 4)
        nonzero_rhs: If True, a zero rhs is replaced by 1 (default: False)
    """
    pairs = []
    for _ in range(count):
        lhs = random_int(rng, max_limbs)
        rhs = random_int(rng, max_limbs)
        if nonzero_rhs and rhs == 0:
            rhs = 1
        pairs.append((lhs, rhs))
    return pairs
