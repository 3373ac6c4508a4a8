"""Shared numeric constants for tests.

Decimal strings are chosen to straddle limb boundaries (9 digits per limb).
"""

from bignum.constants import LIMB_BASE

# One below, at, and one above the first limb boundary
BELOW_BASE = LIMB_BASE - 1
AT_BASE = LIMB_BASE
ABOVE_BASE = LIMB_BASE + 1

# Canonical decimal strings covering 1, 2 and several limbs
CANONICAL_STRINGS = [
    "0",
    "7",
    "-7",
    "999999999",
    "1000000000",
    "-1000000000",
    "1000000001",
    "123456789012345678",
    "-123902310000000000213321",
    "5050505050505050505050505050505",
    "100000000000000000000000000000000000000000000",
]

# Seed shared by randomized tests
RANDOM_SEED = 20240611
