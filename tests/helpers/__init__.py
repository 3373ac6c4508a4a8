"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Limb-boundary values and canonical decimal strings
- factories: Random int generators used as oracles
"""

from tests.helpers.constants import (
    ABOVE_BASE,
    AT_BASE,
    BELOW_BASE,
    CANONICAL_STRINGS,
    RANDOM_SEED,
)
from tests.helpers.factories import random_int, random_pairs

__all__ = [
    # Constants
    "BELOW_BASE",
    "AT_BASE",
    "ABOVE_BASE",
    "CANONICAL_STRINGS",
    "RANDOM_SEED",
    # Factories
    "random_int",
    "random_pairs",
]
