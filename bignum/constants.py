"""Numeric constants shared by the BigInt engine and the Rational layer.

Limbs are decimal digit groups so that rendering and parsing never need a
radix conversion.
"""

# Decimal digits per limb
LIMB_WIDTH = 9

# Limb base (10^9); every limb lies in [0, LIMB_BASE)
LIMB_BASE = 10**LIMB_WIDTH

# Default capacity of BufferedWriter, in characters
DEFAULT_BUFFER_SIZE = 65_536
