"""Mathematical kernels for bignum.

This package provides the limb-level primitives behind BigInt:
- limbs: magnitude add/sub/mul, scalar and long division, text conversion
"""

from bignum.math import limbs

__all__ = ["limbs"]
