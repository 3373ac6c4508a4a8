"""bignum - arbitrary-precision integers and exact rationals."""

from bignum.bigint import B, BigInt
from bignum.config import DEFAULT_CONFIG, BigNumConfig
from bignum.constants import LIMB_BASE, LIMB_WIDTH
from bignum.errors import BigNumError, DivisionByZero, InvalidFormat
from bignum.rational import Rational, gcd
from bignum.streams import BufferedWriter, TokenReader, read_bigint, read_token, write_value

__version__ = "0.1.0"
__all__ = [
    "B",
    "BigInt",
    "Rational",
    "gcd",
    "LIMB_BASE",
    "LIMB_WIDTH",
    "BigNumError",
    "DivisionByZero",
    "InvalidFormat",
    "BigNumConfig",
    "DEFAULT_CONFIG",
    "BufferedWriter",
    "TokenReader",
    "read_bigint",
    "read_token",
    "write_value",
    "__version__",
]
