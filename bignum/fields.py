"""Pydantic field types for BigInt and Rational values.

Numbers travel as decimal strings so no precision is lost in JSON. These
annotated types validate such strings (or plain ints) into BigInt and
Rational instances and serialize them back to text.

Example:
    class Invoice(BaseModel):
        total: BigIntStr
        share: RationalStr

    Invoice.model_validate({"total": "123456789012345678901", "share": "1/3"})
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bignum.bigint import BigInt
from bignum.errors import DivisionByZero, InvalidFormat
from bignum.rational import Rational

BIGINT_PATTERN = r"^-?[0-9]+$"
RATIONAL_PATTERN = r"^-?[0-9]+(/-?[0-9]+)?$"


def validate_bigint(value: Any) -> BigInt:
    """Validate that a value is a decimal integer string, int or BigInt.

    Args:
        value: Value to validate

    Returns:
        The value as a BigInt

    Raises:
        ValueError: If value is not a valid decimal integer
    """
    if isinstance(value, BigInt):
        return value

    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"BigInt must be string or int, got {type(value).__name__}")

    try:
        return BigInt(value)
    except InvalidFormat as err:
        raise ValueError(f"BigInt must be a decimal integer string: '{value}'") from err


def validate_rational(value: Any) -> Rational:
    """Validate that a value is an ``"n"`` / ``"n/d"`` string, int, BigInt or Rational.

    Args:
        value: Value to validate

    Returns:
        The value as a canonical Rational

    Raises:
        ValueError: If value is malformed or has a zero denominator
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, BigInt):
        return Rational(value)

    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Rational must be string or int, got {type(value).__name__}")
    if isinstance(value, int):
        return Rational(value)

    try:
        return Rational.from_str(value)
    except InvalidFormat as err:
        raise ValueError(f"Rational must look like 'n' or 'n/d': '{value}'") from err
    except DivisionByZero as err:
        raise ValueError(f"Rational denominator cannot be zero: '{value}'") from err


class _DecimalText:
    """Annotation that validates with a parse function and serializes with str().

    The JSON schema describes the wire form: a string matching ``pattern``.
    """

    def __init__(self, parse: Callable[[Any], Any], pattern: str) -> None:
        self._parse = parse
        self._pattern = pattern

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self._parse,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=self._pattern))


# Arbitrary-precision integer as decimal string
BigIntStr = Annotated[BigInt, _DecimalText(validate_bigint, BIGINT_PATTERN)]

# Exact rational as "n" or "n/d" string
RationalStr = Annotated[Rational, _DecimalText(validate_rational, RATIONAL_PATTERN)]
