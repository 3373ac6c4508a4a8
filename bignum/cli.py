"""Command-line calculator for BigInt and Rational arithmetic.

Reads ``lhs op rhs`` token triples from stdin and prints one result per line.

Usage:
    echo "9000 + 5000" | bignum
    echo "1/3 + 1/6" | bignum --rational
    echo "1 / 3" | bignum --rational --precision 5
"""

from __future__ import annotations

import argparse
import logging
import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

import structlog

from bignum.bigint import BigInt
from bignum.config import DEFAULT_CONFIG, BigNumConfig
from bignum.errors import BigNumError, InvalidFormat
from bignum.rational import Rational
from bignum.streams import BufferedWriter, TokenReader

logger = structlog.get_logger()

OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": operator.mod,
}


def configure_logging(level: int) -> None:
    """Route structlog output to stderr, filtered at level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def evaluate(lhs: str, op: str, rhs: str, *, rational: bool = False) -> BigInt | Rational:
    """Parse both operand tokens and apply op.

    Raises:
        InvalidFormat: If an operand or the operator is malformed
        DivisionByZero: If op divides by zero
    """
    if op not in OPERATORS:
        raise InvalidFormat(f"Unknown operator: {op!r}")
    if rational:
        if op == "%":
            raise InvalidFormat("Operator '%' is not defined for rationals")
        return OPERATORS[op](Rational.from_str(lhs), Rational.from_str(rhs))
    return OPERATORS[op](BigInt.from_str(lhs), BigInt.from_str(rhs))


def render(value: BigInt | Rational, precision: int = 0) -> str:
    """Render a result; rationals use as_decimal when precision > 0."""
    if isinstance(value, Rational) and precision > 0:
        return value.as_decimal(precision)
    return value.to_string()


def run(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    *,
    rational: bool = False,
    precision: int = 0,
    config: BigNumConfig = DEFAULT_CONFIG,
) -> int:
    """Evaluate every expression on stdin.

    Returns:
        0 if all expressions succeeded, 1 otherwise
    """
    reader = TokenReader(stdin)
    failures = 0
    evaluated = 0

    with BufferedWriter(stdout, config) as writer:
        for lhs in reader:
            try:
                op = reader.next_token()
                rhs = reader.next_token()
            except EOFError:
                logger.error("incomplete_expression", token=lhs)
                print(f"Error: incomplete expression starting at {lhs!r}", file=stderr)
                failures += 1
                break

            try:
                result = evaluate(lhs, op, rhs, rational=rational)
            except BigNumError as err:
                logger.warning("expression_failed", expression=f"{lhs} {op} {rhs}", error=str(err))
                print(f"Error: {err}", file=stderr)
                failures += 1
                continue

            writer.write_line(render(result, precision))
            evaluated += 1

    logger.info("expressions_evaluated", evaluated=evaluated, failed=failures)
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum",
        description="Evaluate 'lhs op rhs' expressions read from stdin",
    )
    parser.add_argument(
        "--rational",
        "-r",
        action="store_true",
        help="Treat operands as rationals ('n' or 'n/d')",
    )
    parser.add_argument(
        "--precision",
        "-p",
        type=int,
        default=None,
        help="Render rational results with this many decimal digits "
        "(default: BIGNUM_PRECISION or 0, which prints n/d)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = BigNumConfig.from_env()
    except ValueError as err:
        print(f"Error: invalid configuration: {err}", file=sys.stderr)
        return 2

    precision = config.default_precision if args.precision is None else args.precision
    if precision < 0:
        print(f"Error: precision cannot be negative: {precision}", file=sys.stderr)
        return 2

    configure_logging(logging.DEBUG if args.verbose else config.log_level_number)

    return run(
        sys.stdin,
        sys.stdout,
        sys.stderr,
        rational=args.rational,
        precision=precision,
        config=config,
    )


if __name__ == "__main__":
    sys.exit(main())
