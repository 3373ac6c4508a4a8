"""Algebraic properties of BigInt and Rational over randomized operands.

Python's int and fractions.Fraction serve as oracles. Division is compared
against truncation toward zero, since BigInt does not floor.
"""

from fractions import Fraction

import pytest

from bignum.bigint import BigInt
from bignum.rational import Rational, gcd
from tests.helpers import random_int, random_pairs


def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class TestBigIntProperties:
    """Laws that must hold for all BigInt operands."""

    def test_round_trip(self, rng):
        """parse(s).to_string() == s for canonical text."""
        for _ in range(200):
            text = str(random_int(rng, max_limbs=8))
            assert BigInt(text).to_string() == text

    def test_additive_identity_and_inverse(self, rng):
        """a + 0 == a and a + (-a) == 0."""
        for _ in range(100):
            a = BigInt(random_int(rng))
            assert a + BigInt(0) == a
            assert a + (-a) == BigInt(0)

    def test_distribution(self, rng):
        """a * (b + c) == a*b + a*c."""
        for _ in range(60):
            a, b, c = (BigInt(random_int(rng)) for _ in range(3))
            assert a * (b + c) == a * b + a * c

    def test_division_modulo_consistency(self, rng):
        """b * (a / b) + (a % b) == a."""
        for lhs, rhs in random_pairs(rng, 100, max_limbs=5, nonzero_rhs=True):
            a, b = BigInt(lhs), BigInt(rhs)
            assert b * (a / b) + (a % b) == a

    @pytest.mark.parametrize("max_limbs", [1, 3, 6])
    def test_matches_int_oracle(self, rng, max_limbs):
        """Every operator agrees with int arithmetic."""
        for lhs, rhs in random_pairs(rng, 60, max_limbs=max_limbs, nonzero_rhs=True):
            a, b = BigInt(lhs), BigInt(rhs)
            assert int(a + b) == lhs + rhs
            assert int(a - b) == lhs - rhs
            assert int(a * b) == lhs * rhs
            assert int(a / b) == trunc_div(lhs, rhs)
            assert int(a % b) == lhs - rhs * trunc_div(lhs, rhs)
            assert (a < b) == (lhs < rhs)
            assert (a == b) == (lhs == rhs)

    def test_scalar_paths_match_bigint_paths(self, rng):
        """Multiplying or dividing by an int equals doing so by a BigInt."""
        for lhs, rhs in random_pairs(rng, 60, max_limbs=4, nonzero_rhs=True):
            a = BigInt(lhs)
            assert a * rhs == a * BigInt(rhs)
            assert a / rhs == a / BigInt(rhs)


class TestRationalProperties:
    """Laws that must hold for all Rational operands."""

    def _random_rational(self, rng) -> tuple[Rational, Fraction]:
        n = random_int(rng, max_limbs=2)
        d = random_int(rng, max_limbs=2) or 1
        return Rational(n, d), Fraction(n, d)

    def test_canonical_form(self, rng):
        """gcd(|n|, d) == 1 and d > 0 after construction and arithmetic."""
        for _ in range(40):
            (a, _), (b, _) = self._random_rational(rng), self._random_rational(rng)
            results = [a, b, a + b, a - b, a * b]
            if b:
                results.append(a / b)
            for r in results:
                assert r.denominator > 0
                assert gcd(r.numerator, r.denominator) == 1

    def test_matches_fraction_oracle(self, rng):
        """Arithmetic and ordering agree with fractions.Fraction."""
        for _ in range(40):
            a, fa = self._random_rational(rng)
            b, fb = self._random_rational(rng)
            for got, want in ((a + b, fa + fb), (a - b, fa - fb), (a * b, fa * fb)):
                assert int(got.numerator) == want.numerator
                assert int(got.denominator) == want.denominator
            assert (a < b) == (fa < fb)
            assert (a == b) == (fa == fb)
            assert [a < b, a == b, a > b].count(True) == 1

    def test_as_decimal_matches_truncation(self, rng):
        """as_decimal digits equal the truncated scaled quotient."""
        for _ in range(40):
            r, f = self._random_rational(rng)
            scaled = abs(f) * 10**6
            digits = str(scaled.numerator // scaled.denominator).zfill(6)
            expected = ("-" if f < 0 else "") + (digits[:-6] or "0") + "." + digits[-6:]
            assert r.as_decimal(6) == expected
