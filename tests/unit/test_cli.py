"""Tests for the command-line calculator."""

import io

import pytest

from bignum import cli
from bignum.bigint import BigInt
from bignum.config import BigNumConfig
from bignum.errors import DivisionByZero, InvalidFormat
from bignum.rational import Rational


def run_cli(text: str, **kwargs) -> tuple[int, str, str]:
    stdout, stderr = io.StringIO(), io.StringIO()
    code = cli.run(io.StringIO(text), stdout, stderr, **kwargs)
    return code, stdout.getvalue(), stderr.getvalue()


class TestEvaluate:
    """Tests for single-expression evaluation."""

    def test_integer_expression(self):
        """Integer mode parses BigInt operands."""
        assert cli.evaluate("9000", "+", "5000") == BigInt(14000)
        assert cli.evaluate("-7", "%", "3") == BigInt(-1)

    def test_rational_expression(self):
        """Rational mode parses n/d operands."""
        assert cli.evaluate("1/3", "+", "1/6", rational=True) == Rational(1, 2)

    def test_unknown_operator(self):
        """Operators outside + - * / % are rejected."""
        with pytest.raises(InvalidFormat):
            cli.evaluate("1", "^", "2")

    def test_modulo_rejected_for_rationals(self):
        """% has no rational meaning."""
        with pytest.raises(InvalidFormat):
            cli.evaluate("1/2", "%", "1/3", rational=True)

    def test_division_by_zero(self):
        """Division errors propagate."""
        with pytest.raises(DivisionByZero):
            cli.evaluate("1", "/", "0")

    def test_render(self):
        """Rationals use as_decimal only with a positive precision."""
        assert cli.render(Rational(1, 3)) == "1/3"
        assert cli.render(Rational(1, 3), precision=5) == "0.33333"
        assert cli.render(BigInt(-25000), precision=5) == "-25000"


class TestRun:
    """Tests for the stdin-to-stdout loop."""

    def test_evaluates_each_triple(self):
        """One result line per expression, across line breaks."""
        code, out, err = run_cli("9000 + 5000\n5050505050505050505050505050505 *\n-5\n")
        assert code == 0
        assert out == "14000\n-25252525252525252525252525252525\n"
        assert err == ""

    def test_rational_mode_with_precision(self):
        """Rational results render as decimals when asked."""
        code, out, _ = run_cli("1 / 3\n-7/2 + 0", rational=True, precision=2)
        assert code == 0
        assert out == "0.33\n-3.50\n"

    def test_errors_are_reported_and_skipped(self):
        """A failing expression is reported and the rest still run."""
        code, out, err = run_cli("1 / 0\n2 * 3\nx + 1\n")
        assert code == 1
        assert out == "6\n"
        assert "Division by zero" in err
        assert "Invalid decimal integer" in err

    def test_incomplete_expression(self):
        """A trailing partial triple is an error."""
        code, out, err = run_cli("1 + 2\n3 +")
        assert code == 1
        assert out == "3\n"
        assert "incomplete expression" in err

    def test_small_buffer(self):
        """Output is identical with a tiny writer buffer."""
        _, out, _ = run_cli("1 + 1\n2 + 2\n3 + 3\n", config=BigNumConfig(buffer_size=1))
        assert out == "2\n4\n6\n"


class TestMain:
    """Tests for argument parsing and configuration."""

    def test_main(self, monkeypatch, capsys, reset_structlog):
        """main reads stdin and honours --rational and --precision."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1 / 8\n"))
        monkeypatch.delenv("BIGNUM_PRECISION", raising=False)
        assert cli.main(["--rational", "--precision", "3"]) == 0
        assert capsys.readouterr().out == "0.125\n"

    def test_main_precision_from_env(self, monkeypatch, capsys, reset_structlog):
        """BIGNUM_PRECISION supplies the default precision."""
        monkeypatch.setattr("sys.stdin", io.StringIO("2 / 3\n"))
        monkeypatch.setenv("BIGNUM_PRECISION", "4")
        assert cli.main(["-r"]) == 0
        assert capsys.readouterr().out == "0.6666\n"

    def test_main_invalid_env(self, monkeypatch, capsys):
        """A bad environment value exits with status 2."""
        monkeypatch.setenv("BIGNUM_BUFFER_SIZE", "0")
        assert cli.main([]) == 2
        assert "invalid configuration" in capsys.readouterr().err

    def test_main_negative_precision(self, monkeypatch, capsys):
        """A negative precision exits with status 2."""
        monkeypatch.delenv("BIGNUM_BUFFER_SIZE", raising=False)
        assert cli.main(["--precision", "-1"]) == 2
        assert "precision" in capsys.readouterr().err
