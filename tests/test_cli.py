"""Tests for the command line interface."""

import warnings

import pytest
from click.testing import CliRunner

from complexeval.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestEval:
    def test_argument(self, runner):
        result = runner.invoke(main, ["eval", "3+4j"])
        assert result.exit_code == 0
        assert result.output == "3+4j\n"

    def test_stdin(self, runner):
        result = runner.invoke(main, ["eval"], input="2*(3+j)\n")
        assert result.exit_code == 0
        assert result.output == "6+2j\n"

    def test_stdin_without_deprecation_warnings(self, runner):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            result = runner.invoke(main, ["eval"], input="1+j\n")
        assert result.exit_code == 0
        assert result.output == "1+j\n"

    def test_format_option(self, runner):
        result = runner.invoke(main, ["eval", "--format", "fixed", "--digits", "2", "1+j"])
        assert result.exit_code == 0
        assert result.output == "1.00+1.00j\n"

    def test_format_from_environment(self, runner):
        result = runner.invoke(
            main, ["eval", "1+j"],
            env={"COMPLEXEVAL_FORMAT": "fixed", "COMPLEXEVAL_DIGITS": "1"},
        )
        assert result.exit_code == 0
        assert result.output == "1.0+1.0j\n"

    def test_invalid_format(self, runner):
        result = runner.invoke(main, ["eval", "--format", "roman", "1"])
        assert result.exit_code != 0

    def test_parse_error_is_fatal(self, runner):
        result = runner.invoke(main, ["eval", "("])
        assert result.exit_code == 1

    def test_division_error_is_fatal(self, runner):
        result = runner.invoke(main, ["eval", "1/0"])
        assert result.exit_code == 1

    def test_zero_significant_digits_is_reported(self, runner):
        result = runner.invoke(main, ["eval", "--format", "precision", "--digits", "0", "1"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_digits_out_of_range(self, runner):
        result = runner.invoke(main, ["eval", "--digits", "101", "1"])
        assert result.exit_code == 2
        result = runner.invoke(main, ["eval", "--digits", "-1", "1"])
        assert result.exit_code == 2

    def test_zero_fixed_digits(self, runner):
        result = runner.invoke(main, ["eval", "--format", "fixed", "--digits", "0", "2.4"])
        assert result.exit_code == 0
        assert result.output == "2\n"


class TestRepl:
    def test_line_by_line(self, runner):
        result = runner.invoke(main, ["repl"], input="3+4j\n\n2j\n")
        assert result.exit_code == 0
        assert result.output == "3+4j\n2j\n"

    def test_stops_at_first_error(self, runner):
        result = runner.invoke(main, ["repl"], input="1\n(\n2\n")
        assert result.exit_code == 1
        assert result.output.startswith("1\n")
        assert "2\n" not in result.output


class TestInspect:
    def test_shows_all_forms(self, runner):
        result = runner.invoke(main, ["inspect", "3+4j"])
        assert result.exit_code == 0
        for form in ("nice", "fixed", "exponential", "precision", "abs"):
            assert form in result.output
        assert "3+4j" in result.output

    def test_zero_digits_is_reported(self, runner):
        result = runner.invoke(main, ["inspect", "--digits", "0", "3+4j"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
