"""Tests for the lettercalc CLI.

Exit codes: 0 on success, 1 on a parse error, 2 on a usage error.
"""

from typer.testing import CliRunner

from lettercalc.__main__ import app

runner = CliRunner()


def test_eval_prints_result():
    result = runner.invoke(app, ["eval", "3a2c4"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "20"


def test_eval_with_groups():
    result = runner.invoke(app, ["eval", "3ae4c66fb32"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "235"


def test_eval_reports_error():
    result = runner.invoke(app, ["eval", "3aa2c4"])
    assert result.exit_code == 1
    assert "malformed expression" in result.output


def test_eval_narrow_width():
    result = runner.invoke(app, ["eval", "16c16", "--bits", "8"])
    assert result.exit_code == 1
    assert "overflow" in result.output


def test_eval_missing_expression():
    result = runner.invoke(app, ["eval"])
    assert result.exit_code == 2


def test_trace_ends_with_result():
    result = runner.invoke(app, ["trace", "e2fae3f"])
    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "5"


def test_codes_lists_alphabet():
    result = runner.invoke(app, ["codes"])
    assert result.exit_code == 0
    assert "multiply" in result.output
