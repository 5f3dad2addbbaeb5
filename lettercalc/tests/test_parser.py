"""Tests for the expression parser.

Left-to-right evaluation, groups, malformed and unbalanced input, the two
overflow stages, and the step listener.
"""

import pytest

from lettercalc.config import SymbolCodes
from lettercalc.errors import (
    ArithmeticOverflowError,
    EmptyExpression,
    InvalidOperation,
    MalformedExpression,
    ParseDigitError,
    UnbalancedParenthesis,
)
from lettercalc.parser import Cursor, Parser, ParserState, evaluate


def _error(expression, **kwargs):
    """Parse and return the raised error."""
    with pytest.raises(Exception) as exc:
        Parser(expression, **kwargs).parse()
    return exc.value


# --- Left to right, no precedence ---

@pytest.mark.parametrize(
    "expression, expected",
    [
        ("7", 7),
        ("3a2c4", 20),
        ("32a2d2", 17),
        ("500a10b66c32", 14208),
        ("10b4", 6),
        ("15d4", 3),
    ],
)
def test_examples(expression, expected):
    assert Parser(expression).parse() == expected


# --- Groups ---

def test_group_folds_into_operation():
    """3 + (4 * 66) - 32."""
    assert evaluate("3ae4c66fb32") == 235


def test_nested_groups():
    """((3 * 4) / 2) + ((2 + 4) * 41) * 4."""
    assert evaluate("3c4d2aee2a4c41fc4f") == 990


def test_group_chains_left_to_right():
    """(2 + 3) * 4, not 2 + 3 * 4."""
    assert evaluate("e2a3fc4") == 20


def test_group_as_second_operand():
    assert evaluate("10be2c3f") == 4


def test_redundant_parenthesis():
    assert evaluate("e2f") == 2
    assert evaluate("e2fae3f") == 5
    assert evaluate("eeeeee42ffffff") == 42


def test_deep_nesting():
    depth = 50
    assert evaluate("e" * depth + "9" + "f" * depth) == 9


# --- Malformed input ---

def test_double_operator():
    assert _error("3aa2c4") == MalformedExpression("a")


def test_unknown_symbol():
    assert _error("3x2") == MalformedExpression("x")
    assert _error("3 a 2") == MalformedExpression(" ")


def test_digit_after_group():
    assert _error("e2f3") == MalformedExpression("3")


def test_group_after_group():
    assert _error("e2fe3f") == MalformedExpression("e")


def test_group_after_digits():
    assert _error("3e2f") == MalformedExpression("e")
    assert _error("3a2e2f") == MalformedExpression("e")


def test_close_after_operator():
    assert _error("e3af") == MalformedExpression("f")


def test_trailing_operator_keeps_running_result():
    assert evaluate("3a") == 3
    assert evaluate("e2a3fc") == 5


# --- Unbalanced groups ---

def test_unbalanced_open():
    assert _error("3aee2fc4") == UnbalancedParenthesis("e")


def test_unbalanced_close():
    assert _error("3aee2fffc4") == UnbalancedParenthesis("f")


def test_close_before_open():
    assert _error("2fae3") == UnbalancedParenthesis("f")
    assert _error("f2e") == UnbalancedParenthesis("f")


def test_balance_checked_before_scanning():
    # "x" would be malformed, but the imbalance is reported first.
    assert _error("x2e") == UnbalancedParenthesis("e")


# --- Overflow ---

def test_overflow_while_reading_literal():
    assert _error("99999999999999999999999999c9") == ParseDigitError(
        "99999999999999999999", "number too large to fit in target type"
    )


def test_overflow_while_applying():
    assert _error("9c99999999999999999999999999") == InvalidOperation(ArithmeticOverflowError())


def test_underflow_while_applying():
    error = _error("2b3")
    assert error == InvalidOperation(ArithmeticOverflowError())
    assert isinstance(error.__cause__, ArithmeticOverflowError)


def test_division_by_zero():
    assert _error("4d0") == InvalidOperation(ArithmeticOverflowError())
    assert _error("4de2b2f") == InvalidOperation(ArithmeticOverflowError())


def test_narrow_width():
    assert evaluate("15c17", integer_bits=8) == 255
    assert _error("256", integer_bits=8) == ParseDigitError(
        "256", "number too large to fit in target type"
    )
    assert _error("16c16", integer_bits=8) == InvalidOperation(ArithmeticOverflowError())


# --- Empty ---

def test_empty():
    assert _error("") == EmptyExpression()


def test_empty_group():
    assert _error("ef") == EmptyExpression()


def test_operator_without_first_operand():
    assert _error("a3") == EmptyExpression()


# --- Independence ---

def test_parse_is_repeatable():
    parser = Parser("500a10b66c32")
    assert parser.parse() == parser.parse() == 14208
    assert _error("3aa2c4") == _error("3aa2c4")


# --- Custom alphabet ---

def test_custom_codes():
    codes = SymbolCodes(add="+", sub="-", mul="*", div="/", open="(", close=")")
    assert evaluate("3+(4*66)-32", codes=codes) == 235
    assert _error("3a2", codes=codes) == MalformedExpression("a")


# --- Step listener ---

def test_listener_sees_every_symbol():
    steps = []
    assert Parser("3ae4fb1", listener=steps.append).parse() == 6
    assert [s.symbol for s in steps] == list("3ae4fb1")
    assert [s.position for s in steps] == list(range(7))
    assert [s.level for s in steps] == [0, 0, 0, 1, 1, 0, 0]
    assert steps[1].before is ParserState.FIRST_OPERAND
    assert steps[1].after is ParserState.OPERATION
    assert steps[4].after is ParserState.CLOSE_PARENTHESIS
    assert steps[-1].result == 6


# --- Cursor ---

def test_cursor_is_shared_and_forward_only():
    cursor = Cursor("abc")
    assert next(cursor) == "a"
    assert cursor.peek() == "b"
    assert list(cursor) == ["b", "c"]
    assert cursor.peek() is None
    assert list(cursor) == []
