"""Error taxonomy for lettercalc.

Two closed families: OperationError for building/applying a single Operation,
and ParseError for everything the parser can reject. Errors compare by kind and
payload, so the same bad input always produces an equal error.
"""

from __future__ import annotations

from typing import Any, Optional


class LetterCalcError(Exception):
    """Base class for every lettercalc failure."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self.args)
        return f"{type(self).__name__}({args})"


# --- Operation errors ---


class OperationError(LetterCalcError):
    """Building or applying an Operation failed."""


class InvalidFirstOperand(OperationError):
    def __init__(self, text: str, detail: str) -> None:
        super().__init__(text, detail)
        self.text = text
        self.detail = detail

    def __str__(self) -> str:
        return f"invalid first operand {self.text!r}: {self.detail}"


class InvalidSecondOperand(OperationError):
    def __init__(self, text: str, detail: str) -> None:
        super().__init__(text, detail)
        self.text = text
        self.detail = detail

    def __str__(self) -> str:
        return f"invalid second operand {self.text!r}: {self.detail}"


class InvalidOperationCode(OperationError):
    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"invalid operation code {self.code!r}"


class ArithmeticOverflowError(OperationError, ArithmeticError):
    """Checked arithmetic failed: overflow, subtraction below zero, or division by zero."""

    def __str__(self) -> str:
        return "arithmetic overflow (result out of range or division by zero)"


# --- Parse errors ---


class ParseError(LetterCalcError):
    """The expression could not be evaluated."""


class EmptyExpression(ParseError):
    def __str__(self) -> str:
        return "empty expression"


class ParseDigitError(ParseError):
    def __init__(self, text: str, detail: str) -> None:
        super().__init__(text, detail)
        self.text = text
        self.detail = detail

    def __str__(self) -> str:
        return f"cannot read operand {self.text!r}: {self.detail}"


class InvalidOperation(ParseError):
    def __init__(self, error: OperationError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"invalid operation: {self.error}"


class MalformedExpression(ParseError):
    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"malformed expression at symbol {self.symbol!r}"


class UnbalancedParenthesis(ParseError):
    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"unbalanced parenthesis: unmatched {self.symbol!r}"


class UnexpectedSymbol(ParseError):
    def __init__(self, symbol: str, state: Any, operation: Optional[Any]) -> None:
        super().__init__(symbol, state, operation)
        self.symbol = symbol
        self.state = state
        self.operation = operation

    def __str__(self) -> str:
        return (
            f"unexpected symbol {self.symbol!r} in state {self.state}"
            f" (pending operation: {self.operation})"
        )


class IllegalState(ParseError):
    """An internal parser invariant was violated. Always a parser bug."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"illegal parser state: {self.detail}" if self.detail else "illegal parser state"
