"""Operation model — one pending binary operation with checked arithmetic.

An Operation is a frozen (kind, first operand) value. It is built from an
operator code plus either a digit literal or an already-resolved integer, and
applied to a second operand the same two ways. Results are unsigned integers
bounded by the configured width; anything outside that range is reported as
ArithmeticOverflowError rather than wrapped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from lettercalc.config import DEFAULT_CODES, DEFAULT_INTEGER_BITS, SymbolCodes, max_operand
from lettercalc.errors import (
    ArithmeticOverflowError,
    InvalidFirstOperand,
    InvalidOperationCode,
    InvalidSecondOperand,
)

logger = logging.getLogger(__name__)

_DEFAULT_MAX = max_operand(DEFAULT_INTEGER_BITS)

_EMPTY_DETAIL = "cannot parse integer from empty string"
_DIGIT_DETAIL = "invalid digit found in string"
_RANGE_DETAIL = "number too large to fit in target type"


class OperationKind(str, Enum):
    """The four arithmetic operations."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


def kind_for_code(code: str, codes: SymbolCodes = DEFAULT_CODES) -> OperationKind:
    """Map an operator code to its kind, or raise InvalidOperationCode."""
    if code == codes.add:
        return OperationKind.ADD
    if code == codes.sub:
        return OperationKind.SUB
    if code == codes.mul:
        return OperationKind.MUL
    if code == codes.div:
        return OperationKind.DIV
    raise InvalidOperationCode(code)


def parse_operand(text: str, max_value: int = _DEFAULT_MAX) -> int:
    """Parse a digit literal as an unsigned integer no larger than `max_value`.

    Raises ValueError whose message is the failure detail.
    """
    if not text:
        raise ValueError(_EMPTY_DETAIL)
    if not (text.isascii() and text.isdigit()):
        raise ValueError(_DIGIT_DETAIL)
    value = int(text)
    if value > max_value:
        raise ValueError(_RANGE_DETAIL)
    return value


@dataclass(frozen=True)
class Operation:
    """A pending arithmetic operation and its resolved first operand."""

    kind: OperationKind
    first_operand: int
    max_value: int = field(default=_DEFAULT_MAX, compare=False, repr=False)

    @classmethod
    def from_literal(
        cls,
        code: str,
        first_operand: str,
        codes: SymbolCodes = DEFAULT_CODES,
        max_value: int = _DEFAULT_MAX,
    ) -> Operation:
        """Build from an operator code and a digit literal as first operand."""
        try:
            value = parse_operand(first_operand, max_value)
        except ValueError as e:
            raise InvalidFirstOperand(first_operand, str(e)) from e
        logger.debug("parsed=%d", value)
        return cls.from_result(code, value, codes=codes, max_value=max_value)

    @classmethod
    def from_result(
        cls,
        code: str,
        first_operand: int,
        codes: SymbolCodes = DEFAULT_CODES,
        max_value: int = _DEFAULT_MAX,
    ) -> Operation:
        """Build from an operator code and an already-resolved first operand."""
        kind = kind_for_code(code, codes)
        if not 0 <= first_operand <= max_value:
            raise ArithmeticOverflowError()
        return cls(kind, first_operand, max_value)

    def apply(self, second_operand: str) -> int:
        """Apply a digit literal as the second operand."""
        logger.debug("%s %s", self, second_operand)
        try:
            value = parse_operand(second_operand, self.max_value)
        except ValueError as e:
            raise InvalidSecondOperand(second_operand, str(e)) from e
        return self.apply_result(value)

    def apply_result(self, second_operand: int) -> int:
        """Apply an already-resolved second operand with checked arithmetic."""
        logger.debug("%s %d", self, second_operand)
        if not 0 <= second_operand <= self.max_value:
            raise ArithmeticOverflowError()
        a, b = self.first_operand, second_operand
        if self.kind is OperationKind.ADD:
            result = a + b
        elif self.kind is OperationKind.SUB:
            result = a - b
        elif self.kind is OperationKind.MUL:
            result = a * b
        else:
            if b == 0:
                raise ArithmeticOverflowError()
            result = a // b
        if not 0 <= result <= self.max_value:
            raise ArithmeticOverflowError()
        return result

    def __str__(self) -> str:
        return f"{self.kind.name.title()}({self.first_operand})"
