"""Expression parser — state machine scan plus recursive descent for groups.

Data flow per parse:
1. Pre-scan: open and close codes must balance over the whole input
2. Scan symbols left to right through one shared Cursor
3. Each symbol first moves the state machine (illegal symbols fail here)
4. Then it is dispatched: digits accumulate, operators build an Operation,
   a group-open recurses into a new frame, a group-close ends the frame

There is no precedence: operations fold strictly left to right, and a group is
evaluated completely before its value is folded into the enclosing frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

from lettercalc.config import DEFAULT_CODES, DEFAULT_INTEGER_BITS, SymbolCodes, max_operand
from lettercalc.errors import (
    EmptyExpression,
    IllegalState,
    InvalidOperation,
    MalformedExpression,
    OperationError,
    ParseDigitError,
    UnbalancedParenthesis,
    UnexpectedSymbol,
)
from lettercalc.operation import Operation, parse_operand

logger = logging.getLogger(__name__)


class ParserState(str, Enum):
    """Positions of the parser; decides which symbols are legal next."""

    FIRST_OPERAND = "first-operand"
    OPERATION = "operation"
    SECOND_OPERAND = "second-operand"
    CLOSE_PARENTHESIS = "close-parenthesis"


@dataclass(frozen=True)
class ParseStep:
    """One accepted symbol, as reported to a step listener."""

    position: int
    symbol: str
    level: int
    before: ParserState
    after: ParserState
    result: Optional[int]


StepListener = Callable[[ParseStep], None]


def _is_digit(symbol: str) -> bool:
    return "0" <= symbol <= "9"


class Cursor:
    """Forward-only iterator over the expression.

    A single Cursor is shared by every frame of one parse: a nested frame
    advances it and the enclosing frame resumes where the nested one stopped.
    """

    def __init__(self, expression: str) -> None:
        self._expression = expression
        self.position = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.position >= len(self._expression):
            raise StopIteration
        symbol = self._expression[self.position]
        self.position += 1
        return symbol

    def peek(self) -> Optional[str]:
        if self.position >= len(self._expression):
            return None
        return self._expression[self.position]


class Parser:
    """Evaluates one letter-notation expression.

    Args:
        expression: The full expression, e.g. "3ae4c66fb32".
        codes: Symbol alphabet. Defaults to a/b/c/d for the operators and e/f
            for the group delimiters.
        integer_bits: Width of the unsigned integers operands and results
            must fit in.
        listener: Optional callable receiving a ParseStep per accepted symbol.
    """

    def __init__(
        self,
        expression: str,
        codes: SymbolCodes = DEFAULT_CODES,
        integer_bits: int = DEFAULT_INTEGER_BITS,
        listener: Optional[StepListener] = None,
    ) -> None:
        self.expression = expression
        self.codes = codes
        self.max_value = max_operand(integer_bits)
        self.listener = listener

    def parse(self) -> int:
        """Evaluate the expression.

        Returns:
            The integer result.

        Raises:
            ParseError: The first failure met anywhere in the expression.
        """
        self._check_balance()
        return self._parse_frame(Cursor(self.expression), 0)

    def _check_balance(self) -> None:
        opens = self.expression.count(self.codes.open)
        closes = self.expression.count(self.codes.close)
        if opens > closes:
            raise UnbalancedParenthesis(self.codes.open)
        if closes > opens:
            raise UnbalancedParenthesis(self.codes.close)

    def next_state(self, state: ParserState, symbol: str, acc: str) -> ParserState:
        """Compute the state reached by reading `symbol` in `state`.

        Raises MalformedExpression if the symbol is illegal there. A chained
        operator needs pending digits; a group-open needs none.
        """
        codes = self.codes
        if _is_digit(symbol):
            if state in (ParserState.FIRST_OPERAND, ParserState.SECOND_OPERAND):
                return state
            if state is ParserState.OPERATION:
                return ParserState.SECOND_OPERAND
        elif codes.is_operator(symbol):
            if state is not ParserState.OPERATION:
                return ParserState.OPERATION
            if acc:
                return state
        elif symbol == codes.open:
            if state is not ParserState.CLOSE_PARENTHESIS and not acc:
                return state
        elif symbol == codes.close:
            if state is not ParserState.OPERATION:
                return ParserState.CLOSE_PARENTHESIS
        raise MalformedExpression(symbol)

    def _parse_frame(self, cursor: Cursor, level: int) -> int:
        """Evaluate one nesting level, consuming symbols up to its close."""
        logger.debug("Parse recursion, level %d", level)

        state = ParserState.FIRST_OPERAND
        result: Optional[int] = None
        operation: Optional[Operation] = None
        acc = ""

        for symbol in cursor:
            prior = state
            state = self.next_state(state, symbol, acc)
            if state is not prior:
                logger.debug("%s -> %s", prior.name, state.name)

            if _is_digit(symbol) and state is ParserState.FIRST_OPERAND:
                acc += symbol
                logger.debug("a = %r", acc)
                try:
                    result = parse_operand(acc, self.max_value)
                except ValueError as e:
                    raise ParseDigitError(acc, str(e)) from e

            elif _is_digit(symbol) and state is ParserState.SECOND_OPERAND:
                acc += symbol
                logger.debug("b = %r", acc)
                if operation is None:
                    raise IllegalState("second operand without a pending operation")
                try:
                    result = operation.apply(acc)
                except OperationError as e:
                    raise InvalidOperation(e) from e

            elif self.codes.is_operator(symbol) and state is ParserState.OPERATION:
                # Digits pending from FIRST_OPERAND are the literal first operand;
                # otherwise chain off the running result.
                if result is None:
                    raise EmptyExpression()
                try:
                    if acc and prior is ParserState.FIRST_OPERAND:
                        operation = Operation.from_literal(
                            symbol, acc, codes=self.codes, max_value=self.max_value
                        )
                    else:
                        operation = Operation.from_result(
                            symbol, result, codes=self.codes, max_value=self.max_value
                        )
                except OperationError as e:
                    raise InvalidOperation(e) from e
                logger.debug("op = %s", operation)

            elif symbol == self.codes.open:
                logger.debug("Open parenthesis: state = %s, operation = %s", state.name, operation)
                self._emit(cursor, symbol, level, prior, state, result)
                sub_result = self._parse_frame(cursor, level + 1)
                if operation is None:
                    result = sub_result
                else:
                    try:
                        result = operation.apply_result(sub_result)
                    except OperationError as e:
                        raise InvalidOperation(e) from e
                # The group now stands in for a closed operand in this frame.
                operation = None
                state = ParserState.CLOSE_PARENTHESIS
                logger.debug("group result = %d, next = %r", result, cursor.peek())
                continue

            elif symbol == self.codes.close and state is ParserState.CLOSE_PARENTHESIS:
                logger.debug("Close parenthesis, level %d", level)
                if level == 0:
                    raise UnbalancedParenthesis(self.codes.close)
                if result is None:
                    raise EmptyExpression()
                self._emit(cursor, symbol, level, prior, state, result)
                return result

            else:
                raise UnexpectedSymbol(symbol, state, operation)

            if not _is_digit(symbol):
                acc = ""
            self._emit(cursor, symbol, level, prior, state, result)

        logger.debug("level = %d, result = %s", level, result)
        if level > 0:
            raise UnbalancedParenthesis(self.codes.open)
        if result is None:
            raise EmptyExpression()
        return result

    def _emit(
        self,
        cursor: Cursor,
        symbol: str,
        level: int,
        before: ParserState,
        after: ParserState,
        result: Optional[int],
    ) -> None:
        if self.listener is not None:
            self.listener(ParseStep(cursor.position - 1, symbol, level, before, after, result))


def evaluate(
    expression: str,
    codes: SymbolCodes = DEFAULT_CODES,
    integer_bits: int = DEFAULT_INTEGER_BITS,
) -> int:
    """Evaluate `expression` and return its integer result."""
    return Parser(expression, codes=codes, integer_bits=integer_bits).parse()
