"""lettercalc — evaluate arithmetic written in letter notation.

Operands are decimal digit runs, operators are letters (a add, b subtract,
c multiply, d divide) and e/f stand in for "(" and ")". Evaluation is strictly
left to right with checked unsigned arithmetic.

Usage:
    python -m lettercalc eval 3a2c4        # 20
    python -m lettercalc trace 3ae4c66fb32 # Step table, then 235
    python -m lettercalc codes             # Show the symbol alphabet
"""

from lettercalc.config import DEFAULT_CODES, SymbolCodes
from lettercalc.errors import LetterCalcError, OperationError, ParseError
from lettercalc.operation import Operation, OperationKind
from lettercalc.parser import Parser, ParserState, evaluate

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CODES",
    "LetterCalcError",
    "Operation",
    "OperationError",
    "OperationKind",
    "ParseError",
    "Parser",
    "ParserState",
    "SymbolCodes",
    "evaluate",
]
