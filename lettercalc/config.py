"""Configuration for lettercalc: symbol alphabet, integer width, log level.

The alphabet and width are plain values handed to the parser. The only thing
read from the environment is log verbosity, which never affects results.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

# Env var holding the diagnostic log level name (DEBUG, INFO, WARNING, ...).
LOG_LEVEL_ENV = "LETTERCALC_LOG"
DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_INTEGER_BITS = 64


@dataclass(frozen=True)
class SymbolCodes:
    """The six reserved one-character codes of the expression alphabet."""

    add: str = "a"
    sub: str = "b"
    mul: str = "c"
    div: str = "d"
    open: str = "e"
    close: str = "f"

    def __post_init__(self) -> None:
        codes = self.symbols()
        for code in codes:
            if len(code) != 1:
                raise ValueError(f"symbol code must be a single character, got {code!r}")
            if code.isdigit():
                raise ValueError(f"symbol code cannot be a digit, got {code!r}")
        if len(set(codes)) != len(codes):
            raise ValueError(f"symbol codes must be distinct, got {codes!r}")

    def operators(self) -> tuple[str, str, str, str]:
        """Arithmetic codes in add, sub, mul, div order."""
        return (self.add, self.sub, self.mul, self.div)

    def symbols(self) -> tuple[str, ...]:
        return (*self.operators(), self.open, self.close)

    def is_operator(self, symbol: str) -> bool:
        return symbol in self.operators()


DEFAULT_CODES = SymbolCodes()


def max_operand(bits: int = DEFAULT_INTEGER_BITS) -> int:
    """Largest value representable by an unsigned integer of `bits` bits."""
    if bits <= 0:
        raise ValueError(f"integer width must be positive, got {bits}")
    return (1 << bits) - 1


def log_level_from_env(default: str = DEFAULT_LOG_LEVEL) -> str:
    """Read the log level name from LETTERCALC_LOG.

    Unknown or empty values fall back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return default
