"""CLI for lettercalc.

Usage:
    python -m lettercalc eval 3a2c4            # Print the result
    python -m lettercalc eval 3a2c4 --verbose  # With debug logging on stderr
    python -m lettercalc trace 3ae4c66fb32     # Show every parser step
    python -m lettercalc codes                 # Show the symbol alphabet
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lettercalc.config import DEFAULT_CODES, DEFAULT_INTEGER_BITS
from lettercalc.errors import LetterCalcError
from lettercalc.log import configure_logging
from lettercalc.parser import ParseStep, Parser

app = typer.Typer(
    name="lettercalc",
    help="Evaluate arithmetic written in letter notation",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _run(parser: Parser) -> int:
    """Parse, or report the error and exit 1."""
    try:
        return parser.parse()
    except LetterCalcError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '3a2c4')"),
    bits: int = typer.Option(DEFAULT_INTEGER_BITS, "--bits", "-b", min=1, help="Unsigned integer width"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    """Evaluate an expression and print the result."""
    configure_logging(verbose)
    result = _run(Parser(expression, integer_bits=bits))
    typer.echo(result)


@app.command("trace")
def cmd_trace(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '3ae4c66fb32')"),
    bits: int = typer.Option(DEFAULT_INTEGER_BITS, "--bits", "-b", min=1, help="Unsigned integer width"),
) -> None:
    """Evaluate an expression, showing every parser step."""
    configure_logging()
    steps: list[ParseStep] = []
    result = _run(Parser(expression, integer_bits=bits, listener=steps.append))

    table = Table(title=f"Trace: {expression}", show_header=True, header_style="bold")
    table.add_column("Pos", justify="right")
    table.add_column("Symbol", style="green")
    table.add_column("Level", justify="right")
    table.add_column("Transition")
    table.add_column("Result", justify="right")

    for step in steps:
        if step.before is step.after:
            transition = step.after.value
        else:
            transition = f"{step.before.value} -> {step.after.value}"
        table.add_row(
            str(step.position),
            step.symbol,
            str(step.level),
            transition,
            "--" if step.result is None else str(step.result),
        )

    console.print()
    console.print(table)
    console.print()
    typer.echo(result)


@app.command("codes")
def cmd_codes() -> None:
    """Show the symbol alphabet."""
    table = Table(title="Symbol Codes", show_header=True, header_style="bold")
    table.add_column("Code", style="green")
    table.add_column("Meaning")

    codes = DEFAULT_CODES
    for code, meaning in (
        (codes.add, "add"),
        (codes.sub, "subtract"),
        (codes.mul, "multiply"),
        (codes.div, "divide"),
        (codes.open, "open group"),
        (codes.close, "close group"),
        ("0-9", "operand digits"),
    ):
        table.add_row(code, meaning)

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()
