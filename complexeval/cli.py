"""CLI interface for the complex expression evaluator.

Usage:
    complexeval eval "3+4j"
    echo "2e^(jπ/2)" | complexeval eval
    complexeval eval --format exponential --digits 3 "1+j"
    complexeval repl < expressions.txt
    complexeval inspect "(1+2j)*(3-j)"
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from complexeval.core.errors import ComplexError
from complexeval.core.number import Complex
from complexeval.core.render import RenderConfig, RenderFormat, render
from complexeval.parser.grammar import evaluate

err_console = Console(stderr=True)

FORMAT_CHOICES = [f.value for f in RenderFormat]
DIGITS = click.IntRange(0, 100)


def _fail(error: Exception) -> None:
    err_console.print(f"[red]{escape(str(error))}[/red]")
    sys.exit(1)


def _evaluate_or_exit(text: str) -> Complex:
    try:
        return evaluate(text)
    except ComplexError as e:
        _fail(e)


def _render_or_exit(value: Complex, config: RenderConfig) -> str:
    try:
        return render(value, config)
    except ValueError as e:
        _fail(e)


@click.group()
@click.option("--verbose", is_flag=True, help="Log tokenizer and parser activity to stderr")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Evaluate human-written complex-number expressions."""
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@main.command("eval")
@click.argument("expression", nargs=-1)
@click.option("--format", "fmt", default="nice", type=click.Choice(FORMAT_CHOICES),
              envvar="COMPLEXEVAL_FORMAT", help="Rendering form of the result")
@click.option("--digits", default=None, type=DIGITS, envvar="COMPLEXEVAL_DIGITS",
              help="Fractional or significant digits, depending on --format")
def eval_command(expression: tuple[str, ...], fmt: str, digits: int | None) -> None:
    """Evaluate EXPRESSION, or all of stdin when no expression is given."""
    text = " ".join(expression) if expression else sys.stdin.read()
    config = RenderConfig(format=RenderFormat(fmt), digits=digits)
    click.echo(_render_or_exit(_evaluate_or_exit(text), config))


@main.command()
@click.option("--format", "fmt", default="nice", type=click.Choice(FORMAT_CHOICES),
              envvar="COMPLEXEVAL_FORMAT", help="Rendering form of each result")
@click.option("--digits", default=None, type=DIGITS, envvar="COMPLEXEVAL_DIGITS",
              help="Fractional or significant digits, depending on --format")
def repl(fmt: str, digits: int | None) -> None:
    """Evaluate stdin line by line. The first failing line ends the session."""
    config = RenderConfig(format=RenderFormat(fmt), digits=digits)
    for line in sys.stdin:
        if not line.strip():
            continue
        click.echo(_render_or_exit(_evaluate_or_exit(line), config))


@main.command()
@click.argument("expression", nargs=-1, required=True)
@click.option("--digits", default=None, type=DIGITS, help="Digits for the fixed, exponential and precision forms")
def inspect(expression: tuple[str, ...], digits: int | None) -> None:
    """Show the tokens of EXPRESSION and its value in every form."""
    from complexeval.parser.tokenizer import tokenize
    from complexeval.utils.display import display_tokens, display_value

    text = " ".join(expression)
    display_tokens(tokenize(text))
    value = _evaluate_or_exit(text)
    try:
        display_value(text, value, digits)
    except ValueError as e:
        _fail(e)


if __name__ == "__main__":
    main()
