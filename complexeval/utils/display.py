"""Rich console display utilities for evaluated expressions."""

from __future__ import annotations

import math

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from complexeval.core.number import Complex
from complexeval.core.render import to_exponential, to_fixed, to_precision, to_string

console = Console()


def display_tokens(tokens: list[str]) -> None:
    """Show the normalized token stream, one cell per token."""
    cells = " ".join(f"[cyan]{escape(t) if t != ' ' else '␣'}[/cyan]" for t in tokens)
    console.print(Panel(cells or "[dim](empty)[/dim]", title="Tokens", border_style="blue"))


def display_value(expression: str, value: Complex, digits: int | None = None) -> None:
    """Display a value in every rendering form, with its modulus and angle."""
    table = Table(title=f"Evaluation: {escape(expression)}")
    table.add_column("Form", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("nice", to_string(value))
    table.add_row("fixed", to_fixed(value, digits if digits is not None else 6))
    table.add_row("exponential", to_exponential(value, digits))
    table.add_row("precision", to_precision(value, digits))
    table.add_row("real", repr(value.real), style="dim")
    table.add_row("imag", repr(value.imag), style="dim")
    table.add_row("abs", f"{value.abs:.12g}", style="bold")
    table.add_row("angle", f"{value.angle:.12g} rad ({value.angle / math.pi:.6g}π)", style="bold")

    console.print(table)
