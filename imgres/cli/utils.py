"""Console output helpers for CLI commands."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[cyan]i[/cyan] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")
