"""Console helpers for status messages printed by the command layer."""

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓ {escape(message)}[/green]")


def error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]Error: {escape(message)}[/red]")
