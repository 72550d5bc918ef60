"""CLI entry point for cloudhooks."""

import typer
from rich.console import Console

from . import __version__
from .cli_commands.functions import register_functions_commands
from .cli_commands.new import register_new_command
from .core.logging import setup_logging


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console = Console()
        console.print(f"cloudhooks v{__version__}")
        raise typer.Exit(0)


app = typer.Typer(
    name="cloudhooks",
    help="""Manage function webhooks of a backend app.

Function webhooks are cloud functions served from your own HTTPS endpoint.
cloudhooks lists them and creates, edits or deletes webhook registrations.

Quick start:
  cloudhooks new
  cloudhooks functions
  cloudhooks functions create

Credentials are read from .cloudhooks/config.json or the
CLOUDHOOKS_APPLICATION_ID and CLOUDHOOKS_MASTER_KEY environment variables.
""",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """cloudhooks - manage function webhooks."""
    setup_logging(verbose)


# Register commands from submodules
register_functions_commands(app)  # functions, functions create/edit/delete
register_new_command(app)  # new


if __name__ == "__main__":
    app()
