"""Functions commands - list, create, edit and delete function webhooks."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer

from ..api.client import APIClient
from ..core import console
from ..core.config import CloudhooksConfig, load_config
from ..core.exceptions import CloudhooksError
from ..core.terminal import Terminal
from ..hooks.manager import FunctionHooksManager
from ..hooks.resource import FunctionHooksResource
from ..scaffold.project import find_project_root

functions_app = typer.Typer(
    name="functions",
    help="List cloud code functions and function webhooks.",
    invoke_without_command=True,
    no_args_is_help=False,
)


def _load_project_config() -> CloudhooksConfig:
    """Load config from the enclosing project, or the current directory."""
    cwd = Path.cwd()
    return load_config(find_project_root(cwd) or cwd)


def _open_client(config: CloudhooksConfig) -> APIClient:
    return APIClient.from_config(config.api)


def run_with_client(workflow: Callable[[FunctionHooksManager], Any]) -> None:
    """Run a hook workflow with an authenticated client.

    Loads configuration, checks credentials before any prompt is shown and
    turns cloudhooks errors into a red message and exit code 1.
    """
    try:
        config = _load_project_config()
        config.require_credentials()
        with _open_client(config) as client:
            manager = FunctionHooksManager(FunctionHooksResource(client), Terminal())
            workflow(manager)
    except CloudhooksError as e:
        console.error(str(e))
        raise typer.Exit(1) from None


@functions_app.callback()
def functions(
    ctx: typer.Context,
    one: bool = typer.Option(
        False, "--one", hidden=True, help="Prompt for a name and list only that function"
    ),
) -> None:
    """List cloud code functions and function webhooks.

    Examples:
        cloudhooks functions          # List every function of the app
        cloudhooks functions create   # Register a new webhook function
        cloudhooks functions edit     # Point a webhook function at a new URL
        cloudhooks functions delete   # Remove a webhook function
    """
    if ctx.invoked_subcommand is not None:
        return
    run_with_client(lambda manager: manager.read(prompt=one))


@functions_app.command()
def create() -> None:
    """Create a function webhook."""
    run_with_client(FunctionHooksManager.create)


@functions_app.command()
def edit() -> None:
    """Edit the URL of a function webhook."""
    run_with_client(FunctionHooksManager.update)


@functions_app.command()
def delete() -> None:
    """Delete a function webhook."""
    run_with_client(FunctionHooksManager.delete)


def register_functions_commands(app: typer.Typer) -> None:
    """Register the functions command group with the main app."""
    app.add_typer(functions_app, name="functions")
