"""New command - scaffold a sample Cloud Code project."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core import console
from ..core.config import load_config
from ..core.exceptions import CloudhooksError
from ..core.terminal import Terminal
from ..scaffold.project import ProjectScaffolder

DEFAULT_APP_NAME = "cloudcode"


def new(
    app_name: str | None = typer.Option(
        None,
        "--app-name",
        "-a",
        help="App name used as the default directory name",
    ),
) -> None:
    """Create a sample Cloud Code project in the current directory.

    The project contains a "hello" cloud function, a static page and a
    .cloudhooks/config.json with the configured application id.

    Examples:
        cloudhooks new
        cloudhooks new -a my-app
    """
    root = Path.cwd()
    try:
        config = load_config(root)
        name = app_name or config.api.application_id or DEFAULT_APP_NAME
        project_dir = ProjectScaffolder(root, Terminal()).run(name, config.api)
    except CloudhooksError as e:
        console.error(str(e))
        raise typer.Exit(1) from None

    console.success(f"Project created at {project_dir}")


def register_new_command(app: typer.Typer) -> None:
    """Register the new command with the main app."""
    app.command()(new)
