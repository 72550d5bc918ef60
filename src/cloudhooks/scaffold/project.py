"""Project Scaffolder - creates a minimal sample project.

The sample holds a "hello" cloud function and a static page, plus a
``.cloudhooks/config.json`` so later commands run from the project
directory pick up the application id and server URL.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.config import (
    APIConfig,
    generate_default_config_json,
    get_config_path,
)
from ..core.exceptions import ScaffoldError
from ..core.terminal import Terminal
from .templates import CURL_TEMPLATE, HELP_TEMPLATE, PROJECT_FILES

logger = logging.getLogger(__name__)

RETRY_HINT = (
    'Please run "cloudhooks new" again and choose a different name for your '
    "Cloud Code directory,\nso it does not conflict with any other Cloud Code "
    "in the current directory."
)


def find_project_root(start: Path) -> Path | None:
    """Return the nearest directory at or above ``start`` holding a project config."""
    for directory in [start, *start.parents]:
        if get_config_path(directory).exists():
            return directory
    return None


class ProjectScaffolder:
    """Creates sample projects below a root directory."""

    def __init__(self, root: Path, terminal: Terminal):
        self.root = root
        self.terminal = terminal

    def ensure_not_in_project(self) -> None:
        """Refuse to create a project inside another one.

        Raises:
            ScaffoldError: If ``root`` or one of its parents is a project.
        """
        existing = find_project_root(self.root)
        if existing is not None:
            raise ScaffoldError(
                "Detected that you are already inside a project.",
                f"Found {get_config_path(existing)}. "
                "Please refrain from creating a project inside another project.",
            )

    def choose_directory(self, app_name: str) -> Path:
        """Ask for the project directory name, defaulting to ``app_name``.

        Only the first word of the answer is used, and it must name a
        directory below ``root``.

        Raises:
            ScaffoldError: If the directory is outside ``root``, already holds
                a project or is a file.
        """
        self.terminal.echo(
            f"Now it's time to setup some Cloud Code for the app: {app_name},\n"
            "Next we will create a directory to hold your Cloud Code.\n"
            "Please enter the name to use for this directory,\n"
            f"or hit ENTER to use {app_name} as the directory name.\n"
        )
        self.terminal.prompt("Directory Name: ")
        name = self.terminal.read_token() or app_name
        project_dir = self.root / name

        root = self.root.resolve()
        resolved = project_dir.resolve()
        if Path(name).is_absolute() or resolved == root or root not in resolved.parents:
            raise ScaffoldError(
                f"Sorry, we are unable to create Cloud Code at {name}.",
                f"The directory must be inside {self.root}.\n{RETRY_HINT}",
            )
        if get_config_path(project_dir).exists():
            raise ScaffoldError(
                f"Sorry, we are unable to create Cloud Code at {name}.",
                f"It seems that you already have Cloud Code at {name}.\n{RETRY_HINT}",
            )
        if project_dir.exists() and not project_dir.is_dir():
            raise ScaffoldError(
                f"Sorry, we are unable to create Cloud Code at {name}.",
                f"In the current directory a file named: {name} already exists.\n{RETRY_HINT}",
            )
        return project_dir

    def write_files(self, project_dir: Path, api: APIConfig) -> list[Path]:
        """Write the sample files and project config.

        Existing sample files are left as they are.

        Returns:
            Paths of the files that were created.
        """
        created: list[Path] = []
        for dirname, filename, content in PROJECT_FILES:
            path = project_dir / dirname / filename
            if path.exists():
                logger.debug("Keeping existing %s", path)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            created.append(path)

        config_path = get_config_path(project_dir)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(generate_default_config_json(api.application_id, api.server_url))
            f.write("\n")
        created.append(config_path)

        logger.debug("Created %d file(s) under %s", len(created), project_dir)
        return created

    def help_message(self, project_dir: Path, api: APIConfig) -> str:
        """Explain what was created and how to call the sample function."""
        curl = CURL_TEMPLATE.format(
            application_id=api.application_id or "<application id>",
            rest_key=api.rest_key or "<REST API key>",
            functions_url=f"{api.server_url.rstrip('/')}/1/functions/hello",
        )
        return HELP_TEMPLATE.format(project_dir=project_dir, curl=curl)

    def run(self, app_name: str, api: APIConfig) -> Path:
        """Create a sample project for ``app_name`` and print how to use it.

        Returns:
            The project directory.

        Raises:
            ScaffoldError: If the project cannot be created there.
        """
        self.ensure_not_in_project()
        project_dir = self.choose_directory(app_name)
        try:
            self.write_files(project_dir, api)
        except OSError as e:
            raise ScaffoldError(f"Failed to create project files in {project_dir}", str(e)) from e
        self.terminal.echo(self.help_message(project_dir, api))
        return project_dir

