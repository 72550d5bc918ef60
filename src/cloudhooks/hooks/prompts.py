"""Interactive input for hook workflows.

Reads function names, URLs and yes/no answers from the terminal's line
source and validates them before anything is sent to the server.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from ..core.exceptions import HookValidationError
from ..core.terminal import Terminal
from .models import FunctionHook

URL_PREFIX = "https://"


def validate_url(url: str) -> None:
    """Check that ``url`` is an absolute https URL with a host.

    Raises:
        HookValidationError: If the URL cannot be parsed, is not https or has no host.
    """
    try:
        parts = urlsplit(url)
        # accessing .port validates the port component
        parts.port  # noqa: B018
    except ValueError as e:
        raise HookValidationError(f"Invalid URL: {url}", str(e)) from e

    if parts.scheme != "https":
        raise HookValidationError(f"Invalid URL: {url}", "Please enter a valid https url.")
    if not parts.hostname:
        raise HookValidationError(f"Invalid URL: {url}", "The URL must include a host name.")


def read_function_name(terminal: Terminal) -> FunctionHook:
    """Prompt for a function name.

    Raises:
        HookValidationError: If the name is empty.
    """
    terminal.prompt("Please enter the function name: ")
    name = terminal.read_token()
    if not name:
        raise HookValidationError("Function name cannot be empty")
    return FunctionHook(function_name=name)


def read_function_params(terminal: Terminal) -> FunctionHook:
    """Prompt for a function name and the URL it should point to.

    The ``https://`` prefix is always added; the user only types the host
    and path.

    Raises:
        HookValidationError: If the name is empty or the URL is malformed.
    """
    hook = read_function_name(terminal)

    terminal.prompt(f"URL: {URL_PREFIX}")
    hook.url = URL_PREFIX + terminal.read_token()
    validate_url(hook.url)
    return hook


def get_confirmation(message: str, terminal: Terminal) -> bool:
    """Ask a yes/no question; only answers starting with "y" count as yes."""
    terminal.prompt(message)
    return terminal.read_token().lower().startswith("y")
