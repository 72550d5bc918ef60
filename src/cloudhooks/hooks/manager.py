"""Hook Manager - the create/read/update/delete workflows for function hooks.

Each workflow is linear: read input from the terminal, make at most one
request through the store, print the outcome. Input is validated before any
request is made. Errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging

from ..core.exceptions import HookValidationError
from ..core.terminal import Terminal
from .models import FunctionHook, quote, render_sorted
from .prompts import get_confirmation, read_function_name, read_function_params
from .resource import FunctionHookStore

logger = logging.getLogger(__name__)

ALL_FUNCTIONS_HEADER = "The following cloudcode or webhook functions are associated with this app:"


class FunctionHooksManager:
    """Runs function hook workflows against a store and a terminal."""

    def __init__(self, store: FunctionHookStore, terminal: Terminal):
        """Initialize the manager.

        Args:
            store: Remote hook collection (the REST resource, or a fake in tests).
            terminal: Where prompts are answered and results are printed.
        """
        self.store = store
        self.terminal = terminal

    def create(self) -> FunctionHook:
        """Prompt for a name and URL and register a new webhook function.

        The confirmation shows what the server returned, not what was typed.
        """
        params = read_function_params(self.terminal)
        result = self.store.create(params)
        self._report_warning(result)
        self.terminal.echo(
            f"Successfully created a webhook function {quote(result.function_name)} "
            f"pointing to {quote(result.url or '')}"
        )
        return result

    def read(self, name: str | None = None, prompt: bool = False) -> list[str]:
        """List functions, either all of them or those registered under one name.

        Args:
            name: Only show functions with this name. ``None`` lists everything
                unless ``prompt`` is set.
            prompt: Ask the user for the name instead of using ``name``.

        Returns:
            The rendered lines, sorted.

        Raises:
            HookValidationError: If ``name`` is empty.
        """
        if prompt:
            name = read_function_name(self.terminal).function_name
        elif name == "":
            raise HookValidationError("Function name cannot be empty")

        if name is None:
            hooks = self.store.list_all()
        else:
            hooks = self.store.get(name)
        lines = render_sorted(hooks)
        logger.debug("Fetched %d function(s)", len(lines))

        if name is None:
            self.terminal.echo(ALL_FUNCTIONS_HEADER)
        elif len(lines) == 1:
            self.terminal.echo(f"You have one function named: {quote(name)}")
        else:
            self.terminal.echo(
                f"The following functions named: {quote(name)} are associated with your app:"
            )
        self.terminal.echo("\n".join(lines))
        return lines

    def list_all(self) -> list[str]:
        """List every cloud code and webhook function of the app."""
        return self.read()

    def update(self) -> FunctionHook:
        """Prompt for a name and new URL and repoint the webhook function."""
        params = read_function_params(self.terminal)
        result = self.store.update(params)
        self._report_warning(result)
        self.terminal.echo(
            f"Successfully update the webhook function {quote(result.function_name)} "
            f"to point to {quote(result.url or '')}"
        )
        return result

    def delete(self) -> bool:
        """Prompt for a name and, once confirmed, delete its webhook registration.

        Returns:
            True if the hook was deleted, False if the user declined.
        """
        params = read_function_name(self.terminal)
        message = (
            f"Are you sure you want to delete webhook function: {quote(params.function_name)} (y/n): "
        )
        if not get_confirmation(message, self.terminal):
            logger.debug("Deletion of %s declined", params.function_name)
            return False

        result = self.store.delete(params.function_name)
        self.terminal.echo(f"Successfully deleted webhook function {quote(params.function_name)}")
        if result.function_name:
            self.terminal.echo(
                f"Function {quote(result.function_name)} defined in cloud code "
                "will be used henceforth"
            )
        return True

    def _report_warning(self, result: FunctionHook) -> None:
        if result.warning:
            self.terminal.warn(result.warning)
