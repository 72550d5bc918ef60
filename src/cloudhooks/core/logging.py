"""Diagnostic logging setup.

Call ``setup_logging()`` once from the CLI entry point. All modules use
``logging.getLogger(__name__)``; user-facing output never goes through here.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "cloudhooks"


class ThirdPartyPrefixFilter(logging.Filter):
    """Prefix records from other libraries with their top-level package name."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # "httpx._client" -> "[httpx] "
            record.prefix = f"[{record.name.split('.')[0]}] "
        else:
            record.prefix = ""
        return True


def setup_logging(verbose: bool = False) -> RichHandler:
    """Install a rich handler on the root logger.

    Args:
        verbose: Log at DEBUG instead of WARNING and show logger names.

    Returns:
        The installed handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.addFilter(ThirdPartyPrefixFilter())
    handler.setFormatter(logging.Formatter("%(prefix)s%(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.INFO if verbose else logging.WARNING)
    return handler
