"""Terminal - the interactive I/O handle passed to every workflow.

Workflows never touch ``sys.stdin`` or ``print`` directly. They read from the
terminal's line source and write to its output and error consoles, so tests
can script the input and capture what was shown.
"""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console
from rich.markup import escape


def _stdout_console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)


def _recording_console() -> Console:
    return Console(
        file=io.StringIO(), highlight=False, soft_wrap=True, emoji=False, color_system=None
    )


@dataclass
class Terminal:
    """Line source plus output and error consoles."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    out: Console = field(default_factory=_stdout_console)
    err: Console = field(default_factory=_stderr_console)

    def prompt(self, text: str) -> None:
        """Write prompt text without a trailing newline."""
        self.out.print(escape(text), end="")

    def read_token(self) -> str:
        """Read one line and return its first whitespace-delimited token.

        Returns an empty string on a blank line or end of input.
        """
        line = self.stdin.readline()
        tokens = line.split()
        return tokens[0] if tokens else ""

    def echo(self, text: str) -> None:
        """Print plain text (no markup) to the output console."""
        self.out.print(escape(text))

    def warn(self, text: str) -> None:
        """Print a warning line to the error console."""
        self.err.print(f"[yellow]WARNING:[/yellow] {escape(text)}")

    @classmethod
    def scripted(cls, text: str = "") -> Terminal:
        """Build a terminal fed from ``text`` that records everything it prints.

        Use :meth:`output` and :meth:`errors` to read the recorded text.
        """
        return cls(stdin=io.StringIO(text), out=_recording_console(), err=_recording_console())

    def output(self) -> str:
        """Text written to the output console (scripted terminals only)."""
        return self.out.file.getvalue()  # type: ignore[attr-defined]

    def errors(self) -> str:
        """Text written to the error console (scripted terminals only)."""
        return self.err.file.getvalue()  # type: ignore[attr-defined]
