"""Function hook data model.

These models mirror the JSON exchanged with ``/1/hooks/functions``. Field
names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote(value: str) -> str:
    """Double-quote a string, escaping quotes, backslashes and non-printables."""
    parts = ['"']
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


class FunctionHook(BaseModel):
    """A function webhook registration.

    A hook without a URL is a function implemented in cloud code. ``warning``
    only ever arrives on create/update responses and is never sent back.
    """

    model_config = ConfigDict(populate_by_name=True)

    function_name: str = Field(default="", alias="functionName")
    url: str | None = None
    warning: str | None = None

    def __str__(self) -> str:
        if self.url:
            return f"Function name: {quote(self.function_name)}, URL: {quote(self.url)}"
        return f"Function name: {quote(self.function_name)}"


class FunctionHookResults(BaseModel):
    """Collection wrapper returned by list and read-one requests."""

    results: list[FunctionHook] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class DeleteFieldOp(BaseModel):
    """Field-deletion operator sent with PUT to remove a hook registration.

    Serializes to ``{"__op": "Delete"}``. Kept apart from update bodies so the
    two requests cannot be confused.
    """

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["Delete"] = Field(default="Delete", alias="__op")


def render_sorted(hooks: Iterable[FunctionHook]) -> list[str]:
    """Render hooks as display lines in lexicographic order.

    The server gives no ordering guarantee, so the listing is sorted on the
    rendered text to make output independent of response order.
    """
    return sorted(str(hook) for hook in hooks)
