"""Function hook resource - maps CRUD intents onto HTTP requests.

| Operation | Method | Path                       | Body                 |
|-----------|--------|----------------------------|----------------------|
| create    | POST   | /1/hooks/functions         | {functionName, url}  |
| list_all  | GET    | /1/hooks/functions         |                      |
| get       | GET    | /1/hooks/functions/{name}  |                      |
| update    | PUT    | /1/hooks/functions/{name}  | {url}                |
| delete    | PUT    | /1/hooks/functions/{name}  | {"__op": "Delete"}   |
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from ..api.client import APIClient
from ..core.exceptions import InvalidResponseError
from .models import DeleteFieldOp, FunctionHook, FunctionHookResults

logger = logging.getLogger(__name__)

FUNCTIONS_PATH = "/1/hooks/functions"

ModelT = TypeVar("ModelT", bound=BaseModel)


class FunctionHookStore(Protocol):
    """Remote collection of function hooks."""

    def create(self, hook: FunctionHook) -> FunctionHook: ...

    def list_all(self) -> list[FunctionHook]: ...

    def get(self, name: str) -> list[FunctionHook]: ...

    def update(self, hook: FunctionHook) -> FunctionHook: ...

    def delete(self, name: str) -> FunctionHook: ...


def function_path(name: str) -> str:
    """Return the sub-resource path for one function name."""
    return f"{FUNCTIONS_PATH}/{quote(name, safe='')}"


def _parse(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidResponseError(
            f"Unexpected response shape for {model.__name__}", str(data)[:500]
        ) from e


class FunctionHooksResource:
    """``FunctionHookStore`` backed by the REST API."""

    def __init__(self, client: APIClient):
        self.client = client

    def create(self, hook: FunctionHook) -> FunctionHook:
        """Register a new webhook function; the response may carry a warning."""
        body = FunctionHook(function_name=hook.function_name, url=hook.url)
        return _parse(FunctionHook, self.client.post(FUNCTIONS_PATH, body))

    def list_all(self) -> list[FunctionHook]:
        """Fetch every cloud code and webhook function of the app."""
        return _parse(FunctionHookResults, self.client.get(FUNCTIONS_PATH)).results

    def get(self, name: str) -> list[FunctionHook]:
        """Fetch the functions registered under ``name``."""
        return _parse(FunctionHookResults, self.client.get(function_path(name))).results

    def update(self, hook: FunctionHook) -> FunctionHook:
        """Point an existing webhook function at a new URL.

        Only the URL is sent; the name addresses the resource and is never changed.
        """
        body = {"url": hook.url}
        return _parse(FunctionHook, self.client.put(function_path(hook.function_name), body))

    def delete(self, name: str) -> FunctionHook:
        """Remove the webhook registration for ``name``.

        A non-empty ``function_name`` in the result means a cloud code function
        with the same name remains active.
        """
        logger.debug("Deleting webhook function %s", name)
        return _parse(FunctionHook, self.client.put(function_path(name), DeleteFieldOp()))
