"""API Client - authenticated JSON requests against the backend.

A thin wrapper over ``httpx.Client`` that attaches the app credentials,
sends JSON bodies and maps every failure onto the ``TransportError``
family. Each call is a single attempt; there is no retry or backoff.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel

from .. import __version__
from ..core.config import APIConfig
from ..core.exceptions import (
    APIConnectionError,
    APIHTTPError,
    APITimeoutError,
    InvalidResponseError,
)

logger = logging.getLogger(__name__)

APPLICATION_ID_HEADER = "X-Parse-Application-Id"
MASTER_KEY_HEADER = "X-Parse-Master-Key"


class APIClient:
    """JSON-over-HTTP client bound to one application.

    Example:
        with APIClient.from_config(config.api) as client:
            data = client.get("/1/hooks/functions")
    """

    def __init__(self, http: httpx.Client):
        """Wrap an already configured ``httpx.Client``.

        Args:
            http: Client with base URL, credential headers and timeout set.
        """
        self.http = http

    @classmethod
    def from_config(
        cls, api: APIConfig, transport: httpx.BaseTransport | None = None
    ) -> APIClient:
        """Build a client from API settings.

        Args:
            api: Server URL, credentials and timeout.
            transport: Optional transport override (used by tests).
        """
        headers = {
            "Content-Type": "application/json",
            "User-Agent": f"cloudhooks/{__version__}",
        }
        if api.application_id:
            headers[APPLICATION_ID_HEADER] = api.application_id
        if api.master_key:
            headers[MASTER_KEY_HEADER] = api.master_key
        http = httpx.Client(
            base_url=api.server_url,
            headers=headers,
            timeout=api.timeout,
            transport=transport,
        )
        return cls(http)

    def __enter__(self) -> APIClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def get(self, path: str) -> Any:
        """Send a GET request and return the decoded JSON body."""
        return self.request("GET", path)

    def post(self, path: str, body: BaseModel | dict[str, Any]) -> Any:
        """Send a POST request with a JSON body and return the decoded response."""
        return self.request("POST", path, body)

    def put(self, path: str, body: BaseModel | dict[str, Any]) -> Any:
        """Send a PUT request with a JSON body and return the decoded response."""
        return self.request("PUT", path, body)

    def request(
        self, method: str, path: str, body: BaseModel | dict[str, Any] | None = None
    ) -> Any:
        """Send one request and decode the JSON response.

        Args:
            method: HTTP method.
            path: Path relative to the server URL.
            body: Model (serialized by alias, unset fields dropped) or plain dict.

        Returns:
            The decoded JSON value.

        Raises:
            APITimeoutError: If the request times out.
            APIConnectionError: If the server cannot be reached.
            APIHTTPError: If the server answers with a non-2xx status.
            InvalidResponseError: If the response body is not valid JSON.
        """
        payload: dict[str, Any] | None
        if isinstance(body, BaseModel):
            payload = body.model_dump(by_alias=True, exclude_none=True)
        else:
            payload = body

        url = f"{str(self.http.base_url).rstrip('/')}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            response = self.http.request(method, path, json=payload)
        except httpx.TimeoutException as e:
            timeout = self.http.timeout.read or 0.0
            raise APITimeoutError(url, timeout) from e
        except httpx.TransportError as e:
            raise APIConnectionError(url, e) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if not response.is_success:
            raise _http_error(response)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidResponseError(
                f"Server returned invalid JSON for {method} {path}", response.text[:500]
            ) from e


def _http_error(response: httpx.Response) -> APIHTTPError:
    """Build an ``APIHTTPError``, using the server's ``{code, error}`` body if present."""
    error: str | None = None
    code: int | None = None
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        data = None
    if isinstance(data, dict):
        if isinstance(data.get("error"), str):
            error = data["error"]
        if isinstance(data.get("code"), int):
            code = data["code"]
    return APIHTTPError(
        response.status_code,
        error=error,
        code=code,
        response_body=response.text[:500] or None,
    )
