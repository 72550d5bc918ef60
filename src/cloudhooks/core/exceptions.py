"""Exception hierarchy shared by every cloudhooks layer.

All errors carry a short ``message`` plus optional ``details`` that explain
how to recover. The command layer prints them; nothing below it exits the
process.
"""

# =============================================================================
# Base Exception
# =============================================================================


class CloudhooksError(Exception):
    """Base exception for all cloudhooks errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


# =============================================================================
# Input and Configuration Errors
# =============================================================================


class HookValidationError(CloudhooksError):
    """Raised when locally entered hook data is rejected before any request."""


class ConfigError(CloudhooksError):
    """Raised when the configuration file cannot be read or is incomplete."""


class MissingCredentialsError(ConfigError):
    """Raised when a command needs credentials that are not configured."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing credentials: {', '.join(missing)}",
            "Set them in .cloudhooks/config.json or via CLOUDHOOKS_* environment variables.",
        )


class ScaffoldError(CloudhooksError):
    """Raised when a sample project cannot be created at the requested place."""


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(CloudhooksError):
    """Base exception for failures talking to the backend."""


class APIConnectionError(TransportError):
    """Raised when the server cannot be reached."""

    def __init__(self, url: str, original_error: Exception):
        self.url = url
        self.original_error = original_error
        super().__init__(
            f"Failed to connect to {url}",
            f"Network error: {original_error}. Check your internet connection.",
        )


class APITimeoutError(TransportError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout
        super().__init__(
            f"Network timeout while connecting to {url}",
            f"Request timed out after {timeout} seconds. Check your network connection.",
        )


class APIHTTPError(TransportError):
    """Raised when the server answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        error: str | None = None,
        code: int | None = None,
        response_body: str | None = None,
    ):
        self.status_code = status_code
        self.error = error
        self.code = code
        self.response_body = response_body
        error_messages = {
            400: "Bad request",
            401: "Unauthorized - check your application id and master key",
            403: "Forbidden - the master key may not have access to this app",
            404: "Not found",
            429: "Rate limited - please try again later",
            500: "Server error",
            503: "Service unavailable",
        }
        message = error or error_messages.get(status_code, f"HTTP error {status_code}")
        details = None
        if code is not None:
            details = f"Server error code {code} (HTTP {status_code})"
        elif response_body and not error:
            details = response_body
        super().__init__(f"Request failed: {message}", details)


class InvalidResponseError(TransportError):
    """Raised when a response body is not the JSON shape we expect."""

    def __init__(self, message: str, response_body: str | None = None):
        self.response_body = response_body
        details = f"Received response: {response_body}" if response_body else None
        super().__init__(message, details)
