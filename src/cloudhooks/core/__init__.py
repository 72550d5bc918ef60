"""Core module - exports configuration, terminal and exception classes."""

from cloudhooks.core.config import (
    APIConfig,
    CloudhooksConfig,
    load_config,
)
from cloudhooks.core.exceptions import (
    APIConnectionError,
    APIHTTPError,
    APITimeoutError,
    CloudhooksError,
    ConfigError,
    HookValidationError,
    InvalidResponseError,
    MissingCredentialsError,
    ScaffoldError,
    TransportError,
)
from cloudhooks.core.terminal import Terminal

__all__ = [
    # Configuration
    "APIConfig",
    "CloudhooksConfig",
    "load_config",
    # Terminal
    "Terminal",
    # Exceptions
    "CloudhooksError",
    "HookValidationError",
    "ConfigError",
    "MissingCredentialsError",
    "ScaffoldError",
    "TransportError",
    "APIConnectionError",
    "APITimeoutError",
    "APIHTTPError",
    "InvalidResponseError",
]
