"""Configuration Model - Pydantic models for cloudhooks configuration.

Configuration is loaded from `.cloudhooks/config.json` in the project directory.
Environment variables override individual settings.

Environment Variable Mapping:
| Config Key           | Environment Variable        |
|----------------------|-----------------------------|
| api.server_url       | CLOUDHOOKS_SERVER_URL       |
| api.application_id   | CLOUDHOOKS_APPLICATION_ID   |
| api.master_key       | CLOUDHOOKS_MASTER_KEY       |
| api.rest_key         | CLOUDHOOKS_REST_KEY         |
| api.timeout          | CLOUDHOOKS_TIMEOUT          |
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, MissingCredentialsError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".cloudhooks"
CONFIG_FILE_NAME = "config.json"

ENV_OVERRIDES = {
    "CLOUDHOOKS_SERVER_URL": "server_url",
    "CLOUDHOOKS_APPLICATION_ID": "application_id",
    "CLOUDHOOKS_MASTER_KEY": "master_key",
    "CLOUDHOOKS_REST_KEY": "rest_key",
    "CLOUDHOOKS_TIMEOUT": "timeout",
}

# =============================================================================
# Configuration Models
# =============================================================================


class APIConfig(BaseModel):
    """Backend API settings and app credentials."""

    server_url: str = Field(
        default="https://api.parse.com",
        description="Backend base URL. Overridden by CLOUDHOOKS_SERVER_URL.",
    )
    application_id: str | None = Field(
        default=None,
        description="Application id. Overridden by CLOUDHOOKS_APPLICATION_ID.",
    )
    master_key: str | None = Field(
        default=None,
        description="Master key used for hook management. Overridden by CLOUDHOOKS_MASTER_KEY.",
    )
    rest_key: str | None = Field(
        default=None,
        description="REST API key shown in the sample curl command. Overridden by CLOUDHOOKS_REST_KEY.",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds. Overridden by CLOUDHOOKS_TIMEOUT.",
    )


class CloudhooksConfig(BaseModel):
    """Root configuration object.

    Example config.json:
    ```json
    {
      "version": "1.0",
      "api": {
        "server_url": "https://api.parse.com",
        "application_id": "my-app-id",
        "master_key": null,
        "rest_key": null,
        "timeout": 30.0
      }
    }
    ```
    """

    version: str = Field(default="1.0", description="Configuration schema version.")
    api: APIConfig = Field(default_factory=APIConfig, description="API settings.")

    def require_credentials(self) -> None:
        """Ensure the credentials needed for hook management are present.

        Raises:
            MissingCredentialsError: If the application id or master key is unset.
        """
        missing = []
        if not self.api.application_id:
            missing.append("application_id")
        if not self.api.master_key:
            missing.append("master_key")
        if missing:
            raise MissingCredentialsError(missing)


# =============================================================================
# Loading
# =============================================================================


def get_config_path(project_dir: Path) -> Path:
    """Return the config file location for a project directory."""
    return project_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def apply_env_overrides(
    config: CloudhooksConfig, environ: Mapping[str, str] | None = None
) -> CloudhooksConfig:
    """Return a copy of ``config`` with CLOUDHOOKS_* environment values applied.

    Raises:
        ConfigError: If an override does not validate (e.g. a non-numeric timeout).
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {
        key: environ[var] for var, key in ENV_OVERRIDES.items() if environ.get(var)
    }
    if not overrides:
        return config

    data = config.api.model_dump()
    data.update(overrides)
    try:
        api = APIConfig(**data)
    except ValidationError as e:
        raise ConfigError("Invalid environment override", str(e)) from e
    logger.debug("Applied environment overrides: %s", ", ".join(sorted(overrides)))
    return config.model_copy(update={"api": api})


def load_config(
    project_dir: Path | None = None, environ: Mapping[str, str] | None = None
) -> CloudhooksConfig:
    """Load configuration for a project directory.

    A missing config file yields the defaults. Environment variables are
    applied on top of whatever the file contains.

    Raises:
        ConfigError: If the file exists but is not valid JSON or not a valid config.
    """
    path = get_config_path(project_dir or Path.cwd())
    config = CloudhooksConfig()

    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Config file {path} contains invalid JSON",
                f"JSON parse error at line {e.lineno}, column {e.colno}: {e.msg}",
            ) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}", str(e)) from e

        try:
            config = CloudhooksConfig(**data)
        except (TypeError, ValidationError) as e:
            raise ConfigError(f"Config file {path} has invalid structure", str(e)) from e
        logger.debug("Loaded config from %s", path)
    else:
        logger.debug("No config file at %s, using defaults", path)

    return apply_env_overrides(config, environ)


def generate_default_config_json(
    application_id: str | None = None, server_url: str | None = None, indent: int = 2
) -> str:
    """Generate a configuration file body for a new project.

    Args:
        application_id: Application id to record, if known.
        server_url: Server URL to record; the default is used when None.
        indent: Number of spaces for JSON indentation.

    Returns:
        JSON string representation of the configuration.
    """
    api = APIConfig(application_id=application_id)
    if server_url:
        api.server_url = server_url
    return CloudhooksConfig(api=api).model_dump_json(indent=indent)
