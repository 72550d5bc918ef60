"""HTTP access to the backend.

Usage:
    from cloudhooks.api import APIClient

    with APIClient.from_config(config.api) as client:
        client.get("/1/hooks/functions")
"""

from cloudhooks.api.client import APIClient

__all__ = ["APIClient"]
