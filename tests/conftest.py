"""Shared fixtures for cloudhooks tests."""

import json
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from cloudhooks.api.client import APIClient
from cloudhooks.hooks.models import FunctionHook

# =============================================================================
# Filesystem and CLI Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def cli_runner():
    """Provide a typer CLI runner."""
    return CliRunner()


@pytest.fixture
def credentials_env(monkeypatch):
    """Set application credentials through the environment."""
    monkeypatch.setenv("CLOUDHOOKS_APPLICATION_ID", "test-app-id")
    monkeypatch.setenv("CLOUDHOOKS_MASTER_KEY", "test-master-key")
    monkeypatch.delenv("CLOUDHOOKS_SERVER_URL", raising=False)
    monkeypatch.delenv("CLOUDHOOKS_REST_KEY", raising=False)
    monkeypatch.delenv("CLOUDHOOKS_TIMEOUT", raising=False)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every CLOUDHOOKS_* variable from the environment."""
    for var in (
        "CLOUDHOOKS_SERVER_URL",
        "CLOUDHOOKS_APPLICATION_ID",
        "CLOUDHOOKS_MASTER_KEY",
        "CLOUDHOOKS_REST_KEY",
        "CLOUDHOOKS_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


# =============================================================================
# HTTP Fixtures
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests if request.content]


@pytest.fixture
def make_client():
    """Build an APIClient whose requests are answered by ``handler``.

    Returns a factory ``(handler) -> (client, transport)``.
    """
    clients: list[APIClient] = []

    def factory(handler):
        transport = RecordingTransport(handler)
        client = APIClient(
            httpx.Client(
                base_url="https://api.example.com",
                headers={"X-Parse-Application-Id": "test-app-id"},
                transport=transport,
            )
        )
        clients.append(client)
        return client, transport

    yield factory
    for client in clients:
        client.close()


# =============================================================================
# Fake Store
# =============================================================================


class FakeHookStore:
    """In-memory FunctionHookStore that counts calls."""

    def __init__(
        self,
        results: list[FunctionHook] | None = None,
        response: FunctionHook | None = None,
    ):
        self.results = results or []
        self.response = response or FunctionHook()
        self.calls: list[tuple[str, object]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def create(self, hook: FunctionHook) -> FunctionHook:
        self.calls.append(("create", hook))
        return self.response

    def list_all(self) -> list[FunctionHook]:
        self.calls.append(("list_all", None))
        return list(self.results)

    def get(self, name: str) -> list[FunctionHook]:
        self.calls.append(("get", name))
        return list(self.results)

    def update(self, hook: FunctionHook) -> FunctionHook:
        self.calls.append(("update", hook))
        return self.response

    def delete(self, name: str) -> FunctionHook:
        self.calls.append(("delete", name))
        return self.response


@pytest.fixture
def fake_store():
    """Provide an empty fake hook store."""
    return FakeHookStore()


@pytest.fixture
def make_store():
    """Build a fake hook store: ``make_store(results=..., response=...)``."""
    return FakeHookStore
