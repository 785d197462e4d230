"""Pytest configuration.

Ensures the local package can be imported without installing it and provides
shared fixtures: a sandbox configuration, an authorized QuickBooks connection,
a fake HTTP transport and the JSON payload fixtures.
"""

import json
import sys
import time
from pathlib import Path
from types import SimpleNamespace

import pytest


def _prepend_sys_path(path: Path) -> None:
    resolved = str(path.resolve())
    if resolved not in sys.path:
        sys.path.insert(0, resolved)


REPO_ROOT = Path(__file__).resolve().parent

# Allow importing `accounting_integration` straight from the src/ tree.
_prepend_sys_path(REPO_ROOT / "src")

FIXTURES_DIR = REPO_ROOT / "src" / "tests" / "fixtures"

from accounting_integration.accounting.quickbooks.connection import (  # noqa: E402
    QuickBooksConnection,
    TokenPair,
)
from accounting_integration.config import Configuration, reset_configuration  # noqa: E402


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._payload is not None:
            return self._payload
        return json.loads(self.text)


class FakeHTTP:
    """Stands in for `requests.request`; replays queued responses in order."""

    def __init__(self) -> None:
        self.calls: list[SimpleNamespace] = []
        self._responses: list[FakeResponse] = []

    def queue(self, status_code: int = 200, payload=None, text: str | None = None) -> None:
        self._responses.append(FakeResponse(status_code, payload, text))

    def __call__(self, method, url, headers=None, params=None, data=None, timeout=None):
        self.calls.append(
            SimpleNamespace(
                method=method,
                url=url,
                headers=headers,
                params=params,
                data=data,
                timeout=timeout,
            )
        )
        if not self._responses:
            return FakeResponse(200, {})
        return self._responses.pop(0)


@pytest.fixture(autouse=True)
def _isolated_configuration(monkeypatch):
    for name in (
        "QUICKBOOKS_CLIENT_ID",
        "QUICKBOOKS_CLIENT_SECRET",
        "QUICKBOOKS_SANDBOX_MODE",
        "QUICKBOOKS_REDIRECT_URI",
        "QUICKBOOKS_MINORVERSION",
        "QUICKBOOKS_HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the tests.
    monkeypatch.setattr("accounting_integration.config.load_dotenv", lambda *a, **k: False)
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def load_quickbooks_fixture():
    def _load(name: str) -> str:
        return (FIXTURES_DIR / "quickbooks" / f"{name}.json").read_text(encoding="utf-8")

    return _load


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        client_id="cid",
        client_secret="secret",
        sandbox_mode=True,
        redirect_uri="http://localhost/callback",
    )


@pytest.fixture
def fresh_tokens() -> TokenPair:
    return TokenPair(access_token="ok", refresh_token="refresh", expires_at=time.time() + 3600)


@pytest.fixture
def connection(config, fresh_tokens) -> QuickBooksConnection:
    return QuickBooksConnection(config=config, tokens=fresh_tokens, realm_id="123456789")


@pytest.fixture
def fake_http(monkeypatch) -> FakeHTTP:
    http = FakeHTTP()
    monkeypatch.setattr("requests.request", http)
    return http
