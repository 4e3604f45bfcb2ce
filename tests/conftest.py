"""Pytest configuration and shared fixtures"""

import logging
import os

import httpx
import pytest

from pbi_refresh.config import Config
from pbi_refresh.models import AccessToken, Credentials, DatasetTarget

TOKEN_URL = "https://login.test/common/oauth2/token"
API_BASE_URL = "https://api.test/v1.0/myorg"

TOKEN_BODY = {
    "token_type": "Bearer",
    "expires_in": "3599",
    "expires_on": "1735689600",
    "resource": "https://analysis.windows.net/powerbi/api",
    "access_token": "abc123",
}


class FakeServer:
    """Routes requests by URL to canned responses and records every request.

    A route value is either an httpx.Response or an exception instance, which
    is raised as if the transport failed.
    """

    def __init__(self, routes: dict):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.routes.get(str(request.url))
        if outcome is None:
            return httpx.Response(404, text=f"no route for {request.url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    def requests_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]


@pytest.fixture
def credentials():
    """Valid password-grant credentials"""
    return Credentials(
        client_id="11111111-2222-3333-4444-555555555555",
        username="reports@example.com",
        password="s3cr3t pass",
    )


@pytest.fixture
def target():
    """Dataset target inside a workspace"""
    return DatasetTarget(group_id="grp-1", dataset_id="ds-1")


@pytest.fixture
def token():
    """Access token as issued by the identity provider"""
    return AccessToken.model_validate(TOKEN_BODY)


@pytest.fixture
def config():
    """Config pointing at fake endpoints"""
    return Config(token_url=TOKEN_URL, api_base_url=API_BASE_URL, log_level="DEBUG")


@pytest.fixture
def refresh_endpoint():
    return f"{API_BASE_URL}/groups/grp-1/datasets/ds-1/refreshes"


@pytest.fixture
def fake_server():
    """Factory for FakeServer instances"""
    return FakeServer


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears PBIREFRESH_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    saved = {
        key: value for key, value in os.environ.items() if key.startswith("PBIREFRESH_")
    }

    for key in saved:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        for key, value in saved.items():
            os.environ[key] = value


@pytest.fixture
def clean_config(clean_env):
    """Config instance built from a clean environment."""
    return Config()


@pytest.fixture
def write_files(tmp_path):
    """Write secrets.toml and dataset.json into tmp_path and return their paths."""

    def _write(secrets: str, dataset: str = '{"dataset_id": "ds-1", "group_id": "grp-1"}'):
        secrets_path = tmp_path / "secrets.toml"
        dataset_path = tmp_path / "dataset.json"
        secrets_path.write_text(secrets, encoding="utf-8")
        dataset_path.write_text(dataset, encoding="utf-8")
        return str(secrets_path), str(dataset_path)

    return _write


VALID_SECRETS = """\
client_id = "11111111-2222-3333-4444-555555555555"
grant_type = "password"
resource = "https://analysis.windows.net/powerbi/api"
username = "reports@example.com"
password = "s3cr3t pass"
"""


@pytest.fixture
def valid_secrets():
    return VALID_SECRETS


@pytest.fixture
def restore_logging():
    """Undo setup_logging's basicConfig(force=True) so pytest's handlers survive"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
