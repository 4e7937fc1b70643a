"""Pytest fixtures: RBS clients backed by httpx.MockTransport."""

import json

import httpx
import pytest

from rbs_client import RBSConfig, create_rbs_client

SERVICE_URL = "https://rbs.test/server"
RBS_ENV_VARS = (
    "RBS_API_KEY", "RBS_MERCHANT_ID", "RBS_SERVICE_URL", "RBS_ENABLE_LOGS", "RBS_TEST_ENV",
    "RBS_ENDPOINT", "RBS_PRODUCTION_URL", "RBS_TEST_URL", "RBS_TIMEOUT",
)


class RecordingBackend:
    """Fake RBS backend: records requests and answers with a queued response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"success": True, "data": True}

    def respond(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """RBSConfig 不读取开发者本地的 RBS_* 环境变量和 .env."""
    for name in RBS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def make_client(backend):
    def _make(**config):
        config.setdefault("endpoint", "server")
        config.setdefault("service_url", SERVICE_URL)
        return create_rbs_client(
            RBSConfig(**config),
            transport=httpx.MockTransport(backend.handler),
        )

    return _make


@pytest.fixture
def client(make_client):
    return make_client(merchant_id="m-1")
