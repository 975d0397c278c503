"""Shared fixtures for the Encar client tests.

HTTP traffic is served by ``httpx.MockTransport``; every request the client
sends is appended to the ``requests`` list of the ``api`` fixture.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest

from encar.client import CarapisClient
from encar.config import Settings

FIXTURES = Path(__file__).parent / "fixtures"
SCHEMA_PATH = FIXTURES / "schema.yaml"

TEST_BASE_URL = "https://api.encar.test"
TEST_API_KEY = "test-api-key"

Handler = Callable[[httpx.Request], httpx.Response]


class MockApi:
    """Records requests and answers them with a configurable handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(200, json={"ok": True})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(encar_api_url=TEST_BASE_URL + "/", carapis_api_key="")


@pytest.fixture
def api() -> MockApi:
    return MockApi()


@pytest.fixture
def make_client(settings: Settings, api: MockApi) -> Callable[..., CarapisClient]:
    def _make(schema_path: Optional[Path] = SCHEMA_PATH) -> CarapisClient:
        return CarapisClient(
            TEST_API_KEY,
            settings=settings,
            schema_path=schema_path,
            transport=httpx.MockTransport(api),
        )

    return _make


@pytest.fixture
def client(make_client) -> CarapisClient:
    return make_client()
