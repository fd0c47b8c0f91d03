# conftest.py
import httpx
import pytest
from fake_service import MASTER_API_KEY, RecordingHandler, create_fake_app
from fastapi import FastAPI
from fastapi.testclient import TestClient

from orama_core.config import get_settings
from orama_core.services.client import Client
from orama_core.services.manager import Manager

BASE_URL = "http://testserver"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def mock_http_client(handler: RecordingHandler):
    """httpx client whose requests never leave the process."""
    client = httpx.Client(transport=httpx.MockTransport(handler))
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def fixed_keys():
    """Deterministic key generator yielding key-1, key-2, ..."""
    issued: list[int] = []

    def generate(length: int) -> str:
        issued.append(length)
        return f"key-{len(issued)}".ljust(length, "x")

    generate.issued = issued  # type: ignore[attr-defined]
    return generate


@pytest.fixture
def stub_manager(mock_http_client: httpx.Client) -> Manager:
    return Manager(BASE_URL, MASTER_API_KEY, http_client=mock_http_client)


@pytest.fixture
def stub_client(mock_http_client: httpx.Client) -> Client:
    return Client(BASE_URL, write_api_key="write_api_key", http_client=mock_http_client)


@pytest.fixture
def fake_app() -> FastAPI:
    return create_fake_app()


@pytest.fixture
def service_client(fake_app: FastAPI):
    """TestClient (an httpx.Client) bound to the fake service."""
    with TestClient(fake_app) as client:
        yield client


@pytest.fixture
def manager(service_client: TestClient) -> Manager:
    return Manager(BASE_URL, MASTER_API_KEY, http_client=service_client)
