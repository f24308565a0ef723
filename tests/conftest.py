"""Pytest configuration and fixtures for the hunters gateway tests."""

from contextlib import contextmanager
from typing import Callable, Generator, Iterator

import anyio
import httpx
import pytest

from adapters.http_client import build_async_client
from adapters.hunter_services import build_hunter_services
from core.config import AppSettings
from core.services.hunters_gateway import HuntersGateway

MONGO_HOST = "mongo.test"
PG_HOST = "pg.test"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackends:
    """Stand-in for both upstream services, routed by host.

    Every request is recorded so tests can assert how many calls reached
    each backend.
    """

    def __init__(self) -> None:
        self.calls: list[httpx.Request] = []
        self._handlers: dict[str, Handler] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self._handlers.get(request.url.host)
        if handler is None:
            return httpx.Response(500, json={"error": "no handler"})
        return handler(request)

    def on(self, host: str, handler: Handler) -> None:
        self._handlers[host] = handler

    def reply(self, host: str, payload=None, *, status: int = 200) -> None:
        self.on(host, lambda request: httpx.Response(status, json=payload))

    def timeout(self, host: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        self.on(host, handler)

    def down(self, host: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.on(host, handler)

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [call for call in self.calls if call.url.host == host]


@contextmanager
def open_fake_client(settings: AppSettings, handler: Handler) -> Iterator[httpx.AsyncClient]:
    """Client over `httpx.MockTransport`; closed on exit like the app lifespan does."""
    client = build_async_client(settings, transport=httpx.MockTransport(handler))
    try:
        yield client
    finally:
        anyio.run(client.aclose)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio for async tests."""
    return "asyncio"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        mongo_service_url=f"http://{MONGO_HOST}",
        pg_service_url=f"http://{PG_HOST}",
    )


@pytest.fixture
def fake_backends() -> FakeBackends:
    return FakeBackends()


@pytest.fixture
def gateway_client(settings: AppSettings, fake_backends: FakeBackends) -> Generator:
    """Shared client routed to the fake backends, closed on teardown."""
    with open_fake_client(settings, fake_backends) as client:
        yield client


@pytest.fixture
def gateway(settings: AppSettings, gateway_client: httpx.AsyncClient) -> HuntersGateway:
    return HuntersGateway(
        build_hunter_services(settings, client=gateway_client),
        identity_fields=settings.identity_fields,
    )


@pytest.fixture
def test_client(settings: AppSettings, gateway: HuntersGateway) -> Generator:
    """Create a test client for the FastAPI application."""
    from fastapi.testclient import TestClient

    from api.main import create_app

    with TestClient(create_app(settings, gateway=gateway)) as client:
        yield client
