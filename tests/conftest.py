"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from advisor_portal.config import Settings
from advisor_portal.main import create_app
from advisor_portal.seed import DEMO_ADVISOR_PASSWORD, DEMO_ADVISOR_USERNAME, seed_demo_data
from advisor_portal.store import EntityStore


REMOTE_URL = "https://remote.test"
REMOTE_ADVISOR = {"id": 7, "name": "Remote Advisor", "email": "advisor@example.com"}


# ============================================================================
# Mock Remote Backend
# ============================================================================

class MockRemote:
    """Stand-in for the MyAdvisor backend that records every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Any] = {}

    def on(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ) -> None:
        self.routes[(method, path)] = handler or (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(route):
            return route(request)
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def last(self, method: str, path: str) -> httpx.Request:
        for request in reversed(self.requests):
            if request.method == method and request.url.path == path:
                return request
        raise AssertionError(f"No {method} {path} reached the remote backend")

    def calls(self, method: str, path: str) -> int:
        return sum(
            1 for request in self.requests
            if request.method == method and request.url.path == path
        )

    @staticmethod
    def json_of(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def remote():
    """Mock remote backend with a working login."""
    mock = MockRemote()
    mock.on(
        "POST",
        "/login",
        json={
            "access_token": "remote-access",
            "token_type": "bearer",
            "refresh_token": "remote-refresh",
            "advisor": REMOTE_ADVISOR,
        },
    )
    mock.on("POST", "/logout", json={"message": "Logged out"})
    return mock


# ============================================================================
# Application
# ============================================================================

@pytest.fixture
def settings():
    return Settings(
        REMOTE_API_URL=REMOTE_URL,
        SEED_DEMO_DATA=False,
        SESSION_COOKIE_SECURE=False,
    )


@pytest.fixture
def store():
    """Empty entity store."""
    return EntityStore()


@pytest.fixture
def seeded_store():
    """Entity store holding the demo data."""
    store = EntityStore()
    seed_demo_data(store)
    return store


@pytest.fixture
def app(settings, seeded_store, remote):
    return create_app(
        settings=settings,
        store=seeded_store,
        remote_transport=httpx.MockTransport(remote.handler),
    )


@pytest.fixture
async def client(app):
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
async def auth_client(client):
    """Client logged in locally as the demo advisor."""
    response = await client.post(
        "/api/auth/login",
        json={"username": DEMO_ADVISOR_USERNAME, "password": DEMO_ADVISOR_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
async def proxy_client(client):
    """Client logged in through the remote backend."""
    response = await client.post(
        "/api/proxy/login",
        json={"email": "advisor@example.com", "password": "secret"},
    )
    assert response.status_code == 200
    return client
