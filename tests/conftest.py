"""
Shared test fixtures.

Provides an in-memory stand-in for the remote API built on
``httpx.MockTransport``, so no test touches the network.
"""

import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from post_client.api.client import APIClient


BASE_URL = "https://api.test"

USER_1 = {"id": 1, "name": "Leanne Graham", "username": "Bret"}
CREATED_POST = {"userId": 1, "id": 101, "title": "Hello!", "body": "World! World!"}


class FakeService:
    """
    Routes requests by (method, path) to canned responses.

    A route is either a ``(status_code, kwargs)`` pair used to build a
    fresh ``httpx.Response``, or an exception instance to raise.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status_code=200, **kwargs):
        self.routes[(method, path)] = (status_code, kwargs)

    def fail(self, method, path, error):
        self.routes[(method, path)] = error

    def paths(self):
        return [(r.method, r.url.path) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))

        if route is None:
            return httpx.Response(404, json={})
        if isinstance(route, Exception):
            raise route

        status_code, kwargs = route
        return httpx.Response(status_code, **kwargs)


@pytest.fixture
def service():
    """Create a FakeService with user 1 and a working POST /posts."""
    fake = FakeService()
    fake.add("GET", "/users/1", json=USER_1)
    fake.add("POST", "/posts", 201, json=CREATED_POST)
    return fake


@pytest.fixture
def client(service):
    """Create an APIClient wired to the fake service."""
    return APIClient(
        base_url=BASE_URL,
        transport=httpx.MockTransport(service.handler)
    )
