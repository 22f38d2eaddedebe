"""Shared fixtures: a scripted upstream API behind ``httpx.MockTransport``."""

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from frontend.app.main import app
from frontend.app.services.blog_api import BlogApiClient, get_api_client

UPSTREAM_BASE_URL = "http://upstream.test"

Responder = Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """Records every request and answers from a ``(method, path)`` table.

    Unregistered routes answer 404 with an error envelope.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Responder] = {}

    def on(
        self,
        method: str,
        path: str,
        *,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        exc: type[httpx.TransportError] | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc("simulated transport failure", request=request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        self._routes[(method.upper(), path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self._routes.get((request.method, request.url.path))
        if respond is None:
            return httpx.Response(404, json={"error": {"message": "Not found"}})
        return respond(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def api_client(self) -> BlogApiClient:
        return BlogApiClient(UPSTREAM_BASE_URL, transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def client(upstream: FakeUpstream) -> Iterator[TestClient]:
    def _override() -> Iterator[BlogApiClient]:
        api = upstream.api_client()
        try:
            yield api
        finally:
            api.close()

    app.dependency_overrides[get_api_client] = _override
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()
