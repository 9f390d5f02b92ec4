"""Shared fixtures: the app served in-process with GitHub replaced by canned responses."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from projectinfo.main import app
from projectinfo.services.github_client import GitHubClient
from projectinfo.services.projectinfo_service import ProjectInfoService

GOLANG_LANGUAGES = {"Go": 98765432, "Assembly": 2345678, "HTML": 123456, "Shell": 45678}
GOLANG_CONTRIBUTORS = [
    {"login": "rsc", "id": 104030, "type": "User", "contributions": 9871},
    {"login": "griesemer", "id": 8566911, "type": "User", "contributions": 5120},
    {"login": "ianlancetaylor", "id": 3330211, "type": "User", "contributions": 4980},
]
NOT_FOUND_BODY = {"message": "Not Found", "documentation_url": "https://docs.github.com/rest", "status": "404"}


class FakeGitHub:
    """Routes /repos/{owner}/{repo}/{languages,contributors} to canned responses and records calls."""

    def __init__(self) -> None:
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.calls: List[str] = []
        self.raw_paths: List[bytes] = []

    def json(self, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, content=json.dumps(payload).encode())

    def raw(self, path: str, body: bytes, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, content=body)

    def unreachable(self, path: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        self.routes[path] = _raise

    def malformed_url(self, path: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.path)
        self.raw_paths.append(request.url.raw_path)
        route: Optional[Callable[[httpx.Request], httpx.Response]] = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json=NOT_FOUND_BODY)
        return route(request)


@pytest.fixture
def github() -> FakeGitHub:
    fake = FakeGitHub()
    fake.json("/repos/golang/go/languages", GOLANG_LANGUAGES)
    fake.json("/repos/golang/go/contributors", GOLANG_CONTRIBUTORS)
    return fake


@pytest_asyncio.fixture
async def github_client(github: FakeGitHub):
    client = GitHubClient(transport=httpx.MockTransport(github.handler))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def client(github_client: GitHubClient):
    """ASGI client for the app, wired to the fake GitHub."""
    app.state.svc = ProjectInfoService(github=github_client)
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
