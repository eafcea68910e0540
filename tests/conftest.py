from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from vault_api.api.deps import get_metadata_service
from vault_api.config import Settings
from vault_api.main import app
from vault_api.services.metadata import MetadataService

PAGE_URL = "https://example.com/articles/post"

FULL_PAGE = """<!doctype html>
<html>
<head>
  <title>
    Example Post
  </title>
  <meta name="description" content="  A post about things.  ">
  <meta property="og:description" content="Open Graph description">
  <meta property="og:image" content="/img.png">
  <meta property="twitter:image" content="https://cdn.example.com/twitter.png">
  <link rel="shortcut icon" href="//cdn.example.com/icon.png">
  <link rel="apple-touch-icon" href="/apple.png">
</head>
<body><p>Hello</p></body>
</html>
"""


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(fetch_timeout=2.0)


@pytest.fixture()
def html_handler() -> Callable[..., RecordingHandler]:
    def factory(body: str = FULL_PAGE, status_code: int = 200) -> RecordingHandler:
        return RecordingHandler(
            lambda request: httpx.Response(
                status_code, text=body, headers={"Content-Type": "text/html"}
            )
        )

    return factory


@pytest.fixture()
def make_service(test_settings: Settings) -> Callable[[RecordingHandler], MetadataService]:
    def factory(handler: RecordingHandler) -> MetadataService:
        return MetadataService(test_settings, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture()
def api_client() -> Iterator[Callable[[MetadataService], TestClient]]:
    def factory(service: MetadataService) -> TestClient:
        app.dependency_overrides[get_metadata_service] = lambda: service
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()


@pytest.fixture()
def full_page() -> str:
    return FULL_PAGE
