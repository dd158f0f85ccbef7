"""Fixtures — stub post server backed by httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from src.pages import PageRenderer

BASE_URL = "https://posts.test/posts"

POSTS = {
    "1": {"userId": 1, "id": 1, "title": "First", "body": "First body"},
    "2": {"userId": 1, "id": 2, "title": "Hello", "body": "World"},
    "3": {"userId": 1, "id": 3, "title": "Third", "body": "Third body"},
    "4": {"userId": 1, "id": 4, "title": "Fourth", "body": "Fourth body"},
}


class StubPostServer:
    """Serves ``POSTS`` under ``/posts/<id>`` and records every request."""

    def __init__(self, posts: dict[str, object] | None = None) -> None:
        self.posts = dict(POSTS if posts is None else posts)
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        identifier = request.url.path.removeprefix("/posts/")
        if identifier not in self.posts:
            return httpx.Response(404, json={})
        return httpx.Response(200, content=json.dumps(self.posts[identifier]))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def post_server() -> StubPostServer:
    return StubPostServer()


@pytest.fixture
def renderer(post_server: StubPostServer) -> PageRenderer:
    return PageRenderer(base_url=BASE_URL, transport=post_server.transport())
