"""HTTP route tests — static params listing and on-demand rendering."""

import logging

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import router
from src.api.service import RENDER_FAILED_DETAIL
from src.pages import PageRenderer

from conftest import BASE_URL, StubPostServer


def _make_app(renderer: PageRenderer) -> FastAPI:
    app = FastAPI()
    app.state.renderer = renderer
    app.include_router(router)
    return app


@pytest.fixture
def client(renderer: PageRenderer) -> TestClient:
    return TestClient(_make_app(renderer))


class TestStaticParams:
    def test_lists_static_ids(self, client: TestClient) -> None:
        resp = client.get("/ssg")
        assert resp.status_code == 200
        assert resp.json() == {"params": [{"id": "1"}, {"id": "2"}, {"id": "3"}, {"id": "4"}]}


class TestPageRoute:
    def test_renders_static_page(self, client: TestClient) -> None:
        resp = client.get("/ssg/2")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert '<h1 class="text-2xl font-medium text-gray-200">Hello</h1>' in resp.text
        assert '<p class="font-medium text-gray-500">World</p>' in resp.text

    def test_renders_id_outside_static_set(self, post_server: StubPostServer) -> None:
        post_server.posts["42"] = {"title": "Answer", "body": "Everything"}
        client = TestClient(
            _make_app(PageRenderer(base_url=BASE_URL, transport=post_server.transport()))
        )

        resp = client.get("/ssg/42")

        assert resp.status_code == 200
        assert ">Answer</h1>" in resp.text

    def test_upstream_404_maps_to_502(self, client: TestClient) -> None:
        resp = client.get("/ssg/999")
        assert resp.status_code == 502
        assert resp.json() == {"detail": RENDER_FAILED_DETAIL}

    def test_failure_logged_once_with_traceback(self, client: TestClient, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            client.get("/ssg/999")

        with_traceback = [r for r in caplog.records if r.exc_info]
        assert len(with_traceback) == 1
        assert with_traceback[0].identifier == "999"
        assert with_traceback[0].failure_kind == "status"

    def test_malformed_json_maps_to_502(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"not json")

        client = TestClient(
            _make_app(PageRenderer(base_url=BASE_URL, transport=httpx.MockTransport(handler)))
        )

        resp = client.get("/ssg/1")

        assert resp.status_code == 502
        assert "not json" not in resp.text

    def test_missing_fields_still_render(self) -> None:
        server = StubPostServer({"7": {"id": 7}})
        client = TestClient(_make_app(PageRenderer(base_url=BASE_URL, transport=server.transport())))

        resp = client.get("/ssg/7")

        assert resp.status_code == 200
        assert '<h1 class="text-2xl font-medium text-gray-200"></h1>' in resp.text
