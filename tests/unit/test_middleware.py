"""
Unit tests for the middleware pipeline and the baked-asset adapter.
"""

import pytest

from bakedassets import MemoryAssetStore, serve_baked
from bakedassets.http import HTTPRequest, HTTPResponse, HTTPStatus, not_found
from bakedassets.middleware import BakedAssetMiddleware, Middleware, MiddlewarePipeline


def make_request(path: str, method: str = "GET", **headers) -> HTTPRequest:
    return HTTPRequest(method=method, path=path, headers=headers)


class RecordingTerminal:
    """Final handler that answers 404 and remembers what reached it."""

    def __init__(self):
        self.requests = []

    def __call__(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        return not_found()


class TagMiddleware(Middleware):
    """Adds a header on the way out so ordering can be observed."""

    def __init__(self, tag: str):
        self.tag = tag

    def __call__(self, request, next):
        response = next(request)
        order = response.headers.get("X-Order", "")
        response.set_header("X-Order", f"{order}{self.tag}")
        return response


@pytest.fixture
def terminal():
    return RecordingTerminal()


class TestMiddlewarePipeline:

    def test_empty_pipeline_is_the_handler(self, terminal):
        app = MiddlewarePipeline().wrap(terminal)

        assert app(make_request("/x")).status == HTTPStatus.NOT_FOUND
        assert len(terminal.requests) == 1

    def test_first_added_is_outermost(self, terminal):
        pipeline = MiddlewarePipeline().use(TagMiddleware("a"), TagMiddleware("b"))
        response = pipeline.wrap(terminal)(make_request("/"))

        # Innermost middleware appends first on the way out
        assert response.headers["X-Order"] == "ba"

    def test_len_and_iter(self):
        first, second = TagMiddleware("a"), TagMiddleware("b")
        pipeline = MiddlewarePipeline().add(first).add(second)

        assert len(pipeline) == 2
        assert list(pipeline) == [first, second]


class TestBakedAssetMiddleware:

    def test_served_short_circuits(self, handler, terminal):
        app = MiddlewarePipeline().add(BakedAssetMiddleware(handler)).wrap(terminal)
        response = app(make_request("/style.css"))

        assert response.status == HTTPStatus.OK
        assert response.body == b"body { color: red; }"
        assert terminal.requests == []

    def test_declined_calls_next(self, handler, terminal):
        app = MiddlewarePipeline().add(handler.middleware()).wrap(terminal)
        request = make_request("/missing.css")
        response = app(request)

        assert response.status == HTTPStatus.NOT_FOUND
        assert terminal.requests == [request]

    def test_405_is_served_not_passed_on(self, store, terminal):
        handler = serve_baked(store, fallthrough_on_miss=False)
        app = MiddlewarePipeline().add(handler.middleware()).wrap(terminal)

        response = app(make_request("/style.css", method="POST"))

        assert response.status == HTTPStatus.METHOD_NOT_ALLOWED
        assert terminal.requests == []

    def test_chained_mounts(self, terminal):
        assets = serve_baked(MemoryAssetStore({"app.css": b"assets"}), mount_path="/assets")
        spa = serve_baked(MemoryAssetStore({"index.html": b"<h1>SPA</h1>", "app.css": b"root"}))
        app = MiddlewarePipeline().use(assets.middleware(), spa.middleware()).wrap(terminal)

        assert app(make_request("/assets/app.css")).body == b"assets"
        assert app(make_request("/app.css")).body == b"root"
        assert app(make_request("/")).body == b"<h1>SPA</h1>"
        assert app(make_request("/assets/other.css")).status == HTTPStatus.NOT_FOUND
        assert len(terminal.requests) == 1

    def test_handler_middleware_wraps_same_handler(self, handler):
        middleware = handler.middleware()

        assert isinstance(middleware, BakedAssetMiddleware)
        assert middleware.handler is handler

    def test_name_includes_mount(self, store):
        middleware = serve_baked(store, mount_path="/static").middleware()
        assert middleware.name == "BakedAssetMiddleware(/static/)"
