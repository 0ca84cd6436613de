"""
Shared test fixtures.
"""

import pytest
import pytest_asyncio
from aiohttp import web
from multidict import CIMultiDict

from httpexpect import AppTransport, AssertReporter, Config, Expect
from httpexpect.transport import BaseTransport, HTTPRequest, HTTPResponse


class MockTransport(BaseTransport):
    """Records sent requests and echoes the request body back as JSON."""

    def __init__(self, response: HTTPResponse | None = None):
        self.response = response
        self.requests: list[HTTPRequest] = []
        self.connected = False

    @property
    def is_connected(self) -> bool:
        return self.connected

    async def connect(self) -> None:
        self.connected = True

    async def disconnect(self) -> None:
        self.connected = False

    async def send(self, request: HTTPRequest, timeout_ms: int = 30000) -> HTTPResponse:
        self.requests.append(request)
        if self.response is not None:
            return self.response
        return HTTPResponse(
            status=200,
            reason="OK",
            headers=CIMultiDict({"Content-Type": "application/json"}),
            body=request.body or b"",
        )


class RecordingReporter(AssertReporter):
    """AssertReporter that also exposes the raw messages."""

    @property
    def messages(self) -> list[str]:
        return [f.message for f in self.failures]


def create_app() -> web.Application:
    """Application used by the live round-trip tests."""

    async def foo(request: web.Request) -> web.Response:
        return web.json_response({"foo": 123})

    async def get_bar(request: web.Request) -> web.Response:
        return web.Response(body=b"[true, false]", content_type="application/json")

    async def put_bar(request: web.Request) -> web.Response:
        return web.Response(status=204)

    async def echo(request: web.Request) -> web.Response:
        body = await request.read()
        return web.Response(body=body, content_type="application/json")

    async def inspect(request: web.Request) -> web.Response:
        return web.json_response({
            "method": request.method,
            "path": request.path,
            "query": {k: request.query.getall(k) for k in request.query.keys()},
            "headers": dict(request.headers),
            "body": (await request.read()).decode("utf-8"),
        })

    async def hello(request: web.Request) -> web.Response:
        return web.Response(text="hello, world!")

    app = web.Application()
    app.router.add_get("/foo", foo)
    app.router.add_get("/bar", get_bar)
    app.router.add_put("/bar", put_bar)
    app.router.add_route("*", "/echo", echo)
    app.router.add_route("*", "/inspect/{tail:.*}", inspect)
    app.router.add_get("/hello", hello)
    return app


@pytest.fixture
def reporter():
    """Fresh reporter recording every failure."""
    return RecordingReporter()


@pytest.fixture
def mock_transport():
    return MockTransport()


@pytest.fixture
def mock_expect(reporter, mock_transport):
    """Expect over a transport that echoes request bodies."""
    return Expect(Config(
        reporter=reporter,
        base_url="http://example.com",
        transport=mock_transport,
    ))


@pytest_asyncio.fixture
async def live_expect(reporter):
    """Expect serving create_app() in-process."""
    transport = AppTransport(create_app())
    async with Expect(Config(reporter=reporter, transport=transport)) as e:
        yield e
