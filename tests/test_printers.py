"""
Tests for httpexpect.printers.
"""

import logging

from multidict import CIMultiDict

from httpexpect import CompactPrinter, CurlPrinter, DebugPrinter, HTTPRequest, HTTPResponse, TransportError
from httpexpect.printers import to_curl

LOGGER = "tests.printers"


def make_request():
    return HTTPRequest(
        method="POST",
        url="http://example.com/users",
        headers=CIMultiDict({"Content-Type": "application/json"}),
        params=[("page", "2")],
        body=b'{"name": "john"}',
    )


class TestPrinters:
    """Tests for the stock printers."""

    def test_compact(self, caplog):
        printer = CompactPrinter(logging.getLogger(LOGGER))
        with caplog.at_level(logging.INFO, logger=LOGGER):
            printer.request(make_request())
            printer.response(HTTPResponse(status=200), 1.0)
        assert caplog.messages == ["POST http://example.com/users?page=2"]

    def test_debug(self, caplog):
        printer = DebugPrinter(logging.getLogger(LOGGER))
        response = HTTPResponse(
            status=201,
            reason="Created",
            headers=CIMultiDict({"Location": "/users/1"}),
            body=b"{}",
        )
        with caplog.at_level(logging.INFO, logger=LOGGER):
            printer.request(make_request())
            printer.response(response, 3.0)
        assert '{"name": "john"}' in caplog.messages[0]
        assert "HTTP/1.1 201 Created" in caplog.messages[1]
        assert "Location: /users/1" in caplog.messages[1]

    def test_debug_without_body(self, caplog):
        printer = DebugPrinter(logging.getLogger(LOGGER), body=False)
        with caplog.at_level(logging.INFO, logger=LOGGER):
            printer.request(make_request())
        assert "john" not in caplog.text

    def test_debug_error(self, caplog):
        printer = DebugPrinter(logging.getLogger(LOGGER))
        response = HTTPResponse.from_error(TransportError.connection_error("refused"))
        with caplog.at_level(logging.INFO, logger=LOGGER):
            printer.response(response, 5.0)
        assert "refused" in caplog.text

    def test_curl(self, caplog):
        printer = CurlPrinter(logging.getLogger(LOGGER))
        with caplog.at_level(logging.INFO, logger=LOGGER):
            printer.request(make_request())
        assert caplog.messages == [to_curl(make_request())]

    def test_to_curl(self):
        command = to_curl(make_request())
        assert command.startswith("curl -X POST")
        assert "-H 'Content-Type: application/json'" in command
        assert "-d '{\"name\": \"john\"}'" in command
        assert command.endswith("'http://example.com/users?page=2'")
