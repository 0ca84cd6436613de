"""
Tests for httpexpect.transport.
"""

import pytest
from multidict import CIMultiDict

from httpexpect import HTTPRequest, HTTPTransport, TransportError, TransportErrorCode, create_transport
from httpexpect.config import AuthConfig, AuthType, validate_settings_yaml


class TestHTTPTransportHeaders:
    """Tests for auth header handling."""

    @pytest.mark.parametrize("auth, name, value", [
        (AuthConfig(type=AuthType.BEARER, token="t0k"), "Authorization", "Bearer t0k"),
        (AuthConfig(type=AuthType.API_KEY, key="k", header="X-Key"), "X-Key", "k"),
        (AuthConfig(type=AuthType.BASIC, username="u", password="p"), "Authorization", "Basic dTpw"),
    ])
    def test_auth_headers(self, auth, name, value):
        transport = HTTPTransport(auth_config=auth)
        headers = transport._build_headers(HTTPRequest("GET", "http://example.com/"))
        assert headers[name] == value

    def test_request_headers_win(self):
        transport = HTTPTransport(auth_config=AuthConfig(type=AuthType.BEARER, token="t0k"))
        request = HTTPRequest(
            "GET", "http://example.com/",
            headers=CIMultiDict({"authorization": "Bearer other"}),
        )
        headers = transport._build_headers(request)
        assert headers.getall("Authorization") == ["Bearer other"]


class TestTransportError:
    """Tests for TransportError factories."""

    def test_codes(self):
        assert TransportError.connection_error("x").code == TransportErrorCode.CONNECTION_ERROR
        assert TransportError.timeout_error("x").code == TransportErrorCode.TIMEOUT_ERROR
        assert TransportError.internal_error("x").code == TransportErrorCode.INTERNAL_ERROR

    def test_codes_are_distinct_and_positive(self):
        codes = [int(code) for code in TransportErrorCode]
        assert len(set(codes)) == len(codes)
        assert all(code > 0 for code in codes)
        assert {code.name for code in TransportErrorCode} == {
            "CONNECTION_ERROR", "TIMEOUT_ERROR", "INTERNAL_ERROR",
        }

    def test_to_dict(self):
        error = TransportError.timeout_error("timed out", data={"timeout_ms": 10})
        assert error.to_dict() == {"code": 2, "message": "timed out", "data": {"timeout_ms": 10}}


class TestHTTPTransportSend:
    """Tests for error values returned by send()."""

    async def test_not_connected(self):
        response = await HTTPTransport().send(HTTPRequest("GET", "http://example.com/"))
        assert not response.success
        assert response.error.code == TransportErrorCode.CONNECTION_ERROR

    async def test_connection_refused(self):
        async with HTTPTransport() as transport:
            assert transport.is_connected
            response = await transport.send(HTTPRequest("GET", "http://127.0.0.1:1/"), timeout_ms=2000)
        assert not transport.is_connected
        assert not response.success
        assert response.to_dict()["success"] is False


class TestAppTransport:
    async def test_serves_app(self, live_expect):
        transport = live_expect.config.transport
        assert transport.is_connected
        response = await transport.send(HTTPRequest("GET", "http://ignored.example/foo"))
        assert response.status == 200
        assert response.content_type.startswith("application/json")


class TestCreateTransport:
    def test_uses_server_auth(self):
        settings, _ = validate_settings_yaml("""
version: 1
name: demo
server:
  url: "http://localhost"
  auth: {type: bearer, token: abc}
""")
        transport = create_transport(settings)
        assert isinstance(transport, HTTPTransport)
        headers = transport._build_headers(HTTPRequest("GET", "http://localhost/"))
        assert headers["Authorization"] == "Bearer abc"
