#!/usr/bin/env python3
"""
Tests for the exception-free client variant.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from abuseipdb_client.errors import ConfigError, TransportError
from abuseipdb_client.quiet import QuietAbuseIPDBClient, quiet
from abuseipdb_client.response import ApiResponse
from abuseipdb_client.transport import HttpTransport


class StubTransport(HttpTransport):
    def __init__(self, body='{"data": {}}', error=None):
        self.body = body
        self.error = error
        self.calls = 0

    def request(self, method, url, headers, data=None, csv_path=None):
        self.calls += 1
        if self.error:
            raise self.error
        return self.body


def _detail(response: ApiResponse) -> str:
    return response.errors()[0]['detail']


class TestQuietDecorator:
    """Tests for the quiet() decorator."""

    def test_exception_becomes_error_response(self):
        """A raised exception is returned as an Internal Error response."""
        @quiet
        def failing():
            raise ValueError("bad input")

        response = failing()
        assert response.has_error()
        assert response.errors()[0] == {"title": "Internal Error", "detail": "bad input"}

    def test_result_passed_through(self):
        """A normal result is returned unchanged."""
        expected = ApiResponse('{"data": {}}')

        @quiet
        def ok():
            return expected

        assert ok() is expected

    def test_keeps_name(self):
        """The wrapped function keeps its name."""
        @quiet
        def check():
            return ApiResponse()

        assert check.__name__ == "check"


class TestQuietClient:
    """Tests for QuietAbuseIPDBClient."""

    @pytest.fixture
    def transport(self):
        return StubTransport()

    @pytest.fixture
    def client(self, transport):
        return QuietAbuseIPDBClient("test-key", transport=transport)

    def test_validation_error(self, client, transport):
        """Out of range max age gives an error response, no request."""
        response = client.check("1.2.3.4", max_age_in_days=400)
        assert response.has_error()
        assert "maxAgeInDays" in _detail(response)
        assert transport.calls == 0

    def test_category_error(self, client):
        """Category errors are returned, not raised."""
        response = client.report("1.2.3.4", "13", "vpn")
        assert response.has_error()
        assert "can't be used alone" in _detail(response)

    def test_missing_file(self, client, tmp_path):
        """Missing bulk-report file is returned as an error."""
        response = client.bulk_report(str(tmp_path / "missing.csv"))
        assert response.has_error()
        assert "does not exist" in _detail(response)

    @pytest.mark.parametrize("call", [
        lambda c: c.report("", "18", "m"),
        lambda c: c.clear_address(""),
        lambda c: c.check(""),
        lambda c: c.check_block(""),
        lambda c: c.blacklist(limit=0),
    ])
    def test_every_operation_is_quiet(self, client, call):
        """No operation raises on invalid input."""
        response = call(client)
        assert isinstance(response, ApiResponse)
        assert response.has_error()

    def test_transport_setup_failure(self, client, transport):
        """Even exceptions propagated by the dispatcher are wrapped."""
        transport.error = RuntimeError("event loop is running")
        response = client.check("1.2.3.4")
        assert _detail(response) == "event loop is running"

    def test_transport_failure_is_empty(self, client, transport):
        """Transport failures still give an empty response."""
        transport.error = TransportError("Connection refused")
        response = client.check("1.2.3.4")
        assert response.is_empty
        assert not response.has_error()

    def test_success(self, client, transport):
        """Successful calls return the API body."""
        transport.body = '{"data": {"ipAddress": "1.2.3.4"}}'
        response = client.check("1.2.3.4")
        assert response.get_object().data.ipAddress == "1.2.3.4"

    def test_construction_with_empty_key_raises(self):
        """Only operations are quiet: an empty key fails at construction."""
        with pytest.raises(ConfigError):
            QuietAbuseIPDBClient("", transport=StubTransport())
