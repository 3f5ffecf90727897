"""
Tests for the auth module - master token presence check.
"""

import io
from unittest.mock import Mock

import pytest
from werkzeug.datastructures import Headers

from token_gate.auth import MASTER_TOKEN_HEADER, is_authorized
from token_gate.http import Request


@pytest.fixture
def mock_request():
    """Fixture for creating a mock request object."""
    request = Mock(spec=Request)
    request.host = "localhost:9292"
    request.method = "GET"
    request.path = "/upstream"
    request.headers = Headers(
        [("Host", "localhost:9292"), ("Content-Type", "application/json")]
    )
    request.body = io.BytesIO()
    return request


class TestIsAuthorized:
    """Tests for the Master-Token presence check."""

    def test_missing_header(self, mock_request):
        """Test request without the token is rejected."""
        assert is_authorized(mock_request) is False

    def test_present_header(self, mock_request):
        """Test request with the token is accepted."""
        mock_request.headers.add(MASTER_TOKEN_HEADER, "super_secret")
        assert is_authorized(mock_request) is True

    def test_any_value_accepted(self, mock_request):
        """Test the value is never compared."""
        mock_request.headers.add(MASTER_TOKEN_HEADER, "wrong")
        assert is_authorized(mock_request) is True

    def test_empty_value_accepted(self, mock_request):
        """Test an empty header still counts as present."""
        mock_request.headers.add(MASTER_TOKEN_HEADER, "")
        assert is_authorized(mock_request) is True

    @pytest.mark.parametrize("name", ["master-token", "MASTER-TOKEN", "Master-token"])
    def test_case_insensitive_name(self, mock_request, name):
        """Test header names match regardless of case."""
        mock_request.headers.add(name, "abc")
        assert is_authorized(mock_request) is True

    def test_underscore_name_is_a_different_header(self, mock_request):
        """Test master_token (the checkpoint response header name) is not accepted."""
        mock_request.headers.add("master_token", "super_secret")
        assert is_authorized(mock_request) is False
