"""Tests for downloading reference pages."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from endpoint_overview.fetch_page import fetch_page


def test_fetch_page_returns_body() -> None:
    """Verify that the response text is returned."""
    response = MagicMock()
    response.text = "<html></html>"
    with patch("endpoint_overview.fetch_page.requests.get", return_value=response) as get:
        assert fetch_page("https://example.com", timeout=5) == "<html></html>"
    get.assert_called_once_with("https://example.com", timeout=5)
    response.raise_for_status.assert_called_once()


def test_fetch_page_raises_on_http_error() -> None:
    """Verify that HTTP errors propagate."""
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with (
        patch("endpoint_overview.fetch_page.requests.get", return_value=response),
        pytest.raises(requests.HTTPError),
    ):
        fetch_page("https://example.com")
