"""Unit tests for the page fetcher."""

import asyncio

import httpx
import pytest
from fuzzy_page_search.config.settings import Settings
from fuzzy_page_search.core.exceptions import FetchError
from fuzzy_page_search.core.fetcher import PageFetcher, is_valid_url

PAGE_URL = "https://example.com/page"
PROXY_URL = "http://proxy.test/"


class TestPageFetcher:
    """Test cases for the PageFetcher class."""

    @pytest.fixture
    def calls(self):
        """Requests seen by the mock transport."""
        return []

    def make_fetcher(self, calls, direct_status=200, proxy_status=200, proxy_url=PROXY_URL):
        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if request.url.host == "proxy.test":
                return httpx.Response(proxy_status, text="<p>from proxy</p>")
            if direct_status is None:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(direct_status, text="<p>direct</p>")

        return PageFetcher(
            proxy_url=proxy_url,
            proxy_api_key="KEY",
            timeout=5.0,
            transport=httpx.MockTransport(handler)
        )

    def test_direct_fetch(self, calls):
        """Test that a healthy page is fetched directly."""
        fetcher = self.make_fetcher(calls)

        body = asyncio.run(fetcher.fetch(PAGE_URL))

        assert body == "<p>direct</p>"
        assert len(calls) == 1

    def test_proxy_fallback_on_bad_status(self, calls):
        """Test that a non-200 response falls back to the proxy."""
        fetcher = self.make_fetcher(calls, direct_status=403)

        body = asyncio.run(fetcher.fetch(PAGE_URL))

        assert body == "<p>from proxy</p>"
        assert len(calls) == 2
        proxy_request = calls[1]
        assert proxy_request.url.params["api_key"] == "KEY"
        assert proxy_request.url.params["url"] == PAGE_URL

    def test_proxy_fallback_on_connection_error(self, calls):
        """Test that a network error falls back to the proxy."""
        fetcher = self.make_fetcher(calls, direct_status=None)

        assert asyncio.run(fetcher.fetch(PAGE_URL)) == "<p>from proxy</p>"

    def test_both_fail(self, calls):
        """Test the error raised when the proxy fails too."""
        fetcher = self.make_fetcher(calls, direct_status=500, proxy_status=502)

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetcher.fetch(PAGE_URL))

        assert str(exc_info.value) == "Not found"
        assert "502" in exc_info.value.inner_error

    def test_no_proxy_configured(self, calls):
        """Test that the fallback is skipped without a proxy URL."""
        fetcher = self.make_fetcher(calls, direct_status=404, proxy_url="")

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetcher.fetch(PAGE_URL))

        assert "404" in exc_info.value.inner_error
        assert len(calls) == 1

    def test_proxy_fallback_is_opt_in(self, monkeypatch):
        """Test that default settings never call a proxy."""
        monkeypatch.delenv("PROXY_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.proxy_url == ""
        assert PageFetcher.from_settings(settings).proxy_url == ""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com", True),
            ("http://example.com/path?q=1", True),
            ("example.com", False),
            ("/relative/path", False),
            ("", False),
            ("not a url", False),
        ]
    )
    def test_is_valid_url(self, url, expected):
        """Test URL format validation."""
        assert is_valid_url(url) is expected
