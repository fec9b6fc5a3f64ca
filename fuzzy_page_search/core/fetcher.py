"""Outbound page fetching with a scraping proxy fallback."""

from typing import Optional
from urllib.parse import urlparse

import httpx
import structlog

from .exceptions import FetchError

logger = structlog.get_logger(__name__)


def is_valid_url(url: str) -> bool:
    """Check that a URL has both a scheme and a host."""
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


class PageFetcher:
    """Downloads pages, retrying once through a proxy API on failure."""

    def __init__(
        self,
        proxy_url: str = "",
        proxy_api_key: str = "",
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            proxy_url: Base URL of the proxy API (empty disables the fallback)
            proxy_api_key: API key passed to the proxy
            timeout: Per-request timeout in seconds
            user_agent: Custom User-Agent header
            transport: Custom httpx transport, mainly for tests
        """
        self.proxy_url = proxy_url
        self.proxy_api_key = proxy_api_key
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self.transport = transport

    @classmethod
    def from_settings(cls, settings) -> "PageFetcher":
        """Build a fetcher from application settings."""
        return cls(
            proxy_url=settings.proxy_url,
            proxy_api_key=settings.proxy_api_key,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent
        )

    async def fetch(self, url: str) -> str:
        """
        Fetch a page body.

        Args:
            url: Page URL

        Returns:
            Decoded response body

        Raises:
            FetchError: If both the direct and the proxy request failed
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self.transport
        ) as client:
            try:
                return await self._get(client, url)
            except httpx.HTTPError as e:
                logger.warning("Direct fetch failed", url=url, error=str(e))
                if not self.proxy_url:
                    raise FetchError("Not found", inner_error=str(e)) from e

            logger.info("Retrying through proxy", url=url)
            try:
                return await self._get(
                    client,
                    self.proxy_url,
                    params={"api_key": self.proxy_api_key, "url": url}
                )
            except httpx.HTTPError as e:
                logger.error("Proxy fetch failed", url=url, error=str(e))
                raise FetchError("Not found", inner_error=str(e)) from e

    @staticmethod
    async def _get(
        client: httpx.AsyncClient,
        url: str,
        params: Optional[dict] = None
    ) -> str:
        response = await client.get(url, params=params)
        if response.status_code != 200:
            raise httpx.HTTPStatusError(
                f"Unexpected status {response.status_code} for {url}",
                request=response.request,
                response=response
            )
        return response.text
