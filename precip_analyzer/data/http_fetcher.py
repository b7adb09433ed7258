"""HTTP fetching with a response cache."""

import logging
from datetime import datetime, timezone

import httpx

from precip_analyzer.config import Settings
from precip_analyzer.data.cache import ResponseCache


logger = logging.getLogger(__name__)


class CachedFetcher:
    """Fetches URLs, reusing cached bodies younger than the configured TTL."""

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self.cache = ResponseCache(self.settings.db_path)
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.http_timeout_seconds)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "CachedFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_text(
        self, url: str, params: dict | None = None, refresh: bool = False
    ) -> str:
        """
        Fetch a URL and return the response body.

        Args:
            url: Base URL
            params: Query parameters, encoded into the URL used as cache key
            refresh: If True, skip the cache lookup and always hit the network

        Returns:
            Response body as text
        """
        full_url = str(httpx.URL(url, params=params))

        if not refresh:
            cached = self.cache.get_fresh(full_url, self.settings.cache_ttl_seconds)
            if cached is not None:
                logger.debug(f"Using cached response for URL: {full_url}")
                return cached

        logger.debug(f"Fetching URL from API: {full_url}")
        response = self.client.get(full_url)
        response.raise_for_status()
        body = response.text

        self.cache.store(full_url, body, datetime.now(timezone.utc))
        return body
