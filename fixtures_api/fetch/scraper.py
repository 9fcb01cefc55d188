import asyncio
import random
from typing import Awaitable, Callable, Optional

import httpx

from fixtures_api.cache.memory import HtmlCache
from fixtures_api.core.config import settings
from fixtures_api.core.logger import setup_logger
from fixtures_api.errors import FetchError

logger = setup_logger(__name__)


def normalize_league_url(league_url: str, base_url: Optional[str] = None) -> str:
    """
    Turn a site-relative league path into an absolute URL.

    Values already starting with "http" are returned untouched.
    Example: "/soccer/england/premier-league/" -> "https://www.futbol24.com/soccer/england/premier-league/"
    """
    if league_url.startswith("http"):
        return league_url
    base = base_url if base_url is not None else settings.BASE_URL
    return f"{base.rstrip('/')}/{league_url.lstrip('/')}"


class HtmlFetcher:
    """Fetch raw page HTML, serving fresh copies from the owned cache."""

    def __init__(
        self,
        cache: Optional[HtmlCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.cache = cache if cache is not None else HtmlCache()
        self._transport = transport
        self._sleep = sleep
        self._rng = rng if rng is not None else random.Random()

    def courtesy_delay(self) -> float:
        """Random pause in seconds taken before each network request"""
        low = settings.COURTESY_DELAY_MIN_MS
        high = max(low, settings.COURTESY_DELAY_MAX_MS)
        return self._rng.uniform(low, high) / 1000

    async def fetch(self, url: str) -> str:
        """Return HTML for url from cache or network. Raises FetchError."""
        # Entry age counts from the start of the request, before the delay
        started_at = self.cache.now()
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Cache hit for %s", url)
            return cached

        logger.debug("Cache miss for %s", url)
        await self._sleep(self.courtesy_delay())

        headers = {
            "User-Agent": settings.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        try:
            async with httpx.AsyncClient(
                timeout=settings.REQUEST_TIMEOUT,
                headers=headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        logger.info("Fetched %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        if not response.is_success:
            raise FetchError(
                f"Fetch failed {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        html = response.text
        self.cache.set(url, html, fetched_at=started_at)
        return html
