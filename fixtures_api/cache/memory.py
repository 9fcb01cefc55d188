import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fixtures_api.core.config import settings

Clock = Callable[[], float]


@dataclass
class CacheEntry:
    url: str
    fetched_at: float
    html: str

    def age(self, now: float) -> float:
        return now - self.fetched_at


class HtmlCache:
    """
    In-memory page cache keyed by the exact URL string.

    Entries older than the TTL are treated as missing but never removed;
    they are only replaced by the next successful fetch of the same URL.
    """

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Clock = time.monotonic):
        self.ttl_seconds = settings.CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, url: str) -> Optional[str]:
        """Return cached HTML for url if it is still fresh"""
        entry = self._entries.get(url)
        if entry is None:
            return None
        if entry.age(self._clock()) < self.ttl_seconds:
            return entry.html
        return None

    def now(self) -> float:
        return self._clock()

    def set(self, url: str, html: str, fetched_at: Optional[float] = None) -> None:
        """Store HTML for url, overwriting any previous entry"""
        if fetched_at is None:
            fetched_at = self._clock()
        self._entries[url] = CacheEntry(url=url, fetched_at=fetched_at, html=html)

    def clear(self) -> None:
        """Drop all entries"""
        self._entries.clear()

    def stats(self) -> dict:
        now = self._clock()
        fresh = sum(1 for e in self._entries.values() if e.age(now) < self.ttl_seconds)
        return {
            "total_entries": len(self._entries),
            "fresh_entries": fresh,
            "ttl_seconds": self.ttl_seconds,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: str) -> bool:
        return url in self._entries
