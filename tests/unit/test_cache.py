from fixtures_api.core.config import settings
from fixtures_api.cache.memory import CacheEntry, HtmlCache

class TestCache:
    """Unit tests for the in-memory page cache"""

    def setup_method(self):
        self.now = 100.0
        self.cache = HtmlCache(ttl_seconds=30, clock=lambda: self.now)

    def test_cache_set_and_get(self):
        self.cache.set("https://test.com", "<html>1</html>")
        assert self.cache.get("https://test.com") == "<html>1</html>"

    def test_cache_get_nonexistent(self):
        assert self.cache.get("https://nonexistent.com") is None

    def test_entry_fresh_until_ttl(self):
        self.cache.set("https://test.com", "<html/>")
        self.now += 29
        assert self.cache.get("https://test.com") == "<html/>"
        self.now += 1
        assert self.cache.get("https://test.com") is None

    def test_stale_entry_is_kept(self):
        """Expired entries are ignored, not removed"""
        self.cache.set("https://test.com", "<html/>")
        self.now += 60
        assert self.cache.get("https://test.com") is None
        assert "https://test.com" in self.cache
        assert len(self.cache) == 1

    def test_cache_replace_existing(self):
        self.cache.set("https://test.com", "v1")
        self.now += 45
        self.cache.set("https://test.com", "v2")
        assert self.cache.get("https://test.com") == "v2"
        assert len(self.cache) == 1

    def test_exact_url_keys(self):
        self.cache.set("https://test.com/a", "a")
        assert self.cache.get("https://test.com/a/") is None

    def test_stats(self):
        self.cache.set("https://old.com", "x")
        self.now += 40
        self.cache.set("https://new.com", "y")
        assert self.cache.stats() == {"total_entries": 2, "fresh_entries": 1, "ttl_seconds": 30}

    def test_clear_all_cache(self):
        self.cache.set("https://test1.com", "1")
        self.cache.set("https://test2.com", "2")
        self.cache.clear()
        assert len(self.cache) == 0
        assert self.cache.get("https://test1.com") is None

    def test_entry_age(self):
        assert CacheEntry(url="u", fetched_at=10.0, html="").age(25.5) == 15.5

    def test_default_ttl_from_settings(self):
        assert HtmlCache().ttl_seconds == settings.CACHE_TTL_SECONDS

    def test_set_with_explicit_timestamp(self):
        self.cache.set("https://test.com", "x", fetched_at=self.now - 25)
        self.now += 4
        assert self.cache.get("https://test.com") == "x"
        self.now += 1
        assert self.cache.get("https://test.com") is None
