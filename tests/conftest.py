import httpx
import pytest
from fixtures_api.api.routes import get_fetcher
from fixtures_api.cache.memory import HtmlCache
from fixtures_api.fetch.scraper import HtmlFetcher
from fixtures_api.main import app

LEAGUE_HTML = """
<html>
<head><title>Futbol24 - England Premier League</title></head>
<body>
    <h1>England - Premier League</h1>
    <div class="breadcrumb"><a href="/">Home</a> <span class="active">Premier League</span></div>
    <table class="teamtable">
        <tr><th>#</th><th>Team</th><th>P</th><th>W</th><th>D</th><th>L</th>
            <th>GF</th><th>GA</th><th>Pts</th><th>Home</th><th>Away</th></tr>
        <tr><td></td><td><a href="/team/arsenal/">Arsenal</a></td><td>9</td><td>6</td><td>2</td><td>1</td>
            <td>18</td><td>8</td><td>20</td><td>4-1-0</td><td>2-1-1</td></tr>
        <tr><td></td><td><a href="/team/man-united/">Man   United</a></td><td>8</td><td>1</td><td>2</td><td>5</td>
            <td>7</td><td>15</td><td>5</td><td>1-0-1</td><td>0-2-4</td></tr>
        <tr><td colspan="11">Relegation zone</td></tr>
        <tr><td></td><td><a href="/team/chelsea/">Chelsea</a></td><td>9</td><td>-</td><td>-</td><td>-</td></tr>
    </table>
    <div class="fixtures">
        <div class="match"><span class="home">Arsenal</span> v <span class="away">Man United</span></div>
        <table>
            <tr class="fixture"><td>20:00</td><td>Chelsea</td><td>Liverpool</td></tr>
        </table>
        <ul><li class="match"><span class="home">Arsenal</span></li></ul>
    </div>
    <a href="/news/">Transfers - Latest</a>
</body>
</html>
"""

class FakeClock:
    """Controllable replacement for time.monotonic"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds

class MockSite:
    """Serves canned pages through httpx.MockTransport and records requests"""

    def __init__(self, pages=None, default_status=404):
        self.pages = pages or {}
        self.default_status = default_status
        self.requests = []
        self.delays = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(str(request.url))
        if page is None:
            return httpx.Response(self.default_status, text="not found")
        status_code, body = page
        return httpx.Response(status_code, text=body)

    async def sleep(self, seconds: float):
        self.delays.append(seconds)

    def fetcher(self, clock=None, ttl_seconds=30) -> HtmlFetcher:
        cache = HtmlCache(ttl_seconds=ttl_seconds, clock=clock or FakeClock())
        return HtmlFetcher(cache=cache, transport=httpx.MockTransport(self.handler), sleep=self.sleep)

@pytest.fixture
def league_html():
    return LEAGUE_HTML

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def mock_site():
    return MockSite()

@pytest.fixture
def use_fetcher():
    """Install a fetcher as the app's dependency for the duration of a test"""
    def install(fetcher: HtmlFetcher) -> HtmlFetcher:
        app.dependency_overrides[get_fetcher] = lambda: fetcher
        return fetcher

    yield install

    app.dependency_overrides.pop(get_fetcher, None)
