from typing import Any, Dict

from fixtures_api.core.logger import setup_logger
from fixtures_api.errors import ValidationError
from fixtures_api.fetch.scraper import HtmlFetcher, normalize_league_url
from fixtures_api.parsing.fixtures import parse_fixtures
from fixtures_api.parsing.league import extract_league_name
from fixtures_api.parsing.soup import make_soup
from fixtures_api.parsing.standings import parse_standings
from fixtures_api.services.metrics import build_standings_index, compose_matches

logger = setup_logger(__name__)

LEAGUE_URL_REQUIRED = "leagueUrl query parameter required"


async def process_league_request(league_url: str, fetcher: HtmlFetcher) -> Dict[str, Any]:
    """
    Main pipeline for one league page.

    1. Normalize the league URL (site-relative paths get the base prefix)
    2. Fetch HTML (cached for a short TTL)
    3. Parse league name, standings table and fixtures
    4. Join fixtures to standings and compute per-match statistics
    """
    if not league_url:
        raise ValidationError(LEAGUE_URL_REQUIRED)

    url = normalize_league_url(league_url)
    html = await fetcher.fetch(url)
    soup = make_soup(html)

    league = extract_league_name(soup)
    standings = parse_standings(soup)
    fixtures = parse_fixtures(soup)

    defaulted = sum(1 for row in standings if not row.stats_parsed)
    logger.info(
        "Parsed %s: league=%r standings=%d (%d defaulted) fixtures=%d",
        url, league, len(standings), defaulted, len(fixtures)
    )

    matches = compose_matches(fixtures, build_standings_index(standings))
    return {"league": league, "matches": matches}
