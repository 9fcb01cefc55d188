import re
from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag

from fixtures_api.parsing.models import Fixture
from fixtures_api.parsing.soup import text_of

FIXTURE_SELECTOR = "div.match, li.match, tr.fixture"
HOME_SELECTOR = ".home, .homeTeam, .team-home, td.team-home"
AWAY_SELECTOR = ".away, .awayTeam, .team-away, td.team-away"
HOME_CELL_INDEX = 1
AWAY_CELL_INDEX = 2

# "Team A - Team B" in link text
_LINK_PAIR = re.compile(r"^(.+)\s-\s(.+)$")


def _team_text(el: Tag, selector: str, cell_index: int) -> str:
    # Text of every matching element, joined
    text = "".join(match.get_text() for match in el.select(selector)).strip()
    if text:
        return text
    cells = el.find_all("td")
    return text_of(cells[cell_index]) if len(cells) > cell_index else ""


def parse_fixtures_primary(soup: BeautifulSoup) -> List[Fixture]:
    fixtures = []
    for el in soup.select(FIXTURE_SELECTOR):
        home = _team_text(el, HOME_SELECTOR, HOME_CELL_INDEX)
        away = _team_text(el, AWAY_SELECTOR, AWAY_CELL_INDEX)
        if home and away:
            fixtures.append(Fixture(home=home, away=away))
    return fixtures


def parse_fixtures_fallback(soup: BeautifulSoup) -> List[Fixture]:
    """
    Read fixtures from link texts shaped like "Home - Away".

    Permissive: any navigation link with that shape becomes a fixture.
    """
    fixtures = []
    for link in soup.find_all("a"):
        match = _LINK_PAIR.match(text_of(link))
        if match:
            fixtures.append(Fixture(home=match.group(1).strip(), away=match.group(2).strip()))
    return fixtures


def parse_fixtures(soup: BeautifulSoup) -> List[Fixture]:
    fixtures = parse_fixtures_primary(soup)
    if not fixtures:
        fixtures = parse_fixtures_fallback(soup)
    return fixtures
