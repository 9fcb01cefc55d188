from bs4 import BeautifulSoup

from fixtures_api.parsing.soup import text_of

LEAGUE_NAME_SELECTOR = "h1, .leagueHeader, .breadcrumb .active"


def extract_league_name(soup: BeautifulSoup) -> str:
    """First non-empty heading-like element, falling back to the page title"""
    for el in soup.select(LEAGUE_NAME_SELECTOR):
        text = text_of(el)
        if text:
            return text
    return text_of(soup.title)
