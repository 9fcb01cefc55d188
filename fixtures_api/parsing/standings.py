"""
Standings table extraction.

The league page carries no stable markup for the table, so rows are read
heuristically: numbers are assigned by position and home/away records are
picked up from any "W-D-L" looking cell. Nothing in here raises on odd
markup; unusable rows are skipped and missing numbers stay None.
"""

import re
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from fixtures_api.parsing.models import StandingsRow, WDLSplit
from fixtures_api.parsing.soup import text_of

# Known standings table classes; first match in document order wins
STANDINGS_TABLE_SELECTOR = "table.teamtable, table.liveTable, table.table"

MIN_CELLS = 6
NUMERIC_FIELDS = ("played", "wins", "draws", "losses", "goals_for", "goals_against", "points")

_NON_NUMERIC = re.compile(r"[^0-9\-/]")
_INT_PREFIX = re.compile(r"^-?\d+")
_SPLIT = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{1,2})")


def clean_numeric_token(text: str) -> str:
    """Keep only digits, hyphens and slashes: '18:8 ' -> '188', '9-2-3' -> '9-2-3'"""
    return _NON_NUMERIC.sub("", text)


def parse_int_prefix(token: str) -> Optional[int]:
    """Leading integer of a token ('3-1' -> 3, '/5' -> None)"""
    match = _INT_PREFIX.match(token)
    return int(match.group(0)) if match else None


def extract_numeric_tokens(cells: List[Tag]) -> List[str]:
    tokens = []
    for cell in cells:
        cleaned = clean_numeric_token(text_of(cell))
        if any(ch.isdigit() for ch in cleaned):
            tokens.append(cleaned)
    return tokens


def extract_team_name(cells: List[Tag]) -> str:
    """Text of the last link inside the cells, else the second cell"""
    links = [a for cell in cells for a in cell.find_all("a")]
    name = text_of(links[-1]) if links else ""
    return name or text_of(cells[1])


def extract_splits(cells: List[Tag]) -> Tuple[Optional[WDLSplit], Optional[WDLSplit]]:
    """First W-D-L match in cell order is the home record, the second the away record"""
    found = []
    for cell in cells:
        match = _SPLIT.search(text_of(cell))
        if match:
            w, d, l = (int(g) for g in match.groups())
            found.append(WDLSplit(wins=w, draws=d, losses=l))
            if len(found) == 2:
                break
    home = found[0] if found else None
    away = found[1] if len(found) > 1 else None
    return home, away


def parse_standings_row(row: Tag) -> Optional[StandingsRow]:
    """Build a StandingsRow from a <tr>, or None when it has too few cells"""
    cells = row.find_all("td")
    if len(cells) < MIN_CELLS:
        return None

    standing = StandingsRow(team=extract_team_name(cells), position=text_of(cells[0]))

    tokens = extract_numeric_tokens(cells)
    if len(tokens) >= len(NUMERIC_FIELDS):
        for field, token in zip(NUMERIC_FIELDS, tokens):
            setattr(standing, field, parse_int_prefix(token))

    standing.home, standing.away = extract_splits(cells)
    return standing


def parse_standings(soup: BeautifulSoup) -> List[StandingsRow]:
    table = soup.select_one(STANDINGS_TABLE_SELECTOR)
    if table is None:
        return []

    standings = []
    # First row is the header
    for row in table.find_all("tr")[1:]:
        parsed = parse_standings_row(row)
        if parsed is not None:
            standings.append(parsed)
    return standings
