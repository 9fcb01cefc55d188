"""
Per-fixture statistics derived from the standings table.

All strings are built from plain integers: a WDL code concatenates wins,
draws and losses ("621"), a goal ratio scales goals by ten and truncates
("180/80"). Teams missing from the table count as all zeros, with goals
against defaulting to 1.
"""

import math
import re
from typing import Dict, Iterable, List, Optional

from fixtures_api.core.logger import setup_logger
from fixtures_api.parsing.models import Fixture, StandingsRow, WDLSplit

logger = setup_logger(__name__)

EMPTY_WDL = "000"

StandingsIndex = Dict[str, StandingsRow]

_WHITESPACE = re.compile(r"\s+")


def normalize_team_name(name: str) -> str:
    """'Real   Madrid' -> 'real madrid'"""
    return _WHITESPACE.sub(" ", name).lower()


def build_standings_index(rows: Iterable[StandingsRow]) -> StandingsIndex:
    index: StandingsIndex = {}
    for row in rows:
        if row.team:
            # Later duplicates overwrite earlier ones
            index[normalize_team_name(row.team)] = row
    return index


def lookup_team(index: StandingsIndex, name: str) -> Optional[StandingsRow]:
    row = index.get(normalize_team_name(name))
    if row is None:
        row = index.get(name.lower())
    return row


def wdl_code(wins: Optional[int], draws: Optional[int], losses: Optional[int]) -> str:
    return f"{wins or 0}{draws or 0}{losses or 0}"


def split_code(split: Optional[WDLSplit]) -> str:
    if split is None:
        return EMPTY_WDL
    return wdl_code(split.wins, split.draws, split.losses)


def overall_code(row: Optional[StandingsRow]) -> str:
    if row is None:
        return EMPTY_WDL
    return wdl_code(row.wins, row.draws, row.losses)


def goal_ratio(goals_for: Optional[float], goals_against: Optional[float]) -> str:
    gf = goals_for or 0
    ga = goals_against or 1
    return f"{math.floor(gf * 10)}/{math.floor(ga * 10)}"


def compose_match(fixture: Fixture, index: StandingsIndex) -> Dict[str, str]:
    home = lookup_team(index, fixture.home)
    away = lookup_team(index, fixture.away)

    for name, row in ((fixture.home, home), (fixture.away, away)):
        if row is None:
            logger.debug("No standings row for %r, using zero statistics", name)

    home_ratio = goal_ratio(home.goals_for, home.goals_against) if home else goal_ratio(None, None)
    away_ratio = goal_ratio(away.goals_for, away.goals_against) if away else goal_ratio(None, None)

    return {
        "home": fixture.home,
        "away": fixture.away,
        "wdl_overall": f"{overall_code(home)} - {overall_code(away)}",
        "goal_ratio": f"{home_ratio} - {away_ratio}",
        "homeaway_wdl": f"{split_code(home.home if home else None)} - {split_code(away.away if away else None)}",
    }


def compose_matches(fixtures: Iterable[Fixture], index: StandingsIndex) -> List[Dict[str, str]]:
    return [compose_match(fixture, index) for fixture in fixtures]
