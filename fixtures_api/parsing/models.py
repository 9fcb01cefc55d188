from dataclasses import dataclass
from typing import Optional


@dataclass
class WDLSplit:
    wins: Optional[int] = None
    draws: Optional[int] = None
    losses: Optional[int] = None


@dataclass
class StandingsRow:
    team: str
    position: str = ""
    played: Optional[int] = None
    wins: Optional[int] = None
    draws: Optional[int] = None
    losses: Optional[int] = None
    goals_for: Optional[int] = None
    goals_against: Optional[int] = None
    points: Optional[int] = None
    home: Optional[WDLSplit] = None
    away: Optional[WDLSplit] = None

    @property
    def stats_parsed(self) -> bool:
        """False when the row had too few numbers and its statistics were left unset"""
        return self.played is not None


@dataclass
class Fixture:
    home: str
    away: str
