from pydantic import BaseModel, Field
from typing import List

class Match(BaseModel):
    home: str
    away: str
    wdl_overall: str = Field(description="Overall W/D/L codes, e.g. '621 - 125'")
    goal_ratio: str = Field(description="GF*10/GA*10 per team, e.g. '180/80 - 70/150'")
    homeaway_wdl: str = Field(description="Home team's home W/D/L - away team's away W/D/L")

class ScrapeResponse(BaseModel):
    league: str
    matches: List[Match] = Field(default_factory=list)

class ErrorResponse(BaseModel):
    error: str
