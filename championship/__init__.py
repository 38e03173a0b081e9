"""
Round-robin championship simulator: schedule, strength-weighted scores, standings.
"""
from .models import (
    InvalidInputError,
    InvalidMatchError,
    Match,
    MatchOutcome,
    MatchStatus,
    Schedule,
    Team,
    TeamRecord,
    TeamStanding,
)
from .simulation import MatchSimulator, ScoreSampler, SeededRNG
from .services import Championship, ChampionshipCompleteError, build_schedule, rank_standings

__all__ = [
    "InvalidInputError",
    "InvalidMatchError",
    "Match",
    "MatchOutcome",
    "MatchStatus",
    "Schedule",
    "Team",
    "TeamRecord",
    "TeamStanding",
    "MatchSimulator",
    "ScoreSampler",
    "SeededRNG",
    "Championship",
    "ChampionshipCompleteError",
    "build_schedule",
    "rank_standings",
]
