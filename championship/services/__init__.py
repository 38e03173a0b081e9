"""
Service layer: scheduling, standings and the championship workflow.
"""
from .scheduling import build_schedule, round_robin_rounds, return_leg, rotate, total_matches
from .standings import build_standings, rank_standings, standing_sort_key
from .championship_service import Championship, ChampionshipCompleteError

__all__ = [
    "build_schedule",
    "round_robin_rounds",
    "return_leg",
    "rotate",
    "total_matches",
    "build_standings",
    "rank_standings",
    "standing_sort_key",
    "Championship",
    "ChampionshipCompleteError",
]
