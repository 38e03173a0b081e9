"""
Match simulation engine: strength-weighted goal sampling with an explicit,
seedable random source.
"""
from .rng import RandomSource, SeededRNG
from .strength_model import (
    BASE_SCORING_PROB,
    MAX_GOALS,
    STRENGTH_COEFFICIENTS,
    adjusted_cumulative,
    expected_goals,
    goal_probabilities,
    strength_coefficient,
)
from .score_sampler import ScoreSampler, goals_for_draw, sample_goals
from .match_simulator import MatchSimulator

__all__ = [
    "RandomSource",
    "SeededRNG",
    "BASE_SCORING_PROB",
    "MAX_GOALS",
    "STRENGTH_COEFFICIENTS",
    "adjusted_cumulative",
    "expected_goals",
    "goal_probabilities",
    "strength_coefficient",
    "ScoreSampler",
    "goals_for_draw",
    "sample_goals",
    "MatchSimulator",
]
