"""
Score Sampler: maps a uniform draw onto the strength-adjusted cumulative goal curve.
Each side of a match is sampled independently.
"""
from __future__ import annotations

from typing import Sequence

from championship.models import Team
from .rng import RandomSource
from .strength_model import adjusted_cumulative


def goals_for_draw(cumulative: Sequence[float], draw: float) -> int:
    """
    Smallest index i with draw <= cumulative[i].
    Index 0 wins when draw <= cumulative[0]; index i when cumulative[i-1] < draw <= cumulative[i].
    """
    for i, p in enumerate(cumulative):
        if draw <= p:
            return i
    return len(cumulative) - 1


def sample_goals(rng: RandomSource, for_strength: int, against_strength: int) -> int:
    """Sample the goals a for_strength team scores against an against_strength team."""
    cumulative = adjusted_cumulative(for_strength, against_strength)
    return goals_for_draw(cumulative, rng.random())


class ScoreSampler:
    """
    Samples goal counts from a random source.
    Same draw sequence => same scores.
    """

    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    def sample(self, for_strength: int, against_strength: int) -> int:
        return sample_goals(self.rng, for_strength, against_strength)

    def sample_score(self, home: Team, away: Team) -> tuple[int, int]:
        """Returns (home_goals, away_goals); home is drawn first."""
        home_goals = self.sample(home.strength, away.strength)
        away_goals = self.sample(away.strength, home.strength)
        return home_goals, away_goals
