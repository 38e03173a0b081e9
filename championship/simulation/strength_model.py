"""
Strength model: static scoring tables used by the score sampler.

BASE_SCORING_PROB[i] is the cumulative probability that a team scores at most i
goals against a team of the same strength. STRENGTH_COEFFICIENTS[s1][s2] shifts
that curve when a strength-s1 team plays a strength-s2 team; positive values
push mass towards fewer goals.
"""
from __future__ import annotations

from championship.models import validate_strength

BASE_SCORING_PROB: tuple[float, ...] = (0.2, 0.45, 0.7, 0.85, 0.92, 0.97, 0.99, 1.0)

# Highest goal count a team can score in one match
MAX_GOALS = len(BASE_SCORING_PROB) - 1

# Rows: scoring team's strength. Columns: opponent's strength.
STRENGTH_COEFFICIENTS: tuple[tuple[float, ...], ...] = (
    (0.0, 0.05, 0.15, 0.3, 0.5),
    (-0.05, 0.0, 0.05, 0.15, 0.3),
    (-0.15, -0.05, 0.0, 0.05, 0.15),
    (-0.3, -0.15, -0.05, 0.0, 0.05),
    (-0.5, -0.3, -0.15, -0.05, 0.0),
)


def strength_coefficient(for_strength: int, against_strength: int) -> float:
    """Adjustment applied when a for_strength team scores against against_strength."""
    return STRENGTH_COEFFICIENTS[validate_strength(for_strength)][validate_strength(against_strength)]


def adjusted_cumulative(for_strength: int, against_strength: int) -> tuple[float, ...]:
    """
    Cumulative goal probabilities for one side of a match.
    P[i] = min(1, B[i] * (1 + C / ((i + 1) * 3 / 4))); the last bucket is always 1.
    """
    coef = strength_coefficient(for_strength, against_strength)
    probs = []
    for i, base in enumerate(BASE_SCORING_PROB):
        if i == MAX_GOALS:
            probs.append(1.0)
            continue
        probs.append(min(1.0, base * (1 + coef / ((i + 1) * 3 / 4))))
    return tuple(probs)


def goal_probabilities(for_strength: int, against_strength: int) -> tuple[float, ...]:
    """Probability of scoring exactly i goals, for i in 0..MAX_GOALS."""
    cumulative = adjusted_cumulative(for_strength, against_strength)
    previous = 0.0
    out = []
    for p in cumulative:
        out.append(max(0.0, p - previous))
        previous = max(previous, p)
    return tuple(out)


def expected_goals(for_strength: int, against_strength: int) -> float:
    return sum(i * p for i, p in enumerate(goal_probabilities(for_strength, against_strength)))
