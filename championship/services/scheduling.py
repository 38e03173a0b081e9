"""
Round-robin schedule generation for championships.

Uses the circle (Berger) method: the last team is a fixed pivot, the others rotate
by half a turn each round. N teams (N even) give N-1 rounds of N/2 matches, and
every pair of teams meets exactly once. Odd team counts are rejected; there is no
bye mechanism.

Double leg ("return games"): the first block of rounds is followed by a permutation
of it with home and away swapped in every match, so each pair meets once at each
ground.
"""
from __future__ import annotations

import logging
from typing import Sequence

from championship.models import InvalidInputError, Match, Round, Schedule, Team
from championship.simulation.rng import RandomSource

logger = logging.getLogger(__name__)


def rotate(rest: Sequence[Team]) -> list[Team]:
    """
    Half-rotation of the non-pivot teams: the last `half` teams move to the front,
    followed by the first `half - 1`, both in their original relative order.
    """
    half = (len(rest) + 1) // 2
    return list(rest[half - 1:]) + list(rest[:half - 1])


def round_robin_rounds(teams: Sequence[Team]) -> list[Round]:
    """
    Single-leg rounds for an even number of teams.
    Round i: (pivot, rest[0]) then (rest[j], rest[-j]) for j = 1 .. len(rest) // 2.
    """
    pivot = teams[-1]
    rest = list(teams[:-1])
    rounds: list[Round] = []
    for _ in range(len(teams) - 1):
        rnd: Round = [Match(home=pivot, away=rest[0])]
        for j in range(1, (len(rest) + 1) // 2):
            rnd.append(Match(home=rest[j], away=rest[len(rest) - j]))
        rounds.append(rnd)
        rest = rotate(rest)
    return rounds


def return_leg(rounds: Sequence[Round], rng: RandomSource | None = None) -> list[Round]:
    """
    Second-leg rounds: a permutation of the given rounds with sides swapped.
    With no random source the round order is kept as-is.
    """
    if rng is None:
        ordered = list(rounds)
    else:
        keys = [rng.random() for _ in rounds]
        ordered = [rnd for _, rnd in sorted(zip(keys, rounds), key=lambda kr: kr[0])]
    return [[match.swapped() for match in rnd] for rnd in ordered]


def _validate_teams(teams: Sequence[Team]) -> None:
    if len(teams) < 2:
        raise InvalidInputError("Need at least 2 teams for a championship")
    if len(teams) % 2 != 0:
        raise InvalidInputError(f"Odd number of teams not supported (got {len(teams)})")
    names = [t.name for t in teams]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise InvalidInputError(f"Team names must be unique: {', '.join(duplicates)}")


def build_schedule(
    teams: Sequence[Team],
    double_leg: bool = False,
    rng: RandomSource | None = None,
) -> Schedule:
    """
    Build the full championship schedule.
    Raises InvalidInputError before any round is built if the team list is invalid.
    rng only affects the order of the second-leg rounds.
    """
    teams = list(teams)
    _validate_teams(teams)
    rounds = round_robin_rounds(teams)
    if double_leg:
        rounds = rounds + return_leg(rounds, rng)
    logger.info(
        "Built %s schedule: %d teams, %d rounds",
        "double-leg" if double_leg else "single-leg",
        len(teams),
        len(rounds),
    )
    return Schedule(rounds=rounds, double_leg=double_leg)


def total_matches(num_teams: int, double_leg: bool = False) -> int:
    """Number of matches in a championship of num_teams."""
    matches = num_teams * (num_teams - 1) // 2
    return matches * 2 if double_leg else matches
