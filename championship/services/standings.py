"""
Standings: ranked, read-only projection of team records.

Order: points, then goal difference, then goals scored (all descending).
Teams still level on all three keys have no defined relative order.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from championship.models import Team, TeamRecord, TeamStanding


def standing_sort_key(standing: TeamStanding) -> tuple[int, int, int]:
    return (-standing.points, -standing.goal_diff, -standing.goals_for)


def rank_standings(standings: Iterable[TeamStanding]) -> list[TeamStanding]:
    """Return standings sorted into table order. Does not modify its input."""
    return sorted(standings, key=standing_sort_key)


def build_standings(
    teams: Sequence[Team],
    records: Mapping[str, TeamRecord],
) -> list[TeamStanding]:
    """Snapshot every team's record (all zeros for teams that have not played) and rank them."""
    snapshots = [records.get(team.name, TeamRecord()).snapshot(team) for team in teams]
    return rank_standings(snapshots)
