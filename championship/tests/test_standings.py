"""
Tests for standings ranking: points, then goal difference, then goals scored.
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from championship.models import Team, TeamRecord, TeamStanding
from championship.services.standings import build_standings, rank_standings, standing_sort_key


def _standing(name, wins=0, draws=0, losses=0, goals_for=0, goals_conceded=0) -> TeamStanding:
    return TeamStanding(
        name=name,
        strength=2,
        wins=wins,
        draws=draws,
        losses=losses,
        goals_for=goals_for,
        goals_conceded=goals_conceded,
    )


def test_derived_fields():
    s = _standing("X", wins=3, draws=2, losses=1, goals_for=9, goals_conceded=11)
    assert s.points == 11
    assert s.played == 6
    assert s.goal_diff == -2
    d = s.to_dict()
    assert d["points"] == 11 and d["goal_diff"] == -2 and d["played"] == 6


def test_points_first():
    low = _standing("Low", wins=1, goals_for=20)
    high = _standing("High", wins=2)
    assert [s.name for s in rank_standings([low, high])] == ["High", "Low"]


def test_goal_diff_breaks_points_tie():
    """Points (9, 9, 6), goal diffs (2, 5, 1): the +5 team leads."""
    x = _standing("X", wins=3, goals_for=5, goals_conceded=3)
    y = _standing("Y", wins=3, goals_for=7, goals_conceded=2)
    z = _standing("Z", wins=2, goals_for=3, goals_conceded=2)
    assert (x.points, y.points, z.points) == (9, 9, 6)
    assert [s.name for s in rank_standings([x, y, z])] == ["Y", "X", "Z"]


def test_goals_for_breaks_goal_diff_tie():
    a = _standing("A", wins=1, draws=1, goals_for=3, goals_conceded=2)
    b = _standing("B", wins=1, draws=1, goals_for=6, goals_conceded=5)
    assert a.points == b.points and a.goal_diff == b.goal_diff
    assert [s.name for s in rank_standings([a, b])] == ["B", "A"]


def test_draws_count_one_point():
    drawer = _standing("Drawer", draws=4)
    winner = _standing("Winner", wins=1, losses=3, goals_for=10, goals_conceded=2)
    assert [s.name for s in rank_standings([winner, drawer])] == ["Drawer", "Winner"]


def test_rank_does_not_modify_input():
    items = [_standing("A"), _standing("B", wins=1), _standing("C", draws=1)]
    before = list(items)
    ranked = rank_standings(items)
    assert items == before
    assert ranked is not items


def test_fully_tied_teams_all_present():
    """Order among fully tied teams is undefined; only membership is checked."""
    tied = [_standing(n, wins=1, goals_for=2, goals_conceded=1) for n in "PQR"]
    ranked = rank_standings(tied + [_standing("Top", wins=2)])
    assert ranked[0].name == "Top"
    assert {s.name for s in ranked[1:]} == {"P", "Q", "R"}


def test_sort_key():
    s = _standing("A", wins=2, goals_for=4, goals_conceded=1)
    assert standing_sort_key(s) == (-6, -3, -4)


def test_build_standings_snapshots_records():
    teams = [Team("A", 1), Team("B", 3)]
    records = {"B": TeamRecord(wins=1, goals_for=2), "A": TeamRecord(losses=1, goals_conceded=2)}
    table = build_standings(teams, records)
    assert [s.name for s in table] == ["B", "A"]
    assert table[0].strength == 3
    records["A"].wins += 5
    assert table[1].wins == 0


def test_build_standings_missing_record_is_zero():
    table = build_standings([Team("A"), Team("B")], {"A": TeamRecord(draws=1)})
    b = next(s for s in table if s.name == "B")
    assert (b.points, b.played, b.goals_for) == (0, 0, 0)
