"""
Tests for the championship workflow: construction guards, round sequencing, standings.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from championship.config import default_config
from championship.models import InvalidInputError, Team
from championship.services.championship_service import Championship, ChampionshipCompleteError
from championship.simulation.rng import SeededRNG


@pytest.fixture
def demo_championship():
    """Eight-team double-leg demo line-up, seeded."""
    config = default_config().model_copy(update={"seed": 2022})
    return Championship.from_config(config)


def test_from_config(demo_championship):
    champ = demo_championship
    assert champ.double_leg
    assert len(champ.teams) == 8
    assert champ.total_rounds == 14
    assert champ.current_round == 0
    assert not champ.is_complete


def test_odd_team_count_fails_at_construction():
    with pytest.raises(InvalidInputError):
        Championship([Team("A"), Team("B"), Team("C")])


def test_standings_before_play_all_zero(demo_championship):
    table = demo_championship.standings()
    assert len(table) == 8
    assert all(s.points == 0 and s.played == 0 for s in table)


def test_play_next_round_sequence(demo_championship):
    champ = demo_championship
    rnd = champ.play_next_round()
    assert champ.current_round == 1
    assert len(rnd) == 4
    assert all(m.is_played for m in rnd)
    assert all(s.played == 1 for s in champ.standings())
    assert not any(m.is_played for m in champ.schedule.rounds[1])


def test_simulate_all_games(demo_championship):
    champ = demo_championship
    champ.play_next_round()
    champ.simulate_all_games()
    assert champ.is_complete
    assert champ.current_round == 14
    table = champ.standings()
    assert all(s.played == 14 for s in table)
    points = [s.points for s in table]
    assert points == sorted(points, reverse=True)
    assert sum(s.goal_diff for s in table) == 0


def test_play_after_completion_raises(demo_championship):
    champ = demo_championship
    champ.simulate_all_games()
    with pytest.raises(ChampionshipCompleteError):
        champ.play_next_round()
    # Simulating again is a no-op
    champ.simulate_all_games()
    assert champ.current_round == 14


def test_records_are_copies(demo_championship):
    champ = demo_championship
    champ.play_next_round()
    records = champ.records
    records["France"].wins += 10
    assert champ.records["France"].wins <= 1


def test_single_leg_default():
    teams = [Team(n, s) for n, s in [("A", 0), ("B", 4), ("C", 2), ("D", 2)]]
    champ = Championship(teams, rng=SeededRNG(4))
    assert not champ.double_leg
    assert champ.total_rounds == 3
    champ.simulate_all_games()
    assert sum(s.wins + s.draws + s.losses for s in champ.standings()) == 2 * 6
