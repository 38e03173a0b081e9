"""
Data models for the championship simulator.
Domain objects only — no scheduling or simulation logic.

Teams are immutable identities. Accumulated results live in TeamRecord, which is
owned by the simulation phase; standings only ever see frozen TeamStanding snapshots.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

MIN_STRENGTH = 0
MAX_STRENGTH = 4
DEFAULT_STRENGTH = 2


# ---------- Exceptions ----------


class InvalidInputError(ValueError):
    """Invalid championship input (odd team count, duplicate names, bad strength)."""


class InvalidMatchError(ValueError):
    """Match cannot be played (missing team or already played)."""


def validate_strength(strength: Any) -> int:
    """Return strength if it is an int in [0, 4], else raise InvalidInputError."""
    if isinstance(strength, bool) or not isinstance(strength, int):
        raise InvalidInputError(f"Strength must be an integer, got {strength!r}")
    if not MIN_STRENGTH <= strength <= MAX_STRENGTH:
        raise InvalidInputError(
            f"Strength must be between {MIN_STRENGTH} and {MAX_STRENGTH}, got {strength}"
        )
    return strength


# ---------- Match status ----------
class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


class MatchOutcome(str, Enum):
    HOME_WIN = "home_win"
    AWAY_WIN = "away_win"
    DRAW = "draw"


# ---------- Team ----------
@dataclass(frozen=True)
class Team:
    """
    A team in a round-robin championship.
    strength: ordinal rating, 0 (weakest) .. 4 (strongest); 2 is average.
    """
    name: str
    strength: int = DEFAULT_STRENGTH

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidInputError("Team name must not be empty")
        validate_strength(self.strength)

    def __str__(self) -> str:
        return self.name


# ---------- Records & snapshots ----------
@dataclass
class TeamRecord:
    """Mutable results accumulated for one team while matches are played."""
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_conceded: int = 0

    @property
    def points(self) -> int:
        return self.wins * 3 + self.draws

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def goal_diff(self) -> int:
        return self.goals_for - self.goals_conceded

    def snapshot(self, team: Team) -> TeamStanding:
        return TeamStanding(
            name=team.name,
            strength=team.strength,
            wins=self.wins,
            draws=self.draws,
            losses=self.losses,
            goals_for=self.goals_for,
            goals_conceded=self.goals_conceded,
        )


@dataclass(frozen=True)
class TeamStanding:
    """Read-only view of one team's results at a point in time."""
    name: str
    strength: int
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_conceded: int = 0

    @property
    def points(self) -> int:
        return self.wins * 3 + self.draws

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def goal_diff(self) -> int:
        return self.goals_for - self.goals_conceded

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "strength": self.strength,
            "points": self.points,
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_for": self.goals_for,
            "goals_conceded": self.goals_conceded,
            "goal_diff": self.goal_diff,
        }


# ---------- Match (fixture) ----------
@dataclass(eq=False)
class Match:
    """
    One fixture between a home and an away team.
    Scores stay 0 until the simulator plays the match (exactly once).
    """
    home: Team | None
    away: Team | None
    home_score: int = 0
    away_score: int = 0
    status: MatchStatus = MatchStatus.SCHEDULED

    @property
    def teams(self) -> tuple[Team | None, Team | None]:
        return (self.home, self.away)

    @property
    def is_played(self) -> bool:
        return self.status == MatchStatus.COMPLETED

    @property
    def outcome(self) -> MatchOutcome:
        if self.home_score > self.away_score:
            return MatchOutcome.HOME_WIN
        if self.away_score > self.home_score:
            return MatchOutcome.AWAY_WIN
        return MatchOutcome.DRAW

    @property
    def winner(self) -> Team | None:
        """Winning team, or None on a draw."""
        outcome = self.outcome
        if outcome == MatchOutcome.HOME_WIN:
            return self.home
        if outcome == MatchOutcome.AWAY_WIN:
            return self.away
        return None

    @property
    def loser(self) -> Team | None:
        outcome = self.outcome
        if outcome == MatchOutcome.HOME_WIN:
            return self.away
        if outcome == MatchOutcome.AWAY_WIN:
            return self.home
        return None

    def swapped(self) -> Match:
        """New scheduled match with home and away reversed."""
        return Match(home=self.away, away=self.home)

    def to_dict(self) -> dict[str, Any]:
        return {
            "home": self.home.name if self.home else None,
            "away": self.away.name if self.away else None,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "status": self.status.value,
        }

    def __str__(self) -> str:
        return f"{self.home} {self.home_score} - {self.away_score} {self.away}"


# A round (match day): every team appears in exactly one match.
Round = list[Match]


# ---------- Schedule ----------
@dataclass
class Schedule:
    """Ordered rounds of a single or double round-robin."""
    rounds: list[Round] = field(default_factory=list)
    double_leg: bool = False

    def matches(self) -> Iterator[Match]:
        """All matches in schedule order (round, then match within round)."""
        for rnd in self.rounds:
            yield from rnd

    @property
    def teams(self) -> list[Team]:
        """Distinct teams in order of first appearance."""
        seen: dict[str, Team] = {}
        for match in self.matches():
            for team in match.teams:
                if team is not None and team.name not in seen:
                    seen[team.name] = team
        return list(seen.values())

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self) -> Iterator[Round]:
        return iter(self.rounds)
