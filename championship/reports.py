"""
Plain-text reports: match calendar with results, and the standings table.
"""
from __future__ import annotations

from typing import Sequence

from championship.models import Schedule, TeamStanding

NAME_WIDTH = 20
STANDINGS_HEADER = "TEAM                Pts Win Dra Los GoF GoC Dif"
SEPARATOR = "-" * 48


def format_team_name(name: str, width: int = NAME_WIDTH) -> str:
    """Exactly `width` characters: padded, or truncated with a trailing '.'."""
    if len(name) > width:
        return name[: width - 1] + "."
    return f"{name:<{width}}"


def format_calendar(schedule: Schedule) -> str:
    """Every match day with its matches and scores."""
    if not schedule.rounds:
        return "No games"
    lines: list[str] = []
    for i, rnd in enumerate(schedule.rounds, 1):
        lines.append(f"--- MATCH DAY {i} ---")
        for match in rnd:
            lines.append(str(match))
        lines.append("")
    return "\n".join(lines)


def format_standings(standings: Sequence[TeamStanding]) -> str:
    """Standings table, one row per team in the given order."""
    lines = [STANDINGS_HEADER, SEPARATOR]
    for s in standings:
        numbers = (s.points, s.wins, s.draws, s.losses, s.goals_for, s.goals_conceded, s.goal_diff)
        lines.append(format_team_name(s.name) + " ".join(f"{n:>3}" for n in numbers))
    return "\n".join(lines)
