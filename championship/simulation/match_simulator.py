"""
Match Simulator: plays scheduled matches and folds results into team records.
Records are owned by the caller of run(); teams themselves are never mutated.
"""
from __future__ import annotations

import logging

from championship.models import (
    InvalidMatchError,
    Match,
    MatchOutcome,
    MatchStatus,
    Round,
    Schedule,
    TeamRecord,
)
from .score_sampler import ScoreSampler

logger = logging.getLogger(__name__)


class MatchSimulator:
    """
    Plays matches in schedule order (round, then match within round).
    Order only matters for which random draws each match consumes.
    """

    def __init__(self, sampler: ScoreSampler) -> None:
        self.sampler = sampler

    def play_match(self, match: Match, records: dict[str, TeamRecord]) -> None:
        """Sample both scores, write them onto the match and update both records."""
        if match.home is None or match.away is None:
            raise InvalidMatchError("Cannot compute score: match is missing its home or away team")
        if match.is_played:
            raise InvalidMatchError(f"Match already played: {match}")
        home, away = match.home, match.away
        home_rec = records.setdefault(home.name, TeamRecord())
        away_rec = records.setdefault(away.name, TeamRecord())

        match.home_score, match.away_score = self.sampler.sample_score(home, away)
        match.status = MatchStatus.COMPLETED

        home_rec.goals_for += match.home_score
        home_rec.goals_conceded += match.away_score
        away_rec.goals_for += match.away_score
        away_rec.goals_conceded += match.home_score

        outcome = match.outcome
        if outcome == MatchOutcome.HOME_WIN:
            home_rec.wins += 1
            away_rec.losses += 1
        elif outcome == MatchOutcome.AWAY_WIN:
            away_rec.wins += 1
            home_rec.losses += 1
        else:
            home_rec.draws += 1
            away_rec.draws += 1
        logger.debug("Played %s", match)

    def play_round(self, rnd: Round, records: dict[str, TeamRecord]) -> None:
        for match in rnd:
            self.play_match(match, records)

    def run(
        self,
        schedule: Schedule,
        records: dict[str, TeamRecord] | None = None,
    ) -> dict[str, TeamRecord]:
        """
        Play every match of the schedule. Returns records keyed by team name;
        pass records to keep accumulating onto existing ones.
        """
        if records is None:
            records = {}
        for team in schedule.teams:
            records.setdefault(team.name, TeamRecord())
        for rnd in schedule.rounds:
            self.play_round(rnd, records)
        logger.info("Simulated %d rounds", len(schedule))
        return records
