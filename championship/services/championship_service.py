"""
Championship service: builds the schedule, advances round by round, exposes standings.
The schedule is built at construction so invalid team lists fail immediately.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from championship.models import Round, Schedule, Team, TeamRecord, TeamStanding
from championship.services.scheduling import build_schedule
from championship.services.standings import build_standings
from championship.simulation.match_simulator import MatchSimulator
from championship.simulation.rng import RandomSource, SeededRNG
from championship.simulation.score_sampler import ScoreSampler

if TYPE_CHECKING:
    from championship.config import ChampionshipConfig

logger = logging.getLogger(__name__)

# ---------- Exceptions ----------


class ChampionshipCompleteError(ValueError):
    """Every round has already been played."""


# ---------- Championship ----------


class Championship:
    """
    A round-robin championship between an even number of teams.
    One random source drives both the second-leg ordering and every score.
    """

    def __init__(
        self,
        teams: Sequence[Team],
        double_leg: bool = False,
        rng: RandomSource | None = None,
    ) -> None:
        self.teams: list[Team] = list(teams)
        self.rng = rng if rng is not None else SeededRNG()
        self.schedule: Schedule = build_schedule(self.teams, double_leg=double_leg, rng=self.rng)
        self.simulator = MatchSimulator(ScoreSampler(self.rng))
        self._records: dict[str, TeamRecord] = {t.name: TeamRecord() for t in self.teams}
        self._next_round = 0

    @classmethod
    def from_config(cls, config: ChampionshipConfig) -> Championship:
        return cls(config.to_teams(), double_leg=config.double_leg, rng=SeededRNG(config.seed))

    @property
    def double_leg(self) -> bool:
        return self.schedule.double_leg

    @property
    def current_round(self) -> int:
        """Number of rounds played so far."""
        return self._next_round

    @property
    def total_rounds(self) -> int:
        return len(self.schedule)

    @property
    def is_complete(self) -> bool:
        return self._next_round >= self.total_rounds

    @property
    def records(self) -> dict[str, TeamRecord]:
        """Copies of the accumulated records, keyed by team name."""
        return {name: TeamRecord(**vars(rec)) for name, rec in self._records.items()}

    def play_next_round(self) -> Round:
        """Play the next pending round and return it."""
        if self.is_complete:
            raise ChampionshipCompleteError(
                f"All {self.total_rounds} rounds have already been played"
            )
        rnd = self.schedule.rounds[self._next_round]
        self.simulator.play_round(rnd, self._records)
        self._next_round += 1
        logger.debug("Round %d/%d played", self._next_round, self.total_rounds)
        return rnd

    def simulate_all_games(self) -> None:
        """Play every remaining round."""
        while not self.is_complete:
            self.play_next_round()
        logger.info("Championship complete: %d rounds", self.total_rounds)

    def standings(self) -> list[TeamStanding]:
        """Ranked table from the results so far."""
        return build_standings(self.teams, self._records)
