"""
Championship configuration: validated team line-up and options.
Can be loaded from a JSON file; default_config() is the demo line-up.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from championship.models import DEFAULT_STRENGTH, MAX_STRENGTH, MIN_STRENGTH, Team


class TeamConfig(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    strength: int = Field(
        default=DEFAULT_STRENGTH,
        ge=MIN_STRENGTH,
        le=MAX_STRENGTH,
        description="0 (weakest) .. 4 (strongest); 2 is average",
    )


class ChampionshipConfig(BaseModel):
    teams: list[TeamConfig] = Field(..., min_length=2, description="Even number of teams")
    double_leg: bool = Field(default=False, description="Play return games with home/away swapped")
    seed: int | None = Field(default=None, description="RNG seed for reproducibility")

    @field_validator("teams")
    @classmethod
    def _unique_names(cls, teams: list[TeamConfig]) -> list[TeamConfig]:
        names = [t.name for t in teams]
        if len(set(names)) != len(names):
            raise ValueError("Team names must be unique")
        return teams

    def to_teams(self) -> list[Team]:
        return [Team(name=t.name, strength=t.strength) for t in self.teams]


def load_config(path: str | Path) -> ChampionshipConfig:
    """Read and validate a JSON championship config."""
    return ChampionshipConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))


def default_config() -> ChampionshipConfig:
    return ChampionshipConfig(
        teams=[
            TeamConfig(name="France", strength=3),
            TeamConfig(name="Brésil", strength=4),
            TeamConfig(name="Allemagne", strength=3),
            TeamConfig(name="Argentine", strength=3),
            TeamConfig(name="Espagne", strength=3),
            TeamConfig(name="Angleterre", strength=3),
            TeamConfig(name="Sénégal", strength=2),
            TeamConfig(name="Italie", strength=3),
        ],
        double_leg=True,
    )
