"""
Simulate a full round-robin championship and print the calendar and the final table.
Run from project root: python -m championship.run_championship --config data/world_cup.json
"""
from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from championship.config import ChampionshipConfig, default_config, load_config
from championship.models import InvalidInputError
from championship.reports import format_calendar, format_standings
from championship.services.championship_service import Championship


def _resolve_config(args: argparse.Namespace) -> ChampionshipConfig:
    config = load_config(args.config) if args.config else default_config()
    updates = {}
    if args.seed is not None:
        updates["seed"] = args.seed
    if args.double_leg is not None:
        updates["double_leg"] = args.double_leg
    return config.model_copy(update=updates)


def run(config: ChampionshipConfig) -> Championship:
    championship = Championship.from_config(config)
    championship.simulate_all_games()
    print(format_calendar(championship.schedule))
    print(format_standings(championship.standings()))
    return championship


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate a round-robin football championship.")
    parser.add_argument("--config", default=None, help="JSON config with teams and options (default: demo line-up)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    legs = parser.add_mutually_exclusive_group()
    legs.add_argument("--double-leg", dest="double_leg", action="store_true", default=None, help="Play return games")
    legs.add_argument("--single-leg", dest="double_leg", action="store_false", help="One game per pair")
    parser.set_defaults(double_leg=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _resolve_config(args)
        run(config)
    except OSError as e:
        raise SystemExit(f"Cannot read config: {e}")
    except (ValidationError, InvalidInputError) as e:
        raise SystemExit(f"Invalid championship: {e}")


if __name__ == "__main__":
    main(sys.argv[1:])
