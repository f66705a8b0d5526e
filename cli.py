"""Command line front end: play one game by hand or run a batch of trials."""

import argparse
import logging
import sys

from config import config
from twentyone.cards import seed_default_source
from twentyone.game import play_game
from twentyone.statistics import summarize_trials
from twentyone.strategy import (
    Strategy,
    UnknownStrategyError,
    ask_user,
    resolve_strategy,
    strategy_names,
    watch_player,
)


def _strategy(name: str, limit: int | None) -> Strategy:
    """Resolve a strategy or exit with a usage error."""
    try:
        return resolve_strategy(name, limit)
    except UnknownStrategyError:
        raise SystemExit(f"Unknown strategy '{name}'; choose from {', '.join(strategy_names())}")
    except ValueError as exc:
        raise SystemExit(str(exc))


def cmd_play(args: argparse.Namespace) -> int:
    """Play one interactive game against the house."""
    house = _strategy(args.house, args.house_limit)
    if args.watch:
        house = watch_player(house)

    outcome = play_game(house, ask_user)
    print(outcome.value)
    return 0


def cmd_trials(args: argparse.Namespace) -> int:
    """Run a batch of games and print the player's results."""
    if args.count < 0:
        raise SystemExit("--count cannot be negative")
    if args.count > config.simulation.max_trials:
        raise SystemExit(f"--count must not exceed {config.simulation.max_trials}")

    player = _strategy(args.player, args.player_limit)
    house = _strategy(args.house, args.house_limit)

    summary = summarize_trials(player, house, args.count)
    print(f"Player won {summary.wins} of {summary.games} games ({summary.win_rate:.1%})")
    for outcome, n in sorted(summary.outcomes.items(), key=lambda item: item[0].value):
        print(f"    {outcome.value}: {n}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate simplified Twenty-One games"
    )
    parser.add_argument(
        "--seed", type=int, default=config.simulation.seed,
        help="Seed the card stream for reproducible runs"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play one game, answering y/n/q at the prompt")
    play.add_argument("--house", default=config.simulation.house_strategy)
    play.add_argument("--house-limit", type=int, default=config.simulation.house_limit)
    play.add_argument(
        "--watch", action="store_true",
        help="Print the house strategy's decisions"
    )
    play.set_defaults(func=cmd_play)

    trials = sub.add_parser("trials", help="Run many games and count player wins")
    trials.add_argument("--player", default="louis")
    trials.add_argument("--player-limit", type=int, default=None)
    trials.add_argument("--house", default=config.simulation.house_strategy)
    trials.add_argument("--house-limit", type=int, default=config.simulation.house_limit)
    trials.add_argument(
        "--count", type=int, default=config.simulation.default_trials,
        help="Number of games to play"
    )
    trials.set_defaults(func=cmd_trials)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.logging.level)

    if args.seed is not None:
        seed_default_source(args.seed)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
