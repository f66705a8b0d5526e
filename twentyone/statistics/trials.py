"""Repeated games for estimating a strategy's win rate."""

import logging
from collections import Counter
from dataclasses import dataclass, field

from twentyone.cards import CardSource
from twentyone.game.engine import play_game
from twentyone.game.state import Outcome
from twentyone.strategy.actions import Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialSummary:
    """Results of a batch of games."""

    games: int
    outcomes: Counter = field(default_factory=Counter)

    @property
    def wins(self) -> int:
        """Games counted as player wins (user won or house busted)."""
        return sum(n for outcome, n in self.outcomes.items() if outcome.is_player_win)

    @property
    def win_rate(self) -> float:
        """Fraction of games the player won."""
        if self.games == 0:
            return 0.0
        return self.wins / self.games

    def count(self, outcome: Outcome) -> int:
        """Return how many games ended with the given outcome."""
        return self.outcomes.get(outcome, 0)


def summarize_trials(
    player_strategy: Strategy,
    house_strategy: Strategy,
    count: int,
    cards: CardSource | None = None,
) -> TrialSummary:
    """
    Play ``count`` games with fixed strategies and tally every outcome.

    Args:
        player_strategy: Strategy under evaluation
        house_strategy: Strategy the house plays with
        count: Number of games to play
        cards: Card source shared by all games (process-wide if not provided)

    Returns:
        Summary of the batch

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError("Trial count cannot be negative")

    logger.info("Running %d trials", count)
    outcomes: Counter = Counter()
    for _ in range(count):
        outcomes[play_game(house_strategy, player_strategy, cards=cards)] += 1

    summary = TrialSummary(games=count, outcomes=outcomes)
    logger.info("Trials complete: %d wins out of %d", summary.wins, count)
    return summary


def run_trials(
    player_strategy: Strategy,
    house_strategy: Strategy,
    count: int,
    cards: CardSource | None = None,
) -> int:
    """Play ``count`` games and return how many the player won."""
    return summarize_trials(player_strategy, house_strategy, count, cards=cards).wins
