"""Twenty-One simulation engine: card source, strategies, game flow and trials."""

from twentyone.cards import CardSource, generate_card
from twentyone.game import Outcome, play_game
from twentyone.statistics import run_trials

__all__ = [
    "CardSource",
    "generate_card",
    "Outcome",
    "play_game",
    "run_trials",
]
