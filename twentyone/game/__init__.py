"""Game engine and state management."""

from twentyone.game.events import GameEvent, EventType, EventEmitter
from twentyone.game.state import GameState, TurnState, Outcome
from twentyone.game.turn import PartyState, TurnEngine
from twentyone.game.engine import TwentyOneGame, play_game

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameState",
    "TurnState",
    "Outcome",
    "PartyState",
    "TurnEngine",
    "TwentyOneGame",
    "play_game",
]
