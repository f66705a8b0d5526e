"""Pytest fixtures for Twenty-One simulator tests."""

import pytest
from random import Random

from twentyone.cards import CardSource
from twentyone.game.events import EventEmitter
from twentyone.strategy import Action, stop_at


class ScriptedCards(CardSource):
    """Card source that deals a fixed sequence of cards."""

    def __init__(self, *cards: int) -> None:
        super().__init__(Random(0))
        self._script = list(cards)

    def draw(self) -> int:
        if not self._script:
            raise AssertionError("Scripted card source ran out of cards")
        self._cards_drawn += 1
        return self._script.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._script)


class RecordingStrategy:
    """Strategy that replays scripted actions and records its inputs."""

    def __init__(self, *actions: Action, then: Action = Action.DONE) -> None:
        self._actions = list(actions)
        self._then = then
        self.calls: list[tuple[int, int]] = []

    def __call__(self, tally: int, opponent_up: int) -> Action:
        self.calls.append((tally, opponent_up))
        if self._actions:
            return self._actions.pop(0)
        return self._then


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def cards(rng):
    """A seeded card source."""
    return CardSource(rng=rng)


@pytest.fixture
def scripted():
    """Factory for scripted card sources."""
    return ScriptedCards


@pytest.fixture
def recording():
    """Factory for recording strategies."""
    return RecordingStrategy


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def house_stop_17():
    """Typical house strategy: hold at 17."""
    return stop_at(17)
