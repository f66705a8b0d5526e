"""Strategy actions and the strategy callable contract."""

from enum import Enum
from typing import Callable


class Action(Enum):
    """Decisions a strategy can return."""

    DRAW = "draw"
    DONE = "done"
    QUIT = "quit"
    RETRY = "retry"  # Ask again with the same hand

    def __str__(self) -> str:
        return self.value


# (tally, opponent_up_card) -> Action
Strategy = Callable[[int, int], Action]


class InvalidActionError(TypeError):
    """A strategy returned something that is not an Action."""


def ensure_action(value: object) -> Action:
    """
    Validate a strategy's return value.

    Args:
        value: Whatever the strategy returned

    Returns:
        The value, known to be an Action

    Raises:
        InvalidActionError: If the value is not an Action member
    """
    if not isinstance(value, Action):
        raise InvalidActionError(f"Strategy returned {value!r}, expected an Action")
    return value
