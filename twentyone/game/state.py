"""Game, turn and outcome enumerations."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: DEALING → PLAYER_TURN → HOUSE_TURN → RESOLVED, with QUIT
    reachable from either turn.
    """

    # Up cards being dealt
    DEALING = auto()

    # Player draws until done, bust or quit
    PLAYER_TURN = auto()

    # House draws until done, bust or quit
    HOUSE_TURN = auto()

    # Outcome decided
    RESOLVED = auto()

    # A strategy quit the game
    QUIT = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class TurnState(Enum):
    """States of a single party's draw loop."""

    DRAWING = auto()
    BUSTED = auto()
    STOPPED = auto()
    QUIT = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if the turn is over."""
        return self is not TurnState.DRAWING


class Outcome(Enum):
    """Terminal result of one game."""

    USER_QUIT = "user_quit"
    USER_BUSTED = "user_busted"
    HOUSE_BUSTED = "house_busted"
    HOUSE_WON = "house_won"
    USER_WON = "user_won"

    @property
    def is_player_win(self) -> bool:
        """Check if the outcome counts as a win for the player."""
        return self in (Outcome.USER_WON, Outcome.HOUSE_BUSTED)

    def __str__(self) -> str:
        return self.value
