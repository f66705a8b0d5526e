"""Twenty-One game orchestration with a state machine."""

import logging
from typing import Callable

from transitions import Machine

from twentyone.cards import CardSource, default_source
from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.state import GameState, Outcome, TurnState
from twentyone.game.turn import PartyState, TurnEngine
from twentyone.strategy.actions import Strategy

logger = logging.getLogger(__name__)


class TwentyOneGame:
    """
    One game of Twenty-One between a player and the house.

    The player plays out a full turn first; the house only acts once the
    player has stopped. Either strategy quitting ends the game as a user
    quit. Ties go to the house.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "house_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "resolved"},
        {"trigger": "house_busts", "source": "house_turn", "dest": "resolved"},
        {"trigger": "house_done", "source": "house_turn", "dest": "resolved"},
        {"trigger": "abort", "source": ["player_turn", "house_turn"], "dest": "quit"},
    ]

    # Shared by every game; a game stays attached until it has been played
    machine = Machine(
        model=None,
        states=STATES,
        transitions=TRANSITIONS,
        initial="dealing",
        auto_transitions=False,
        model_attribute="_machine_state",
    )

    def __init__(
        self,
        house_strategy: Strategy,
        player_strategy: Strategy,
        cards: CardSource | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            house_strategy: Decision function for the house
            player_strategy: Decision function for the player
            cards: Card source (process-wide source if not provided)
            events: Emitter to report game events on
        """
        self.house_strategy = house_strategy
        self.player_strategy = player_strategy
        self.cards = cards or default_source()
        self.events = events or EventEmitter()

        self.house: PartyState | None = None
        self.player: PartyState | None = None
        self.outcome: Outcome | None = None

        self.machine.add_model(self)

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _deal_up_cards(self) -> tuple[PartyState, PartyState]:
        """Deal each side its up card, house first, and return (house, player)."""
        house_up = self.cards.draw()
        player_up = self.cards.draw()
        self.house = PartyState.deal("house", house_up, self.house_strategy)
        self.player = PartyState.deal("player", player_up, self.player_strategy)

        self.events.emit_new(EventType.GAME_STARTED)
        self.events.emit_new(EventType.UP_CARD_DEALT, party="house", card=house_up)
        self.events.emit_new(EventType.UP_CARD_DEALT, party="player", card=player_up)
        return self.house, self.player

    def _run_turn(self, party: PartyState, opponent: PartyState) -> TurnState:
        """Play out one party's turn against the opponent's up card."""
        turn = TurnEngine(party, opponent.up_card, self.cards, self.events)
        return turn.run()

    def play(self) -> Outcome:
        """
        Play the game to completion.

        Returns:
            The game's outcome

        Raises:
            MachineError: If the game has already been played
        """
        self.deal()
        try:
            house, player = self._deal_up_cards()
            return self._play_turns(house, player)
        finally:
            self.machine.remove_model(self)

    def _play_turns(self, house: PartyState, player: PartyState) -> Outcome:
        """Run the player's turn, then the house's, and decide the game."""
        player_result = self._run_turn(player, house)
        if player_result is TurnState.BUSTED:
            self.player_busts()
            return self._finish(Outcome.USER_BUSTED, house, player)
        if player_result is TurnState.QUIT:
            self.abort()
            return self._finish(Outcome.USER_QUIT, house, player)

        self.player_done()

        house_result = self._run_turn(house, player)
        if house_result is TurnState.BUSTED:
            self.house_busts()
            return self._finish(Outcome.HOUSE_BUSTED, house, player)
        if house_result is TurnState.QUIT:
            self.abort()
            return self._finish(Outcome.USER_QUIT, house, player)

        self.house_done()
        if house.tally >= player.tally:
            return self._finish(Outcome.HOUSE_WON, house, player)
        return self._finish(Outcome.USER_WON, house, player)

    def _finish(self, outcome: Outcome, house: PartyState, player: PartyState) -> Outcome:
        """Record and report the outcome."""
        self.outcome = outcome
        self.events.emit_new(
            EventType.GAME_RESOLVED,
            outcome=outcome.value,
            player_tally=player.tally,
            house_tally=house.tally,
        )
        logger.debug(
            "Game finished: %s (player %s, house %s)",
            outcome.value,
            player.tally,
            house.tally,
        )
        return outcome


def play_game(
    house_strategy: Strategy,
    player_strategy: Strategy,
    cards: CardSource | None = None,
) -> Outcome:
    """
    Play one game and return its outcome.

    Args:
        house_strategy: Decision function for the house
        player_strategy: Decision function for the player
        cards: Card source (process-wide source if not provided)
    """
    game = TwentyOneGame(
        house_strategy,
        player_strategy,
        cards=cards,
        events=EventEmitter(keep_history=False),
    )
    return game.play()
