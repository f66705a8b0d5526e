"""Per-party draw loop driven by a small state machine."""

from dataclasses import dataclass

from transitions import Machine

from twentyone.cards import BUST_LIMIT, CardSource
from twentyone.game.events import EventEmitter, EventType
from twentyone.game.state import TurnState
from twentyone.strategy.actions import Action, Strategy, ensure_action


@dataclass
class PartyState:
    """One side of the table during a game."""

    name: str
    tally: int
    up_card: int
    strategy: Strategy

    @classmethod
    def deal(cls, name: str, up_card: int, strategy: Strategy) -> "PartyState":
        """Start a party whose tally is just its up card."""
        return cls(name=name, tally=up_card, up_card=up_card, strategy=strategy)


class TurnEngine:
    """
    Runs one party's turn until it busts, stops or quits.

    The strategy sees the party's tally and the opponent's up card. A
    card that would push the tally over 21 busts the party; the strategy
    is not asked again after that.
    """

    STATES = [s.name.lower() for s in TurnState]

    TRANSITIONS = [
        {"trigger": "take_card", "source": "drawing", "dest": "drawing"},
        {"trigger": "ask_again", "source": "drawing", "dest": "drawing"},
        {"trigger": "bust", "source": "drawing", "dest": "busted"},
        {"trigger": "stop", "source": "drawing", "dest": "stopped"},
        {"trigger": "give_up", "source": "drawing", "dest": "quit"},
    ]

    # Shared by every turn; a turn is attached as a model only while it runs
    machine = Machine(
        model=None,
        states=STATES,
        transitions=TRANSITIONS,
        initial="drawing",
        auto_transitions=False,
        model_attribute="_machine_state",
    )

    def __init__(
        self,
        party: PartyState,
        opponent_up_card: int,
        cards: CardSource,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a turn.

        Args:
            party: The party taking the turn; its tally is updated in place
            opponent_up_card: The card the strategy sees for the other side
            cards: Where drawn cards come from
            events: Emitter to report progress on
        """
        self.party = party
        self.opponent_up_card = opponent_up_card
        self.cards = cards
        self.events = events or EventEmitter()
        self.machine.add_model(self)

    @property
    def state(self) -> TurnState:
        """Get current turn state as enum."""
        return TurnState[self._machine_state.upper()]  # type: ignore

    def _consult(self) -> Action:
        """Ask the party's strategy what to do next."""
        action = ensure_action(
            self.party.strategy(self.party.tally, self.opponent_up_card)
        )
        self.events.emit_new(
            EventType.STRATEGY_CONSULTED,
            party=self.party.name,
            tally=self.party.tally,
            opponent_up_card=self.opponent_up_card,
            action=action.value,
        )
        return action

    def _draw(self) -> None:
        """Draw one card, busting the party if it goes over the limit."""
        card = self.cards.draw()
        total = self.party.tally + card

        if total > BUST_LIMIT:
            self.events.emit_new(
                EventType.PARTY_BUSTED,
                party=self.party.name,
                card=card,
                total=total,
            )
            self.bust()
            return

        self.party.tally = total
        self.events.emit_new(
            EventType.CARD_DRAWN,
            party=self.party.name,
            card=card,
            tally=total,
        )
        self.take_card()

    def step(self) -> TurnState:
        """Consult the strategy once and apply its action."""
        action = self._consult()

        if action is Action.DRAW:
            self._draw()
        elif action is Action.RETRY:
            self.events.emit_new(EventType.STRATEGY_RETRY, party=self.party.name)
            self.ask_again()
        elif action is Action.DONE:
            self.events.emit_new(
                EventType.PARTY_STOPPED,
                party=self.party.name,
                tally=self.party.tally,
            )
            self.stop()
        else:
            self.events.emit_new(EventType.PARTY_QUIT, party=self.party.name)
            self.give_up()

        return self.state

    def run(self) -> TurnState:
        """Step until the turn reaches a terminal state, then detach from the machine."""
        try:
            while not self.state.is_terminal:
                self.step()
        finally:
            if self in self.machine.models:
                self.machine.remove_model(self)
        return self.state
