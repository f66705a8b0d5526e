"""Card source - independent uniform draws, no deck."""

from random import Random

CARD_MIN = 1
CARD_MAX = 10
BUST_LIMIT = 21


class CardSource:
    """
    Infinite source of numeric cards.

    Every draw is uniform over 1-10 and independent of previous draws;
    there is no deck to exhaust or reshuffle.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a card source.

        Args:
            rng: Random number generator for reproducible draws
        """
        self._rng = rng or Random()
        self._cards_drawn = 0

    def draw(self) -> int:
        """Draw a card value in [1, 10]."""
        self._cards_drawn += 1
        return self._rng.randint(CARD_MIN, CARD_MAX)

    def seed(self, seed: int | None) -> None:
        """Reseed the underlying random stream."""
        self._rng.seed(seed)

    @property
    def cards_drawn(self) -> int:
        """Return how many cards this source has produced."""
        return self._cards_drawn


# Process-wide stream used when callers don't supply their own source
_default_source = CardSource()


def default_source() -> CardSource:
    """Return the process-wide card source."""
    return _default_source


def seed_default_source(seed: int | None) -> None:
    """Reseed the process-wide card source."""
    _default_source.seed(seed)


def generate_card() -> int:
    """Draw one card from the process-wide source."""
    return _default_source.draw()
