"""Built-in strategies and strategy combinators."""

from typing import Callable, Mapping

from twentyone.strategy.actions import Action, Strategy


def stop_at(limit: int) -> Strategy:
    """
    Build a threshold strategy.

    The returned strategy holds once the tally reaches ``limit`` and
    draws below it. The opponent's card is ignored.

    Args:
        limit: Tally at which to stop drawing

    Returns:
        The threshold strategy
    """

    def strategy(tally: int, opponent_up: int) -> Action:
        if tally >= limit:
            return Action.DONE
        return Action.DRAW

    strategy.__name__ = f"stop_at_{limit}"
    return strategy


def louis(tally: int, opponent_up: int) -> Action:
    """
    Louis' strategy: draw below 12, hold above 16.

    In between the decision depends on the opponent's up card. Rules are
    checked in order and the first match wins.
    """
    if tally < 12:
        return Action.DRAW
    if tally > 16:
        return Action.DONE
    if tally == 12:
        return Action.DRAW if opponent_up < 4 else Action.DONE
    if tally == 16:
        return Action.DONE if opponent_up == 10 else Action.DRAW
    if opponent_up > 6:
        return Action.DRAW
    return Action.DONE


def both(first: Strategy, second: Strategy) -> Strategy:
    """
    Combine two strategies so the result draws only if both would draw.

    ``second`` is only consulted when ``first`` draws, and its answer is
    then returned as-is. Any other answer from ``first`` becomes DONE.
    """

    def strategy(tally: int, opponent_up: int) -> Action:
        if first(tally, opponent_up) is Action.DRAW:
            return second(tally, opponent_up)
        return Action.DONE

    strategy.__name__ = (
        f"both_{getattr(first, '__name__', 'strategy')}"
        f"_{getattr(second, '__name__', 'strategy')}"
    )
    return strategy


def always_draw(tally: int, opponent_up: int) -> Action:
    """Draw no matter what."""
    return Action.DRAW


def always_done(tally: int, opponent_up: int) -> Action:
    """Hold on the up card."""
    return Action.DONE


class UnknownStrategyError(KeyError):
    """No strategy registered under the requested name."""


# Named strategies; factories take the threshold as their argument
_FIXED: Mapping[str, Strategy] = {
    "louis": louis,
    "always_draw": always_draw,
    "always_done": always_done,
}

_FACTORIES: Mapping[str, Callable[[int], Strategy]] = {
    "stop_at": stop_at,
}


def strategy_names() -> list[str]:
    """Return all registered strategy names."""
    return sorted([*_FIXED, *_FACTORIES])


def resolve_strategy(name: str, limit: int | None = None) -> Strategy:
    """
    Look up a strategy by name.

    Args:
        name: Registered strategy name
        limit: Threshold for parameterized strategies such as ``stop_at``

    Returns:
        The strategy callable

    Raises:
        UnknownStrategyError: If the name is not registered
        ValueError: If a parameterized strategy is missing its limit
    """
    if name in _FIXED:
        return _FIXED[name]
    if name in _FACTORIES:
        if limit is None:
            raise ValueError(f"Strategy '{name}' requires a limit")
        return _FACTORIES[name](limit)
    raise UnknownStrategyError(name)
