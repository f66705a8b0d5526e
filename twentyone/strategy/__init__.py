"""Strategies, combinators and adapters."""

from twentyone.strategy.actions import Action, Strategy, InvalidActionError, ensure_action
from twentyone.strategy.basic import (
    stop_at,
    louis,
    both,
    always_draw,
    always_done,
    resolve_strategy,
    strategy_names,
    UnknownStrategyError,
)
from twentyone.strategy.console import watch_player, ask_user, hit1

__all__ = [
    "Action",
    "Strategy",
    "InvalidActionError",
    "ensure_action",
    "stop_at",
    "louis",
    "both",
    "always_draw",
    "always_done",
    "resolve_strategy",
    "strategy_names",
    "UnknownStrategyError",
    "watch_player",
    "ask_user",
    "hit1",
]
