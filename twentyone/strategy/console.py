"""Console adapters: a human-driven strategy and a watching wrapper."""

import sys
from functools import partial
from typing import TextIO

from twentyone.strategy.actions import Action, Strategy

_ANSWERS = {
    "y": Action.DRAW,
    "n": Action.DONE,
    "q": Action.QUIT,
}


def watch_player(strategy: Strategy, out: TextIO | None = None) -> Strategy:
    """
    Wrap a strategy so its inputs and decisions are printed.

    The wrapped strategy's answer is passed through unchanged.
    """

    def watched(tally: int, opponent_up: int) -> Action:
        stream = out or sys.stdout
        print(f"Current hand: {tally}, Opponent card: {opponent_up}", file=stream)
        choice = strategy(tally, opponent_up)
        print(f"Strategy decided to {choice}", file=stream)
        return choice

    return watched


def parse_answer(line: str) -> Action | None:
    """Map a line of user input to an action, or None if unrecognized."""
    if not line:
        return None
    return _ANSWERS.get(line[0].lower())


def ask_user(
    tally: int,
    opponent_up: int,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> Action:
    """
    Ask a human whether to take a card.

    An empty read (end of input) quits; anything not starting with
    y, n or q asks again via RETRY.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    print(f"Opponent facing up: {opponent_up}", file=out)
    print(f"Your current total: {tally}", file=out)
    print("Take a card? ", end="", file=out, flush=True)

    try:
        line = stdin.readline()
    except (UnicodeDecodeError, OSError) as exc:
        print(f"Error: {exc}", file=out)
        return Action.RETRY
    if line == "":
        print("Goodbye.", file=out)
        return Action.QUIT

    answer = parse_answer(line)
    if answer is None:
        print(f"Sorry, didn't understand {line.strip()!r}", file=out)
        return Action.RETRY
    return answer


hit1 = ask_user


def make_console_strategy(stdin: TextIO, out: TextIO) -> Strategy:
    """Bind ``ask_user`` to specific input and output streams."""
    return partial(ask_user, stdin=stdin, out=out)
