"""Statistical harness for strategy evaluation."""

from twentyone.statistics.trials import TrialSummary, run_trials, summarize_trials

__all__ = [
    "TrialSummary",
    "run_trials",
    "summarize_trials",
]
