"""Balance analysis: repeated trials, aggregate metrics, and reports."""

from autobattle.balance.metrics import (
    compute_field_stats,
    compute_matchup_stats,
    win_rate,
)
from autobattle.balance.models import FieldStats, MatchupStats
from autobattle.balance.report import generate_field_report, generate_text_report
from autobattle.balance.trials import run_deck_vs_field, run_trials

__all__ = [
    "FieldStats",
    "MatchupStats",
    "compute_field_stats",
    "compute_matchup_stats",
    "generate_field_report",
    "generate_text_report",
    "run_deck_vs_field",
    "run_trials",
    "win_rate",
]
