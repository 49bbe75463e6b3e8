"""Pure metric computation functions for balance analysis.

All functions take match results (or already-computed stats) and return
structured metrics.  No side effects, no I/O.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from autobattle.balance.models import FieldStats, MatchupStats

if TYPE_CHECKING:
    from autobattle.sim.core.game_state import MatchResult


def win_rate(wins: int, games: int) -> float:
    """Percentage of *games* won, ``0.0`` for no games."""
    return wins / games * 100 if games > 0 else 0.0


def compute_matchup_stats(
    results: list[MatchResult],
    deck_a: str = "Player 1",
    deck_b: str = "Player 2",
) -> MatchupStats:
    """Aggregate results of ``deck_a`` (side 1) vs ``deck_b`` (side 2)."""
    games = len(results)
    if games == 0:
        return MatchupStats(
            deck_a=deck_a, deck_b=deck_b, games=0,
            wins_a=0, wins_b=0, win_rate_a=0.0, avg_turns=0.0,
        )

    wins_a = sum(1 for r in results if r.winner == 1)
    reasons = Counter(r.reason.value for r in results)

    return MatchupStats(
        deck_a=deck_a,
        deck_b=deck_b,
        games=games,
        wins_a=wins_a,
        wins_b=games - wins_a,
        win_rate_a=win_rate(wins_a, games),
        avg_turns=sum(r.turn for r in results) / games,
        reasons=dict(reasons),
        timeout_ties=sum(1 for r in results if r.is_hp_tie),
    )


def compute_field_stats(deck: str, matchups: list[MatchupStats]) -> FieldStats:
    """Combine several matchups of *deck* (always side 1) into one record."""
    wins = sum(m.wins_a for m in matchups)
    games = sum(m.games for m in matchups)
    return FieldStats(
        deck=deck,
        wins=wins,
        games=games,
        win_rate=win_rate(wins, games),
        matchups=list(matchups),
    )
