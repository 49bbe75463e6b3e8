"""Pydantic v2 models for trial aggregates.

These models define the structured output of balance analysis: one
matchup's win/turn statistics, and one deck's record against a field of
opponents.  All are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MatchupStats(BaseModel):
    """Aggregate of repeated matches between the same two decks."""

    deck_a: str
    deck_b: str
    games: int
    wins_a: int
    wins_b: int
    win_rate_a: float
    """Percentage (0-100) of games won by ``deck_a``."""
    avg_turns: float
    reasons: dict[str, int] = Field(default_factory=dict)
    """Games per end reason (``player-hp``, ``deck-out``, ``timeout``)."""
    timeout_ties: int = 0
    """Timeouts with equal HP, decided by the configured tie winner."""


class FieldStats(BaseModel):
    """One deck's combined record against several opponents."""

    deck: str
    wins: int
    games: int
    win_rate: float
    """Percentage (0-100) of all games won, each matchup weighted equally."""
    matchups: list[MatchupStats] = Field(default_factory=list)
