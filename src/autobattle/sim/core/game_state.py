"""Match state for the auto-battler simulator.

Houses the rule constants (``EngineConfig``), the mutable per-side and
per-match state owned by one simulation, and the immutable ``MatchResult``
returned when the match ends.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from autobattle.errors import InvalidConfiguration
from autobattle.ir.cards import Strategy
from autobattle.sim.core.entities import ModifiedCard, UnitInstance


# ---------------------------------------------------------------------------
# EngineConfig
# ---------------------------------------------------------------------------

class EngineConfig(BaseModel):
    """Rule constants injected into the match engine.

    The defaults are the standard ruleset; balance experiments can vary any
    of them without touching engine code.
    """

    model_config = ConfigDict(frozen=True)

    max_field_size: int = 5
    max_turns: int = 20
    starting_hp: int = 100
    starting_mana: int = 4
    mana_per_turn: int = 1

    timeout_tie_winner: int = 2
    """Side awarded the win when a timed-out match ends with equal HP."""

    def check(self) -> None:
        """Raise :class:`InvalidConfiguration` if any constant is out of range."""
        problems: list[str] = []
        if self.max_field_size < 1:
            problems.append(f"max_field_size must be >= 1, got {self.max_field_size}")
        if self.max_turns < 1:
            problems.append(f"max_turns must be >= 1, got {self.max_turns}")
        if self.starting_hp < 1:
            problems.append(f"starting_hp must be >= 1, got {self.starting_hp}")
        if self.starting_mana < 0:
            problems.append(f"starting_mana must be >= 0, got {self.starting_mana}")
        if self.mana_per_turn < 0:
            problems.append(f"mana_per_turn must be >= 0, got {self.mana_per_turn}")
        if self.timeout_tie_winner not in (1, 2):
            problems.append(
                f"timeout_tie_winner must be 1 or 2, got {self.timeout_tie_winner}"
            )
        if problems:
            raise InvalidConfiguration("; ".join(problems))


# ---------------------------------------------------------------------------
# SideState
# ---------------------------------------------------------------------------

class SideState(BaseModel):
    """Everything one player owns during a match."""

    side: int
    hp: int
    strategy: Strategy
    deck: list[ModifiedCard]
    """Flavored deck pool in draw order.  Never reordered."""

    cursor: int = 0
    """Index of the next card to draw."""

    field: list[UnitInstance] = Field(default_factory=list)

    # -- queries -------------------------------------------------------------

    @property
    def cards_remaining(self) -> int:
        return len(self.deck) - self.cursor

    @property
    def is_decked_out(self) -> bool:
        """No units on the field and nothing left to draw."""
        return not self.field and self.cursor >= len(self.deck)

    @property
    def living_units(self) -> list[UnitInstance]:
        return [u for u in self.field if not u.is_dead]

    def next_card(self) -> ModifiedCard | None:
        if self.cursor >= len(self.deck):
            return None
        return self.deck[self.cursor]


# ---------------------------------------------------------------------------
# MatchState
# ---------------------------------------------------------------------------

class MatchState(BaseModel):
    """Full mutable state of one match.  Never shared between matches."""

    model_config = {"arbitrary_types_allowed": True}

    sides: list[SideState]
    mana: int
    turn: int = 1
    next_uid: int = 1
    rng: Any = Field(default=None, exclude=True)
    """Tie-break ``GameRNG``, or ``None`` for field-order ties."""

    def side(self, n: int) -> SideState:
        return self.sides[n - 1]

    def opponent(self, n: int) -> SideState:
        return self.sides[2 - n]

    def alloc_uid(self) -> int:
        uid = self.next_uid
        self.next_uid += 1
        return uid


# ---------------------------------------------------------------------------
# MatchResult
# ---------------------------------------------------------------------------

class ResultReason(str, Enum):
    """Why a match ended."""

    PLAYER_HP = "player-hp"
    DECK_OUT = "deck-out"
    TIMEOUT = "timeout"


class MatchResult(BaseModel):
    """Terminal outcome of a match."""

    model_config = ConfigDict(frozen=True)

    winner: int
    """``1`` or ``2``."""

    turn: int
    """Turn on which the match ended (``max_turns`` on timeout)."""

    reason: ResultReason
    final_hp: tuple[int, int]
    """Player HP of side 1 and side 2 when the match ended."""

    seed: int | None = None
    """Tie-break seed, enough to replay the match exactly."""

    @property
    def is_hp_tie(self) -> bool:
        """A timeout decided by ``timeout_tie_winner`` rather than by HP."""
        return self.reason is ResultReason.TIMEOUT and self.final_hp[0] == self.final_hp[1]
