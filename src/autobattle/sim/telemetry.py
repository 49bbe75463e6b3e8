"""Telemetry data models for per-turn and per-match statistics.

- **SideSnapshot / TurnSnapshot**: what an observer sees each turn, taken
  right after deployment (field sizes, player HP, cards left in deck).
- **MatchTelemetry**: the result plus every snapshot and damage totals.

All are plain ``dataclass`` instances (not Pydantic models) to keep
collection cheap during batch runs.  Nothing here feeds back into the
simulation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from autobattle.sim.core.game_state import MatchResult, MatchState, SideState


@dataclass(frozen=True)
class SideSnapshot:
    """One side's visible state at a point in the turn.

    Attributes
    ----------
    field_size:
        Units currently on the field.
    hp:
        Player HP.
    cards_remaining:
        Cards not yet drawn from the deck.
    deployed:
        Units this side deployed during the current turn.
    units:
        ``(name, current_hp)`` for each unit, in field order.
    """

    field_size: int
    hp: int
    cards_remaining: int
    deployed: int = 0
    units: tuple[tuple[str, int], ...] = ()

    @classmethod
    def capture(cls, side: SideState, deployed: int = 0) -> SideSnapshot:
        return cls(
            field_size=len(side.field),
            hp=side.hp,
            cards_remaining=side.cards_remaining,
            deployed=deployed,
            units=tuple((u.name, u.current_hp) for u in side.field),
        )


@dataclass(frozen=True)
class TurnSnapshot:
    turn: int
    mana: int
    sides: tuple[SideSnapshot, SideSnapshot]

    @classmethod
    def capture(cls, state: MatchState, deployed: tuple[int, int] = (0, 0)) -> TurnSnapshot:
        return cls(
            turn=state.turn,
            mana=state.mana,
            sides=(
                SideSnapshot.capture(state.side(1), deployed[0]),
                SideSnapshot.capture(state.side(2), deployed[1]),
            ),
        )


@dataclass
class MatchTelemetry:
    """Stats from a single match.

    The per-side lists are indexed by ``side - 1``.

    Attributes
    ----------
    result:
        Terminal result of the match.
    snapshots:
        One :class:`TurnSnapshot` per turn played.
    units_deployed:
        Units each side put onto its field.
    units_lost:
        Units each side lost in cleanup.
    unit_damage:
        Damage each side dealt to enemy units.
    player_damage:
        Damage each side dealt directly to the enemy player.
    """

    result: MatchResult | None = None
    snapshots: list[TurnSnapshot] = field(default_factory=list)
    units_deployed: list[int] = field(default_factory=lambda: [0, 0])
    units_lost: list[int] = field(default_factory=lambda: [0, 0])
    unit_damage: list[int] = field(default_factory=lambda: [0, 0])
    player_damage: list[int] = field(default_factory=lambda: [0, 0])
