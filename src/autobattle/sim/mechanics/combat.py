"""Combat phase -- speed-ordered attacks, then removal of dead units.

Every living unit on both fields acts once per turn, fastest first.  A unit
killed earlier in the same pass does not act.  Damage goes to an enemy unit
chosen by the acting side's strategy, or straight to the enemy player when
the enemy field has no living units.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from autobattle.sim.mechanics.targeting import select_target

if TYPE_CHECKING:
    from autobattle.sim.core.entities import UnitInstance
    from autobattle.sim.core.game_state import MatchState


@dataclass
class CombatReport:
    """What happened during one combat pass, indexed by attacking side - 1."""

    unit_damage: list[int] = field(default_factory=lambda: [0, 0])
    player_damage: list[int] = field(default_factory=lambda: [0, 0])
    attacks: int = 0


def action_order(state: MatchState) -> list[UnitInstance]:
    """Return every living unit, fastest first.

    Equal speeds keep side 1 before side 2 in field order, unless the
    match carries a tie-break RNG, in which case they are shuffled first
    (``sort`` is stable, so the shuffle decides among equal speeds only).
    """
    units = state.side(1).living_units + state.side(2).living_units
    if state.rng is not None:
        state.rng.shuffle(units)
    units.sort(key=lambda u: u.speed, reverse=True)
    return units


def resolve_combat(state: MatchState) -> CombatReport:
    """Run one combat pass.  Dead units stay on the field until cleanup."""
    report = CombatReport()
    for unit in action_order(state):
        if unit.is_dead:
            continue

        own = state.side(unit.side)
        enemy = state.opponent(unit.side)
        target = select_target(unit, enemy.living_units, own.strategy)
        if target is not None:
            target.take_damage(unit.attack)
            report.unit_damage[unit.side - 1] += unit.attack
        else:
            enemy.hp -= unit.attack
            report.player_damage[unit.side - 1] += unit.attack
        report.attacks += 1
    return report


def remove_dead(state: MatchState) -> list[UnitInstance]:
    """Remove every unit at or below 0 HP.  Returns the removed units."""
    removed: list[UnitInstance] = []
    for side in state.sides:
        dead = [u for u in side.field if u.is_dead]
        if dead:
            side.field = [u for u in side.field if not u.is_dead]
            removed.extend(dead)
    return removed
