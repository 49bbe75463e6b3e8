"""Deployment phase -- move cards from the deck onto the field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from autobattle.sim.core.entities import UnitInstance

if TYPE_CHECKING:
    from autobattle.sim.core.game_state import MatchState, SideState


def deploy_side(
    state: MatchState,
    side: SideState,
    max_field_size: int,
) -> list[UnitInstance]:
    """Deploy cards for one side with the full turn's mana.

    Greedy over the fixed draw order: stops at the first card that does not
    fit in the remaining mana, even if a cheaper card follows it.

    Returns the newly deployed units.
    """
    deployed: list[UnitInstance] = []
    spent = 0
    while len(side.field) < max_field_size:
        card = side.next_card()
        if card is None or spent + card.cost > state.mana:
            break
        unit = UnitInstance.deploy(card, side=side.side, uid=state.alloc_uid())
        side.field.append(unit)
        side.cursor += 1
        spent += card.cost
        deployed.append(unit)
    return deployed
