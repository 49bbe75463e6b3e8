"""Card and unit models used during a match.

``ModifiedCard`` is the flavored template a deck pool is made of;
``UnitInstance`` is the mutable runtime copy living on a field.  Units are
always built from a card's values, never by aliasing the template, so
damage to one deployed copy cannot leak into another.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# ModifiedCard
# ---------------------------------------------------------------------------

class ModifiedCard(BaseModel):
    """A catalog card after its deck's flavor has been applied."""

    model_config = ConfigDict(frozen=True)

    name: str
    hp: int
    attack: int
    speed: int
    cost: int


# ---------------------------------------------------------------------------
# UnitInstance
# ---------------------------------------------------------------------------

class UnitInstance(BaseModel):
    """A card deployed onto one side's field."""

    uid: int
    """Unique within a match; lets observers track a unit across turns."""

    side: int
    """Owning side, ``1`` or ``2``."""

    name: str
    attack: int
    speed: int
    cost: int
    max_hp: int
    current_hp: int

    @classmethod
    def deploy(cls, card: ModifiedCard, side: int, uid: int) -> UnitInstance:
        """Instantiate *card* at full health for *side*."""
        return cls(
            uid=uid,
            side=side,
            name=card.name,
            attack=card.attack,
            speed=card.speed,
            cost=card.cost,
            max_hp=card.hp,
            current_hp=card.hp,
        )

    # -- HP queries ----------------------------------------------------------

    @property
    def is_dead(self) -> bool:
        return self.current_hp <= 0

    # -- damage --------------------------------------------------------------

    def take_damage(self, amount: int) -> None:
        """Subtract *amount* from current HP.

        There is no floor: HP may go negative until the cleanup step
        removes the unit.
        """
        if amount <= 0:
            return
        self.current_hp -= amount
