"""Deck configuration -- the raw input a match is built from."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DeckConfig(BaseModel):
    """An ordered, unshuffled list of card ids plus the deck's tags.

    ``flavor`` and ``strategy`` are kept as raw strings: an unrecognised tag
    is not a validation error, it falls back to a default when the deck pool
    is built (see :mod:`autobattle.sim.mechanics.flavors` and
    :mod:`autobattle.sim.mechanics.targeting`).

    Older deck files name the tags ``type`` and ``targetStrategy``; both
    spellings are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cards: tuple[str, ...]
    """Card ids in draw order (front first)."""

    flavor: str = Field(
        default="base",
        validation_alias=AliasChoices("flavor", "type"),
    )
    strategy: str = Field(
        default="optimize-damage",
        validation_alias=AliasChoices("strategy", "targetStrategy"),
    )
    name: str | None = None
    """Optional display label used by reports and verbose output."""

    def label(self, side: int) -> str:
        return self.name or f"Player {side}"
