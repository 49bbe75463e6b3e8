"""Card templates and the closed sets of deck tags (flavors, strategies)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Flavor(str, Enum):
    """Stat-modifier profile applied to every card of a deck at build time."""

    BASE = "base"
    SPEEDY = "speedy"
    HARDY = "hardy"
    ANGRY = "angry"


class Strategy(str, Enum):
    """Targeting policy used by every unit of one side."""

    TARGET_MANA = "target-mana"
    KILL_SHOT = "kill-shot"
    OPTIMIZE_DAMAGE = "optimize-damage"


class CardTemplate(BaseModel):
    """Immutable catalog entry: a card's base stats before any flavor."""

    model_config = ConfigDict(frozen=True)

    id: str
    """Catalog key, also used as the display name (e.g. ``"Goblin"``)."""

    hp: int = Field(gt=0)
    attack: int = Field(gt=0)
    speed: int = Field(gt=0)
    """Higher speed acts earlier in the combat pass."""

    cost: int = Field(gt=0)
    """Mana needed to deploy.  Never changed by a flavor."""
