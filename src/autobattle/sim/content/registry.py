"""Content registry -- loads and serves card templates and deck configs.

The stock catalog and example decks ship as JSON in ``autobattle/data/``.
Decks are checked against the catalog here, before any match starts, so
the engine itself never sees an unknown card id.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from autobattle.errors import InvalidCardReference, InvalidConfiguration
from autobattle.ir.cards import CardTemplate
from autobattle.ir.decks import DeckConfig
from autobattle.sim.core.entities import ModifiedCard
from autobattle.sim.mechanics.flavors import apply_flavor, resolve_flavor

logger = logging.getLogger(__name__)

# Default paths inside the installed package.
_DATA_DIR = Path(__file__).resolve().parents[2] / "data"  # sim/content -> autobattle
_DEFAULT_CARDS_PATH = _DATA_DIR / "cards.json"
_DEFAULT_DECKS_PATH = _DATA_DIR / "decks.json"


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class CardRegistry:
    """Loads and serves the card catalog and named deck configurations.

    Usage::

        registry = CardRegistry()
        registry.load_cards()
        registry.load_decks()

        goblin = registry.get_card("Goblin")
        rush = registry.get_deck("goblin_rush")
        pool = registry.build_deck_pool(rush)
    """

    def __init__(self) -> None:
        self.cards: dict[str, CardTemplate] = {}
        self.decks: dict[str, DeckConfig] = {}

    @classmethod
    def default(cls) -> CardRegistry:
        """A registry with the stock catalog and example decks loaded."""
        registry = cls()
        registry.load_cards()
        registry.load_decks()
        return registry

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_cards(self, path: str | Path | None = None) -> None:
        """Load card templates from a JSON list of ``{id, hp, attack, speed, cost}``."""
        path = Path(path) if path is not None else _DEFAULT_CARDS_PATH
        for raw in _read_json(path):
            self.add_card(CardTemplate.model_validate(raw))
        logger.debug("Loaded %d card templates from %s", len(self.cards), path)

    def load_decks(self, path: str | Path | None = None) -> None:
        """Load named decks from a JSON object mapping key -> deck config."""
        path = Path(path) if path is not None else _DEFAULT_DECKS_PATH
        for key, raw in _read_json(path).items():
            self.decks[key] = DeckConfig.model_validate(raw)
        logger.debug("Loaded %d decks from %s", len(self.decks), path)

    def add_card(self, card: CardTemplate) -> None:
        self.cards[card.id] = card

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_card(self, card_id: str) -> CardTemplate | None:
        return self.cards.get(card_id)

    def get_deck(self, key: str) -> DeckConfig | None:
        return self.decks.get(key)

    # ------------------------------------------------------------------
    # Deck building
    # ------------------------------------------------------------------

    def validate_deck(self, deck: DeckConfig) -> None:
        """Raise if *deck* is empty or references an unknown card."""
        if not deck.cards:
            raise InvalidConfiguration(f"Deck {deck.label(1)!r} has no cards")
        for card_id in deck.cards:
            if card_id not in self.cards:
                raise InvalidCardReference(card_id, deck.name)

    def build_deck_pool(self, deck: DeckConfig) -> list[ModifiedCard]:
        """Validate *deck* and return its flavored cards in draw order."""
        self.validate_deck(deck)
        flavor = resolve_flavor(deck.flavor)
        flavored: dict[str, ModifiedCard] = {}
        pool: list[ModifiedCard] = []
        for card_id in deck.cards:
            card = flavored.get(card_id)
            if card is None:
                card = apply_flavor(self.cards[card_id], flavor)
                flavored[card_id] = card
            pool.append(card)
        return pool
