"""Configuration errors raised before a match or batch starts.

Both exceptions subclass ``ValueError`` so callers that only care about
"bad input" can catch that.  Nothing in this package raises once a match
is underway: every turn transition operates on already-validated state.
"""

from __future__ import annotations


class InvalidCardReference(ValueError):
    """A deck references a card id that is not in the catalog."""

    def __init__(self, card_id: str, deck_name: str | None = None) -> None:
        self.card_id = card_id
        self.deck_name = deck_name
        where = f" in deck {deck_name!r}" if deck_name else ""
        super().__init__(f"Unknown card id {card_id!r}{where}")


class InvalidConfiguration(ValueError):
    """Empty deck, non-positive trial count, or out-of-range engine constant."""
