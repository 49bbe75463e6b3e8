"""Static game definitions: card templates, deck configuration, and tags.

Everything here is an immutable Pydantic model or a ``str`` enum so it can
be loaded from JSON, shared read-only between concurrent matches, and
pickled to worker processes.
"""

from .cards import CardTemplate, Flavor, Strategy
from .decks import DeckConfig

__all__ = [
    "CardTemplate",
    "DeckConfig",
    "Flavor",
    "Strategy",
]
