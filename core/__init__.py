"""Card deck core - 100% transport-agnostic."""

from core.cards import Card, DeckState, Face, Suit, build_reference_deck

__all__ = [
    "Card",
    "DeckState",
    "Face",
    "Suit",
    "build_reference_deck",
]
