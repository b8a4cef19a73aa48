"""Card and DeckState classes - the single live deck and its reset template."""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from random import Random

logger = logging.getLogger(__name__)


class Suit(str, Enum):
    """Card suits, in reference deck order."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value


class Face(str, Enum):
    """Card faces, in reference deck order."""

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"
    SEVEN = "Seven"
    EIGHT = "Eight"
    NINE = "Nine"
    TEN = "Ten"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    face: Face

    def __str__(self) -> str:
        return f"{self.face} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.face.name})"


def build_reference_deck() -> tuple[Card, ...]:
    """Return all 52 cards, every face of Hearts first, then Diamonds, Clubs, Spades."""
    return tuple(Card(suit, face) for suit in Suit for face in Face)


class DeckState:
    """
    Owner of the live deck and the reference deck it resets to.

    The front of the live deck is the top card. Every operation runs under a
    single lock, so one instance may be shared by concurrent request handlers.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Build the reference deck and deal a fresh ordered copy into play.

        Args:
            rng: Random number generator for shuffling
        """
        self._rng = rng or Random()
        self._lock = threading.Lock()
        self._reference = build_reference_deck()
        self._cards: list[Card] = list(self._reference)

    def draw(self) -> Card | None:
        """Remove and return the top card, or None if the deck is empty."""
        with self._lock:
            if not self._cards:
                return None
            card = self._cards.pop(0)
            logger.debug("Drew %s, %d cards left", card, len(self._cards))
            return card

    def shuffle(self) -> None:
        """Shuffle the cards currently in the deck."""
        with self._lock:
            self._rng.shuffle(self._cards)
            logger.debug("Shuffled %d cards", len(self._cards))

    def reset(self) -> None:
        """Reset the deck to all 52 cards in reference order."""
        with self._lock:
            self._cards = list(self._reference)
            logger.debug("Deck reset to %d cards", len(self._cards))

    def show(self) -> list[Card]:
        """Return a copy of the deck in current order."""
        with self._lock:
            return list(self._cards)

    def put_card(self, suit: Suit, face: Face) -> bool:
        """
        Put a card on the bottom of the deck unless it is already present.

        Args:
            suit: Suit of the card to add
            face: Face of the card to add

        Returns:
            True if the card was added, False if the deck already holds it
        """
        card = Card(suit, face)
        with self._lock:
            if any(c == card for c in self._cards):
                return False
            self._cards.append(card)
            logger.debug("Put %s, %d cards in deck", card, len(self._cards))
            return True

    @property
    def reference(self) -> tuple[Card, ...]:
        """Return the reference deck used by reset."""
        return self._reference

    def __len__(self) -> int:
        with self._lock:
            return len(self._cards)

    def __contains__(self, card: object) -> bool:
        with self._lock:
            return card in self._cards
