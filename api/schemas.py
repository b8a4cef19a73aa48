"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict

from core.cards import Face, Suit


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    suit: Suit
    face: Face


class DeckResponse(BaseModel):
    """Current deck contents, top card first."""

    count: int
    cards: list[CardResponse]


class MessageResponse(BaseModel):
    """Acknowledgement of a deck operation."""

    message: str
