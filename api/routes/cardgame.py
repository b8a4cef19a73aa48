"""Card deck API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from api.schemas import CardResponse, DeckResponse, MessageResponse
from core.cards import DeckState, Face, Suit

router = APIRouter()

logger = logging.getLogger(__name__)


def get_deck(request: Request) -> DeckState:
    """Return the deck owned by the running application."""
    return request.app.state.deck


Deck = Annotated[DeckState, Depends(get_deck)]


@router.get("/drawcard")
def draw_card(deck: Deck) -> CardResponse:
    """Draw a card from the top of the deck."""
    card = deck.draw()
    if card is None:
        logger.info("Draw requested on an empty deck")
        raise HTTPException(status_code=404, detail="No cards left in the deck")
    return CardResponse.model_validate(card)


@router.post("/shuffle")
def shuffle(deck: Deck) -> MessageResponse:
    """Shuffle the cards remaining in the deck."""
    deck.shuffle()
    return MessageResponse(message="Deck shuffled successfully")


@router.post("/restart")
def restart(deck: Deck) -> MessageResponse:
    """Restart the game with a fresh deck."""
    deck.reset()
    return MessageResponse(message="Game restarted with a fresh deck")


@router.get("/show")
def show_deck(deck: Deck) -> DeckResponse:
    """Show all cards currently in the deck."""
    cards = deck.show()
    return DeckResponse(
        count=len(cards),
        cards=[CardResponse.model_validate(c) for c in cards],
    )


@router.post("/putcard")
def put_card(
    deck: Deck,
    suit: Annotated[Suit, Query()],
    face: Annotated[Face, Query()],
) -> MessageResponse:
    """Put a specific card back on the bottom of the deck."""
    if not deck.put_card(suit, face):
        logger.info("Rejected duplicate card: %s of %s", face, suit)
        raise HTTPException(status_code=400, detail="Card already exists in the deck")
    return MessageResponse(message=f"{face} of {suit} added to the deck")
