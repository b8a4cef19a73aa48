"""FastAPI application entry point."""

import logging
from random import Random

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from api.logging_utils import log_level, setup_logging
from api.routes import cardgame
from config import config
from core.cards import DeckState

logger = logging.getLogger(__name__)

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
    default_limits=[f"{config.rate_limit.requests_per_minute}/minute"],
)


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


@limiter.limit(f"{config.rate_limit.requests_per_minute}/minute")
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def create_app(deck: DeckState | None = None) -> FastAPI:
    """
    Build the application around a single deck.

    Args:
        deck: Deck to serve; a fresh one seeded from DECK_SEED when omitted

    Returns:
        The configured FastAPI application
    """
    setup_logging()

    if deck is None:
        rng = Random(config.deck.seed) if config.deck.seed is not None else None
        deck = DeckState(rng=rng)

    app = FastAPI(
        title="Card Deck",
        description="Single deck of playing cards: draw, shuffle, restart, show and put back",
        version="0.1.0",
        debug=config.debug,
    )
    app.state.deck = deck

    # Add rate limiter to app state and exception handler
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS middleware with configurable origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allowed_origins,
        allow_credentials=config.cors.allow_credentials,
        allow_methods=config.cors.allow_methods,
        allow_headers=config.cors.allow_headers,
    )

    app.add_api_route("/api/health", health_check, methods=["GET"])
    app.include_router(cardgame.router, prefix="/api/cardgame", tags=["cardgame"])

    logger.info("Deck ready with %d cards", len(deck))
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "api.main:app",
        host=config.host,
        port=config.port,
        log_level=log_level().lower(),
    )
