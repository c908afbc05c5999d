"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import game
from config import config


def configure_logging() -> None:
    """Configure root logging from the application config."""
    level = "DEBUG" if config.debug else config.logging.level
    logging.basicConfig(level=level, format=config.logging.format)


configure_logging()

app = FastAPI(
    title="Blackjack",
    description="Player versus dealer blackjack rules engine API",
    version="0.1.0",
    debug=config.debug,
)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(game.router, prefix="/api/game", tags=["game"])
