"""Main API router that aggregates all route modules."""

from fastapi import APIRouter

from guessgame.api import categories, game, health, play, questions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])

# Public
api_router.include_router(game.router, prefix="/game", tags=["game"])
api_router.include_router(play.router, prefix="/play", tags=["play"])

# Administration
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(questions.router, prefix="/questions", tags=["questions"])
