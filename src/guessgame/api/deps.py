"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from guessgame.database import get_session
from guessgame.services.play_store import PlaySessionStore, play_sessions
from guessgame.services.session import GameSession

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_play_store() -> PlaySessionStore:
    """Return the process-wide play-session store."""
    return play_sessions


PlayStoreDep = Annotated[PlaySessionStore, Depends(get_play_store)]


def get_play_session(session_id: str, store: PlayStoreDep) -> GameSession:
    """Resolve a play session from the path or raise 404."""
    game = store.get(session_id)
    if game is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Play session not found",
        )
    return game


PlaySessionDep = Annotated[GameSession, Depends(get_play_session)]
