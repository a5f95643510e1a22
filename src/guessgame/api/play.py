"""Play-session endpoints driving a server-held game controller."""

import logging

from fastapi import APIRouter, HTTPException, status

from guessgame.api.deps import PlaySessionDep, PlayStoreDep, SessionDep
from guessgame.schemas import ErrorResponse
from guessgame.schemas.play import PlaySessionRead, SelectCategoryRequest, SubmitAnswerRequest
from guessgame.services.content import DatabaseContentProvider
from guessgame.services.session import GameSession

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


def session_read(session_id: str, game: GameSession) -> PlaySessionRead:
    return PlaySessionRead(session_id=session_id, **game.snapshot().model_dump())


@router.post("", response_model=PlaySessionRead, status_code=status.HTTP_201_CREATED)
async def create_play_session(session: SessionDep, store: PlayStoreDep):
    """Start a play-through and load the visible categories.

    A failed load still creates the session; the snapshot carries a
    retryable notice.
    """
    session_id, game = store.create()
    await game.load(DatabaseContentProvider(session))
    logger.info(f"Created play session {session_id}")
    return session_read(session_id, game)


@router.get("/{session_id}", response_model=PlaySessionRead, responses=NOT_FOUND)
async def get_play_session(session_id: str, game: PlaySessionDep):
    """Current state of a play session."""
    return session_read(session_id, game)


@router.post("/{session_id}/reload", response_model=PlaySessionRead, responses=NOT_FOUND)
async def reload_content(session_id: str, game: PlaySessionDep, session: SessionDep):
    """Retry loading content, returning to category selection."""
    await game.load(DatabaseContentProvider(session))
    return session_read(session_id, game)


@router.post("/{session_id}/category", response_model=PlaySessionRead, responses=NOT_FOUND)
async def select_category(session_id: str, body: SelectCategoryRequest, game: PlaySessionDep):
    """Choose one of the loaded categories."""
    category = game.find_category(body.category_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    game.select_category(category)
    return session_read(session_id, game)


@router.post("/{session_id}/start", response_model=PlaySessionRead, responses=NOT_FOUND)
async def start_game(session_id: str, game: PlaySessionDep):
    """Pick a random visible question from the chosen category."""
    game.start_game()
    return session_read(session_id, game)


@router.post("/{session_id}/hint", response_model=PlaySessionRead, responses=NOT_FOUND)
async def reveal_hint(session_id: str, game: PlaySessionDep):
    """Reveal the next hint; a no-op on the last one."""
    game.reveal_next_hint()
    return session_read(session_id, game)


@router.post("/{session_id}/answer", response_model=PlaySessionRead, responses=NOT_FOUND)
async def submit_answer(session_id: str, body: SubmitAnswerRequest, game: PlaySessionDep):
    """Evaluate an answer against the active question."""
    game.submit_answer(body.answer)
    return session_read(session_id, game)


@router.post("/{session_id}/reset", response_model=PlaySessionRead, responses=NOT_FOUND)
async def return_to_category_selection(session_id: str, game: PlaySessionDep):
    """Abandon the current category and question."""
    game.return_to_category_selection()
    return session_read(session_id, game)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_play_session(session_id: str, store: PlayStoreDep):
    """Discard a play session."""
    if not store.discard(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Play session not found",
        )
