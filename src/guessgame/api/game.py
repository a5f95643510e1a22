"""Public game content feed."""

from fastapi import APIRouter

from guessgame.api.deps import SessionDep
from guessgame.schemas.content import CategoryContent
from guessgame.services.content import fetch_visible_content

router = APIRouter()


@router.get("", response_model=list[CategoryContent])
async def get_game_content(session: SessionDep):
    """Visible categories with their questions and hints (ordered ascending).

    Questions are included regardless of visibility; players only get asked
    visible ones.
    """
    return await fetch_visible_content(session)
