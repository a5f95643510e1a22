"""Question CRUD endpoints. Hints are written through their question."""

import logging

from fastapi import APIRouter, status
from sqlalchemy import delete
from sqlmodel import select

from guessgame.api.deps import SessionDep
from guessgame.api.utils import (
    build_question_reads,
    get_category_or_404,
    get_question_or_404,
    replace_hints,
)
from guessgame.models import Hint, Question
from guessgame.models.question import QuestionCreate, QuestionRead, QuestionUpdate
from guessgame.schemas import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[QuestionRead])
async def list_questions(session: SessionDep, category_id: str | None = None):
    """List questions with their category and ordered hints."""
    stmt = select(Question).order_by(Question.created_at, Question.id)
    if category_id:
        stmt = stmt.where(Question.category_id == category_id)
    result = await session.execute(stmt)
    questions = list(result.scalars().all())

    return await build_question_reads(session, questions)


@router.get(
    "/{question_id}",
    response_model=QuestionRead,
    responses={404: {"model": ErrorResponse}},
)
async def get_question(question_id: str, session: SessionDep):
    """Get a question by ID."""
    question = await get_question_or_404(question_id, session)
    return (await build_question_reads(session, [question]))[0]


@router.post(
    "",
    response_model=QuestionRead,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def create_question(question_in: QuestionCreate, session: SessionDep):
    """Create a question and its hints."""
    await get_category_or_404(question_in.category_id, session)

    question = Question(
        answer=question_in.answer,
        category_id=question_in.category_id,
        is_visible=question_in.is_visible,
    )
    session.add(question)
    await session.flush()
    replace_hints(session, question.id, question_in.hints)
    await session.commit()
    await session.refresh(question)
    logger.info(f"Created question {question.id} with {len(question_in.hints)} hints")

    return (await build_question_reads(session, [question]))[0]


@router.patch(
    "/{question_id}",
    response_model=QuestionRead,
    responses={404: {"model": ErrorResponse}},
)
async def update_question(question_id: str, question_in: QuestionUpdate, session: SessionDep):
    """Update a question. A ``hints`` list replaces all existing hints."""
    question = await get_question_or_404(question_id, session)

    update_data = question_in.model_dump(exclude_unset=True, exclude_none=True)
    hints = update_data.pop("hints", None)

    if "category_id" in update_data and update_data["category_id"] != question.category_id:
        await get_category_or_404(update_data["category_id"], session)

    for field, value in update_data.items():
        setattr(question, field, value)

    if hints is not None:
        await session.execute(delete(Hint).where(Hint.question_id == question.id))  # type: ignore[arg-type]
        replace_hints(session, question.id, hints)

    await session.commit()
    await session.refresh(question)

    return (await build_question_reads(session, [question]))[0]


@router.delete(
    "/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_question(question_id: str, session: SessionDep):
    """Delete a question and its hints."""
    question = await get_question_or_404(question_id, session)

    await session.delete(question)
    await session.commit()
    logger.info(f"Deleted question {question_id}")
