"""Shared API utilities."""

from collections import defaultdict

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from guessgame.models import Category, Hint, Question
from guessgame.models.category import CategoryRead
from guessgame.models.hint import HintRead
from guessgame.models.question import QuestionRead


async def get_category_or_404(category_id: str, session: AsyncSession) -> Category:
    """Get a category by ID.

    Raises:
        HTTPException: 404 if the category does not exist
    """
    category = await session.get(Category, category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return category


async def get_question_or_404(question_id: str, session: AsyncSession) -> Question:
    """Get a question by ID.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    question = await session.get(Question, question_id)
    if not question:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    return question


async def get_question_count(session: AsyncSession, category_id: str) -> int:
    """Count questions in a category."""
    stmt = select(func.count(col(Question.id))).where(Question.category_id == category_id)
    result = await session.execute(stmt)
    return result.scalar() or 0


def category_read(category: Category, question_count: int = 0) -> CategoryRead:
    return CategoryRead(
        id=category.id,
        name=category.name,
        description=category.description,
        is_visible=category.is_visible,
        question_count=question_count,
    )


async def get_hints_by_question(
    session: AsyncSession, question_ids: list[str]
) -> dict[str, list[HintRead]]:
    """Load hints for many questions at once, ordered by ``order``."""
    hints: dict[str, list[HintRead]] = defaultdict(list)
    if not question_ids:
        return hints

    stmt = (
        select(Hint)
        .where(col(Hint.question_id).in_(question_ids))
        .order_by(Hint.question_id, Hint.order)
    )
    result = await session.execute(stmt)
    for hint in result.scalars():
        hints[hint.question_id].append(HintRead(id=hint.id, content=hint.content, order=hint.order))
    return hints


async def build_question_reads(session: AsyncSession, questions: list[Question]) -> list[QuestionRead]:
    """Attach category and ordered hints to each question."""
    hints = await get_hints_by_question(session, [q.id for q in questions])

    category_ids = {q.category_id for q in questions}
    categories: dict[str, Category] = {}
    if category_ids:
        stmt = select(Category).where(col(Category.id).in_(category_ids))
        categories = {c.id: c for c in (await session.execute(stmt)).scalars()}

    return [
        QuestionRead(
            id=q.id,
            answer=q.answer,
            category_id=q.category_id,
            is_visible=q.is_visible,
            category=category_read(categories[q.category_id]) if q.category_id in categories else None,
            hints=hints[q.id],
        )
        for q in questions
    ]


def replace_hints(session: AsyncSession, question_id: str, contents: list[str]) -> None:
    """Add hint rows for a question in list order (``order`` = position)."""
    for index, content in enumerate(contents):
        session.add(Hint(question_id=question_id, content=content, order=index))
