"""Category CRUD endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select

from guessgame.api.deps import SessionDep
from guessgame.api.utils import category_read, get_category_or_404, get_question_count
from guessgame.models import Category, Question
from guessgame.models.category import CategoryCreate, CategoryRead, CategoryUpdate
from guessgame.schemas import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def ensure_unique_name(session: SessionDep, name: str, exclude_id: str | None = None) -> None:
    stmt = select(Category).where(Category.name == name)
    if exclude_id:
        stmt = stmt.where(Category.id != exclude_id)
    result = await session.execute(stmt)
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Category '{name}' already exists",
        )


async def commit_category(session: SessionDep, category: Category) -> None:
    """Commit category changes, mapping a lost unique-name race to 409."""
    name = category.name
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Category '{name}' already exists",
        ) from None


@router.get("", response_model=list[CategoryRead])
async def list_categories(session: SessionDep):
    """List all categories, visible or not, with question counts."""
    question_count_subq = (
        select(Question.category_id, func.count(col(Question.id)).label("question_count"))
        .group_by(Question.category_id)
        .subquery()
    )

    stmt = (
        select(Category, func.coalesce(question_count_subq.c.question_count, 0).label("question_count"))
        .outerjoin(question_count_subq, Category.id == question_count_subq.c.category_id)  # type: ignore[arg-type]
        .order_by(Category.name)
    )
    result = await session.execute(stmt)

    return [category_read(category, question_count) for category, question_count in result.all()]


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    responses={404: {"model": ErrorResponse}},
)
async def get_category(category_id: str, session: SessionDep):
    """Get a category by ID."""
    category = await get_category_or_404(category_id, session)
    return category_read(category, await get_question_count(session, category.id))


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_category(category_in: CategoryCreate, session: SessionDep):
    """Create a new category."""
    await ensure_unique_name(session, category_in.name)

    category = Category(
        name=category_in.name,
        description=category_in.description,
        is_visible=category_in.is_visible,
    )
    session.add(category)
    await commit_category(session, category)
    await session.refresh(category)
    logger.info(f"Created category {category.id} ({category.name})")

    return category_read(category)


@router.patch(
    "/{category_id}",
    response_model=CategoryRead,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_category(category_id: str, category_in: CategoryUpdate, session: SessionDep):
    """Update a category, including its visibility."""
    category = await get_category_or_404(category_id, session)

    update_data = category_in.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in update_data and update_data["name"] != category.name:
        await ensure_unique_name(session, update_data["name"], exclude_id=category.id)

    for field, value in update_data.items():
        setattr(category, field, value)

    await commit_category(session, category)
    await session.refresh(category)

    return category_read(category, await get_question_count(session, category.id))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_category(category_id: str, session: SessionDep):
    """Delete a category together with its questions and hints."""
    category = await get_category_or_404(category_id, session)

    await session.delete(category)
    await session.commit()
    logger.info(f"Deleted category {category_id}")
