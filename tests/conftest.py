"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "test"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from guessgame.config import settings
from guessgame.database import create_engine, get_session, init_db
from guessgame.main import app
from guessgame.models import Category, Hint, Question
from guessgame.services.play_store import play_sessions


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test."""
    engine = create_engine(settings.database_url_test)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
async def client(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
    play_sessions.clear()


async def add_question(
    session: AsyncSession,
    category: Category,
    answer: str,
    hints: list[str],
    is_visible: bool = True,
) -> Question:
    """Insert a question with hints in reveal order."""
    question = Question(answer=answer, category_id=category.id, is_visible=is_visible)
    session.add(question)
    await session.flush()
    for index, content in enumerate(hints):
        session.add(Hint(question_id=question.id, content=content, order=index))
    await session.flush()
    return question


@pytest.fixture
async def category(session: AsyncSession) -> Category:
    """Create a visible test category."""
    category = Category(name="Capitals", description="World capital cities")
    session.add(category)
    await session.flush()
    return category


@pytest.fixture
async def hidden_category(session: AsyncSession) -> Category:
    """Create a category hidden from players."""
    category = Category(name="Drafts", description="Work in progress", is_visible=False)
    session.add(category)
    await session.flush()
    return category


@pytest.fixture
async def question(session: AsyncSession, category: Category) -> Question:
    """Create a visible question with two hints."""
    question = await add_question(session, category, "Paris", ["Eiffel Tower", "France"])
    await session.commit()
    return question
