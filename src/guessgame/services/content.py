"""Content providers supplying categories, questions and hints to the game."""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict

import httpx
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from guessgame.config import settings
from guessgame.models import Category, Hint, Question
from guessgame.schemas.content import CategoryContent, HintContent, QuestionContent

logger = logging.getLogger(__name__)

_categories_adapter = TypeAdapter(list[CategoryContent])


class ContentLoadError(Exception):
    """Content could not be fetched or was malformed."""


class ContentProvider(ABC):
    """Read interface for game content."""

    @abstractmethod
    async def list_visible_categories(self) -> list[CategoryContent]:
        """Return categories with nested questions and ordered hints.

        Questions are returned regardless of their visibility flag; the game
        controller filters them when a game starts.

        Raises:
            ContentLoadError: if the content cannot be loaded
        """


async def fetch_visible_content(session: AsyncSession) -> list[CategoryContent]:
    """Query visible categories with all of their questions and hints."""
    stmt = select(Category).where(Category.is_visible == True).order_by(Category.name)  # noqa: E712
    categories = (await session.execute(stmt)).scalars().all()
    if not categories:
        return []

    category_ids = [c.id for c in categories]
    stmt = (
        select(Question)
        .where(col(Question.category_id).in_(category_ids))
        .order_by(Question.created_at, Question.id)
    )
    questions = (await session.execute(stmt)).scalars().all()

    hints_by_question: dict[str, list[HintContent]] = defaultdict(list)
    if questions:
        stmt = (
            select(Hint)
            .where(col(Hint.question_id).in_([q.id for q in questions]))
            .order_by(Hint.question_id, Hint.order)
        )
        for hint in (await session.execute(stmt)).scalars():
            hints_by_question[hint.question_id].append(HintContent.model_validate(hint))

    questions_by_category: dict[str, list[QuestionContent]] = defaultdict(list)
    for question in questions:
        questions_by_category[question.category_id].append(
            QuestionContent(
                id=question.id,
                answer=question.answer,
                category_id=question.category_id,
                is_visible=question.is_visible,
                hints=hints_by_question[question.id],
            )
        )

    return [
        CategoryContent(
            id=category.id,
            name=category.name,
            description=category.description,
            is_visible=category.is_visible,
            questions=questions_by_category[category.id],
        )
        for category in categories
    ]


class DatabaseContentProvider(ContentProvider):
    """Provider reading straight from the database."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_visible_categories(self) -> list[CategoryContent]:
        try:
            return await fetch_visible_content(self.session)
        except Exception as e:
            logger.error(f"Failed to load game content from database: {e!r}")
            raise ContentLoadError("Failed to load game content") from e


class HttpContentProvider(ContentProvider):
    """Provider fetching the public game feed over HTTP."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url or settings.content_url
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._client = client

    async def _get(self) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.url, timeout=self.timeout)
        async with httpx.AsyncClient() as client:
            return await client.get(self.url, timeout=self.timeout)

    async def list_visible_categories(self) -> list[CategoryContent]:
        try:
            response = await self._get()
            response.raise_for_status()
            return _categories_adapter.validate_json(response.content)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to fetch game content from {self.url}: {e!r}")
            raise ContentLoadError(f"Could not fetch game content from {self.url}") from e
        except ValidationError as e:
            logger.error(f"Malformed game content from {self.url}: {e}")
            raise ContentLoadError("Game content was malformed") from e
