"""Content provider tests."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from guessgame.models import Category, Hint
from guessgame.services.content import (
    ContentLoadError,
    DatabaseContentProvider,
    HttpContentProvider,
)
from tests.conftest import add_question

FEED = [
    {
        "id": "c1",
        "name": "Capitals",
        "description": "World capital cities",
        "is_visible": True,
        "questions": [
            {
                "id": "q1",
                "answer": "Paris",
                "category_id": "c1",
                "is_visible": True,
                "hints": [
                    {"id": "h1", "content": "Eiffel Tower", "order": 0},
                    {"id": "h2", "content": "France", "order": 1},
                ],
            }
        ],
    }
]


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpContentProvider:
    @pytest.mark.asyncio
    async def test_parses_feed(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, json=FEED)

        async with mock_client(handler) as client:
            provider = HttpContentProvider("http://content.test/api/game", client=client)
            categories = await provider.list_visible_categories()

        assert requested == ["http://content.test/api/game"]
        assert len(categories) == 1
        assert categories[0].name == "Capitals"
        assert [h.content for h in categories[0].questions[0].hints] == ["Eiffel Tower", "France"]

    @pytest.mark.asyncio
    async def test_server_error_raises_load_error(self):
        async with mock_client(lambda request: httpx.Response(500, json={"detail": "boom"})) as client:
            provider = HttpContentProvider("http://content.test/api/game", client=client)
            with pytest.raises(ContentLoadError):
                await provider.list_visible_categories()

    @pytest.mark.asyncio
    async def test_malformed_payload_raises_load_error(self):
        async with mock_client(lambda request: httpx.Response(200, json={"not": "a list"})) as client:
            provider = HttpContentProvider("http://content.test/api/game", client=client)
            with pytest.raises(ContentLoadError):
                await provider.list_visible_categories()

    @pytest.mark.asyncio
    async def test_connection_error_raises_load_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_client(handler) as client:
            provider = HttpContentProvider("http://content.test/api/game", client=client)
            with pytest.raises(ContentLoadError):
                await provider.list_visible_categories()

    @pytest.mark.asyncio
    async def test_invalid_url_raises_load_error(self):
        provider = HttpContentProvider("http://[::1")
        with pytest.raises(ContentLoadError):
            await provider.list_visible_categories()

    def test_defaults_from_settings(self):
        from guessgame.config import settings

        provider = HttpContentProvider()
        assert provider.url == settings.content_url
        assert provider.timeout == settings.http_timeout


class TestDatabaseContentProvider:
    @pytest.mark.asyncio
    async def test_returns_visible_categories_with_ordered_hints(
        self, session: AsyncSession, category: Category, hidden_category: Category
    ):
        question = await add_question(session, category, "Paris", ["Eiffel Tower", "France"])
        await add_question(session, category, "Berlin", ["Brandenburg Gate"], is_visible=False)
        await add_question(session, hidden_category, "Secret", ["Hidden"])
        # Inserted out of order on purpose
        session.add(Hint(question_id=question.id, content="Seine", order=3))
        session.add(Hint(question_id=question.id, content="Louvre", order=2))
        await session.commit()

        categories = await DatabaseContentProvider(session).list_visible_categories()

        assert [c.name for c in categories] == ["Capitals"]
        answers = {q.answer: q for q in categories[0].questions}
        assert set(answers) == {"Paris", "Berlin"}
        assert answers["Berlin"].is_visible is False
        assert [h.content for h in answers["Paris"].hints] == ["Eiffel Tower", "France", "Louvre", "Seine"]
        assert [q.answer for q in categories[0].visible_questions] == ["Paris"]

    @pytest.mark.asyncio
    async def test_empty_database(self, session: AsyncSession):
        assert await DatabaseContentProvider(session).list_visible_categories() == []

    @pytest.mark.asyncio
    async def test_database_error_raises_load_error(self, session: AsyncSession):
        with patch(
            "guessgame.services.content.fetch_visible_content",
            new_callable=AsyncMock,
            side_effect=RuntimeError("database is locked"),
        ):
            with pytest.raises(ContentLoadError):
                await DatabaseContentProvider(session).list_visible_categories()
