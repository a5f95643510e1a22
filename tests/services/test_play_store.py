"""Play-session store tests."""

from guessgame.services.play_store import PlaySessionStore
from guessgame.services.session import GameSession


def test_create_and_get():
    store = PlaySessionStore(limit=10)
    session_id, game = store.create()

    assert isinstance(game, GameSession)
    assert len(session_id) == 21
    assert store.get(session_id) is game
    assert session_id in store


def test_get_unknown_returns_none():
    assert PlaySessionStore(limit=10).get("missing") is None


def test_sessions_are_independent():
    store = PlaySessionStore(limit=10)
    _, first = store.create()
    _, second = store.create()

    first.set_draft("hello")
    assert second.draft == ""


def test_evicts_least_recently_used():
    store = PlaySessionStore(limit=2)
    oldest, _ = store.create()
    middle, _ = store.create()

    # Touch the oldest so the middle one becomes least recently used
    store.get(oldest)
    newest, _ = store.create()

    assert len(store) == 2
    assert oldest in store
    assert newest in store
    assert middle not in store


def test_discard():
    store = PlaySessionStore(limit=10)
    session_id, _ = store.create()

    assert store.discard(session_id) is True
    assert store.discard(session_id) is False
    assert store.get(session_id) is None
