"""In-memory registry of server-held play sessions."""

import logging
from collections import OrderedDict

from guessgame.config import settings
from guessgame.models.base import generate_nanoid
from guessgame.services.session import GameSession

logger = logging.getLogger(__name__)


class PlaySessionStore:
    """Bounded mapping of session ID to :class:`GameSession`.

    Sessions are never persisted. When the limit is reached the least
    recently used session is evicted.
    """

    def __init__(self, limit: int | None = None):
        self.limit = limit or settings.play_session_limit
        self._sessions: OrderedDict[str, GameSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self, game: GameSession | None = None) -> tuple[str, GameSession]:
        session_id = generate_nanoid()
        game = game or GameSession()
        self._sessions[session_id] = game
        while len(self._sessions) > self.limit:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info(f"Evicted play session {evicted_id}")
        return session_id, game

    def get(self, session_id: str) -> GameSession | None:
        game = self._sessions.get(session_id)
        if game is not None:
            self._sessions.move_to_end(session_id)
        return game

    def discard(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        self._sessions.clear()


# Global store used by the API
play_sessions = PlaySessionStore()
