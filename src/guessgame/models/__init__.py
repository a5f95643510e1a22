"""SQLModel database models."""

from guessgame.models.base import Record, TimestampMixin, generate_nanoid
from guessgame.models.category import Category
from guessgame.models.hint import Hint
from guessgame.models.question import Question

__all__ = [
    "Category",
    "Hint",
    "Question",
    "Record",
    "TimestampMixin",
    "generate_nanoid",
]
