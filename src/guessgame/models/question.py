"""Question model."""

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from guessgame.models.base import ID_LENGTH, Record
from guessgame.models.category import CategoryRead
from guessgame.models.hint import HintRead


def _clean_hints(hints: list[str]) -> list[str]:
    cleaned = [h.strip() for h in hints if h.strip()]
    if not cleaned:
        raise ValueError("at least one hint is required")
    return cleaned


class Question(Record, table=True):
    """A single answer paired with an ordered list of hints."""

    __tablename__ = "questions"

    category_id: str = Field(foreign_key="categories.id", index=True, ondelete="CASCADE", max_length=ID_LENGTH)
    answer: str = Field(max_length=255)
    is_visible: bool = Field(default=True, index=True)


class QuestionCreate(SQLModel):
    """Schema for creating a question.

    Hints are given as plain strings; their order in the list becomes the
    reveal order. Blank entries are dropped.
    """

    answer: str = Field(max_length=255)
    category_id: str
    hints: list[str]
    is_visible: bool = True

    @field_validator("answer")
    @classmethod
    def validate_answer(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("hints")
    @classmethod
    def validate_hints(cls, v: list[str]) -> list[str]:
        return _clean_hints(v)


class QuestionRead(SQLModel):
    """Schema for reading a question with its category and ordered hints."""

    id: str
    answer: str
    category_id: str
    is_visible: bool
    category: CategoryRead | None = None
    hints: list[HintRead] = []


class QuestionUpdate(SQLModel):
    """Schema for updating a question.

    When ``hints`` is present it replaces the question's whole hint set.
    """

    answer: str | None = Field(default=None, max_length=255)
    category_id: str | None = None
    hints: list[str] | None = None
    is_visible: bool | None = None

    @field_validator("answer")
    @classmethod
    def validate_answer(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("hints")
    @classmethod
    def validate_hints(cls, v: list[str] | None) -> list[str] | None:
        return _clean_hints(v) if v is not None else v
