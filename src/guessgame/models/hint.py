"""Hint model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from guessgame.models.base import ID_LENGTH, Record


class Hint(Record, table=True):
    """One progressively revealed clue belonging to a question."""

    __tablename__ = "hints"

    question_id: str = Field(foreign_key="questions.id", index=True, ondelete="CASCADE", max_length=ID_LENGTH)
    content: str
    order: int = Field(default=0, description="Zero-based position within the question")

    __table_args__ = (
        UniqueConstraint("question_id", "order", name="uq_hints_question_order"),
    )


class HintRead(SQLModel):
    """Schema for reading a hint."""

    id: str
    content: str
    order: int
