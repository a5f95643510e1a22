"""Shared table columns: nanoid primary keys and UTC timestamps."""

from datetime import UTC, datetime

from nanoid import generate as nanoid_generate
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

ID_LENGTH = 21


def generate_nanoid() -> str:
    """URL-safe random ID used for records and play sessions."""
    return nanoid_generate(size=ID_LENGTH)


def utcnow() -> datetime:
    return datetime.now(UTC)


class TimestampMixin(SQLModel):
    """Adds ``created_at`` and ``updated_at``; questions are listed by creation time."""

    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),  # type: ignore[call-overload]
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),  # type: ignore[call-overload]
        sa_column_kwargs={"onupdate": utcnow},
    )


class Record(TimestampMixin):
    """Base for every table: nanoid ``id`` plus timestamps."""

    id: str = Field(default_factory=generate_nanoid, primary_key=True, max_length=ID_LENGTH)
