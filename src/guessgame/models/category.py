"""Category model."""

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from guessgame.models.base import Record


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class Category(Record, table=True):
    """Top-level grouping of questions shown to players."""

    __tablename__ = "categories"

    name: str = Field(max_length=255, unique=True, index=True)
    description: str = Field(default="")
    is_visible: bool = Field(default=True, index=True)


class CategoryCreate(SQLModel):
    """Schema for creating a category."""

    name: str = Field(max_length=255)
    description: str = ""
    is_visible: bool = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v)


class CategoryRead(SQLModel):
    """Schema for reading a category."""

    id: str
    name: str
    description: str
    is_visible: bool
    question_count: int = 0


class CategoryUpdate(SQLModel):
    """Schema for updating a category."""

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    is_visible: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return _require_text(v) if v is not None else v
