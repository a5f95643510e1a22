"""Schemas for play-session requests and snapshots."""

from enum import Enum

from pydantic import BaseModel, Field


class SessionPhase(str, Enum):
    """Where a play-through currently is."""

    CATEGORY_SELECTION = "category_selection"
    CATEGORY_CHOSEN = "category_chosen"
    QUESTION_ACTIVE = "question_active"


class AnswerResult(str, Enum):
    """Outcome of the last submitted answer."""

    UNSET = "unset"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class NoticeKind(str, Enum):
    """User-visible messages raised by the game controller."""

    LOAD_FAILED = "load_failed"
    NO_QUESTIONS = "no_questions"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class Notice(BaseModel):
    """A non-blocking message for the player."""

    kind: NoticeKind
    message: str
    retryable: bool = False


class CategorySummary(BaseModel):
    """Category as listed to the player."""

    id: str
    name: str
    description: str


class ActiveQuestion(BaseModel):
    """The question in play, without its answer."""

    id: str
    hint_count: int
    revealed_hints: list[str]


class PlayState(BaseModel):
    """Serializable snapshot of a game session."""

    phase: SessionPhase
    categories: list[CategorySummary]
    selected_category: CategorySummary | None = None
    question: ActiveQuestion | None = None
    hint_index: int = 0
    draft: str = ""
    result: AnswerResult = AnswerResult.UNSET
    notice: Notice | None = None


class PlaySessionRead(PlayState):
    """Play-session snapshot with the session identifier."""

    session_id: str


class SelectCategoryRequest(BaseModel):
    """Body for choosing a category."""

    category_id: str = Field(..., description="ID of a loaded category")


class SubmitAnswerRequest(BaseModel):
    """Body for submitting an answer."""

    answer: str = Field(..., description="Free-text answer; surrounding whitespace is ignored")
