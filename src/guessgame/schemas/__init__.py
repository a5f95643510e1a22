"""Pydantic schemas for API requests/responses."""

from guessgame.schemas.common import ErrorResponse
from guessgame.schemas.content import CategoryContent, HintContent, QuestionContent
from guessgame.schemas.play import (
    ActiveQuestion,
    AnswerResult,
    CategorySummary,
    Notice,
    NoticeKind,
    PlaySessionRead,
    PlayState,
    SelectCategoryRequest,
    SessionPhase,
    SubmitAnswerRequest,
)

__all__ = [
    "ActiveQuestion",
    "AnswerResult",
    "CategoryContent",
    "CategorySummary",
    "ErrorResponse",
    "HintContent",
    "Notice",
    "NoticeKind",
    "PlaySessionRead",
    "PlayState",
    "QuestionContent",
    "SelectCategoryRequest",
    "SessionPhase",
    "SubmitAnswerRequest",
]
