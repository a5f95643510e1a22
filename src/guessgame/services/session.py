"""Game session controller.

Drives one play-through: category selection, random question selection,
incremental hint disclosure, answer evaluation and reset. The controller is
independent of rendering and never raises past its own boundary; failures
become a :class:`Notice` and a safe state.

Phases::

    CATEGORY_SELECTION --select_category--> CATEGORY_CHOSEN
    CATEGORY_CHOSEN    --start_game-------> QUESTION_ACTIVE (if any visible question)
    QUESTION_ACTIVE    --return_to_category_selection--> CATEGORY_SELECTION
"""

import logging
import random

from guessgame.schemas.content import CategoryContent, QuestionContent
from guessgame.schemas.play import (
    ActiveQuestion,
    AnswerResult,
    CategorySummary,
    Notice,
    NoticeKind,
    PlayState,
    SessionPhase,
)
from guessgame.services.content import ContentLoadError, ContentProvider

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Could not load game data. Please try again."
NO_QUESTIONS_MESSAGE = "There are no questions in this category."
CORRECT_MESSAGE = "Correct!"
INCORRECT_MESSAGE = "Not quite. Try again."


def answer_matches(submitted: str, answer: str) -> bool:
    """Case-insensitive exact match, ignoring whitespace around the submission.

    Internal whitespace, punctuation and accents are compared as-is.
    """
    return submitted.strip().lower() == answer.lower()


class GameSession:
    """State machine for a single player's play-through."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.categories: list[CategoryContent] = []
        self.category: CategoryContent | None = None
        self.question: QuestionContent | None = None
        self.hint_index = 0
        self.draft = ""
        self.result = AnswerResult.UNSET
        self.notice: Notice | None = None

    @property
    def phase(self) -> SessionPhase:
        if self.category is None:
            return SessionPhase.CATEGORY_SELECTION
        if self.question is None:
            return SessionPhase.CATEGORY_CHOSEN
        return SessionPhase.QUESTION_ACTIVE

    @property
    def hint_count(self) -> int:
        return len(self.question.hints) if self.question else 0

    @property
    def revealed_hints(self) -> list[str]:
        if not self.question or not self.question.hints:
            return []
        return [h.content for h in self.question.hints[: self.hint_index + 1]]

    def _reset_progress(self) -> None:
        self.hint_index = 0
        self.draft = ""
        self.result = AnswerResult.UNSET
        self.notice = None

    async def load(self, provider: ContentProvider) -> bool:
        """Fetch categories from the provider, keeping the visible ones.

        On failure the category list is emptied, the session returns to
        category selection and a retryable notice is set. Calling ``load``
        again retries.
        """
        try:
            categories = await provider.list_visible_categories()
        except ContentLoadError as e:
            logger.warning(f"Game content load failed: {e}")
            self._fail_load()
            return False
        except Exception as e:
            logger.exception(f"Unexpected error loading game content: {e!r}")
            self._fail_load()
            return False

        self.return_to_category_selection()
        self.categories = [c for c in categories if c.is_visible]
        logger.debug(f"Loaded {len(self.categories)} visible categories")
        return True

    def _fail_load(self) -> None:
        self.return_to_category_selection()
        self.categories = []
        self.notice = Notice(kind=NoticeKind.LOAD_FAILED, message=LOAD_FAILED_MESSAGE, retryable=True)

    def find_category(self, category_id: str) -> CategoryContent | None:
        """Look up a loaded category by ID."""
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def select_category(self, category: CategoryContent) -> None:
        """Choose a category, discarding any question in play."""
        self.category = category
        self.question = None
        self._reset_progress()
        logger.debug(f"Selected category {category.id}")

    def start_game(self) -> QuestionContent | None:
        """Pick a random visible question from the chosen category.

        Returns the question, or None when no category is chosen or it has no
        visible questions (a notice is set in the latter case).
        """
        if self.category is None:
            return None

        candidates = self.category.visible_questions
        if not candidates:
            self.notice = Notice(kind=NoticeKind.NO_QUESTIONS, message=NO_QUESTIONS_MESSAGE)
            logger.debug(f"Category {self.category.id} has no visible questions")
            return None

        self.question = self.rng.choice(candidates)
        self._reset_progress()
        logger.debug(f"Started question {self.question.id} ({self.hint_count} hints)")
        return self.question

    def reveal_next_hint(self) -> int:
        """Reveal one more hint; stays on the last hint once reached."""
        if self.question is not None and self.hint_index + 1 < self.hint_count:
            self.hint_index += 1
            logger.debug(f"Revealed hint {self.hint_index + 1}/{self.hint_count}")
        return self.hint_index

    def set_draft(self, text: str) -> None:
        self.draft = text

    def submit_answer(self, text: str | None = None) -> AnswerResult:
        """Evaluate ``text`` (or the current draft) against the answer.

        Wrong answers may be resubmitted any number of times.
        """
        if self.question is None:
            return self.result

        if text is not None:
            self.draft = text

        if answer_matches(self.draft, self.question.answer):
            self.result = AnswerResult.CORRECT
            self.notice = Notice(kind=NoticeKind.CORRECT, message=CORRECT_MESSAGE)
        else:
            self.result = AnswerResult.INCORRECT
            self.notice = Notice(kind=NoticeKind.INCORRECT, message=INCORRECT_MESSAGE)
        logger.debug(f"Answer for question {self.question.id} was {self.result.value}")
        return self.result

    def return_to_category_selection(self) -> None:
        self.category = None
        self.question = None
        self._reset_progress()

    def snapshot(self) -> PlayState:
        """Serializable view of the session. Never includes the answer."""
        question = None
        if self.question is not None:
            question = ActiveQuestion(
                id=self.question.id,
                hint_count=self.hint_count,
                revealed_hints=self.revealed_hints,
            )

        return PlayState(
            phase=self.phase,
            categories=[_summarize(c) for c in self.categories],
            selected_category=_summarize(self.category) if self.category else None,
            question=question,
            hint_index=self.hint_index,
            draft=self.draft,
            result=self.result,
            notice=self.notice,
        )


def _summarize(category: CategoryContent) -> CategorySummary:
    return CategorySummary(id=category.id, name=category.name, description=category.description)
