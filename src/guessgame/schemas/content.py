"""Plain records describing game content as the game controller consumes it."""

from pydantic import BaseModel, ConfigDict


class HintContent(BaseModel):
    """One clue of a question."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    order: int


class QuestionContent(BaseModel):
    """A question with its hints, ordered ascending by ``order``."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    answer: str
    category_id: str
    is_visible: bool = True
    hints: list[HintContent] = []


class CategoryContent(BaseModel):
    """A category with all of its questions, visible or not."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str = ""
    is_visible: bool = True
    questions: list[QuestionContent] = []

    @property
    def visible_questions(self) -> list[QuestionContent]:
        """Questions a player may be asked."""
        return [q for q in self.questions if q.is_visible]
