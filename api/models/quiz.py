"""Quiz-related Pydantic models."""
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


class QuestionPayload(BaseModel):
    """Model for a single catalog question."""

    id: int
    index: int
    type: str
    text: str
    options: list[str] | None = None


class CatalogResponse(BaseModel):
    """Model for the question catalog."""

    questionCount: int
    questions: list[QuestionPayload]


class AnswerRequest(BaseModel):
    """Model for recording an answer to the current question."""

    # strict so booleans and numeric strings reach the answer checks as sent
    value: StrictBool | StrictInt | list[StrictInt] | StrictStr


class QuizView(BaseModel):
    """Model for what the quiz screen renders."""

    currentIndex: int
    questionCount: int
    complete: bool
    isLast: bool
    canProceed: bool
    question: QuestionPayload | None = None
    answer: bool | int | list[int] | str | None = None
    nextLabel: str | None = None


class SessionSnapshot(BaseModel):
    """Model for saving and restoring quiz progress."""

    currentIndex: int = Field(..., ge=0)
    answers: dict[str, StrictBool | StrictInt | list[StrictInt] | StrictStr] = Field(
        default_factory=dict
    )
