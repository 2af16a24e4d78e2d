"""Pydantic models."""
from api.models.quiz import (
    AnswerRequest,
    CatalogResponse,
    QuestionPayload,
    QuizView,
    SessionSnapshot,
)

__all__ = [
    "AnswerRequest",
    "CatalogResponse",
    "QuestionPayload",
    "QuizView",
    "SessionSnapshot",
]
