from __future__ import annotations
from typing import Iterable, Iterator, Tuple

from exceptions import InvalidQuestionError
from models import MultiChoice, Question, SingleChoice, TextEntry, TrueFalse


class QuestionCatalog:
    """Ordered, immutable sequence of questions fixed at construction."""

    def __init__(self, questions: Iterable[Question]):
        self._questions: Tuple[Question, ...] = tuple(questions)
        if not self._questions:
            raise InvalidQuestionError("Catalog must contain at least one question")

    def question_count(self) -> int:
        return len(self._questions)

    def question_at(self, index: int) -> Question:
        # negative indices are out of range, not wrapped
        if not 0 <= index < len(self._questions):
            raise IndexError(
                f"Question index {index} out of range [0, {len(self._questions)})"
            )
        return self._questions[index]

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)


def default_catalog() -> QuestionCatalog:
    return QuestionCatalog(
        [
            TrueFalse("True or False: An Activity is destroyed during recomposition?"),
            SingleChoice(
                "Which of the following is used to build UI in modern Android development?",
                ("XML", "Jetpack Compose", "Android Views", "Flutter"),
            ),
            MultiChoice(
                "Which of the following are Android Architecture Components?",
                ("LiveData", "ViewModel", "Room", "Fragment"),
            ),
            TextEntry("Describe what a ContentProvider is used for in Android."),
        ]
    )
