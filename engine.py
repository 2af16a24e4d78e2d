from __future__ import annotations
import logging
from typing import Callable, List, Mapping, Optional

from catalog import QuestionCatalog
from exceptions import AnswerTypeError, PreconditionViolation
from models import (
    Answer,
    MultiChoice,
    Question,
    SessionState,
    SingleChoice,
    TextEntry,
    TrueFalse,
)

log = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


def _is_index(value: object, options: tuple) -> bool:
    # bool is an int subclass but never a valid option index
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value < len(options)
    )


def answer_matches(question: Question, answer: object) -> bool:
    """Check that an answer has the shape expected by the question variant."""
    if isinstance(question, TrueFalse):
        return isinstance(answer, bool)
    if isinstance(question, SingleChoice):
        return _is_index(answer, question.options)
    if isinstance(question, MultiChoice):
        if not isinstance(answer, (set, frozenset)):
            return False
        return all(_is_index(item, question.options) for item in answer)
    if isinstance(question, TextEntry):
        return isinstance(answer, str)
    return False


def can_proceed(question: Question, answer: Optional[Answer]) -> bool:
    """Whether the given answer is complete enough to move past the question."""
    if answer is None:
        return False
    if isinstance(question, (TrueFalse, SingleChoice)):
        return True
    if isinstance(question, MultiChoice):
        return isinstance(answer, (set, frozenset)) and len(answer) > 0
    if isinstance(question, TextEntry):
        return isinstance(answer, str) and bool(answer.strip())
    return False


class QuizSession:
    """
    Owns the quiz progress for one logical session.

    State is replaced by a new SessionState on every mutation; listeners
    registered with subscribe() receive each new snapshot.
    """

    def __init__(
        self,
        catalog: QuestionCatalog,
        state: SessionState | None = None,
    ):
        self.catalog = catalog
        self._state = SessionState()
        self._listeners: List[StateListener] = []
        if state is not None:
            self._validate(state)
            self._state = state

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def question_count(self) -> int:
        return self.catalog.question_count()

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def answers(self) -> Mapping[int, Answer]:
        return self._state.answers

    def is_complete(self) -> bool:
        return self._state.current_index == self.question_count

    @property
    def is_last_question(self) -> bool:
        return self._state.current_index == self.question_count - 1

    @property
    def current_question(self) -> Question | None:
        if self.is_complete():
            return None
        return self.catalog.question_at(self._state.current_index)

    @property
    def current_answer(self) -> Answer | None:
        if self.is_complete():
            return None
        return self._state.answers.get(self._state.current_index)

    def can_proceed_current(self) -> bool:
        question = self.current_question
        if question is None:
            return False
        return can_proceed(question, self.current_answer)

    def record_answer(self, answer: Answer) -> None:
        if self.is_complete():
            raise PreconditionViolation("No active question to answer")
        index = self._state.current_index
        question = self.catalog.question_at(index)
        if not answer_matches(question, answer):
            raise AnswerTypeError(
                f"{type(answer).__name__} answer does not fit "
                f"{type(question).__name__} question at index {index}"
            )
        if isinstance(answer, set):
            answer = frozenset(answer)
        self._set_state(self._state.with_answer(answer))
        log.debug("Recorded answer for question %d", index)

    def advance(self) -> None:
        if self.is_complete():
            return
        self._set_state(self._state.advanced())
        if self.is_complete():
            log.debug("Quiz complete after %d questions", self.question_count)
        else:
            log.debug("Advanced to question %d", self._state.current_index)

    def reset(self) -> None:
        self._set_state(SessionState())
        log.debug("Quiz reset")

    def restore(self, state: SessionState) -> None:
        """Install a previously saved snapshot after checking it fits the catalog."""
        self._validate(state)
        self._set_state(state)
        log.debug(
            "Restored quiz at index %d with %d answers",
            state.current_index,
            len(state.answers),
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _validate(self, state: SessionState) -> None:
        count = self.question_count
        if not 0 <= state.current_index <= count:
            raise PreconditionViolation(
                f"currentIndex {state.current_index} out of range [0, {count}]"
            )
        for index, answer in state.answers.items():
            # answers are only ever written at the current index
            if not 0 <= index < count or index > state.current_index:
                raise PreconditionViolation(f"Answer index {index} not reachable")
            question = self.catalog.question_at(index)
            if not answer_matches(question, answer):
                raise AnswerTypeError(
                    f"Saved answer at index {index} does not fit "
                    f"{type(question).__name__} question"
                )
