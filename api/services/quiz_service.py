"""Service layer binding the quiz engine to HTTP requests."""
import logging
import threading
from pathlib import Path

from fastapi import HTTPException

from api.utils import read_json_file
from catalog import QuestionCatalog, default_catalog
from engine import QuizSession
from exceptions import AnswerTypeError, InvalidQuestionError, PreconditionViolation
from serialization import (
    decode_answer,
    deserialize_catalog,
    deserialize_session_state,
    encode_answer,
    serialize_question,
    serialize_session_state,
)

logger = logging.getLogger(__name__)


def load_catalog(path: Path | None) -> QuestionCatalog:
    """Load catalog from a JSON payload, or the built-in questions."""
    if path is None:
        return default_catalog()
    payload = read_json_file(path, None)
    if payload is None:
        raise InvalidQuestionError(f"Catalog file not found: {path}")
    catalog = deserialize_catalog(payload)
    logger.info(f"Loaded {catalog.question_count()} questions from {path}")
    return catalog


class QuizService:
    """
    Holds the single quiz session served by this process.

    Route functions run in a threadpool, so every engine call goes
    through the lock.
    """

    def __init__(self, catalog: QuestionCatalog):
        self.session = QuizSession(catalog)
        self._lock = threading.Lock()

    def view(self) -> dict[str, object]:
        with self._lock:
            return self._view()

    def record_answer(self, value: object) -> dict[str, object]:
        with self._lock:
            question = self.session.current_question
            if question is None:
                raise HTTPException(status_code=409, detail="Quiz is already complete")
            try:
                self.session.record_answer(decode_answer(question, value))
            except AnswerTypeError as exc:
                raise HTTPException(status_code=422, detail=str(exc)) from exc
            return self._view()

    def advance(self) -> dict[str, object]:
        with self._lock:
            if not self.session.is_complete() and not self.session.can_proceed_current():
                raise HTTPException(status_code=409, detail="Answer required")
            self.session.advance()
            if self.session.is_complete():
                logger.info("Quiz completed")
            return self._view()

    def reset(self) -> dict[str, object]:
        with self._lock:
            self.session.reset()
            logger.info("Quiz reset")
            return self._view()

    def snapshot(self) -> dict[str, object]:
        with self._lock:
            return serialize_session_state(self.session.state)

    def restore(self, payload: dict[str, object]) -> dict[str, object]:
        with self._lock:
            try:
                state = deserialize_session_state(payload, self.session.catalog)
                self.session.restore(state)
            except AnswerTypeError as exc:
                raise HTTPException(status_code=422, detail=str(exc)) from exc
            except PreconditionViolation as exc:
                raise HTTPException(status_code=409, detail=str(exc)) from exc
            logger.info(f"Restored quiz at question {state.current_index}")
            return self._view()

    def _view(self) -> dict[str, object]:
        session = self.session
        question = session.current_question
        answer = session.current_answer
        view: dict[str, object] = {
            "currentIndex": session.current_index,
            "questionCount": session.question_count,
            "complete": session.is_complete(),
            "isLast": session.is_last_question,
            "canProceed": session.can_proceed_current(),
            "question": None,
            "answer": None,
            "nextLabel": None,
        }
        if question is not None:
            view["question"] = serialize_question(question, session.current_index)
            view["answer"] = None if answer is None else encode_answer(answer)
            view["nextLabel"] = "Submit" if session.is_last_question else "Next"
        return view
