from __future__ import annotations

from typing import Any

from catalog import QuestionCatalog
from exceptions import AnswerTypeError, InvalidQuestionError, PreconditionViolation
from models import (
    Answer,
    MultiChoice,
    Question,
    SessionState,
    SingleChoice,
    TextEntry,
    TrueFalse,
)


QUESTION_TRUE_FALSE = "true_false"
QUESTION_SINGLE_CHOICE = "single_choice"
QUESTION_MULTI_CHOICE = "multi_choice"
QUESTION_TEXT_ENTRY = "text_entry"

_QUESTION_TYPES = {
    TrueFalse: QUESTION_TRUE_FALSE,
    SingleChoice: QUESTION_SINGLE_CHOICE,
    MultiChoice: QUESTION_MULTI_CHOICE,
    TextEntry: QUESTION_TEXT_ENTRY,
}


def question_type(question: Question) -> str:
    return _QUESTION_TYPES[type(question)]


def serialize_question(question: Question, index: int) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": index + 1,
        "index": index,
        "type": question_type(question),
        "text": question.text,
    }
    if isinstance(question, (SingleChoice, MultiChoice)):
        payload["options"] = list(question.options)
    return payload


def serialize_catalog(catalog: QuestionCatalog) -> dict[str, Any]:
    return {
        "questionCount": catalog.question_count(),
        "questions": [
            serialize_question(question, index)
            for index, question in enumerate(catalog)
        ],
    }


def deserialize_question(entry: object) -> Question:
    if not isinstance(entry, dict):
        raise InvalidQuestionError("Invalid question format")
    kind = entry.get("type")
    text = entry.get("text")
    if not isinstance(text, str):
        raise InvalidQuestionError("Question text is required")
    if kind == QUESTION_TRUE_FALSE:
        return TrueFalse(text)
    if kind == QUESTION_TEXT_ENTRY:
        return TextEntry(text)
    if kind in (QUESTION_SINGLE_CHOICE, QUESTION_MULTI_CHOICE):
        options = entry.get("options")
        if not isinstance(options, list):
            raise InvalidQuestionError("Options are required")
        if kind == QUESTION_SINGLE_CHOICE:
            return SingleChoice(text, tuple(options))
        return MultiChoice(text, tuple(options))
    raise InvalidQuestionError(f"Unknown question type: {kind!r}")


def deserialize_catalog(payload: object) -> QuestionCatalog:
    if not isinstance(payload, dict) or not isinstance(payload.get("questions"), list):
        raise InvalidQuestionError("Invalid catalog payload")
    return QuestionCatalog(deserialize_question(entry) for entry in payload["questions"])


def encode_answer(answer: Answer) -> object:
    if isinstance(answer, (set, frozenset)):
        return sorted(answer)
    return answer


def decode_answer(question: Question, value: object) -> Answer:
    """Turn a JSON value into the answer type the question variant expects."""
    if isinstance(question, MultiChoice):
        if not isinstance(value, list):
            raise AnswerTypeError("Multi-choice answer must be a list of indices")
        if not all(isinstance(item, int) and not isinstance(item, bool) for item in value):
            raise AnswerTypeError("Multi-choice answer must contain integers")
        return frozenset(value)
    if isinstance(question, TrueFalse) and not isinstance(value, bool):
        raise AnswerTypeError("True/false answer must be a boolean")
    if isinstance(question, SingleChoice) and (
        not isinstance(value, int) or isinstance(value, bool)
    ):
        raise AnswerTypeError("Single-choice answer must be an integer index")
    if isinstance(question, TextEntry) and not isinstance(value, str):
        raise AnswerTypeError("Text answer must be a string")
    return value


def serialize_session_state(state: SessionState) -> dict[str, Any]:
    return {
        "currentIndex": state.current_index,
        "answers": {
            str(index): encode_answer(answer)
            for index, answer in sorted(state.answers.items())
        },
    }


def deserialize_session_state(
    payload: object,
    catalog: QuestionCatalog,
) -> SessionState:
    """
    Rebuild a snapshot from serialize_session_state() output.
    Range checks against the catalog happen in QuizSession.restore().
    """
    if not isinstance(payload, dict):
        raise AnswerTypeError("Invalid session payload")
    current_index = payload.get("currentIndex", 0)
    if not isinstance(current_index, int) or isinstance(current_index, bool):
        raise AnswerTypeError("currentIndex must be an integer")
    raw_answers = payload.get("answers", {})
    if not isinstance(raw_answers, dict):
        raise AnswerTypeError("answers must be an object")

    answers: dict[int, Answer] = {}
    for key, value in raw_answers.items():
        try:
            index = int(key)
        except (TypeError, ValueError):
            raise AnswerTypeError(f"Invalid answer index: {key!r}") from None
        try:
            question = catalog.question_at(index)
        except IndexError:
            raise PreconditionViolation(f"Answer index {index} out of range") from None
        answers[index] = decode_answer(question, value)
    return SessionState(current_index, answers)
