import pytest

from catalog import default_catalog
from exceptions import AnswerTypeError, InvalidQuestionError, PreconditionViolation
from models import MultiChoice, SessionState, SingleChoice, TextEntry
from serialization import (
    decode_answer,
    deserialize_catalog,
    deserialize_session_state,
    serialize_catalog,
    serialize_session_state,
)


def test_serialize_catalog_payload() -> None:
    payload = serialize_catalog(default_catalog())
    assert payload["questionCount"] == 4
    types = [question["type"] for question in payload["questions"]]
    assert types == ["true_false", "single_choice", "multi_choice", "text_entry"]
    assert payload["questions"][0]["id"] == 1
    assert "options" not in payload["questions"][0]
    assert payload["questions"][2]["options"] == ["LiveData", "ViewModel", "Room", "Fragment"]


def test_deserialize_catalog_rebuilds_questions() -> None:
    catalog = deserialize_catalog(serialize_catalog(default_catalog()))
    assert catalog.questions == default_catalog().questions


def test_deserialize_catalog_rejects_unknown_type() -> None:
    with pytest.raises(InvalidQuestionError):
        deserialize_catalog({"questions": [{"type": "essay", "text": "Write"}]})
    with pytest.raises(InvalidQuestionError):
        deserialize_catalog({"questions": [{"type": "single_choice", "text": "Pick"}]})
    with pytest.raises(InvalidQuestionError):
        deserialize_catalog([])


def test_session_state_payload_sorts_multi_choice() -> None:
    state = SessionState(3, {0: True, 1: 2, 2: frozenset({3, 1})})
    payload = serialize_session_state(state)
    assert payload == {"currentIndex": 3, "answers": {"0": True, "1": 2, "2": [1, 3]}}


def test_deserialize_session_state_decodes_per_question() -> None:
    payload = {"currentIndex": 4, "answers": {"2": [0, 1], "3": " text "}}
    state = deserialize_session_state(payload, default_catalog())
    assert state.current_index == 4
    assert state.answers[2] == frozenset({0, 1})
    assert state.answers[3] == " text "


def test_deserialize_session_state_errors() -> None:
    catalog = default_catalog()
    with pytest.raises(PreconditionViolation):
        deserialize_session_state({"currentIndex": 0, "answers": {"9": True}}, catalog)
    with pytest.raises(AnswerTypeError):
        deserialize_session_state({"currentIndex": 0, "answers": {"x": True}}, catalog)
    with pytest.raises(AnswerTypeError):
        deserialize_session_state({"currentIndex": "1"}, catalog)
    with pytest.raises(AnswerTypeError):
        deserialize_session_state({"currentIndex": 1, "answers": {"0": "yes"}}, catalog)


def test_decode_answer() -> None:
    assert decode_answer(MultiChoice("q", ["a", "b"]), []) == frozenset()
    assert decode_answer(TextEntry("q"), "") == ""
    with pytest.raises(AnswerTypeError):
        decode_answer(SingleChoice("q", ["a", "b"]), True)
    with pytest.raises(AnswerTypeError):
        decode_answer(MultiChoice("q", ["a", "b"]), [True])
