from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from exceptions import InvalidQuestionError


def _require_text(text: str) -> None:
    if not isinstance(text, str) or not text.strip():
        raise InvalidQuestionError("Question text must be a non-empty string")


def _require_options(options: Tuple[str, ...]) -> None:
    if len(options) < 2:
        raise InvalidQuestionError("Choice questions need at least two options")
    for option in options:
        if not isinstance(option, str) or not option.strip():
            raise InvalidQuestionError("Options must be non-empty strings")


@dataclass(frozen=True)
class TrueFalse:
    text: str

    def __post_init__(self) -> None:
        _require_text(self.text)


@dataclass(frozen=True)
class SingleChoice:
    text: str
    options: Tuple[str, ...]

    def __post_init__(self) -> None:
        _require_text(self.text)
        object.__setattr__(self, "options", tuple(self.options))
        _require_options(self.options)


@dataclass(frozen=True)
class MultiChoice:
    text: str
    options: Tuple[str, ...]

    def __post_init__(self) -> None:
        _require_text(self.text)
        object.__setattr__(self, "options", tuple(self.options))
        _require_options(self.options)


@dataclass(frozen=True)
class TextEntry:
    text: str

    def __post_init__(self) -> None:
        _require_text(self.text)


Question = Union[TrueFalse, SingleChoice, MultiChoice, TextEntry]

# TrueFalse -> bool, SingleChoice -> int, MultiChoice -> frozenset[int], TextEntry -> str
Answer = Union[bool, int, frozenset, str]


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of quiz progress.
    current_index == question count means the quiz is complete.
    """

    current_index: int = 0
    answers: Mapping[int, Answer] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))

    def with_answer(self, answer: Answer) -> SessionState:
        answers = dict(self.answers)
        answers[self.current_index] = answer
        return SessionState(self.current_index, answers)

    def advanced(self) -> SessionState:
        return SessionState(self.current_index + 1, self.answers)
