from pathlib import Path

import pytest

import cli
from api.utils import read_json_file, write_json_file
from catalog import default_catalog
from engine import QuizSession
from models import MultiChoice, SingleChoice, TextEntry, TrueFalse


def _scripted(lines: list[str]):
    remaining = iter(lines)
    return lambda prompt="": next(remaining)


def test_parse_answer_by_question_type() -> None:
    assert cli.parse_answer(TrueFalse("q"), " Yes ") is True
    assert cli.parse_answer(TrueFalse("q"), "f") is False
    assert cli.parse_answer(TrueFalse("q"), "maybe") is None
    choice = SingleChoice("q", ["a", "b"])
    assert cli.parse_answer(choice, "2") == 1
    assert cli.parse_answer(choice, "3") is None
    multi = MultiChoice("q", ["a", "b", "c"])
    assert cli.parse_answer(multi, "1, 3") == frozenset({0, 2})
    assert cli.parse_answer(multi, "") == frozenset()
    assert cli.parse_answer(multi, "x") is None
    assert cli.parse_answer(TextEntry("q"), "  hi ") == "  hi "


def test_run_quiz_gates_and_completes() -> None:
    session = QuizSession(default_catalog())
    output: list[str] = []
    cli.run_quiz(
        session,
        read=_scripted(["nope", "t", "2", "", "1,3", "  ", "stores data", "n"]),
        write=output.append,
    )
    assert session.is_complete()
    assert dict(session.answers) == {
        0: True,
        1: 1,
        2: frozenset({0, 2}),
        3: "stores data",
    }
    assert "Could not read that answer, try again." in output
    assert output.count("An answer is required to continue.") == 2
    assert output[-1] == "Thank you for completing the quiz!"


def test_run_quiz_retry_resets() -> None:
    session = QuizSession(default_catalog())
    with pytest.raises(StopIteration):
        cli.run_quiz(
            session,
            read=_scripted(["t", "1", "1", "x", "y"]),
            write=lambda line: None,
        )
    assert session.current_index == 0
    assert session.answers == {}


def test_main_saves_and_resumes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    state_file = tmp_path / "state.json"
    write_json_file(state_file, {"currentIndex": 1, "answers": {"0": True}})

    answers = iter(["2"])

    def fake_input(prompt: str = "") -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    cli.main(["--state-file", str(state_file), "--log-level", "WARNING"])

    saved = read_json_file(state_file, {})
    assert saved == {"currentIndex": 2, "answers": {"0": True, "1": 1}}
