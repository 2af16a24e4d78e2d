import pytest

from catalog import QuestionCatalog, default_catalog
from exceptions import InvalidQuestionError
from models import MultiChoice, SingleChoice, TextEntry, TrueFalse


def test_default_catalog_has_four_question_types() -> None:
    catalog = default_catalog()
    assert catalog.question_count() == 4
    assert [type(q) for q in catalog] == [TrueFalse, SingleChoice, MultiChoice, TextEntry]
    assert catalog.question_at(1).options[1] == "Jetpack Compose"
    assert len(catalog.question_at(2).options) == 4


def test_question_at_rejects_out_of_range() -> None:
    catalog = default_catalog()
    with pytest.raises(IndexError):
        catalog.question_at(4)
    with pytest.raises(IndexError):
        catalog.question_at(-1)


def test_catalog_is_immutable_copy() -> None:
    questions = [TrueFalse("Is water wet?")]
    catalog = QuestionCatalog(questions)
    questions.append(TextEntry("Why?"))
    assert catalog.question_count() == 1
    assert isinstance(catalog.questions, tuple)


def test_empty_catalog_rejected() -> None:
    with pytest.raises(InvalidQuestionError):
        QuestionCatalog([])


def test_question_invariants() -> None:
    with pytest.raises(InvalidQuestionError):
        TrueFalse("   ")
    with pytest.raises(InvalidQuestionError):
        SingleChoice("Pick", ["only"])
    with pytest.raises(InvalidQuestionError):
        MultiChoice("Pick", ["a", ""])
    question = SingleChoice("Pick", ["a", "b"])
    assert question.options == ("a", "b")
