import random

import pytest

from core.errors import InsufficientData
from core.modes import MultipleChoiceSession, build_multiple_choice_questions, score_answers
from core.modes.multiple_choice import build_options
from core.repository import ItemRepository
from core.schemas import Item, QuestionMark


def test_options_contain_correct_answer_and_unique_distractors(repository, rng):
    questions = build_multiple_choice_questions(repository.entries(), repository.answers(), rng=rng)

    for question in questions:
        assert question.expected in question.options
        assert len(question.options) == 4
        assert len(set(question.options)) == len(question.options)


def test_options_skip_duplicates_of_correct_answer():
    options = build_options("x", ["x", "y", "x", "y", "z"], rng=random.Random(0))
    assert sorted(options) == ["x", "y", "z"]


def test_options_stop_at_four():
    options = build_options("a", ["b", "c", "d", "e", "f"], rng=random.Random(0))
    assert len(options) == 4
    assert "a" in options


def test_fewer_than_four_items_is_insufficient():
    repo = ItemRepository([Item(prompt=str(i), answer=str(i)) for i in range(3)])
    with pytest.raises(InsufficientData) as excinfo:
        build_multiple_choice_questions(repo.entries(), repo.answers())
    assert excinfo.value.required == 4
    assert excinfo.value.available == 3


def test_session_shows_guidance_when_insufficient():
    repo = ItemRepository([Item(prompt="A", answer="1")])
    session = MultipleChoiceSession(repo)
    session.render()
    assert session.questions == []
    assert "At least 4" in session.message
    assert session.check() is None


def test_scoring_counts_verbatim_matches():
    result = score_answers(["Paris", "4", "blue"], ["paris", "4", None])
    assert result.correct == 1
    assert result.marks == (QuestionMark.INCORRECT, QuestionMark.CORRECT, QuestionMark.UNANSWERED)
    assert result.percentage == round(1 / 3 * 100, 2)


def test_three_of_four_correct(repository, in_order, rng):
    session = MultipleChoiceSession(repository, sampler=in_order, rng=rng)
    session.render()

    for index, question in enumerate(session.questions):
        if index < 3:
            session.select(index, question.expected)
        else:
            wrong = next(option for option in question.options if option != question.expected)
            session.select(index, wrong)

    result = session.check()

    assert result.correct == 3
    assert result.total == 4
    assert result.percentage == 75.0
    assert result.summary() == "3 of 4 (75.00%)"


def test_render_resets_selections(repository, rng):
    session = MultipleChoiceSession(repository, rng=rng)
    session.render()
    session.select(0, session.questions[0].expected)
    session.check()

    session.render()

    assert session.result is None
    assert session.selections == [None] * len(session.questions)
