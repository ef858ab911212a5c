from types import SimpleNamespace

import pytest

from app import state
from app.ui import flashcard, quiz_result
from app.ui.flashcard_style import ANSWER_STYLE
from core.schemas import QuestionMark


@pytest.fixture
def markdown_calls(monkeypatch):
    calls = []

    def fake_markdown(body, **kwargs):
        calls.append((body, kwargs))

    monkeypatch.setattr(quiz_result.st, "markdown", fake_markdown)
    return calls


def test_question_mark_escapes_expected_answer(markdown_calls):
    quiz_result.render_question_mark(QuestionMark.INCORRECT, "<b>x</b> < y")

    body, kwargs = markdown_calls[-1]
    assert kwargs == {"unsafe_allow_html": True}
    assert "<b>x</b>" not in body
    assert "&lt;b&gt;x&lt;/b&gt; &lt; y" in body


def test_correct_mark_hides_expected_answer(markdown_calls):
    quiz_result.render_question_mark(QuestionMark.CORRECT, "1")

    body, _ = markdown_calls[-1]
    assert "expected" not in body


def test_flashcard_uses_style_preset_and_escapes(markdown_calls):
    flashcard.render_flashcard("<i>a</i>", corner_text="#1", style=ANSWER_STYLE)

    body, _ = markdown_calls[-1]
    assert ANSWER_STYLE.bg_color in body
    assert ANSWER_STYLE.main_font_size in body
    assert "<i>a</i>" not in body


def test_show_page_selects_tab_and_forces_resample(monkeypatch):
    session_state = SimpleNamespace(tab_choice="⏱️ Timed writing", active_tab="⏱️ Timed writing")
    monkeypatch.setattr(state, "st", SimpleNamespace(session_state=session_state))

    state.show_page("🃏 Flashcards")

    assert session_state.tab_choice == "🃏 Flashcards"
    assert session_state.active_tab is None
