"""
Quiz Result UI

Renders per-question marks and the overall score of a checked quiz.
"""

import html

import streamlit as st

from app.ui.flashcard_style import MARK_COLORS
from core.modes import QuizResult
from core.schemas import QuestionMark


MARK_LABELS = {
    QuestionMark.CORRECT: "✅ Correct",
    QuestionMark.INCORRECT: "❌ Incorrect",
    QuestionMark.UNANSWERED: "⚠️ Not answered",
}


def render_question_mark(mark: QuestionMark, expected: str | None = None) -> None:
    """
    Render the outcome badge below a checked question.
    """
    text = MARK_LABELS[mark]
    if expected is not None and mark is not QuestionMark.CORRECT:
        text = f"{text} (expected: {html.escape(expected)})"
    st.markdown(
        f'<div style="background-color: {MARK_COLORS[mark.value]}; padding: 4px 10px; '
        f'border-radius: 6px; margin-bottom: 12px;">{text}</div>',
        unsafe_allow_html=True
    )


def render_quiz_result(result: QuizResult | None, label: str) -> None:
    """Render the overall score line."""
    if result is None:
        return
    st.success(f"**Result ({label}):** you got {result.summary()} right.")
