"""
Shared quiz page rendering for multiple choice and true/false.
"""

from __future__ import annotations

from typing import Callable, Sequence

import streamlit as st

from app.ui import render_question_mark, render_quiz_result
from core.modes import QuizSession


def render_quiz(
    session: QuizSession,
    label: str,
    heading: Callable[[int, object], str],
    options: Callable[[object], Sequence[str]],
    format_option: Callable[[str], str] = str,
) -> None:
    """
    Render one radio group per question, a check button and the result.

    Args:
        session: Quiz session holding questions and selections
        label: Quiz name used in the result line
        heading: Builds the markdown heading for question i
        options: Answer values offered for a question
        format_option: Display text for an answer value
    """
    if session.message:
        st.info(session.message)
        return

    result = session.result
    key_prefix = f"{session.get_mode()}_{session.render_count}"

    for index, question in enumerate(session.questions):
        st.markdown(heading(index, question))
        choice = st.radio(
            f"Answer {index + 1}",
            list(options(question)),
            index=None,
            key=f"{key_prefix}_{index}",
            format_func=format_option,
            label_visibility="collapsed",
        )
        session.select(index, choice)
        if result is not None:
            render_question_mark(result.marks[index], format_option(question.expected))

    render_quiz_result(result, label)

    if st.button("Check answers", key=f"{key_prefix}_check", type="primary"):
        session.check()
        st.rerun()
