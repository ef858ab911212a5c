"""
Multiple-choice page rendering.
"""

from __future__ import annotations

from app.views.quiz import render_quiz
from core.controller import StudyController


def render_multiple_choice_page(controller: StudyController) -> None:
    render_quiz(
        controller.multiple_choice,
        label="Multiple choice",
        heading=lambda index, question: f"#### {index + 1}. {question.prompt}",
        options=lambda question: question.options,
    )
