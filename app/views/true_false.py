"""
True/false page rendering.
"""

from __future__ import annotations

from app.views.quiz import render_quiz
from core.controller import StudyController
from core.modes.true_false import FALSE_LABEL, LABELS, TRUE_LABEL

LABEL_TEXT = {
    TRUE_LABEL: "True",
    FALSE_LABEL: "False",
}


def render_true_false_page(controller: StudyController) -> None:
    render_quiz(
        controller.true_false,
        label="True/False",
        heading=lambda index, question: (
            f"#### {index + 1}. Question: \"{question.prompt}\"\n\nStatement: **{question.statement}**"
        ),
        options=lambda question: LABELS,
        format_option=lambda value: LABEL_TEXT[value],
    )
