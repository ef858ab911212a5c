"""UI Components for Study Deck"""

from app.ui.flashcard import render_flashcard
from app.ui.quiz_result import render_question_mark, render_quiz_result
from app.ui.rating_buttons import render_rating_buttons

__all__ = [
    "render_flashcard",
    "render_question_mark",
    "render_quiz_result",
    "render_rating_buttons",
]
