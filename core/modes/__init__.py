"""Study modes for Study Deck"""

from core.modes.base import AbstractModeSession, QuizResult, QuizSession, score_answers
from core.modes.flashcards import FlashcardSession
from core.modes.multiple_choice import (
    MultipleChoiceQuestion,
    MultipleChoiceSession,
    build_multiple_choice_questions,
)
from core.modes.true_false import (
    TrueFalseQuestion,
    TrueFalseSession,
    build_true_false_questions,
)
from core.modes.timed_writing import TimedWritingSession
from core.modes.scheduling import LoggingScheduler, ReviewScheduler

__all__ = [
    "AbstractModeSession",
    "QuizResult",
    "QuizSession",
    "score_answers",
    "FlashcardSession",
    "MultipleChoiceQuestion",
    "MultipleChoiceSession",
    "build_multiple_choice_questions",
    "TrueFalseQuestion",
    "TrueFalseSession",
    "build_true_false_questions",
    "TimedWritingSession",
    "LoggingScheduler",
    "ReviewScheduler",
]
