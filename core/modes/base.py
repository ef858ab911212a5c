"""
Abstract Mode Session

Defines the interface shared by the four study modes, plus the scoring
helpers used by the two quiz modes.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from core.repository import ItemRepository, RepositoryEntry
from core.sampler import sample_session
from core.schemas import QuestionMark

Sampler = Callable[[Sequence[RepositoryEntry]], list[RepositoryEntry]]


class AbstractModeSession(ABC):
    """
    Base class for study modes.

    Subclasses should implement:
    - render()
    - get_mode()
    """

    def __init__(
        self,
        repository: ItemRepository,
        sampler: Optional[Sampler] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize mode session.

        Args:
            repository: Shared item repository
            sampler: Session sampler (capped shuffle by default)
            rng: Random source for question building
        """
        self.repository = repository
        self.rng = rng or random.Random()
        self.sampler = sampler or (lambda entries: sample_session(entries, rng=self.rng))
        self.message: Optional[str] = None

    def draw_sample(self) -> list[RepositoryEntry]:
        return self.sampler(self.repository.entries())

    @abstractmethod
    def render(self) -> None:
        """Rebuild the mode from a fresh session sample."""
        pass

    @abstractmethod
    def get_mode(self) -> str:
        """Return the mode identifier (e.g., 'flashcards', 'timed_writing')."""
        pass

    def teardown(self) -> None:
        """Release anything the mode holds between renders."""
        pass


# ---- Quiz Scoring ----

@dataclass(frozen=True)
class QuizResult:
    """
    Outcome of checking a quiz.
    """
    correct: int
    total: int
    marks: tuple[QuestionMark, ...]

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.correct / self.total * 100, 2)

    def summary(self) -> str:
        return f"{self.correct} of {self.total} ({self.percentage:.2f}%)"


def score_answers(expected: Sequence[str], selections: Sequence[Optional[str]]) -> QuizResult:
    """
    Compare selections to expected answers verbatim (case-sensitive).

    Args:
        expected: Correct value per question
        selections: Chosen value per question, None when unanswered

    Returns:
        QuizResult with a mark per question
    """
    marks: list[QuestionMark] = []
    correct = 0
    for answer, selection in zip(expected, selections):
        if selection is None:
            marks.append(QuestionMark.UNANSWERED)
        elif selection == answer:
            correct += 1
            marks.append(QuestionMark.CORRECT)
        else:
            marks.append(QuestionMark.INCORRECT)
    return QuizResult(correct=correct, total=len(expected), marks=tuple(marks))


class QuizSession(AbstractModeSession):
    """
    Shared select/check flow for the multiple-choice and true/false modes.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.questions: list = []
        self.selections: list[Optional[str]] = []
        self.result: Optional[QuizResult] = None
        self.render_count = 0

    def _reset(self, questions: list) -> None:
        self.render_count += 1
        self.questions = questions
        self.selections = [None] * len(questions)
        self.result = None

    def select(self, index: int, value: Optional[str]) -> None:
        """Record (or clear, with None) the answer for question `index`."""
        self.selections[index] = value

    def expected_answers(self) -> list[str]:
        return [question.expected for question in self.questions]

    def check(self) -> Optional[QuizResult]:
        """
        Score the current selections.

        Returns:
            QuizResult, or None if there are no questions
        """
        if not self.questions:
            return None
        self.result = score_answers(self.expected_answers(), self.selections)
        return self.result
