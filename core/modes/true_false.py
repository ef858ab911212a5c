"""
True/False Mode

Each sampled item is shown with a statement that is either its own answer
("true") or another item's answer ("false"), decided by a fair coin.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from core.modes.base import QuizSession
from core.repository import RepositoryEntry

TRUE_LABEL = "true"
FALSE_LABEL = "false"
LABELS = (TRUE_LABEL, FALSE_LABEL)

EMPTY_MESSAGE = "Add items to build a true/false quiz."


@dataclass(frozen=True)
class TrueFalseQuestion:
    """
    A prompt paired with a statement and its expected label.
    """
    entry: RepositoryEntry
    statement: str
    expected: str

    @property
    def prompt(self) -> str:
        return self.entry.prompt


def build_true_false_question(
    entry: RepositoryEntry,
    all_answers: Sequence[str],
    rng: random.Random
) -> TrueFalseQuestion:
    if rng.random() < 0.5:
        return TrueFalseQuestion(entry=entry, statement=entry.answer, expected=TRUE_LABEL)

    wrong_answers = [answer for answer in all_answers if answer != entry.answer]
    # Without a distinct answer the "false" statement is the item's own answer.
    statement = rng.choice(wrong_answers) if wrong_answers else entry.answer
    return TrueFalseQuestion(entry=entry, statement=statement, expected=FALSE_LABEL)


def build_true_false_questions(
    sample: Sequence[RepositoryEntry],
    all_answers: Sequence[str],
    rng: random.Random | None = None
) -> list[TrueFalseQuestion]:
    """
    Build one true/false question per sampled entry.

    Args:
        sample: Session sample
        all_answers: Answers of every repository item
        rng: Random source
    """
    rng = rng or random.Random()
    return [build_true_false_question(entry, all_answers, rng) for entry in sample]


class TrueFalseSession(QuizSession):
    """
    True/false quiz over a session sample.
    """

    def get_mode(self) -> str:
        return "true_false"

    def render(self) -> None:
        if len(self.repository) == 0:
            self.message = EMPTY_MESSAGE
            self._reset([])
            return
        self.message = None
        self._reset(
            build_true_false_questions(
                self.draw_sample(),
                self.repository.answers(),
                rng=self.rng,
            )
        )

    def select(self, index: int, value: str | None) -> None:
        if value is not None and value not in LABELS:
            raise ValueError(f"Unknown true/false label: {value}")
        super().select(index, value)
