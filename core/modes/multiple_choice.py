"""
Multiple-Choice Mode

Each sampled item becomes a question with its correct answer plus up to
three distractors taken from other items' answers.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from core.config import MIN_MULTIPLE_CHOICE_ITEMS, MULTIPLE_CHOICE_OPTIONS
from core.errors import InsufficientData
from core.modes.base import QuizSession
from core.repository import RepositoryEntry


@dataclass(frozen=True)
class MultipleChoiceQuestion:
    """
    A question with shuffled answer options.
    """
    entry: RepositoryEntry
    options: tuple[str, ...]

    @property
    def prompt(self) -> str:
        return self.entry.prompt

    @property
    def expected(self) -> str:
        return self.entry.answer


def build_options(
    correct_answer: str,
    distractor_pool: Sequence[str],
    size: int = MULTIPLE_CHOICE_OPTIONS,
    rng: random.Random | None = None
) -> tuple[str, ...]:
    """
    Collect the correct answer plus unique distractors, then shuffle.

    Distractors equal to the correct answer (or already collected) are
    skipped; fewer than `size` options come back when the pool runs out.
    """
    rng = rng or random.Random()
    options = [correct_answer]
    for answer in distractor_pool:
        if len(options) >= size:
            break
        if answer != correct_answer and answer not in options:
            options.append(answer)
    rng.shuffle(options)
    return tuple(options)


def build_multiple_choice_questions(
    sample: Sequence[RepositoryEntry],
    all_answers: Sequence[str],
    rng: random.Random | None = None
) -> list[MultipleChoiceQuestion]:
    """
    Build one question per sampled entry.

    Args:
        sample: Session sample
        all_answers: Answers of every repository item (distractor source)
        rng: Random source

    Raises:
        InsufficientData: if fewer than MIN_MULTIPLE_CHOICE_ITEMS items exist
    """
    if len(all_answers) < MIN_MULTIPLE_CHOICE_ITEMS:
        raise InsufficientData(MIN_MULTIPLE_CHOICE_ITEMS, len(all_answers))

    rng = rng or random.Random()
    distractor_pool = list(all_answers)
    rng.shuffle(distractor_pool)

    return [
        MultipleChoiceQuestion(
            entry=entry,
            options=build_options(entry.answer, distractor_pool, rng=rng),
        )
        for entry in sample
    ]


class MultipleChoiceSession(QuizSession):
    """
    Multiple-choice quiz over a session sample.
    """

    def get_mode(self) -> str:
        return "multiple_choice"

    def render(self) -> None:
        try:
            questions = build_multiple_choice_questions(
                self.draw_sample(),
                self.repository.answers(),
                rng=self.rng,
            )
        except InsufficientData as exc:
            self.message = str(exc)
            self._reset([])
            return
        self.message = None
        self._reset(questions)
