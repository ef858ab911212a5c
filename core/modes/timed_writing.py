"""
Timed Writing Mode

Free recall against a countdown. Each question moves through:

    presenting -> revealed -> (rating) -> presenting ... -> finished

The reveal happens on whichever comes first, the countdown expiring or the
user submitting. The other event is then a no-op. Ratings are
self-reported and only passed to the review scheduling hook.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Literal, Optional

from core.config import TIMED_WRITING_SECONDS
from core.modes.base import AbstractModeSession
from core.modes.scheduling import LoggingScheduler, ReviewScheduler
from core.repository import RepositoryEntry
from core.schemas import DifficultyRating
from core.timer import CountdownTimer

logger = logging.getLogger(__name__)

WritingState = Literal["idle", "presenting", "revealed", "finished"]
RevealCause = Literal["timeout", "submit"]
TimerFactory = Callable[[int, Callable[[int], None], Callable[[], None]], CountdownTimer]

EMPTY_MESSAGE = "Add items to start the timed writing challenge."
FINISHED_MESSAGE = "Challenge complete! Switch tabs or reload for a new set."


def start_countdown(
    duration: int,
    on_tick: Callable[[int], None],
    on_expire: Callable[[], None]
) -> CountdownTimer:
    """Create and start a one-second countdown."""
    timer = CountdownTimer(duration, on_tick=on_tick, on_expire=on_expire)
    timer.start()
    return timer


class TimedWritingSession(AbstractModeSession):
    """
    Timed-writing state machine over a fixed session sample.
    """

    def __init__(
        self,
        *args,
        timer_factory: TimerFactory = start_countdown,
        scheduler: Optional[ReviewScheduler] = None,
        duration: int = TIMED_WRITING_SECONDS,
        **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.timer_factory = timer_factory
        self.scheduler = scheduler or LoggingScheduler()
        self.duration = duration

        self.state: WritingState = "idle"
        self.questions: list[RepositoryEntry] = []
        self.cursor = 0
        self.remaining_seconds = duration
        self.response: str = ""
        self.revealed_by: Optional[RevealCause] = None
        self.ratings: list[DifficultyRating] = []
        self.question_round = 0  # Bumped every time a question is presented

        self._lock = threading.RLock()
        self._timer: Optional[CountdownTimer] = None
        self._generation = 0

    def get_mode(self) -> str:
        return "timed_writing"

    # ---- Reads ----

    @property
    def current(self) -> Optional[RepositoryEntry]:
        if self.state in ("presenting", "revealed"):
            return self.questions[self.cursor]
        return None

    @property
    def input_locked(self) -> bool:
        return self.state != "presenting"

    @property
    def answer_visible(self) -> bool:
        return self.state == "revealed"

    # ---- Lifecycle ----

    def render(self) -> None:
        """Start a new challenge from a fresh sample."""
        with self._lock:
            self._cancel_timer()
            self.cursor = 0
            self.ratings = []
            self.questions = self.draw_sample() if len(self.repository) else []
            if not self.questions:
                self.state = "idle"
                self.message = EMPTY_MESSAGE
                return
            self.message = None
            self._present()

    def teardown(self) -> None:
        with self._lock:
            self._cancel_timer()

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _present(self) -> None:
        if self.cursor >= len(self.questions):
            self.state = "finished"
            self.message = FINISHED_MESSAGE
            return

        self.state = "presenting"
        self.question_round += 1
        self.response = ""
        self.revealed_by = None
        self.remaining_seconds = self.duration

        generation = self._generation
        self._timer = self.timer_factory(
            self.duration,
            lambda remaining: self._on_tick(generation, remaining),
            lambda: self._on_expire(generation),
        )

    # ---- Timer Callbacks ----

    def _on_tick(self, generation: int, remaining: int) -> None:
        with self._lock:
            if generation == self._generation and self.state == "presenting":
                self.remaining_seconds = remaining

    def _on_expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._reveal("timeout")

    # ---- User Actions ----

    def submit(self, response: str) -> bool:
        """
        Reveal the answer early.

        Returns:
            True if this submission caused the reveal, False if the question
            was already revealed (the call is then a no-op)
        """
        with self._lock:
            if self.state != "presenting":
                return False
            self.response = response
            return self._reveal("submit")

    def _reveal(self, cause: RevealCause) -> bool:
        if self.state != "presenting":
            return False
        self._cancel_timer()
        self.state = "revealed"
        self.revealed_by = cause
        if cause == "timeout":
            self.remaining_seconds = 0
        logger.info("Question %d revealed by %s", self.cursor + 1, cause)
        return True

    def rate(self, rating: DifficultyRating) -> None:
        """
        Record a self-rating and move to the next question.

        Raises:
            RuntimeError: if the answer has not been revealed yet
        """
        with self._lock:
            if self.state != "revealed":
                raise RuntimeError("Rate a question only after its answer is revealed")
            rating = DifficultyRating(rating)
            entry = self.questions[self.cursor]
            logger.info("Question %d rated as %s", self.cursor + 1, rating.value)
            self.ratings.append(rating)
            self.scheduler.schedule(entry, rating)
            self.cursor += 1
            self._present()
