"""
Review scheduling hook.

Timed-writing ratings are handed to a ReviewScheduler. No scheduling
algorithm exists yet; LoggingScheduler just records the rating.
"""

from __future__ import annotations

import logging
from typing import Protocol

from core.repository import RepositoryEntry
from core.schemas import DifficultyRating

logger = logging.getLogger(__name__)


class ReviewScheduler(Protocol):
    """Turns a self-reported rating into a scheduling decision."""

    def schedule(self, entry: RepositoryEntry, rating: DifficultyRating) -> None:
        ...


class LoggingScheduler:
    """
    Records ratings to the log without scheduling anything.
    """

    def schedule(self, entry: RepositoryEntry, rating: DifficultyRating) -> None:
        logger.info("Rated '%s' as %s", entry.prompt, rating.value)
