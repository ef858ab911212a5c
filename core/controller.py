"""
Study controller - application state and lifecycle.

Owns the store, the active dataset, the item repository and one session per
study mode. Every repository mutation is persisted immediately and followed
by a full re-render of all modes.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Literal, Optional

from core import config
from core.dataset_loader import DatasetLoader, LoadResult
from core.modes import (
    AbstractModeSession,
    FlashcardSession,
    MultipleChoiceSession,
    TimedWritingSession,
    TrueFalseSession,
)
from core.modes.scheduling import ReviewScheduler
from core.modes.timed_writing import TimerFactory, start_countdown
from core.repository import ItemRepository, RepositoryEntry
from core.schemas import DatasetSelector, Item
from core.storage.persistence import KeyValueStore

logger = logging.getLogger(__name__)

NoticeLevel = Literal["success", "info", "error"]

MODE_ORDER = ("flashcards", "multiple_choice", "true_false", "timed_writing")


@dataclass(frozen=True)
class Notice:
    """A user-visible message waiting to be shown."""
    level: NoticeLevel
    text: str


class StudyController:
    """
    Top-level controller for one user session.
    """

    def __init__(
        self,
        store: KeyValueStore,
        loader: Optional[DatasetLoader] = None,
        default_selector: DatasetSelector | str | None = None,
        rng: Optional[random.Random] = None,
        timer_factory: TimerFactory = start_countdown,
        scheduler: Optional[ReviewScheduler] = None
    ):
        self.store = store
        self.loader = loader or DatasetLoader(store, config.get_dataset_locations())
        self.default_selector = DatasetSelector(default_selector or config.get_default_dataset())
        self.selector = self.default_selector
        self.repository = ItemRepository()
        self.last_load: Optional[LoadResult] = None
        self.notices: list[Notice] = []

        rng = rng or random.Random()
        self.flashcards = FlashcardSession(self.repository, rng=rng)
        self.multiple_choice = MultipleChoiceSession(self.repository, rng=rng)
        self.true_false = TrueFalseSession(self.repository, rng=rng)
        self.timed_writing = TimedWritingSession(
            self.repository,
            rng=rng,
            timer_factory=timer_factory,
            scheduler=scheduler,
        )

    @property
    def modes(self) -> dict[str, AbstractModeSession]:
        return {
            "flashcards": self.flashcards,
            "multiple_choice": self.multiple_choice,
            "true_false": self.true_false,
            "timed_writing": self.timed_writing,
        }

    # ---- Lifecycle ----

    def init(self) -> LoadResult:
        """Load the persisted dataset and render every mode."""
        self.selector = self.store.load_selector(self.default_selector)
        result = self._load()
        self.render_all()
        return result

    def teardown(self) -> None:
        for session in self.modes.values():
            session.teardown()

    def _load(self) -> LoadResult:
        result = self.loader.load(self.selector)
        self.repository.replace_all(result.items)
        self.last_load = result
        if result.error is not None:
            self.notify("error", str(result.error))
        return result

    def _save(self) -> None:
        self.store.save_items(self.selector, self.repository.items())

    @property
    def load_failed(self) -> bool:
        """True when the active dataset failed to load and nothing is available."""
        return self.last_load is not None and not self.last_load.ok and len(self.repository) == 0

    # ---- Rendering ----

    def render_all(self) -> None:
        for session in self.modes.values():
            session.render()

    def activate(self, mode: str) -> AbstractModeSession:
        """Tab activation: redraw one mode from a fresh sample."""
        session = self.modes[mode]
        session.render()
        return session

    # ---- Notices ----

    def notify(self, level: NoticeLevel, text: str) -> None:
        self.notices.append(Notice(level=level, text=text))

    def drain_notices(self) -> list[Notice]:
        notices, self.notices = self.notices, []
        return notices

    # ---- Item CRUD ----

    def add_item(self, prompt: str, answer: str) -> RepositoryEntry:
        """
        Append an item, persist, re-render.

        Raises:
            ValidationFailure: if prompt or answer is blank
        """
        entry = self.repository.append(prompt, answer)
        self._save()
        self.render_all()
        self.notify("success", "Item added.")
        return entry

    def save_edit(self, prompt: str, answer: str) -> RepositoryEntry:
        """
        Save the flashcard being edited, persist, re-render.

        Raises:
            ValidationFailure: if prompt or answer is blank (nothing changes)
        """
        entry = self.flashcards.save_edit(prompt, answer)
        self._save()
        self.render_all()
        self.notify("success", "Item updated.")
        return entry

    def confirm_delete(self) -> Item:
        """Delete the flashcard awaiting confirmation, persist, re-render."""
        removed = self.flashcards.confirm_delete()
        self._save()
        self.render_all()
        self.notify("success", f"Deleted \"{removed.prompt}\".")
        return removed

    # ---- Datasets ----

    def switch_dataset(self) -> LoadResult:
        """
        Toggle to the other dataset, persist the choice, reload, re-render.
        """
        self.teardown()
        self.flashcards.cancel_edit()
        self.selector = self.selector.other()
        self.store.save_selector(self.selector)
        logger.info("Switched dataset to '%s'", self.selector.value)
        result = self._load()
        self.render_all()
        self.notify("info", f"Dataset switched to: {self.selector.label}")
        return result

    def reset_dataset(self) -> LoadResult:
        """
        Drop local edits for the active dataset and re-seed it.
        """
        self.teardown()
        self.flashcards.cancel_edit()
        self.store.reset_items(self.selector)
        logger.info("Reset stored items for '%s'", self.selector.value)
        result = self._load()
        self.render_all()
        if result.ok:
            self.notify("info", f"{self.selector.label} restored from its seed document.")
        return result
