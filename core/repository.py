"""
Item Repository - the mutable, ordered item collection.

Entries carry a synthetic item_id assigned when they enter the repository.
Session samples hold entries, so a displayed card is resolved back to its
current position by id even when two items have identical text.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Iterable, Iterator

from core.errors import ValidationFailure
from core.schemas import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepositoryEntry:
    """
    An item plus its stable identifier.
    """
    item_id: str
    item: Item

    @property
    def prompt(self) -> str:
        return self.item.prompt

    @property
    def answer(self) -> str:
        return self.item.answer


def _new_id() -> str:
    return uuid.uuid4().hex


def validate_item_text(prompt: str, answer: str) -> Item:
    """
    Trim both fields and reject empty ones.

    Raises:
        ValidationFailure: if prompt or answer is blank
    """
    prompt = (prompt or "").strip()
    answer = (answer or "").strip()
    if not prompt or not answer:
        raise ValidationFailure("Prompt and answer cannot be empty.")
    return Item(prompt=prompt, answer=answer)


class ItemRepository:
    """
    Ordered collection of repository entries.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._entries: list[RepositoryEntry] = []
        self.replace_all(items)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RepositoryEntry]:
        return iter(list(self._entries))

    # ---- Reads ----

    def entries(self) -> list[RepositoryEntry]:
        return list(self._entries)

    def items(self) -> list[Item]:
        return [entry.item for entry in self._entries]

    def answers(self) -> list[str]:
        return [entry.answer for entry in self._entries]

    def position_of(self, item_id: str) -> int:
        """
        Current position of an entry.

        Raises:
            KeyError: if the id is unknown (e.g. the entry was deleted)
        """
        for position, entry in enumerate(self._entries):
            if entry.item_id == item_id:
                return position
        raise KeyError(item_id)

    def get(self, item_id: str) -> RepositoryEntry:
        return self._entries[self.position_of(item_id)]

    def __contains__(self, item_id: object) -> bool:
        return any(entry.item_id == item_id for entry in self._entries)

    # ---- Mutations ----

    def replace_all(self, items: Iterable[Item]) -> None:
        """Swap the whole collection (fresh ids for every item)."""
        self._entries = [RepositoryEntry(item_id=_new_id(), item=item) for item in items]

    def append(self, prompt: str, answer: str) -> RepositoryEntry:
        entry = RepositoryEntry(item_id=_new_id(), item=validate_item_text(prompt, answer))
        self._entries.append(entry)
        logger.info("Added item %d: %s", len(self._entries), entry.prompt)
        return entry

    def update_at(self, position: int, prompt: str, answer: str) -> RepositoryEntry:
        item = validate_item_text(prompt, answer)
        current = self._entries[position]
        updated = RepositoryEntry(item_id=current.item_id, item=item)
        self._entries[position] = updated
        logger.info("Updated item %d: %s", position + 1, updated.prompt)
        return updated

    def update(self, item_id: str, prompt: str, answer: str) -> RepositoryEntry:
        return self.update_at(self.position_of(item_id), prompt, answer)

    def remove_at(self, position: int) -> Item:
        entry = self._entries.pop(position)
        logger.info("Removed item %d: %s", position + 1, entry.prompt)
        return entry.item

    def remove(self, item_id: str) -> Item:
        return self.remove_at(self.position_of(item_id))
