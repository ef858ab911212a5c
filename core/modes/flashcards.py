"""
Flashcard Mode

Cards flip between prompt and answer. One card at a time can be edited in
place; deleting a card needs an explicit confirmation.
"""

from __future__ import annotations

from typing import Optional

from core.modes.base import AbstractModeSession
from core.repository import RepositoryEntry
from core.schemas import Item

EMPTY_MESSAGE = "No items available. Add one in the \"Add item\" tab or check that the dataset loaded."


class FlashcardSession(AbstractModeSession):
    """
    Flashcard mode state.

    Per card: Viewing (front/back) or Editing. editing_id names the single
    card being edited; pending_delete_id names a card awaiting confirmation.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cards: list[RepositoryEntry] = []
        self.flipped: set[str] = set()
        self.editing_id: Optional[str] = None
        self.pending_delete_id: Optional[str] = None

    def get_mode(self) -> str:
        return "flashcards"

    def render(self) -> None:
        self.flipped.clear()
        self.pending_delete_id = None
        if self.editing_id is not None and self.editing_id not in self.repository:
            self.editing_id = None
        if len(self.repository) == 0:
            self.cards = []
            self.message = EMPTY_MESSAGE
            return
        self.message = None
        self.cards = self.draw_sample()

    # ---- Viewing ----

    def is_flipped(self, item_id: str) -> bool:
        return item_id in self.flipped

    def toggle(self, item_id: str) -> None:
        """Flip a card between front and back."""
        if item_id in self.flipped:
            self.flipped.discard(item_id)
        else:
            self.flipped.add(item_id)

    # ---- Editing ----

    def is_editing(self, item_id: str) -> bool:
        return self.editing_id == item_id

    def start_edit(self, item_id: str) -> None:
        """
        Open a card for editing.

        Any other card's unsaved edit is discarded.
        """
        self.repository.position_of(item_id)
        self.editing_id = item_id

    def save_edit(self, prompt: str, answer: str) -> RepositoryEntry:
        """
        Save the card being edited.

        Raises:
            ValidationFailure: on an empty field; the card stays in editing
            RuntimeError: if no card is being edited
        """
        if self.editing_id is None:
            raise RuntimeError("No card is being edited")
        updated = self.repository.update(self.editing_id, prompt, answer)
        self.editing_id = None
        self.cards = [updated if card.item_id == updated.item_id else card for card in self.cards]
        return updated

    def cancel_edit(self) -> None:
        self.editing_id = None

    # ---- Deleting ----

    def request_delete(self, item_id: str) -> RepositoryEntry:
        """Ask for confirmation before deleting a card."""
        entry = self.repository.get(item_id)
        self.pending_delete_id = item_id
        return entry

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    def confirm_delete(self) -> Item:
        """
        Delete the card awaiting confirmation.

        Raises:
            RuntimeError: if no delete was requested
        """
        if self.pending_delete_id is None:
            raise RuntimeError("No delete awaiting confirmation")
        item_id = self.pending_delete_id
        self.pending_delete_id = None
        if self.editing_id == item_id:
            self.editing_id = None
        removed = self.repository.remove(item_id)
        self.cards = [card for card in self.cards if card.item_id != item_id]
        return removed
