"""
Persistence Layer - scoped key-value access for item collections.

Schema:
- store_entries: one row per key
  - "<ITEMS_KEY_PREFIX>_<selector>" -> JSON array of items
  - SELECTOR_KEY -> active dataset selector
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.engine import Engine

from core.config import ITEMS_KEY_PREFIX, SELECTOR_KEY
from core.schemas import DatasetSelector, Item, dump_items, parse_items
from core.storage.database import init_db, make_session_factory
from core.storage.models import StoreEntry

logger = logging.getLogger(__name__)


def items_key(selector: DatasetSelector | str) -> str:
    """Store key for a dataset's item collection."""
    return f"{ITEMS_KEY_PREFIX}_{DatasetSelector(selector).value}"


class KeyValueStore:
    """
    Key-value store backed by a single SQLAlchemy table.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = make_session_factory(engine)
        init_db(engine)

    # ---- Raw Access ----

    def get(self, key: str) -> Optional[str]:
        session = self._session_factory()
        try:
            entry = session.get(StoreEntry, key)
            return entry.value if entry is not None else None
        finally:
            session.close()

    def set(self, key: str, value: str) -> None:
        session = self._session_factory()
        try:
            entry = session.get(StoreEntry, key)
            if entry is None:
                session.add(StoreEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, key: str) -> None:
        session = self._session_factory()
        try:
            session.query(StoreEntry).filter(StoreEntry.key == key).delete()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ---- Item Collections ----

    def load_items(self, selector: DatasetSelector) -> list[Item]:
        """
        Load a dataset's stored items.

        Returns:
            Stored items, or [] if nothing (or nothing readable) is stored
        """
        raw = self.get(items_key(selector))
        if not raw:
            return []
        try:
            return parse_items(raw)
        except ValidationError as exc:
            logger.warning("Ignoring unreadable collection under %s: %s", items_key(selector), exc)
            return []

    def save_items(self, selector: DatasetSelector, items: list[Item]) -> None:
        self.set(items_key(selector), dump_items(items))

    def reset_items(self, selector: DatasetSelector) -> None:
        """Forget a dataset's stored items so the next load re-seeds it."""
        self.delete(items_key(selector))

    # ---- Active Selector ----

    def load_selector(self, default: DatasetSelector | str) -> DatasetSelector:
        raw = self.get(SELECTOR_KEY)
        try:
            return DatasetSelector(raw) if raw else DatasetSelector(default)
        except ValueError:
            logger.warning("Unknown stored dataset selector %r, using %s", raw, default)
            return DatasetSelector(default)

    def save_selector(self, selector: DatasetSelector) -> None:
        self.set(SELECTOR_KEY, DatasetSelector(selector).value)
