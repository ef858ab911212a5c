"""
Storage - local persistence for item collections.

Quick start:
    from core import storage

    store = storage.KeyValueStore(storage.get_engine())
    items = store.load_items(DatasetSelector.GENERAL)
"""

from core.storage.database import (
    create_store_engine,
    get_engine,
    init_db,
    reset_db,
)
from core.storage.persistence import KeyValueStore, items_key

__all__ = [
    "create_store_engine",
    "get_engine",
    "init_db",
    "reset_db",
    "KeyValueStore",
    "items_key",
]
