"""
Dataset Loader - resolve the active dataset's items.

Loading order:
1. Items already stored for the dataset
2. Otherwise the dataset's seed document (HTTP URL or local JSON file),
   which is then written back to the store

A failed seed load never raises: the caller gets an empty collection plus
the LoadFailure to show the user. Nothing is retried automatically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, Optional

import requests
from pydantic import ValidationError

from core.config import get_fetch_timeout
from core.errors import LoadFailure
from core.schemas import DatasetSelector, Item, parse_items
from core.storage.persistence import KeyValueStore

logger = logging.getLogger(__name__)

LoadSource = Literal["store", "remote", "none"]
Fetcher = Callable[[str], bytes]


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of a dataset load.
    """
    selector: DatasetSelector
    items: list[Item]
    source: LoadSource
    error: Optional[LoadFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_document(location: str, timeout: Optional[float] = None) -> bytes:
    """
    Read a seed document from an http(s) URL or a local path.

    Raises:
        requests.RequestException: network error or non-success status
        OSError: local file missing or unreadable
    """
    if location.startswith(("http://", "https://")):
        response = requests.get(location, timeout=timeout or get_fetch_timeout())
        response.raise_for_status()
        return response.content
    return Path(location).read_bytes()


class DatasetLoader:
    """
    Loads item collections for a dataset selector.
    """

    def __init__(
        self,
        store: KeyValueStore,
        locations: dict[str, str],
        fetcher: Fetcher = fetch_document
    ):
        self.store = store
        self.locations = locations
        self.fetcher = fetcher

    def location_for(self, selector: DatasetSelector) -> str:
        return self.locations[DatasetSelector(selector).value]

    def load(self, selector: DatasetSelector) -> LoadResult:
        """
        Load items for a dataset, seeding the store on first use.

        Args:
            selector: Dataset to load

        Returns:
            LoadResult with the items and where they came from
        """
        selector = DatasetSelector(selector)
        stored = self.store.load_items(selector)
        if stored:
            logger.info("Loaded %d items for '%s' from the store", len(stored), selector.value)
            return LoadResult(selector=selector, items=stored, source="store")

        location = self.location_for(selector)
        logger.info("No stored items for '%s', fetching seed document %s", selector.value, location)
        try:
            items = parse_items(self.fetcher(location))
        except (requests.RequestException, OSError) as exc:
            return self._failed(selector, location, str(exc))
        except ValidationError as exc:
            return self._failed(selector, location, f"invalid item document ({exc.error_count()} errors)")

        self.store.save_items(selector, items)
        logger.info("Seeded '%s' with %d items from %s", selector.value, len(items), location)
        return LoadResult(selector=selector, items=items, source="remote")

    def _failed(self, selector: DatasetSelector, location: str, reason: str) -> LoadResult:
        error = LoadFailure(selector.value, location, reason)
        logger.error("%s", error)
        return LoadResult(selector=selector, items=[], source="none", error=error)
