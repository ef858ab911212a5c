from core.config import ITEMS_KEY_PREFIX, SELECTOR_KEY
from core.schemas import DatasetSelector, Item
from core.storage import items_key


def test_items_key_format():
    assert items_key(DatasetSelector.GENERAL) == f"{ITEMS_KEY_PREFIX}_general"
    assert items_key("daily") == f"{ITEMS_KEY_PREFIX}_daily"


def test_raw_get_set_delete(store):
    assert store.get("missing") is None
    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"
    store.delete("k")
    assert store.get("k") is None


def test_items_are_scoped_by_dataset(store, sample_items):
    store.save_items(DatasetSelector.GENERAL, sample_items)

    assert store.load_items(DatasetSelector.GENERAL) == sample_items
    assert store.load_items(DatasetSelector.DAILY) == []


def test_unreadable_collection_loads_as_empty(store):
    store.set(items_key(DatasetSelector.GENERAL), "{not json")
    assert store.load_items(DatasetSelector.GENERAL) == []


def test_reset_items(store, sample_items):
    store.save_items(DatasetSelector.DAILY, sample_items)
    store.reset_items(DatasetSelector.DAILY)
    assert store.load_items(DatasetSelector.DAILY) == []


def test_selector_round_trip_and_default(store):
    assert store.load_selector("general") is DatasetSelector.GENERAL
    store.save_selector(DatasetSelector.DAILY)
    assert store.get(SELECTOR_KEY) == "daily"
    assert store.load_selector("general") is DatasetSelector.DAILY


def test_unknown_stored_selector_falls_back(store):
    store.set(SELECTOR_KEY, "weekly")
    assert store.load_selector("general") is DatasetSelector.GENERAL


def test_saved_items_keep_order_and_duplicates(store):
    items = [Item(prompt="x", answer="y"), Item(prompt="x", answer="y"), Item(prompt="a", answer="b")]
    store.save_items(DatasetSelector.GENERAL, items)
    assert store.load_items(DatasetSelector.GENERAL) == items
