import json

import pytest
import requests

from core import dataset_loader
from core.dataset_loader import DatasetLoader, fetch_document
from core.errors import LoadFailure
from core.schemas import DatasetSelector, Item

LOCATIONS = {
    "general": "https://example.test/general.json",
    "daily": "https://example.test/daily.json",
}

SEED = [{"prompt": "Capital of France?", "answer": "Paris"}, {"prompt": "2 + 2", "answer": "4"}]


class FakeFetcher:
    def __init__(self, documents=None, error=None):
        self.documents = documents or {}
        self.error = error
        self.calls: list[str] = []

    def __call__(self, location):
        self.calls.append(location)
        if self.error is not None:
            raise self.error
        return self.documents[location]


def test_seeds_store_from_remote_document(store):
    fetcher = FakeFetcher({LOCATIONS["general"]: json.dumps(SEED).encode()})
    loader = DatasetLoader(store, LOCATIONS, fetcher=fetcher)

    result = loader.load(DatasetSelector.GENERAL)

    assert result.ok
    assert result.source == "remote"
    assert result.items == [Item(**record) for record in SEED]
    assert store.load_items(DatasetSelector.GENERAL) == result.items


def test_stored_items_win_over_remote(store, sample_items):
    store.save_items(DatasetSelector.GENERAL, sample_items)
    fetcher = FakeFetcher()
    loader = DatasetLoader(store, LOCATIONS, fetcher=fetcher)

    result = loader.load(DatasetSelector.GENERAL)

    assert result.source == "store"
    assert result.items == sample_items
    assert fetcher.calls == []


def test_network_error_returns_empty_with_failure(store):
    fetcher = FakeFetcher(error=requests.ConnectionError("offline"))
    loader = DatasetLoader(store, LOCATIONS, fetcher=fetcher)

    result = loader.load(DatasetSelector.DAILY)

    assert result.items == []
    assert result.source == "none"
    assert isinstance(result.error, LoadFailure)
    assert result.error.selector == "daily"
    assert result.error.location == LOCATIONS["daily"]
    assert store.load_items(DatasetSelector.DAILY) == []


def test_failed_load_is_not_retried(store):
    fetcher = FakeFetcher(error=requests.ConnectionError("offline"))
    DatasetLoader(store, LOCATIONS, fetcher=fetcher).load(DatasetSelector.GENERAL)
    assert fetcher.calls == [LOCATIONS["general"]]


@pytest.mark.parametrize("document", [b"not json", b'{"prompt": "x"}', b'[{"prompt": "x"}]'])
def test_unparseable_document_is_a_load_failure(store, document):
    fetcher = FakeFetcher({LOCATIONS["general"]: document})
    result = DatasetLoader(store, LOCATIONS, fetcher=fetcher).load(DatasetSelector.GENERAL)

    assert not result.ok
    assert result.items == []
    assert "invalid item document" in result.error.reason


def test_missing_local_file_is_a_load_failure(store, tmp_path):
    locations = {"general": str(tmp_path / "missing.json"), "daily": str(tmp_path / "daily.json")}
    result = DatasetLoader(store, locations).load(DatasetSelector.GENERAL)
    assert isinstance(result.error, LoadFailure)


def test_local_seed_file(store, tmp_path):
    path = tmp_path / "daily.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    locations = {"general": str(tmp_path / "general.json"), "daily": str(path)}

    result = DatasetLoader(store, locations).load(DatasetSelector.DAILY)

    assert result.source == "remote"
    assert len(result.items) == 2


class FakeResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_document_uses_requests(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(200, b"[]")

    monkeypatch.setattr(dataset_loader.requests, "get", fake_get)

    assert fetch_document("https://example.test/x.json", timeout=3) == b"[]"
    assert calls == [("https://example.test/x.json", 3)]


def test_non_success_status_is_a_load_failure(store, monkeypatch):
    monkeypatch.setattr(dataset_loader.requests, "get", lambda url, timeout: FakeResponse(404))

    result = DatasetLoader(store, LOCATIONS).load(DatasetSelector.GENERAL)

    assert not result.ok
    assert "404" in result.error.reason
