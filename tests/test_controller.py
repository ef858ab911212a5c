import json

import pytest

from core.controller import StudyController
from core.dataset_loader import DatasetLoader
from core.errors import ValidationFailure
from core.schemas import DatasetSelector, Item

GENERAL = [{"prompt": f"G{i}", "answer": f"g{i}"} for i in range(5)]
DAILY = [{"prompt": f"D{i}", "answer": f"d{i}"} for i in range(3)]


@pytest.fixture
def seed_files(tmp_path):
    general = tmp_path / "general.json"
    daily = tmp_path / "daily.json"
    general.write_text(json.dumps(GENERAL), encoding="utf-8")
    daily.write_text(json.dumps(DAILY), encoding="utf-8")
    return {"general": str(general), "daily": str(daily)}


@pytest.fixture
def controller(store, seed_files, rng, manual_timers):
    controller = StudyController(
        store,
        loader=DatasetLoader(store, seed_files),
        default_selector="general",
        rng=rng,
        timer_factory=manual_timers,
    )
    controller.init()
    yield controller
    controller.teardown()


def test_init_loads_default_dataset_and_renders_modes(controller):
    assert controller.selector is DatasetSelector.GENERAL
    assert len(controller.repository) == 5
    assert controller.last_load.source == "remote"
    assert len(controller.flashcards.cards) == 5
    assert len(controller.multiple_choice.questions) == 5
    assert len(controller.true_false.questions) == 5
    assert controller.timed_writing.state == "presenting"


def test_add_item_persists_and_rerenders(controller, store):
    controller.add_item("New", "item")

    assert store.load_items(DatasetSelector.GENERAL)[-1] == Item(prompt="New", answer="item")
    assert len(controller.flashcards.cards) == 6
    assert controller.drain_notices()[-1].level == "success"


def test_add_item_validation_leaves_store_untouched(controller, store):
    before = store.load_items(DatasetSelector.GENERAL)
    with pytest.raises(ValidationFailure):
        controller.add_item("  ", "x")
    assert store.load_items(DatasetSelector.GENERAL) == before


def test_save_edit_persists(controller, store):
    target = controller.repository.entries()[0]
    controller.flashcards.start_edit(target.item_id)

    controller.save_edit("G0 edited", "g0")

    assert store.load_items(DatasetSelector.GENERAL)[0] == Item(prompt="G0 edited", answer="g0")


def test_confirm_delete_persists(controller, store):
    target = controller.repository.entries()[1]
    controller.flashcards.request_delete(target.item_id)

    controller.confirm_delete()

    stored = store.load_items(DatasetSelector.GENERAL)
    assert len(stored) == 4
    assert Item(prompt="G1", answer="g1") not in stored


def test_switch_dataset_ping_pongs_and_persists(controller, store, manual_timers):
    running = manual_timers.last

    controller.switch_dataset()

    assert running.cancelled
    assert controller.selector is DatasetSelector.DAILY
    assert store.load_selector("general") is DatasetSelector.DAILY
    assert controller.repository.items() == [Item(**record) for record in DAILY]
    assert "WEEKLY STUDY" in controller.drain_notices()[-1].text

    controller.switch_dataset()
    assert controller.selector is DatasetSelector.GENERAL
    assert len(controller.repository) == 5


def test_edits_survive_a_round_trip_switch(controller):
    controller.add_item("Kept", "yes")
    controller.switch_dataset()
    controller.switch_dataset()
    assert Item(prompt="Kept", answer="yes") in controller.repository.items()


def test_persisted_selector_is_used_on_init(store, seed_files, manual_timers):
    store.save_selector(DatasetSelector.DAILY)
    controller = StudyController(store, loader=DatasetLoader(store, seed_files), timer_factory=manual_timers)
    controller.init()
    assert controller.selector is DatasetSelector.DAILY
    controller.teardown()


def test_load_failure_is_reported_not_raised(store, tmp_path, manual_timers):
    locations = {"general": str(tmp_path / "nope.json"), "daily": str(tmp_path / "nope2.json")}
    controller = StudyController(
        store,
        loader=DatasetLoader(store, locations),
        default_selector="general",
        timer_factory=manual_timers,
    )

    result = controller.init()

    assert not result.ok
    assert controller.load_failed
    assert len(controller.repository) == 0
    assert controller.drain_notices()[0].level == "error"
    assert controller.multiple_choice.message
    assert controller.timed_writing.state == "idle"


def test_reset_dataset_restores_seed(controller, store):
    controller.add_item("Temp", "x")
    controller.reset_dataset()

    assert len(controller.repository) == 5
    assert store.load_items(DatasetSelector.GENERAL) == [Item(**record) for record in GENERAL]


def test_activate_resamples_one_mode(controller, manual_timers):
    before = len(manual_timers.created)
    controller.activate("timed_writing")
    assert len(manual_timers.created) == before + 1
    assert manual_timers.created[before - 1].cancelled
