import datetime
import threading
import time

import pytest

from concert_lab_api.app.services.concert_store import ConcertNotFound, ConcertStore


HALCYON = datetime.date(2025, 5, 1)


def test_create_assigns_increasing_ids(store):
    ids = [store.create(f"Concert {n}", HALCYON).id for n in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert len(store) == 5


def test_get_returns_created_concert(store):
    created = store.create("Halcyon Days", HALCYON)
    fetched = store.get(created.id)
    assert fetched.id == 1
    assert fetched.title == "Halcyon Days"
    assert fetched.date == HALCYON


def test_get_unknown_id_raises(store):
    with pytest.raises(ConcertNotFound) as excinfo:
        store.get(42)
    assert excinfo.value.concert_id == 42
    assert isinstance(excinfo.value, ValueError)


def test_delete_all_empties_and_restarts_ids(store):
    store.create("Halcyon Days", HALCYON)
    store.create("Dangerous Woman", HALCYON)
    store.delete_all()

    assert len(store) == 0
    with pytest.raises(ConcertNotFound):
        store.get(1)
    assert store.create("Encore", HALCYON).id == 1


def test_list_examines_size_successive_ids(store):
    for n in range(1, 8):
        store.create(f"Concert {n}", HALCYON)

    titles = [c.title for c in store.list(3, 3)]
    assert titles == ["Concert 3", "Concert 4", "Concert 5"]


def test_list_skips_missing_ids_and_stops_at_range_end(store):
    for n in range(1, 4):
        store.create(f"Concert {n}", HALCYON)

    assert [c.id for c in store.list(0, 10)] == [1, 2, 3]
    assert [c.id for c in store.list(2, 1)] == [2]
    assert store.list(10, 5) == []


def test_list_with_non_positive_size_is_empty(store):
    store.create("Halcyon Days", HALCYON)
    assert store.list(1, 0) == []
    assert store.list(1, -3) == []


def test_concurrent_creates_never_reuse_ids(store):
    def worker():
        for _ in range(200):
            store.create("Parallel", HALCYON)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1600
    assert [c.id for c in store.list(1, 1600)] == list(range(1, 1601))


def test_concerts_are_immutable(store):
    concert = store.create("Halcyon Days", HALCYON)
    with pytest.raises(Exception):
        concert.title = "Changed"


def test_list_cost_does_not_depend_on_size(store):
    store.create("Halcyon Days", HALCYON)
    store.create("Dangerous Woman", HALCYON)

    began = time.perf_counter()
    concerts = store.list(1, 10_000_000_000)
    assert time.perf_counter() - began < 0.5
    assert [c.id for c in concerts] == [1, 2]
