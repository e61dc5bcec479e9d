# tests/test_store.py
from concurrent.futures import ThreadPoolExecutor

from receipt_points.store import ScoreStore


def test_assign_then_get():
    store = ScoreStore()
    rid = store.assign(28)
    assert store.get(rid) == 28
    assert rid in store
    assert len(store) == 1


def test_get_unknown_returns_none():
    store = ScoreStore()
    assert store.get("7fb1377b-b223-49d9-a31a-5a02701dd310") is None
    assert "nope" not in store


def test_identifiers_never_repeat():
    store = ScoreStore()
    ids = {store.assign(i) for i in range(10_000)}
    assert len(ids) == 10_000
    assert len(store) == 10_000


def test_concurrent_assign_and_get():
    store = ScoreStore()

    def work(n):
        rid = store.assign(n)
        return rid, store.get(rid), n

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(work, range(2_000)))

    assert len({rid for rid, _, _ in results}) == 2_000
    assert all(got == n for _, got, n in results)
    assert len(store) == 2_000
