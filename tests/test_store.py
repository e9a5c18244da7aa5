import pytest

from cliptails.models import ClipEntry
from cliptails.store import NO_TIMESTAMP, UNSET, HistoryStore


# region Insert


def test_insert_prepends(store):
    first = store.insert("python", ["one = 1"])
    second = store.insert("python", ["two = 2"])
    assert [e.created_at for e in store] == [second.created_at, first.created_at]
    assert store[0].lines == ["two = 2"]


def test_insert_rejects_duplicate_in_same_language(store):
    assert store.insert("python", ["x = 1", "y = 2"]) is not None
    assert store.insert("python", ["x = 1", "y = 2"]) is None
    assert len(store) == 1


def test_same_content_in_other_language_is_kept(store):
    store.insert("python", ["print(x)"])
    store.insert("ruby", ["print(x)"])
    assert [e.language_id for e in store] == ["ruby", "python"]


def test_capacity_evicts_oldest(store):
    for i in range(7):
        store.insert("python", [f"line {i}"])
    assert len(store) == store.capacity == 5
    assert [e.lines[0] for e in store] == [f"line {i}" for i in range(6, 1, -1)]


def test_timestamps_strictly_increase_with_frozen_clock(store, clock):
    a = store.insert("python", ["aaaa"])
    b = store.insert("python", ["bbbb"])
    assert a.created_at == clock.now
    assert b.created_at == clock.now + 1


def test_timestamps_follow_the_clock(store, clock):
    store.insert("python", ["aaaa"])
    clock.advance(250)
    assert store.insert("python", ["bbbb"]).created_at == clock.now


def test_insert_keeps_metadata(store):
    entry = store.insert(
        "python", ["def f():", "    pass"], "main.py", ["pass"], line_number=12
    )
    assert entry.line_number == 12
    assert entry.source_file == "main.py"
    assert entry.keywords == ["pass"]
    assert entry.line_count == 2


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        HistoryStore(capacity=0)


# endregion
# region Delete / clear


def test_delete_at(store):
    store.insert("python", ["aaaa"])
    store.insert("python", ["bbbb"])
    store.delete_at(0)
    assert [e.lines for e in store] == [["aaaa"]]


@pytest.mark.parametrize("index", [-1, 2, 99])
def test_delete_at_out_of_range_is_ignored(store, index):
    store.insert("python", ["aaaa"])
    store.insert("python", ["bbbb"])
    generation = store.generation
    store.delete_at(index)
    assert len(store) == 2
    assert store.generation == generation


def test_delete_by_timestamp_spans_languages(store):
    py = store.insert("python", ["aaaa"])
    store.insert("javascript", ["bbbb"])
    store.delete_by_timestamp(py.created_at)
    assert [e.language_id for e in store] == ["javascript"]


def test_delete_by_timestamp_removes_one_of_identical_clips(store):
    """Same text in two languages: only the entry with the timestamp goes."""
    py = store.insert("python", ["same_text"])
    js = store.insert("javascript", ["same_text"])
    store.delete_by_timestamp(py.created_at)
    assert [(e.created_at, e.language_id) for e in store] == [
        (js.created_at, "javascript")
    ]


def test_delete_by_unknown_or_zero_timestamp_is_ignored(store):
    store.insert("python", ["aaaa"])
    store.delete_by_timestamp(NO_TIMESTAMP)
    store.delete_by_timestamp(123)
    assert len(store) == 1


def test_index_of(store):
    entry = store.insert("python", ["aaaa"])
    store.insert("python", ["bbbb"])
    assert store.index_of(entry.created_at) == 1
    assert store.index_of(42) == UNSET


def test_clear(store):
    store.insert("python", ["aaaa"])
    store.clear()
    assert len(store) == 0
    assert store.entries == []


# endregion
# region Load / snapshot


def test_snapshot_then_load(store, clock):
    store.insert("python", ["def f():", "    pass"], "a.py", ["pass"])
    store.insert("go", ["fmt.Println(x)"], "b.go")
    saved = store.snapshot()

    restored = HistoryStore(capacity=5, clock=clock)
    restored.load(saved)
    assert restored.entries == store.entries


def test_snapshot_is_json_ready(store):
    store.insert("python", ["aaaa"], "a.py", ["aaaa"])
    assert store.snapshot() == [
        {
            "created_at": store[0].created_at,
            "language_id": "python",
            "lines": ["aaaa"],
            "source_file": "a.py",
            "line_number": 0,
            "keywords": ["aaaa"],
        }
    ]


def test_load_skips_invalid_and_duplicate_items(store):
    store.load(
        [
            {"created_at": 3, "language_id": "python", "lines": ["x = 1"]},
            {"created_at": 2, "language_id": "python", "lines": []},
            {"language_id": "python", "lines": ["no timestamp"]},
            {"created_at": 1, "language_id": "python", "lines": ["x = 1"]},
            ClipEntry(created_at=4, language_id="go", lines=["x := 1"]),
        ]
    )
    assert [(e.created_at, e.language_id) for e in store] == [(3, "python"), (4, "go")]


def test_load_skips_repeated_timestamps(store):
    """created_at identifies an entry, so the first item with a timestamp wins."""
    store.load(
        [
            {"created_at": 7, "language_id": "python", "lines": ["aaaa"]},
            {"created_at": 7, "language_id": "go", "lines": ["bbbb"]},
            {"created_at": 6, "language_id": "go", "lines": ["cccc"]},
        ]
    )
    assert [(e.created_at, e.language_id) for e in store] == [(7, "python"), (6, "go")]
    store.delete_by_timestamp(7)
    assert [e.lines for e in store] == [["cccc"]]


def test_load_truncates_to_capacity(store):
    store.load(
        [
            {"created_at": 100 - i, "language_id": "python", "lines": [f"l{i}"]}
            for i in range(8)
        ]
    )
    assert len(store) == 5
    assert store[0].created_at == 100


def test_load_moves_timestamps_past_newest(clock):
    store = HistoryStore(capacity=5, clock=clock)
    store.load([{"created_at": 5_000, "language_id": "python", "lines": ["old!"]}])
    assert clock.now < 5_000
    assert store.insert("python", ["new!"]).created_at == 5_001


# endregion
# region Change notification


def test_listeners_see_every_mutation(store):
    seen = []
    store.subscribe(lambda s: seen.append(len(s)))
    store.insert("python", ["aaaa"])
    store.insert("python", ["aaaa"])  # duplicate: no change
    store.insert("python", ["bbbb"])
    store.delete_at(0)
    store.clear()
    assert seen == [1, 2, 1, 0]
    assert store.generation == 4


def test_iteration_is_over_a_copy(store):
    store.insert("python", ["aaaa"])
    store.insert("python", ["bbbb"])
    for _ in store:
        store.delete_at(0)
    assert len(store) == 0


# endregion
