import pytest

from cliptails.store import UNSET, HistoryStore, RingCursor


@pytest.fixture
def mixed(store) -> HistoryStore:
    """[python, python, javascript], most recent first."""
    store.insert("javascript", ["console.log(x)"])
    store.insert("python", ["print(x)"])
    store.insert("python", ["print(y)"])
    return store


def test_advance_from_unset_finds_first_match(mixed):
    assert mixed.advance(UNSET, "python", 0) == 0
    assert mixed.advance(UNSET, "javascript", 0) == 2


def test_advance_cycles_within_language(mixed):
    assert mixed.advance(0, "python", 0) == 1
    assert mixed.advance(1, "python", 0) == 0


def test_advance_without_match_returns_input(mixed):
    assert mixed.advance(2, "typescript", 0) == 2
    assert mixed.advance(UNSET, "typescript", 0) == UNSET


def test_advance_single_match_stays_put(mixed):
    assert mixed.advance(2, "javascript", 0) == 2


def test_advance_honours_line_limit(store):
    store.insert("python", ["def f():", "    pass"])
    store.insert("python", ["x = 1"])
    assert store.advance(UNSET, "python", 1) == 0
    assert store.advance(0, "python", 1) == 0
    assert store.advance(0, "python", 0) == 1


def test_advance_out_of_range_start_scans_from_top(mixed):
    assert mixed.advance(17, "python", 0) == 0


def test_advance_on_empty_store(store):
    assert store.advance(UNSET, "python", 0) == UNSET
    assert store.advance(3, "python", 0) == 3


def test_cursor_starts_unset(mixed):
    assert RingCursor().current(mixed) == UNSET


def test_cursor_tracks_position(mixed):
    cursor = RingCursor()
    cursor.move_to(1, mixed)
    assert cursor.current(mixed) == 1


def test_cursor_goes_stale_after_mutation(mixed):
    cursor = RingCursor()
    cursor.move_to(1, mixed)
    mixed.insert("python", ["print(z)"])
    assert cursor.current(mixed) == UNSET


def test_cursor_reset(mixed):
    cursor = RingCursor()
    cursor.move_to(0, mixed)
    cursor.reset()
    assert cursor.current(mixed) == UNSET
