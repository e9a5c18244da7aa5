# region Docstring
"""
cliptails.store
Bounded, per-language deduplicated clip history and the ring cursor over it.
Overview:
- HistoryStore keeps ClipEntry objects most-recent first, rejects a clip whose
    language and content already exist, and evicts from the tail past capacity.
- Every mutation bumps a generation counter and notifies subscribers (the session
    persists and refreshes its status label from there).
- advance() is the cyclic "next matching entry" scan used by ring paste.
- RingCursor remembers the last ring-pasted position together with the store
    generation it belongs to, so a position made stale by a later insert or delete
    reads back as unset.
Contents:
- UNSET (int): Cursor value meaning "no ring position".
- NO_TIMESTAMP (int): Sentinel ignored by delete_by_timestamp.
- HistoryStore:
    insert, delete_at, delete_by_timestamp, clear, load, snapshot, advance,
    subscribe.
- RingCursor:
    current, move_to, reset.
Design notes:
- All operations are total. Invalid indices and unknown timestamps are ignored
    because callers often act on a stale picker or on an old timestamp.
- Timestamps are epoch milliseconds and strictly increasing within one store, even
    when the clock does not move between two captures.
"""
# endregion
# region Imports
import logging
from typing import Callable, Iterable, Iterator, Optional

from pydantic import ValidationError

from cliptails.models import ClipEntry
from cliptails.utils import now_ms

# endregion

logger = logging.getLogger("cliptails.store")

UNSET = -1
NO_TIMESTAMP = 0

StoreListener = Callable[["HistoryStore"], None]


# region HistoryStore
class HistoryStore:
    """
    Ordered, bounded and deduplicated collection of clips.

    Attributes:
        capacity (int): Maximum number of entries kept.
        generation (int): Incremented on every mutation.
    """

    def __init__(self, capacity: int, clock: Callable[[], int] = now_ms) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.generation = 0
        self._clock = clock
        self._entries: list[ClipEntry] = []
        self._last_timestamp = NO_TIMESTAMP
        self._listeners: list[StoreListener] = []

    # region Read access
    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ClipEntry]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> ClipEntry:
        return self._entries[index]

    @property
    def entries(self) -> list[ClipEntry]:
        """A copy of the entries, most recent first."""
        return list(self._entries)

    def contains(self, language_id: str, lines: list[str]) -> bool:
        joined = "\n".join(lines)
        return any(entry.same_content(language_id, joined) for entry in self._entries)

    def index_of(self, created_at: int) -> int:
        for i, entry in enumerate(self._entries):
            if entry.created_at == created_at:
                return i
        return UNSET

    # endregion
    # region Mutation
    def subscribe(self, listener: StoreListener) -> None:
        self._listeners.append(listener)

    def insert(
        self,
        language_id: str,
        lines: list[str],
        source_file: str = "",
        keywords: Optional[list[str]] = None,
        line_number: int = 0,
    ) -> Optional[ClipEntry]:
        """
        Prepend a new entry unless the same language and content is already stored.

        Args:
            language_id (str): Language of the source document.
            lines (list[str]): Normalized clip lines.
            source_file (str): Display name of the source file.
            keywords (list[str] | None): Autocomplete keywords.
            line_number (int): Line of the source document the clip starts on.

        Returns:
            ClipEntry | None: The new entry, or None when the clip was a duplicate.
        """
        if self.contains(language_id, lines):
            logger.debug(f"Duplicate clip for language '{language_id}' rejected.")
            return None

        entry = ClipEntry(
            created_at=self._next_timestamp(),
            language_id=language_id,
            lines=list(lines),
            source_file=source_file,
            line_number=line_number,
            keywords=list(keywords or []),
        )
        self._entries.insert(0, entry)

        while len(self._entries) > self.capacity:
            evicted = self._entries.pop()
            logger.debug(f"Evicted clip created at {evicted.created_at}.")

        self._changed()
        return entry

    def delete_at(self, index: int) -> None:
        if index < 0 or index >= len(self._entries):
            logger.debug(f"delete_at({index}) ignored; {len(self._entries)} entries.")
            return

        del self._entries[index]
        self._changed()

    def delete_by_timestamp(self, created_at: int) -> None:
        if created_at == NO_TIMESTAMP:
            return

        index = self.index_of(created_at)
        if index == UNSET:
            logger.debug(f"No clip created at {created_at}; nothing deleted.")
            return

        del self._entries[index]
        self._changed()

    def clear(self) -> None:
        self._entries = []
        self._changed()

    def load(self, entries: Iterable[object]) -> None:
        """
        Replace the contents with persisted entries.

        Items may be ClipEntry objects or mappings. Invalid items, duplicate content
        and repeated created_at values are skipped; the result is truncated to
        capacity. The timestamp clock moves past the newest loaded entry so later
        captures keep sorting after it.
        """
        loaded: list[ClipEntry] = []
        seen_timestamps: set[int] = set()
        for item in entries:
            try:
                entry = (
                    item
                    if isinstance(item, ClipEntry)
                    else ClipEntry.model_validate(item)
                )
            except ValidationError as e:
                logger.warning(f"Skipping invalid persisted clip: {e}")
                continue
            if entry.created_at in seen_timestamps:
                logger.warning(
                    f"Skipping persisted clip with repeated timestamp {entry.created_at}."
                )
                continue
            if any(e.same_content(entry.language_id, entry.joined) for e in loaded):
                continue
            seen_timestamps.add(entry.created_at)
            loaded.append(entry)

        self._entries = loaded[: self.capacity]
        if self._entries:
            newest = max(entry.created_at for entry in self._entries)
            self._last_timestamp = max(self._last_timestamp, newest)
        self._changed()

    def snapshot(self) -> list[dict]:
        """JSON-ready dump of the entries, most recent first."""
        return [entry.model_dump(mode="json") for entry in self._entries]

    # endregion
    # region Ring scan
    def advance(self, after_index: int, language_id: str, max_line_count: int) -> int:
        """
        Find the next entry after `after_index` usable for ring paste.

        The scan is cyclic and visits every other position once. An entry matches
        when its language equals `language_id` and, unless `max_line_count` is 0,
        it has at most `max_line_count` lines.

        Returns:
            int: The matching index, or `after_index` unchanged when there is none.
        """
        count = len(self._entries)
        if count == 0:
            return after_index

        start = after_index if 0 <= after_index < count else UNSET
        steps = count - 1 if start != UNSET else count

        for offset in range(1, steps + 1):
            index = (start + offset) % count
            entry = self._entries[index]
            if entry.language_id != language_id:
                continue
            if max_line_count == 0 or entry.line_count <= max_line_count:
                return index

        return after_index

    # endregion
    def _next_timestamp(self) -> int:
        self._last_timestamp = max(int(self._clock()), self._last_timestamp + 1)
        return self._last_timestamp

    def _changed(self) -> None:
        self.generation += 1
        for listener in list(self._listeners):
            listener(self)


# endregion
# region RingCursor
class RingCursor:
    """
    Last position pasted by ring paste.

    The position is only meaningful for the store generation it was taken at; any
    later mutation of the store makes `current` report UNSET.
    """

    def __init__(self) -> None:
        self.index = UNSET
        self.generation = -1

    def current(self, store: HistoryStore) -> int:
        if self.index == UNSET or self.generation != store.generation:
            return UNSET
        if self.index >= len(store):
            return UNSET
        return self.index

    def move_to(self, index: int, store: HistoryStore) -> None:
        self.index = index
        self.generation = store.generation

    def reset(self) -> None:
        self.index = UNSET
        self.generation = -1


# endregion
