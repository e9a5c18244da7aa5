# region Docstring
"""
cliptails.session
The clip history session: one object per host process that owns the history
store, the ring cursor and the status label, and implements every user command.
Overview:
- Capture: copy/cut run the host command, read the clipboard and push the text
    through normalize -> index -> store.insert.
- Cut throttle: a cut issued within `cut_throttle_ms` of the previous cut is not
    captured; if the previous capture is itself that recent it is retracted.
- Paste modes: picker, ring (cyclic, per language, line-limited), smart paste
    (picker on an empty selection, ring otherwise) and CSV.
- Suggestions: keyword completions and inline ghost text for a document.
- Every store mutation persists the history (when enabled) and refreshes the
    status label.
Contents:
- ClipHistorySession
Design notes:
- State is only mutated after the host call it depends on has succeeded; a
    HostError aborts the current command and is logged, never raised.
- Missing context (no active document, empty history) makes a command a no-op.
- The ring cursor is reset by any store mutation (see RingCursor).
"""
# endregion
# region Imports
import logging
from typing import Callable, Optional

from cliptails.config import ClipHistorySettings
from cliptails.errors import HostError, StateStorageError
from cliptails.host import (
    DocumentContext,
    HostBridge,
    PickItem,
    Selection,
    StatusDisplay,
    status_text,
)
from cliptails.indexer import index_clip
from cliptails.normalizer import normalize
from cliptails.persistence import HISTORY_STATE_KEY, StateStorage
from cliptails.renderer import entry_detail, entry_label, render_replacement
from cliptails.store import NO_TIMESTAMP, HistoryStore, RingCursor
from cliptails.suggestions import (
    CompletionItem,
    InlineItem,
    completion_items,
    inline_items,
)
from cliptails.transcoder import to_csv
from cliptails.utils import now_ms

# endregion

logger = logging.getLogger("cliptails.session")


class ClipHistorySession:
    """
    Clip history engine bound to one host.

    Attributes:
        settings (ClipHistorySettings): Engine configuration.
        host (HostBridge): Clipboard, commands and UI of the host editor.
        storage (StateStorage | None): Where the history is persisted.
        status (StatusDisplay | None): The "N clips" label.
        store (HistoryStore): The clip history.
        ring (RingCursor): Position of the last ring paste.
        last_added_timestamp (int): created_at of the last captured clip, or 0.
        last_cut_timestamp (int): Time of the last cut command, or 0.
    """

    def __init__(
        self,
        settings: ClipHistorySettings,
        host: HostBridge,
        storage: Optional[StateStorage] = None,
        status: Optional[StatusDisplay] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.settings = settings
        self.host = host
        self.storage = storage
        self.status = status
        self._clock = clock
        self._loading = False

        self.store = HistoryStore(settings.capacity, clock=clock)
        self.ring = RingCursor()
        self.last_added_timestamp = NO_TIMESTAMP
        self.last_cut_timestamp = 0

        self.store.subscribe(self._on_store_changed)

    # region Lifecycle
    @property
    def persistence_enabled(self) -> bool:
        return self.settings.persist and self.storage is not None

    def load(self) -> None:
        """Restore the persisted history, if persistence is enabled."""
        if self.persistence_enabled:
            try:
                stored = self.storage.load(HISTORY_STATE_KEY)
            except StateStorageError as e:
                logger.warning(f"Could not load clip history: {e}")
                stored = None

            if isinstance(stored, list):
                self._loading = True
                try:
                    self.store.load(stored)
                finally:
                    self._loading = False
                logger.info(f"Loaded {len(self.store)} clips.")
            elif stored is not None:
                logger.warning("Ignoring persisted clip history with unexpected shape.")

        self.refresh_status()

    def save(self) -> None:
        if not self.persistence_enabled:
            return
        try:
            self.storage.save(HISTORY_STATE_KEY, self.store.snapshot())
        except StateStorageError as e:
            logger.warning(f"Could not save clip history: {e}")

    def close(self) -> None:
        self.save()
        if self.status is not None:
            self.status.hide()

    def refresh_status(self) -> None:
        if self.status is None:
            return
        text = status_text(len(self.store))
        if text is None:
            self.status.hide()
        else:
            self.status.show(text)

    def _on_store_changed(self, store: HistoryStore) -> None:
        if not self._loading:
            self.save()
        self.refresh_status()

    # endregion
    # region Capture
    def process_clipboard_string(self, text: str, document: DocumentContext) -> int:
        """
        Store `text` captured from `document`.

        Returns:
            int: created_at of the new entry, or 0 when the clip was rejected.
        """
        lines = normalize(text, document.eol, self.settings)
        if lines is None:
            logger.debug("Clip rejected by capture filters.")
            return NO_TIMESTAMP

        keywords = index_clip(text, self.settings)
        entry = self.store.insert(
            document.language_id,
            lines,
            document.file_name,
            keywords,
            line_number=document.selection.start.line,
        )
        if entry is None:
            return NO_TIMESTAMP

        logger.debug(
            f"Captured {len(lines)} line(s) from '{entry.source_file}' "
            f"({entry.language_id})."
        )
        return entry.created_at

    async def handle_clipboard(self) -> int:
        """Read the clipboard and capture it for the active document."""
        try:
            text = await self.host.read_clipboard()
        except HostError as e:
            logger.warning(f"Clipboard read failed: {e}")
            return NO_TIMESTAMP

        document = self.host.active_document()
        if document is None:
            return NO_TIMESTAMP

        timestamp = self.process_clipboard_string(text, document)
        if timestamp:
            self.last_added_timestamp = timestamp
        return timestamp

    async def copy_to_clipboard(self) -> int:
        if not await self._run_command(self.settings.copy_command):
            return NO_TIMESTAMP
        return await self.handle_clipboard()

    async def cut_to_clipboard(self) -> int:
        """
        Cut, then capture unless this cut repeats the previous one too quickly.

        A quick repeat also retracts the previous capture when that capture is
        still within the throttle window.
        """
        throttle = self.settings.cut_throttle_ms
        now = self._clock()
        since_last_cut = now - self.last_cut_timestamp
        self.last_cut_timestamp = now

        if not await self._run_command(self.settings.cut_command):
            return NO_TIMESTAMP

        if since_last_cut >= throttle:
            return await self.handle_clipboard()

        if self.last_added_timestamp > 0:
            if self._clock() - self.last_added_timestamp < throttle:
                logger.debug(
                    f"Retracting clip {self.last_added_timestamp} after repeated cut."
                )
                self.store.delete_by_timestamp(self.last_added_timestamp)
                self.last_added_timestamp = NO_TIMESTAMP

        return NO_TIMESTAMP

    # endregion
    # region Paste
    async def paste_text(self, text: str) -> bool:
        """Put `text` on the clipboard and run the host paste command."""
        try:
            await self.host.write_clipboard(text)
        except HostError as e:
            logger.warning(f"Clipboard write failed: {e}")
            return False
        return await self._run_command(self.settings.paste_command)

    async def paste_next_from_ring(self) -> bool:
        """
        Paste the next ring clip and select it, so the next call replaces it.
        """
        document = self.host.active_document()
        if document is None or len(self.store) == 0:
            return False

        current = self.ring.current(self.store)
        next_index = self.store.advance(
            current, document.language_id, self.settings.ring_line_limit
        )
        if next_index == current:
            return False
        if next_index < 0 or next_index >= len(self.store):
            return False

        beginning = document.selection.start
        entry = self.store[next_index]
        text = render_replacement(entry, "", document.line_separator)

        if not await self.paste_text(text):
            return False

        self.ring.move_to(next_index, self.store)

        after = self.host.active_document()
        if after is not None:
            self.host.set_selection(
                Selection(anchor=beginning, active=after.selection.active)
            )
        return True

    def pick_items(self) -> list[PickItem]:
        return [
            PickItem(label=entry_label(entry), detail=entry_detail(entry))
            for entry in self.store
        ]

    async def paste_from_picker(self) -> bool:
        try:
            index = await self.host.pick(self.pick_items())
        except HostError as e:
            logger.warning(f"Picker failed: {e}")
            return False
        if index is None or index < 0 or index >= len(self.store):
            return False

        document = self.host.active_document()
        if document is None:
            return False

        entry = self.store[index]
        return await self.paste_text(
            render_replacement(entry, "", document.line_separator)
        )

    async def smart_paste(self) -> bool:
        """Picker on an empty selection, ring paste otherwise."""
        document = self.host.active_document()
        if document is None:
            return False
        if document.selection.is_empty:
            return await self.paste_from_picker()
        return await self.paste_next_from_ring()

    async def paste_as_csv(self) -> bool:
        if len(self.store) == 0:
            self.host.show_error("No clips to paste")
            return False

        try:
            wrap = await self.host.prompt(
                "Optional wrapping character", placeholder='e.g. "'
            )
        except HostError as e:
            logger.warning(f"Prompt failed: {e}")
            return False

        text = to_csv(self.store, wrap or "")
        if text is None:
            return False
        return await self.paste_text(text)

    # endregion
    # region History management
    def delete_entry(self, index: int) -> None:
        self.store.delete_at(index)

    def clear_history(self) -> None:
        self.store.clear()
        self.ring.reset()
        self.last_added_timestamp = NO_TIMESTAMP

    @property
    def ring_index(self) -> int:
        return self.ring.current(self.store)

    # endregion
    # region Suggestions
    def completions(self, document: DocumentContext) -> list[CompletionItem]:
        return completion_items(self.store, document, self.settings)

    def inline_suggestions(self, document: DocumentContext) -> list[InlineItem]:
        return inline_items(self.store, document, self.settings)

    # endregion
    async def _run_command(self, name: str) -> bool:
        try:
            await self.host.execute_command(name)
        except HostError as e:
            logger.warning(f"Host command '{name}' failed: {e}")
            return False
        return True


__all__ = ["ClipHistorySession"]
