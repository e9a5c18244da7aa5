"""
cliptails.suggestions

Completion and inline ghost-text items built from the clip history.

Both providers only look at entries captured in the document's language. They
are pure: the host turns the returned models into its own completion objects.
"""

from typing import Iterable

from pydantic import BaseModel

from cliptails.config import ClipHistorySettings
from cliptails.host import DocumentContext, Position
from cliptails.models import ClipEntry
from cliptails.renderer import render_replacement

COMPLETION_DETAIL = "Clipboard history"
MIN_INLINE_PREFIX = 3


class CompletionItem(BaseModel):
    label: str
    detail: str = COMPLETION_DETAIL
    insert_text: str


class InlineItem(BaseModel):
    insert_text: str
    position: Position


def completion_items(
    entries: Iterable[ClipEntry],
    document: DocumentContext,
    settings: ClipHistorySettings,
) -> list[CompletionItem]:
    """One item per keyword of every entry in the document's language."""
    if not settings.autocomplete_enabled:
        return []

    items: list[CompletionItem] = []
    for entry in entries:
        if entry.language_id != document.language_id:
            continue
        replacement = render_replacement(entry, "", document.line_separator)
        for word in entry.keywords:
            items.append(CompletionItem(label=word, insert_text=replacement))

    return items


def inline_items(
    entries: Iterable[ClipEntry],
    document: DocumentContext,
    settings: ClipHistorySettings,
) -> list[InlineItem]:
    """
    Ghost-text continuations of the typed line.

    Offered only with the cursor at end of line and at least three non-blank
    characters typed; an entry qualifies when its first line starts with them.
    """
    if not settings.inline_enabled:
        return []
    if not document.at_end_of_line:
        return []

    typed = document.text_before_cursor.lstrip()
    if len(typed) < MIN_INLINE_PREFIX:
        return []

    max_lines = settings.inline_max_line_count
    position = document.selection.active
    items: list[InlineItem] = []

    for entry in entries:
        if entry.language_id != document.language_id:
            continue
        if max_lines > 0 and len(entry.lines) > max_lines:
            continue
        if not entry.lines[0].strip().startswith(typed):
            continue

        text = render_replacement(
            entry, document.indentation, document.line_separator
        ).strip()
        items.append(InlineItem(insert_text=text[len(typed) :], position=position))

    return items
