# region Docstring
"""
cliptails.host
Boundary contracts between the clip history engine and its host editor.
Overview:
- The engine never talks to a clipboard, a command system or a UI directly; the
    session calls a HostBridge and reads DocumentContext snapshots instead.
- Host calls are coroutines. A failing call raises a HostError subclass and the
    session abandons that one user action.
Contents:
- Value models:
    - Position, Selection:
        Zero-based line/character positions and an anchor/active selection.
    - DocumentContext:
        Snapshot of the active document: language, end-of-line string, file
        path, selection and the text of the line holding the cursor.
    - PickItem:
        Label/detail pair offered by the picker.
- Interfaces:
    - HostBridge:
        Clipboard I/O, command dispatch, active document, selection update,
        picker, prompt and error display.
    - StatusDisplay:
        The "N clips" status label.
- In-memory implementations:
    - MemoryHost:
        A single-document text buffer that implements copy/cut/paste commands,
        with scripted picker/prompt answers and failure injection.
    - MemoryStatusDisplay
- status_text(count) -> str | None
"""
# endregion
# region Imports
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cliptails.errors import ClipboardError, CommandError
from cliptails.utils import extract_filename, leading_whitespace, resolve_line_separator

# endregion


# region Value Models
class Position(BaseModel):
    line: int = Field(0, ge=0)
    character: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[int, int]:
        return (self.line, self.character)


class Selection(BaseModel):
    anchor: Position = Field(default_factory=Position)
    active: Position = Field(default_factory=Position)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def caret(cls, line: int, character: int) -> "Selection":
        position = Position(line=line, character=character)
        return cls(anchor=position, active=position)

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active, key=lambda p: p.key)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active, key=lambda p: p.key)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active


class DocumentContext(BaseModel):
    """
    Snapshot of the active document taken for one capture or render request.

    Attributes:
        language_id (str): Language identifier of the document.
        eol (str): "\\n", "\\r\\n", or "" when undetermined.
        file_path (str): Full path of the document.
        selection (Selection): Current selection.
        line_text (str): Text of the line holding `selection.active`.
    """

    language_id: str
    eol: str = "\n"
    file_path: str = ""
    selection: Selection = Field(default_factory=Selection)
    line_text: str = ""

    @property
    def file_name(self) -> str:
        return extract_filename(self.file_path)

    @property
    def line_separator(self) -> str:
        return resolve_line_separator(self.eol)

    @property
    def indentation(self) -> str:
        return leading_whitespace(self.line_text)

    @property
    def text_before_cursor(self) -> str:
        return self.line_text[: self.selection.active.character]

    @property
    def at_end_of_line(self) -> bool:
        return self.selection.active.character == len(self.line_text)


class PickItem(BaseModel):
    label: str
    detail: str


# endregion
# region Interfaces
class HostBridge(ABC):
    """Everything the session needs from the host editor."""

    @abstractmethod
    async def read_clipboard(self) -> str: ...

    @abstractmethod
    async def write_clipboard(self, text: str) -> None: ...

    @abstractmethod
    async def execute_command(self, name: str) -> None: ...

    @abstractmethod
    def active_document(self) -> Optional[DocumentContext]: ...

    @abstractmethod
    def set_selection(self, selection: Selection) -> None: ...

    @abstractmethod
    async def pick(self, items: list[PickItem]) -> Optional[int]:
        """Show a picker; return the chosen index or None when dismissed."""

    @abstractmethod
    async def prompt(self, message: str, placeholder: str = "") -> Optional[str]:
        """Ask for a line of text; None when cancelled."""

    @abstractmethod
    def show_error(self, message: str) -> None: ...


class StatusDisplay(ABC):
    @abstractmethod
    def show(self, text: str) -> None: ...

    @abstractmethod
    def hide(self) -> None: ...


def status_text(count: int) -> Optional[str]:
    """Label for the status display; None means hide it."""
    if count == 0:
        return None
    if count == 1:
        return "1 clip"
    return f"{count} clips"


# endregion
# region In-memory Implementations
class MemoryStatusDisplay(StatusDisplay):
    def __init__(self) -> None:
        self.text = ""
        self.visible = False

    def show(self, text: str) -> None:
        self.text = text
        self.visible = True

    def hide(self) -> None:
        self.visible = False


class MemoryHost(HostBridge):
    """
    In-memory editor with a single open document.

    The configured copy, cut and paste command names act on the buffer the way a
    text editor does: copy/cut with an empty selection take the whole current line
    including its line break, paste replaces the selection and leaves an empty
    selection after the inserted text.

    Attributes:
        text (str): Document contents.
        clipboard (str): Clipboard contents.
        executed (list[str]): Names of the commands run so far.
        errors (list[str]): Messages passed to show_error.
        picks (list[Optional[int]]): Scripted picker answers, consumed in order.
        prompts (list[Optional[str]]): Scripted prompt answers, consumed in order.
        fail_clipboard (bool): Make clipboard calls raise ClipboardError.
        fail_commands (set[str]): Command names that raise CommandError.
    """

    def __init__(
        self,
        text: str = "",
        language_id: str = "plaintext",
        eol: str = "\n",
        file_path: str = "untitled",
        copy_command: str = "editor.action.clipboardCopyAction",
        cut_command: str = "editor.action.clipboardCutAction",
        paste_command: str = "editor.action.clipboardPasteAction",
    ) -> None:
        self.text = text
        self.language_id = language_id
        self.eol = eol
        self.file_path = file_path
        self.selection = Selection()
        self.clipboard = ""
        self.has_document = True
        self.executed: list[str] = []
        self.errors: list[str] = []
        self.picks: list[Optional[int]] = []
        self.prompts: list[Optional[str]] = []
        self.picked_items: list[list[PickItem]] = []
        self.fail_clipboard = False
        self.fail_commands: set[str] = set()
        self._commands = {
            copy_command: self._copy,
            cut_command: self._cut,
            paste_command: self._paste,
        }

    # region Buffer helpers
    @property
    def _separator(self) -> str:
        return resolve_line_separator(self.eol)

    @property
    def lines(self) -> list[str]:
        return self.text.split(self._separator)

    def offset_at(self, position: Position) -> int:
        lines = self.lines
        line = min(position.line, len(lines) - 1)
        offset = sum(len(text) + len(self._separator) for text in lines[:line])
        return offset + min(position.character, len(lines[line]))

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        before = self.text[:offset].split(self._separator)
        return Position(line=len(before) - 1, character=len(before[-1]))

    def selected_text(self) -> str:
        start = self.offset_at(self.selection.start)
        end = self.offset_at(self.selection.end)
        return self.text[start:end]

    def select(self, start: int, end: int) -> None:
        """Select between two buffer offsets (anchor, active)."""
        self.selection = Selection(
            anchor=self.position_at(start), active=self.position_at(end)
        )

    def _line_range(self) -> tuple[int, int]:
        line = self.selection.active.line
        start = self.offset_at(Position(line=line, character=0))
        end = start + len(self.lines[line])
        if line < len(self.lines) - 1:
            end += len(self._separator)
        return start, end

    def _selected_range(self) -> tuple[int, int]:
        if self.selection.is_empty:
            return self._line_range()
        return self.offset_at(self.selection.start), self.offset_at(self.selection.end)

    # endregion
    # region Commands
    def _copy(self) -> None:
        start, end = self._selected_range()
        self.clipboard = self.text[start:end]

    def _cut(self) -> None:
        start, end = self._selected_range()
        self.clipboard = self.text[start:end]
        self.text = self.text[:start] + self.text[end:]
        self.select(start, start)

    def _paste(self) -> None:
        start = self.offset_at(self.selection.start)
        end = self.offset_at(self.selection.end)
        self.text = self.text[:start] + self.clipboard + self.text[end:]
        caret = start + len(self.clipboard)
        self.select(caret, caret)

    # endregion
    # region HostBridge
    async def read_clipboard(self) -> str:
        if self.fail_clipboard:
            raise ClipboardError("clipboard read failed")
        return self.clipboard

    async def write_clipboard(self, text: str) -> None:
        if self.fail_clipboard:
            raise ClipboardError("clipboard write failed")
        self.clipboard = text

    async def execute_command(self, name: str) -> None:
        if name in self.fail_commands:
            raise CommandError(f"command '{name}' failed")
        if name not in self._commands:
            raise CommandError(f"unknown command '{name}'")
        self.executed.append(name)
        self._commands[name]()

    def active_document(self) -> Optional[DocumentContext]:
        if not self.has_document:
            return None
        lines = self.lines
        line_text = lines[min(self.selection.active.line, len(lines) - 1)]
        return DocumentContext(
            language_id=self.language_id,
            eol=self.eol,
            file_path=self.file_path,
            selection=self.selection,
            line_text=line_text,
        )

    def set_selection(self, selection: Selection) -> None:
        self.selection = selection

    async def pick(self, items: list[PickItem]) -> Optional[int]:
        self.picked_items.append(items)
        return self.picks.pop(0) if self.picks else None

    async def prompt(self, message: str, placeholder: str = "") -> Optional[str]:
        return self.prompts.pop(0) if self.prompts else None

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    # endregion


# endregion
