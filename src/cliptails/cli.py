"""
cliptails.cli

Headless command line front-end over a persisted clip history.

Each invocation loads the history from the SQL state storage, runs one command
through a ClipHistorySession and lets the session persist the result.
"""

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cliptails.config import (
    AppSettings,
    ClipHistorySettings,
    DatabaseSettings,
    get_settings,
)
from cliptails.database import DatabaseSessionGenerator
from cliptails.host import DocumentContext, MemoryHost, Selection
from cliptails.logger import setup_logging
from cliptails.persistence import SqlStateStorage
from cliptails.renderer import entry_detail, entry_label, render_replacement
from cliptails.session import ClipHistorySession
from cliptails.store import UNSET
from cliptails.transcoder import to_csv

console = Console(
    width=120,
    color_system="auto",
)

app = typer.Typer(name="cliptails", help="Clip history: capture, list and re-paste clips.")


def _eol(crlf: bool) -> str:
    return "\r\n" if crlf else "\n"


def build_session() -> ClipHistorySession:
    """Create a session bound to the configured SQL storage and load it."""
    setup_logging(get_settings(AppSettings))
    settings = get_settings(ClipHistorySettings)
    storage = SqlStateStorage(DatabaseSessionGenerator(get_settings(DatabaseSettings)))
    session = ClipHistorySession(settings, MemoryHost(), storage=storage)
    session.load()
    return session


def _entry_or_exit(session: ClipHistorySession, index: int):
    if index < 0 or index >= len(session.store):
        console.print(f"[bold red]No clip at index {index}.[/bold red]")
        raise typer.Exit(code=1)
    return session.store[index]


@app.command(name="add", help="Capture text from stdin (or --text) as a clip.")
def add(
    language: str = typer.Option("plaintext", "--language", "-l", help="Language id."),
    file: str = typer.Option("", "--file", "-f", help="Path of the source file."),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Clip text."),
    crlf: bool = typer.Option(False, "--crlf", help="Text uses CRLF line endings."),
):
    session = build_session()
    raw = text if text is not None else sys.stdin.read()
    document = DocumentContext(language_id=language, eol=_eol(crlf), file_path=file)
    timestamp = session.process_clipboard_string(raw, document)
    if not timestamp:
        console.print("[yellow]Clip not stored.[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]Stored clip {timestamp}.[/bold green]")


@app.command(name="list", help="List the clips, most recent first.")
def list_clips():
    session = build_session()
    if len(session.store) == 0:
        console.print("[yellow]No clips.[/yellow]")
        return

    table = Table(title=f"{len(session.store)} clips")
    table.add_column("#", justify="right")
    table.add_column("Language")
    table.add_column("Clip")
    table.add_column("Detail")
    for i, entry in enumerate(session.store):
        table.add_row(
            str(i), entry.language_id, escape(entry_label(entry)), escape(entry_detail(entry))
        )
    console.print(table)


@app.command(name="show", help="Print one clip as it would be pasted.")
def show(
    index: int = typer.Argument(..., help="Clip index."),
    indent: str = typer.Option("", "--indent", help="Indent for continuation lines."),
    crlf: bool = typer.Option(False, "--crlf"),
):
    session = build_session()
    entry = _entry_or_exit(session, index)
    typer.echo(render_replacement(entry, indent, _eol(crlf)), nl=False)


@app.command(name="ring", help="Print the next ring clip after an index.")
def ring(
    language: str = typer.Option(..., "--language", "-l", help="Language id."),
    after: int = typer.Option(UNSET, "--after", help="Index of the current ring clip."),
):
    session = build_session()
    next_index = session.store.advance(
        after, language, session.settings.ring_line_limit
    )
    if next_index == after or next_index == UNSET:
        console.print("[yellow]No other ring clip.[/yellow]")
        raise typer.Exit(code=1)
    text = render_replacement(session.store[next_index], "", "\n")
    typer.echo(f"{next_index}\t{text}".rstrip("\n"))


@app.command(name="csv", help="Print every clip line as one CSV string.")
def csv(wrap: str = typer.Option("", "--wrap", "-w", help="Wrapping character.")):
    session = build_session()
    text = to_csv(session.store, wrap)
    if text is None:
        console.print("[yellow]No clips to paste.[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(text)


@app.command(name="complete", help="Show suggestions for a typed line.")
def complete(
    line: str = typer.Argument(..., help="Text typed so far on the line."),
    language: str = typer.Option("plaintext", "--language", "-l"),
):
    session = build_session()
    document = DocumentContext(
        language_id=language,
        line_text=line,
        selection=Selection.caret(0, len(line)),
    )
    for item in session.inline_suggestions(document):
        console.print(f"[bold cyan]inline[/bold cyan] {escape(line + item.insert_text)}")
    prefix = line.strip().split()[-1] if line.strip() else ""
    for item in session.completions(document):
        if item.label.startswith(prefix):
            console.print(f"[bold magenta]keyword[/bold magenta] {escape(item.label)}")


@app.command(name="delete", help="Delete a clip by index or by timestamp.")
def delete(
    index: Optional[int] = typer.Argument(None, help="Clip index."),
    timestamp: int = typer.Option(0, "--timestamp", help="created_at of the clip."),
):
    session = build_session()
    before = len(session.store)
    if timestamp:
        session.store.delete_by_timestamp(timestamp)
    elif index is not None:
        session.delete_entry(index)
    if len(session.store) == before:
        console.print("[yellow]Nothing deleted.[/yellow]")
        raise typer.Exit(code=1)
    console.print("[bold green]Clip deleted.[/bold green]")


@app.command(name="clear", help="Delete every clip.")
def clear():
    session = build_session()
    session.clear_history()
    console.print("[bold green]History cleared.[/bold green]")


def main():
    """Entry point for the cliptails console script."""
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise e


if __name__ == "__main__":
    main()
