"""
cliptails.transcoder

CSV rendering of the whole history: every line of every entry becomes one token,
optionally wrapped (and escaped) with a quote character, joined with ", ".
"""

from typing import Iterable, Optional

from cliptails.models import ClipEntry

CSV_DELIMITER = ", "


def wrap_token(line: str, wrap_char: str) -> str:
    """Backslash-escape the first character of `wrap_char` in `line`, then wrap it."""
    if wrap_char:
        line = line.replace(wrap_char[0], "\\" + wrap_char[0])
    return f"{wrap_char}{line}{wrap_char}"


def to_csv(entries: Iterable[ClipEntry], wrap_char: str = "") -> Optional[str]:
    """
    Fold the lines of `entries`, in order, into one delimited string.

    Returns:
        str | None: The CSV text, or None when there is nothing to paste.

    Example:
        >>> to_csv([entry_with_lines(["a", "b"]), entry_with_lines(["c"])], '"')
        '"a", "b", "c"'
    """
    tokens = [
        wrap_token(line, wrap_char) for entry in entries for line in entry.lines
    ]
    if not any(tokens):
        return None
    return CSV_DELIMITER.join(tokens)
