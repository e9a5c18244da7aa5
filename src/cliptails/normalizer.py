# region Docstring
"""
cliptails.normalizer
Turns raw captured text into the canonical line sequence stored in the history.
Overview:
- Splits on the document's line separator, drops blank lines at both ends and
    removes the indentation common to every non-blank line.
- Applies the capture filters from ClipHistorySettings and rejects clips that
    should not be stored.
Contents:
- trim_blank_lines(text, line_separator) -> list[str]
- remove_common_leading_whitespace(lines) -> list[str]
- clean_clip(text, line_separator) -> list[str]
- should_ignore_clip(text, patterns) -> bool
- normalize(raw, line_separator, settings) -> list[str] | None
Design notes:
- Every function is pure; a rejected clip is reported as None, never raised.
- An empty separator means the document's end-of-line is undetermined and falls
    back to "\\n".
"""
# endregion
# region Imports
import re
from typing import Iterable, Optional

from cliptails.config import ClipHistorySettings
from cliptails.utils import leading_whitespace, resolve_line_separator


# endregion
# region Line Cleanup
def trim_blank_lines(text: str, line_separator: str) -> list[str]:
    """
    Split `text` and drop whitespace-only lines at the start and end.

    Example:
        >>> trim_blank_lines("\\n  \\nfoo\\n\\nbar\\n  ", "\\n")
        ['foo', '', 'bar']
    """
    lines = text.split(resolve_line_separator(line_separator))
    start = 0
    end = len(lines) - 1

    while start < len(lines) and lines[start].strip() == "":
        start += 1

    while end >= 0 and lines[end].strip() == "":
        end -= 1

    return lines[start : end + 1]


def remove_common_leading_whitespace(lines: list[str]) -> list[str]:
    """
    Remove the smallest leading-whitespace run of the non-blank lines from every line.

    Blank lines do not take part in the minimum; the cut is still applied to them.

    Example:
        >>> remove_common_leading_whitespace(["  a", "    b", "  c"])
        ['a', '  b', 'c']
    """
    indents = [len(leading_whitespace(line)) for line in lines if line.strip()]
    if not indents:
        return list(lines)

    cut = min(indents)
    if cut == 0:
        return list(lines)

    return [line[cut:] for line in lines]


def clean_clip(text: str, line_separator: str) -> list[str]:
    """Trim surrounding blank lines, then dedent."""
    return remove_common_leading_whitespace(trim_blank_lines(text, line_separator))


# endregion
# region Filtering
def should_ignore_clip(text: str, patterns: Iterable[str]) -> bool:
    """True when any pattern is found anywhere in `text` (multiline mode)."""
    for pattern in patterns:
        if re.search(pattern, text, re.MULTILINE):
            return True
    return False


def normalize(
    raw: str, line_separator: str, settings: ClipHistorySettings
) -> Optional[list[str]]:
    """
    Normalize a captured clip, or return None when it must not be stored.

    Args:
        raw (str): Text read from the clipboard.
        line_separator (str): The document's end-of-line string ("" if unknown).
        settings (ClipHistorySettings): Capture filters.

    Returns:
        list[str] | None: The dedented lines, or None for a rejected clip.
    """
    if raw.strip() == "":
        return None
    if should_ignore_clip(raw, settings.clip_ignored_regexes):
        return None

    lines = clean_clip(raw, line_separator)

    if settings.clip_line_limit > 0 and len(lines) > settings.clip_line_limit:
        return None

    min_chars = settings.min_single_line_chars
    if min_chars > 0 and len(lines) == 1 and len(lines[0]) < min_chars:
        return None

    return lines


# endregion
