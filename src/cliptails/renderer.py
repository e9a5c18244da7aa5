"""
cliptails.renderer

Materializes stored clips as pasteable text and as picker labels.
"""

from cliptails.models import ClipEntry


def render_replacement(entry: ClipEntry, indent: str, line_separator: str) -> str:
    """
    Join the entry's lines for pasting.

    Lines are joined with `line_separator + indent`. A multi-line entry gets one
    trailing separator so the cursor ends on a fresh line; a single line does not.

    Example:
        >>> render_replacement(entry_with_lines(["x", "y"]), "", "\\n")
        'x\\ny\\n'
    """
    text = (line_separator + indent).join(entry.lines)
    if len(entry.lines) > 1:
        text += line_separator
    return text


def entry_label(entry: ClipEntry) -> str:
    suffix = "..." if len(entry.lines) > 1 else ""
    return entry.lines[0].strip() + suffix


def entry_detail(entry: ClipEntry) -> str:
    plural = "s" if len(entry.lines) > 1 else ""
    return f"... {len(entry.lines)} line{plural}, from '{entry.source_file}'"
