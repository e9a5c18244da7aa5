import re
import sys
import time

_LEADING_WS = re.compile(r"^\s*")
_POSIX_FILENAME = re.compile(r"/([^/]+)$")
_WINDOWS_FILENAME = re.compile(r".*[\\/](.*)$")


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def leading_whitespace(text: str) -> str:
    """
    Return the run of whitespace at the start of `text`.

    Example:
        >>> leading_whitespace("    return x")
        '    '
    """
    return _LEADING_WS.match(text).group(0)


def resolve_line_separator(eol: str) -> str:
    """Map an undetermined end-of-line string ("") to "\\n"."""
    return eol or "\n"


def extract_filename(path: str, platform: str | None = None) -> str:
    """
    Get the display name of a file from its full path.

    On Windows both separators are honoured; elsewhere only "/". A path without a
    separator is returned unchanged.

    Args:
        path (str): Full path of the document.
        platform (str | None): Platform name, defaults to sys.platform.

    Returns:
        str: The last path segment.

    Example:
        >>> extract_filename("/home/user/src/main.py", "linux")
        'main.py'
        >>> extract_filename("C:\\\\src\\\\main.py", "win32")
        'main.py'
    """
    platform = platform or sys.platform
    regex = _WINDOWS_FILENAME if platform == "win32" else _POSIX_FILENAME
    match = regex.match(path) if platform == "win32" else regex.search(path)
    if not match:
        return path
    return match.group(1)
