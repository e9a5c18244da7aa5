"""
cliptails
Bounded, deduplicated clip history for editor hosts.

Overview:
- Captured copy/cut text is normalized (blank-trimmed, dedented), filtered,
    keyword-indexed and stored most-recent first, deduplicated per language.
- The history drives a picker, cyclic ring paste scoped to the document language,
    keyword autocomplete, inline suggestions and a CSV paste mode.
- A ClipHistorySession binds the engine to a host through the HostBridge
    interface and persists it through a StateStorage.
"""

__version__ = "0.3.0"

from .config import ClipHistorySettings  # noqa: F401
from .host import DocumentContext, HostBridge, MemoryHost, Position, Selection  # noqa: F401
from .models import ClipEntry  # noqa: F401
from .normalizer import normalize  # noqa: F401
from .indexer import index_clip  # noqa: F401
from .persistence import MemoryStateStorage, SqlStateStorage, StateStorage  # noqa: F401
from .renderer import render_replacement  # noqa: F401
from .session import ClipHistorySession  # noqa: F401
from .store import HistoryStore, RingCursor  # noqa: F401
from .transcoder import to_csv  # noqa: F401

__all__ = [
    "ClipEntry",
    "ClipHistorySession",
    "ClipHistorySettings",
    "DocumentContext",
    "HistoryStore",
    "HostBridge",
    "MemoryHost",
    "MemoryStateStorage",
    "Position",
    "RingCursor",
    "Selection",
    "SqlStateStorage",
    "StateStorage",
    "__version__",
    "index_clip",
    "normalize",
    "render_replacement",
    "to_csv",
]
