"""
cliptails.config
Configuration and settings management for the clip history engine.
Overview:
- Provides Pydantic-based settings classes for the engine, the application shell
    and the persistence layer.
- Each settings class inherits from FactoryBaseSettings and supports environment
    variable overrides via Field aliases.
Contents:
- ClipHistorySettings:
    Capacity, persistence toggle, capture filters, keyword filters, ring and
    suggestion limits, the cut throttle window and the host command names.
- AppSettings:
    Application root, environment and log level, with computed logs/cache dirs.
- DatabaseSettings:
    SQLAlchemy URL used by the SQL state storage.
Design Notes:
- Defaults allow zero-configuration startup; every field can be overridden from
    the environment (e.g. TAILS_CAPACITY, TAILS_RING_LINE_LIMIT).
- Regex lists are checked during validation (each pattern must compile) so a bad
    pattern fails at startup rather than on the first captured clip. The lists
    keep the pattern strings.
"""

from cliptails.imports import (
    Annotated,
    Any,
    Field,
    List,
    NoDecode,
    Optional,
    Path,
    field_validator,
    json,
    re,
)
from cliptails.config.base import APP_ENV, APP_ROOT
from cliptails.config.factory import FactoryBaseSettings
from cliptails.config.factory import get_settings  # noqa: F401  This is used externally


def _as_list(v: Any) -> Any:
    """Accept a list, a JSON-encoded list, or one bare value from the environment."""
    if v is None:
        return []
    if isinstance(v, str):
        if not v:
            return []
        try:
            decoded = json.loads(v)
        except json.JSONDecodeError:
            return [v]
        return decoded if isinstance(decoded, list) else [v]
    return v


def _check_patterns(patterns: List[str]) -> List[str]:
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {pattern!r}: {e}") from e
    return patterns


class ClipHistorySettings(FactoryBaseSettings):
    """
    Clip history engine configuration settings.
    """

    capacity: int = Field(
        default=20,
        ge=1,
        alias="TAILS_CAPACITY",
        description="Maximum number of clips kept in the history.",
    )
    persist: bool = Field(
        default=True,
        alias="TAILS_PERSIST_HISTORY",
        description="Save the history to state storage after every change.",
    )
    ignored_words: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="TAILS_IGNORED_WORDS",
        description="Literal words never offered as autocomplete keywords.",
    )
    ignored_regexes: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="TAILS_IGNORED_REGEXES",
        description="Patterns; keywords matching any of them are not indexed.",
    )
    clip_ignored_regexes: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="TAILS_CLIP_IGNORED_REGEXES",
        description="Patterns; captured text matching any of them is not stored.",
    )
    clip_line_limit: int = Field(
        default=0,
        ge=0,
        alias="TAILS_CLIP_LINE_LIMIT",
        description="Maximum lines per stored clip. (0 = unlimited)",
    )
    min_single_line_chars: int = Field(
        default=4,
        ge=0,
        alias="TAILS_MIN_SINGLE_LINE_CHARS",
        description="Minimum length of a single-line clip. (0 = no minimum)",
    )
    ring_line_limit: int = Field(
        default=1,
        ge=0,
        alias="TAILS_RING_LINE_LIMIT",
        description="Maximum lines of clips visited by ring paste. (0 = unlimited)",
    )
    autocomplete_enabled: bool = Field(
        default=True,
        alias="TAILS_AUTOCOMPLETE_ENABLE",
        description="Offer history keywords as completion items.",
    )
    inline_enabled: bool = Field(
        default=True,
        alias="TAILS_INLINE_SUGGESTIONS_ENABLE",
        description="Offer inline ghost-text suggestions from the history.",
    )
    inline_max_line_count: int = Field(
        default=0,
        ge=0,
        alias="TAILS_INLINE_MAX_LINE_COUNT",
        description="Maximum lines of clips offered inline. (0 = unlimited)",
    )
    cut_throttle_ms: int = Field(
        default=500,
        ge=0,
        alias="TAILS_CUT_THROTTLE_MS",
        description="Window in milliseconds within which a repeated cut is treated as accidental.",
    )
    copy_command: str = Field(
        default="editor.action.clipboardCopyAction",
        alias="TAILS_COPY_COMMAND",
        description="Host command run to copy the selection.",
    )
    cut_command: str = Field(
        default="editor.action.clipboardCutAction",
        alias="TAILS_CUT_COMMAND",
        description="Host command run to cut the selection.",
    )
    paste_command: str = Field(
        default="editor.action.clipboardPasteAction",
        alias="TAILS_PASTE_COMMAND",
        description="Host command run to paste the clipboard.",
    )

    @field_validator(
        "ignored_words", "ignored_regexes", "clip_ignored_regexes", mode="before"
    )
    def coerce_list(cls, v: Any) -> Any:
        return _as_list(v)

    @field_validator("ignored_regexes", "clip_ignored_regexes")
    def check_patterns(cls, v: List[str]) -> List[str]:
        return _check_patterns(v)


class AppSettings(FactoryBaseSettings):
    """Application configuration settings."""

    app_root: Path = Field(
        default=Path(APP_ROOT),
        description="Root directory for application data storage.",
        alias="CLIPTAILS_HOME",
    )
    environment: str = Field(
        default=APP_ENV,
        description="Current application environment (prod, ci, dev).",
        alias="CLIPTAILS_ENV",
    )
    log_level: str = Field(
        default="info",
        description="Log level for the cliptails loggers.",
        alias="CLIPTAILS_LOG_LEVEL",
    )

    @property
    def logs_dir(self) -> Path:
        """Base directory for logs."""
        return self.app_root / "logs"

    @property
    def cache_dir(self) -> Path:
        """Base directory for cache."""
        return self.app_root / ".cache"


class DatabaseSettings(FactoryBaseSettings):
    """
    Database configuration settings.
    """

    url: Optional[str] = Field(
        default=None,
        alias="CLIPTAILS_DATABASE_URL",
        description="SQLAlchemy URL for state storage. Defaults to a SQLite file in the cache dir.",
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL, falling back to <AppSettings.cache_dir>/cliptails.db."""
        if self.url:
            return self.url
        cache_dir = get_settings(AppSettings).cache_dir
        return f"sqlite:///{(cache_dir / 'cliptails.db').as_posix()}"


__all__ = [
    "AppSettings",
    "ClipHistorySettings",
    "DatabaseSettings",
    "FactoryBaseSettings",
    "get_settings",
]
