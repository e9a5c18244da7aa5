"""
cliptails.logger

Logging setup for the cliptails application shell.

Library modules only ask for child loggers of `cliptails`; handlers are installed
by `setup_logging`, which the CLI calls once at startup. Records go to a JSONL
file (python-json-logger) and to the console.
"""

from datetime import datetime
import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from cliptails.config import AppSettings

LOGGER_NAME = "cliptails"
LOG_FILE_NAME = "cliptails.jsonl"

logger: T_Logger = logging.getLogger(LOGGER_NAME)
system_logger = logger.getChild("SYSTEM")


def build_config(log_file_path: Path, log_level: str) -> dict:
    """Return the dictConfig mapping for the given log file and level."""
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_file_path),
                "formatter": "json",
                "level": level,
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": "WARNING",
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["file", "console"],
                "level": level,
                "propagate": False,
            },
        },
    }


def setup_logging(settings: AppSettings, days_to_keep: int = 10) -> T_Logger:
    """Configure the `cliptails` logger and rotate old JSONL files."""
    log_file_path = settings.logs_dir / LOG_FILE_NAME
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    _archive_daily_log_file(log_file_path)
    _manage_logfile_archives(log_file_path, days_to_keep)

    dictConfig(build_config(log_file_path, settings.log_level))
    system_logger.debug("Logger for cliptails initialized.")
    return logger


def _archives(log_file_path: Path) -> list[Path]:
    return sorted(
        log_file_path.parent.glob(f"{log_file_path.stem}_*.jsonl"),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )


def _archive_daily_log_file(log_file_path: Path) -> None:
    """Rename the log file with a timestamp unless an archive from the last 24h exists."""
    current_time = datetime.now()
    archive_files = _archives(log_file_path)
    if archive_files:
        latest_archive = archive_files[0]
        timestamp_str = latest_archive.stem.replace(f"{log_file_path.stem}_", "")
        try:
            timestamp = datetime.strptime(timestamp_str, "%Y%m%d_%H%M%S")
        except ValueError:
            system_logger.warning(
                f"Could not parse timestamp from archive file {latest_archive}, skipping."
            )
            return
        if (current_time - timestamp).total_seconds() < 24 * 3600:
            return

    if log_file_path.exists():
        timestamp = current_time.strftime("%Y%m%d_%H%M%S")
        archive_path = log_file_path.with_name(
            f"{log_file_path.stem}_{timestamp}.jsonl"
        )
        log_file_path.rename(archive_path)


def _manage_logfile_archives(log_file_path: Path, days_to_keep: int) -> None:
    """Keep only the newest `days_to_keep` archives."""
    archive_files = _archives(log_file_path)
    for archive_file in archive_files[days_to_keep:]:
        archive_file.unlink()
