"""
Logging setup with contextvars-based metadata injection.

- Adds the active command and collection into every log line (via contextvars).
- Logs to stderr so `load` output on stdout stays clean.
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (pymongo).
"""

import contextvars
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_command = contextvars.ContextVar("command", default="-")
cv_collection = contextvars.ContextVar("collection", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.command = cv_command.get() or "-"
        record.collection = cv_collection.get() or "-"
        return True


def set_log_context(*, command: str | None = None, collection: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if command is not None:
        cv_command.set(str(command))
    if collection is not None:
        cv_collection.set(str(collection))


def clear_log_context() -> None:
    """Reset context to defaults."""
    cv_command.set("-")
    cv_collection.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] %(command)s %(collection)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | %(command)s %(collection)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler (human-readable, INFO+); stdout is reserved for document output
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, DEBUG+, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Driver chatter (heartbeats, topology changes)
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
