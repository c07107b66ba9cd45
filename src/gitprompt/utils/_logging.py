"""Logging utilities for gitprompt.

Loggers are standalone structlog loggers writing one JSON (or text) line per
event to the gitprompt log file. Nothing touches the global structlog or
stdlib configuration, and nothing is ever written to the terminal the prompt
is drawn on.
"""

import logging
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

DEFAULT_LEVEL = logging.WARNING

# The render command runs before every prompt, keep the file small
DEFAULT_MAX_BYTES: int = 512 * 1024
DEFAULT_BACKUP_COUNT: int = 2


def resolve_log_level(level: str | None = None) -> int:
    """Work out the effective log level.

    Precedence: ``GITPROMPT_DEBUG`` (any non-empty value forces DEBUG), then
    the explicit level, then ``GITPROMPT_LOG_LEVEL``, then WARNING. Unknown
    level names resolve to WARNING.

    Args:
        level: Level name requested by the caller, if any.

    Returns:
        The stdlib logging level.
    """
    if getenv("GITPROMPT_DEBUG"):
        return logging.DEBUG
    name = level if level is not None else getenv("GITPROMPT_LOG_LEVEL", "warning")
    return logging.getLevelNamesMapping().get(name.upper(), DEFAULT_LEVEL)


def _processors(log_format: LogFormatType) -> list["Processor"]:  # noqa: UP037
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _file_logger(
    log_path: Path, level: int, max_bytes: int | None, backup_count: int | None
) -> logging.Logger:
    # A private stdlib logger per file; it never propagates to the root logger
    stdlib_logger = logging.getLogger(f"gitprompt.file.{log_path}")
    for old_handler in stdlib_logger.handlers:
        old_handler.close()
    stdlib_logger.handlers.clear()
    stdlib_logger.propagate = False
    stdlib_logger.setLevel(level)

    handler: logging.FileHandler
    if max_bytes is not None and backup_count is not None:
        handler = RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count
        )
    else:
        handler = logging.FileHandler(log_path)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib_logger.addHandler(handler)
    return stdlib_logger


def _create_logger(
    log_file_path: str,
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger writing to the specified file.

    Args:
        log_file_path: Path to the log file, opened in append mode.
        log_level: Level override (resolved from the environment if None).
        log_format: Output format, either "json" or "text".
        max_bytes: Size at which the file is rotated. Rotation is enabled only
            when both max_bytes and backup_count are given.
        backup_count: Number of rotated files to keep.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    level = log_level if log_level is not None else resolve_log_level()

    # Handlers are closed on reconfiguration and by logging.shutdown at exit
    stdlib_logger = _file_logger(log_path, level, max_bytes, backup_count)

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            stdlib_logger,
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that discards everything."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        ),
    )


def create_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
    max_bytes: int | None = DEFAULT_MAX_BYTES,
    backup_count: int | None = DEFAULT_BACKUP_COUNT,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger for gitprompt commands.

    Writes to ``log_file`` or, when empty, to the default log file (see
    ``get_log_file``). If the file cannot be opened a logger that discards
    everything is returned, so a read-only home directory never breaks the
    prompt.

    Args:
        level: Log level name (see ``resolve_log_level`` for precedence).
        log_format: Output format, either "json" or "text".
        log_file: Path to the log file (default location if empty).
        command: Name of the CLI command, bound to every entry.
        max_bytes: Size at which the file is rotated.
        backup_count: Number of rotated files to keep.

    Returns:
        A FilteringBoundLogger instance.
    """
    try:
        logger = _create_logger(
            log_file or str(get_log_file()),
            log_level=resolve_log_level(level),
            log_format=log_format,
            max_bytes=max_bytes,
            backup_count=backup_count,
        )
    except OSError:
        return create_null_logger()

    return logger.bind(command=command) if command else logger
