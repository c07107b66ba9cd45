"""CLI context for global state management.

This module provides context management for global CLI options and the
structured logger. The CLIContext is set once at CLI startup and made
available to all commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


_current_cli_context: "contextvars.ContextVar[CLIContext | None]" = (  # noqa: UP037
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with options and logger.

    Attributes:
        log_level: Log level requested on the command line, or None to use
            the environment.
        log_file: Log file requested on the command line (empty for default).
        logger: Structured logger for CLI commands (writes to file only).
    """

    log_level: str | None = None
    log_file: str = ""
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)  # noqa: UP037

    @classmethod
    def get_current(cls) -> "CLIContext":  # noqa: UP037
        """Get current active CLIContext, or a default if not set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls()

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:  # noqa: UP037
        """Set the current active CLIContext."""
        _ = _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _ = _current_cli_context.set(None)

    def get_logger(self, command: str = "") -> "FilteringBoundLogger":  # noqa: UP037
        """Return the context logger, creating a file logger if none is set.

        Args:
            command: Command name bound to all entries of a created logger.
        """
        if self.logger is not None:
            return self.logger.bind(command=command) if command else self.logger

        from gitprompt.utils import create_logger

        return create_logger(level=self.log_level, log_file=self.log_file, command=command)
