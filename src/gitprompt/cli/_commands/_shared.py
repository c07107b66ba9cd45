# pyright: reportExplicitAny=false
"""Helpers shared by the CLI commands.

Every command reports failures the same way: a red ``Error:`` line on stderr
and an exit code chosen from the kind of gitprompt error that occurred.
"""

from enum import IntEnum
from typing import Any, Never

import orjson
from rich.console import Console
from rich.markup import escape

from gitprompt.exceptions import (
    ConfigError,
    GitPromptError,
    NotARepositoryError,
    ToolUnavailableError,
)

# Values handed to orjson; Any matches its signature
type JSONData = dict[str, Any]

__all__ = [
    "ExitCode",
    "JSONData",
    "exit_code_for",
    "exit_with_error",
    "format_json",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Exit codes of the gitprompt commands."""

    SUCCESS = 0
    NOT_FOUND = 1
    TOOL_UNAVAILABLE = 2
    VALIDATION_ERROR = 3
    INTERNAL_ERROR = 4


_ERROR_EXIT_CODES: tuple[tuple[type[GitPromptError], ExitCode], ...] = (
    (NotARepositoryError, ExitCode.NOT_FOUND),
    (ToolUnavailableError, ExitCode.TOOL_UNAVAILABLE),
    (ConfigError, ExitCode.VALIDATION_ERROR),
)


def exit_code_for(error: GitPromptError) -> ExitCode:
    """Map a gitprompt error onto the exit code reported for it."""
    for error_type, code in _ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.INTERNAL_ERROR


def format_json(data: JSONData, *, indent: bool = True) -> str:
    """Serialize command output with orjson.

    Args:
        data: Mapping to serialize.
        indent: Pretty-print with two-space indentation.

    Returns:
        The JSON text.
    """
    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def get_error_console() -> Console:
    """Return a console writing to stderr."""
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error line and exit.

    Args:
        message: The error message to display.
        code: Exit code (defaults to INTERNAL_ERROR).
        console: Console to print on (a new stderr console if None).

    Raises:
        SystemExit: Always, with the given exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)
