"""Status report acquisition.

This module runs the single ``git status`` subprocess needed per prompt
render and classifies its failures.
"""

# ruff: noqa: TC003  # Path needed at runtime
from pathlib import Path
from typing import TYPE_CHECKING

from gitprompt.exceptions import NotARepositoryError, ToolUnavailableError
from gitprompt.utils._exec import (
    DEFAULT_TIMEOUT_MS,
    CommandConfig,
    run_command,
    truncate_output,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

GIT_EXECUTABLE = "git"

# Keep the prompt from taking index.lock away from concurrent git commands
_STATUS_ENV = {"GIT_OPTIONAL_LOCKS": "0"}


def build_status_args(*, untracked: bool = True) -> tuple[str, ...]:
    """Build the argument vector for the status query.

    Args:
        untracked: Whether git should list untracked files.

    Returns:
        The command to execute.
    """
    args = [GIT_EXECUTABLE, "status", "--porcelain", "--branch"]
    if not untracked:
        args.append("--untracked-files=no")
    return tuple(args)


def query_status(
    cwd: Path | str | None = None,
    *,
    untracked: bool = True,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> list[str]:
    """Run ``git status --porcelain --branch`` and return its lines.

    Args:
        cwd: Directory to run the query in. If None, uses current directory.
        untracked: Whether untracked files should be listed.
        timeout_ms: Timeout for the subprocess in milliseconds.
        logger: Optional logger for failure details.

    Returns:
        The status report, one entry per line.

    Raises:
        ToolUnavailableError: If the git executable cannot be found.
        NotARepositoryError: If the query fails or times out.
    """
    result = run_command(
        CommandConfig(
            args=build_status_args(untracked=untracked),
            cwd=cwd,
            env=_STATUS_ENV,
            timeout_ms=timeout_ms,
        )
    )

    if result.command_not_found:
        if logger is not None:
            logger.warning("git_not_found", error=result.error)
        msg = f"{GIT_EXECUTABLE} executable not found"
        raise ToolUnavailableError(msg, executable=GIT_EXECUTABLE)

    if not result.success:
        if logger is not None:
            logger.debug(
                "status_query_failed",
                exit_code=result.exit_code,
                timed_out=result.timed_out,
                error=result.error,
                stderr=truncate_output(result.stderr.strip()),
            )
        raise NotARepositoryError

    return result.stdout.splitlines()
