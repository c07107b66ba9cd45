"""Execution utilities for external commands.

This module runs a single external command with timeout handling, output
capture and error classification, without ever raising for the common
failure modes.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

# Default timeout in milliseconds
DEFAULT_TIMEOUT_MS: int = 2000

# Maximum output size in bytes kept for log messages
MAX_OUTPUT_BYTES: int = 4096


@dataclass(frozen=True, slots=True)
class CommandConfig:
    """Configuration for command execution.

    Attributes:
        args: Program and arguments, executed without a shell.
        cwd: Working directory for execution.
        env: Additional environment variables to set.
        timeout_ms: Execution timeout in milliseconds.
    """

    args: tuple[str, ...] = ()
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result from command execution.

    Attributes:
        success: Whether the command ran and exited with status 0.
        exit_code: Process exit code, or None if execution failed.
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        error: Error message if execution failed (timeout, not found, etc.).
        timed_out: Whether the command timed out.
        command_not_found: Whether the program was not found.
    """

    success: bool
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    timed_out: bool = False
    command_not_found: bool = False


def truncate_output(output: str, max_bytes: int = MAX_OUTPUT_BYTES) -> str:
    """Truncate output to max bytes, preserving valid UTF-8.

    Args:
        output: The string to truncate.
        max_bytes: Maximum size in bytes.

    Returns:
        Truncated string with indicator if truncated.
    """
    if not output:
        return output

    encoded = output.encode("utf-8")
    if len(encoded) <= max_bytes:
        return output

    # Drop any multi-byte sequence cut in half at the boundary
    truncated = encoded[:max_bytes].decode("utf-8", errors="ignore")
    return truncated + "\n... [output truncated]"


def run_command(config: CommandConfig) -> CommandResult:
    """Execute an external command.

    Args:
        config: Command configuration specifying args, env, cwd and timeout.

    Returns:
        CommandResult with execution outcome.
    """
    if not config.args:
        return CommandResult(success=False, error="No command specified")

    env = {**os.environ, **config.env}
    cwd = str(config.cwd) if config.cwd else None
    timeout_seconds = config.timeout_ms / 1000.0

    try:
        result = subprocess.run(  # noqa: S603
            list(config.args),
            env=env,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(
            success=False,
            error=f"Command timed out after {timeout_seconds}s",
            timed_out=True,
        )
    except FileNotFoundError as e:
        # A missing cwd raises the same error, with the directory as filename
        return CommandResult(
            success=False,
            error=str(e),
            command_not_found=e.filename != cwd,
        )
    except OSError as e:
        # Missing or unreadable working directory, permission errors
        return CommandResult(success=False, error=str(e))

    return CommandResult(
        success=result.returncode == 0,
        exit_code=result.returncode,
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )
