"""Shared utilities for gitprompt."""

from ._exec import (
    DEFAULT_TIMEOUT_MS,
    CommandConfig,
    CommandResult,
    run_command,
    truncate_output,
)
from ._git import decode_bytes, describe_head, discover_repo, query_status
from ._logging import create_logger, create_null_logger
from ._paths import get_log_file, get_state_dir

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "CommandConfig",
    "CommandResult",
    "create_logger",
    "create_null_logger",
    "decode_bytes",
    "describe_head",
    "discover_repo",
    "get_log_file",
    "get_state_dir",
    "query_status",
    "run_command",
    "truncate_output",
]
