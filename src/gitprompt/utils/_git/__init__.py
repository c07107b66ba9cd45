"""Git utilities for gitprompt.

This package provides the status query subprocess wrapper, the detached HEAD
description lookup, and common repository helpers.
"""

from gitprompt.utils._git._common import decode_bytes, discover_repo, open_repo
from gitprompt.utils._git._describe import ABBREV_LENGTH, describe_head
from gitprompt.utils._git._status import (
    GIT_EXECUTABLE,
    build_status_args,
    query_status,
)

__all__ = [
    "ABBREV_LENGTH",
    "GIT_EXECUTABLE",
    "build_status_args",
    "decode_bytes",
    "describe_head",
    "discover_repo",
    "open_repo",
    "query_status",
]
