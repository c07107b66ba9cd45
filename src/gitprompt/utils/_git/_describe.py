"""Detached HEAD description lookup."""

# ruff: noqa: TC003  # Path needed at runtime
from pathlib import Path
from typing import TYPE_CHECKING

from dulwich import porcelain

from gitprompt.utils._git._common import decode_bytes, open_repo

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

ABBREV_LENGTH = 7


def describe_head(
    cwd: Path | str | None = None,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> str | None:
    """Describe the commit at HEAD.

    Prefers the nearest reachable tag description (``v1.2-3-gabcdef0``);
    when no tag is reachable from HEAD, falls back to the abbreviated commit
    id.

    Args:
        cwd: Directory to start repository discovery from.
        logger: Optional logger for failure details.

    Returns:
        The description, or None if HEAD cannot be resolved.
    """
    with open_repo(cwd) as repo:
        if repo is None:
            return None
        try:
            short_id = decode_bytes(repo.head())[:ABBREV_LENGTH]
            if repo.refs.as_dict(b"refs/tags"):
                description = porcelain.describe(repo, abbrev=ABBREV_LENGTH)
                # dulwich answers g<id> when no tag is reachable
                if description != f"g{short_id}":
                    return description
            return short_id
        except Exception as e:  # noqa: BLE001 - dulwich raises assorted errors on odd repos
            if logger is not None:
                logger.debug("describe_failed", error=str(e))
            return None
