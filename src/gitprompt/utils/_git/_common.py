"""Repository access shared by the in-process git lookups.

The status query itself runs the git binary; configuration and the detached
HEAD description are read in-process with dulwich, through these helpers.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo


def decode_bytes(value: bytes | str) -> str:
    """Decode a dulwich value to str.

    Config values and object ids come back as bytes. Undecodable bytes are
    replaced rather than raising, since the result is only displayed.
    """
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return value


def discover_repo(cwd: Path | str | None = None) -> Repo | None:
    """Find the repository containing a directory.

    Args:
        cwd: Directory to start search from. If None, uses current directory.

    Returns:
        Repo instance if found, None otherwise (including when the directory
        does not exist). Callers must close it.
    """
    try:
        return Repo.discover(str(cwd) if cwd is not None else ".")
    except (NotGitRepository, OSError):
        return None


@contextmanager
def open_repo(cwd: Path | str | None = None) -> Iterator[Repo | None]:
    """Open the repository containing a directory for the duration of a block.

    Yields:
        The Repo, or None outside a repository.
    """
    repo = discover_repo(cwd)
    try:
        yield repo
    finally:
        if repo is not None:
            repo.close()
