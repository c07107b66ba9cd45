"""Status summarizer.

Turns a porcelain status report into a StatusSummary: branch identity, the
worst dirty classification, and upstream counts.
"""

from collections.abc import Callable, Iterable

from gitprompt.config import PromptConfig
from gitprompt.enums import DirtyState
from gitprompt.exceptions import NotARepositoryError
from gitprompt.status._models import (
    FileStatusLine,
    HeaderLine,
    RemoteCounts,
    StatusSummary,
)
from gitprompt.status._parser import DETACHED_BRANCH, parse_status_line

ELLIPSIS = ".."
PREFIX_LENGTH = 3

_UNMERGED_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})
_UNTRACKED_CODES = frozenset({"??", "!!"})
_INDEX_CHANGES = frozenset("MTADRC")

type Describe = Callable[[], str | None]


def classify_file_status(
    line: FileStatusLine, *, include_untracked: bool = True
) -> DirtyState:
    """Classify one file status line using git's short-format code table.

    Args:
        line: Parsed file status line.
        include_untracked: Whether untracked and listed ignored files count
            as dirty.

    Returns:
        The classification this line alone implies.
    """
    code = line.code
    if code in _UNTRACKED_CODES:
        return DirtyState.WORKTREE_DIRTY if include_untracked else DirtyState.CLEAN
    if code in _UNMERGED_CODES or "U" in code:
        return DirtyState.INDEX_DIRTY
    if line.index in _INDEX_CHANGES:
        return DirtyState.INDEX_DIRTY
    # Worktree-only changes, and any unknown non-blank code
    return DirtyState.WORKTREE_DIRTY


def scan_status(
    lines: Iterable[str], *, include_untracked: bool = True
) -> tuple[HeaderLine | None, DirtyState]:
    """Fold the status report into its header and worst classification.

    Only the first header is kept. INDEX_DIRTY is the maximum of the
    ordering, so the fold stops as soon as it is reached; lines after it are
    never read.

    Args:
        lines: Status report lines.
        include_untracked: Whether untracked files count as dirty.

    Returns:
        Tuple of (first header or None, worst classification).
    """
    header: HeaderLine | None = None
    dirty = DirtyState.CLEAN
    for line in lines:
        token = parse_status_line(line)
        match token:
            case HeaderLine() if header is None:
                header = token
            case FileStatusLine():
                dirty = max(
                    dirty,
                    classify_file_status(token, include_untracked=include_untracked),
                )
            case _:
                pass
        # git writes the header first, so stopping here never loses it; a
        # staged line ahead of the header leaves the report headerless
        if dirty is DirtyState.INDEX_DIRTY:
            break
    return header, dirty


def shorten_branch(name: str, limit: int) -> str:
    """Shorten a branch name for display.

    A ``prefix/rest`` name with a prefix longer than three characters first
    has its prefix cut to three characters; a name still over the limit is
    cut to ``limit`` characters and marked with ``..``.

    Args:
        name: Branch name.
        limit: Maximum length; zero or negative disables shortening.

    Returns:
        The display name, at most ``limit + 2`` characters long.
    """
    if limit <= 0 or len(name) <= limit:
        return name

    if name.count("/") == 1:
        prefix, rest = name.split("/")
        if len(prefix) > PREFIX_LENGTH:
            name = f"{prefix[:PREFIX_LENGTH]}/{rest}"

    if len(name) > limit:
        name = name[:limit] + ELLIPSIS
    return name


def summarize_status(
    lines: Iterable[str],
    config: PromptConfig | None = None,
    *,
    describe: Describe | None = None,
) -> StatusSummary:
    """Summarize a porcelain status report.

    Args:
        lines: Output of ``git status --porcelain --branch``.
        config: Prompt configuration (defaults when None).
        describe: Lookup used to name a detached HEAD. Returns a tag
            description or an abbreviated commit id, or None on failure.

    Returns:
        The StatusSummary for the working tree.

    Raises:
        NotARepositoryError: If the report carries no usable branch header.
    """
    if config is None:
        config = PromptConfig()

    header, dirty = scan_status(lines, include_untracked=config.untracked)
    if header is None:
        raise NotARepositoryError

    branch = header.branch
    if branch == DETACHED_BRANCH and describe is not None:
        branch = describe() or DETACHED_BRANCH
    branch = shorten_branch(branch, config.branch_limit)

    remote: RemoteCounts | None = None
    if config.show_remote and header.upstream is not None and not header.gone:
        remote = RemoteCounts(ahead=header.ahead or 0, behind=header.behind or 0)

    return StatusSummary(branch=branch, dirty=dirty, remote=remote)
