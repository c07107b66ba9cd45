"""Status summary models.

This module provides the value types produced by the status summarizer and
the tokens produced by the status line parser.
"""

from dataclasses import dataclass

from gitprompt.enums import DirtyState


@dataclass(frozen=True, slots=True)
class RemoteCounts:
    """Commit counts relative to the configured upstream.

    Attributes:
        ahead: Commits on the local branch missing from the upstream.
        behind: Commits on the upstream missing from the local branch.
    """

    ahead: int = 0
    behind: int = 0

    @property
    def is_zero(self) -> bool:
        """Whether the branch is level with its upstream."""
        return self.ahead == 0 and self.behind == 0

    @property
    def diverged(self) -> bool:
        """Whether both sides carry commits the other lacks."""
        return self.ahead > 0 and self.behind > 0


@dataclass(frozen=True, slots=True)
class StatusSummary:
    """Structured summary of a working tree.

    Attributes:
        branch: Branch short name, tag description, abbreviated commit id, or
            the literal ``HEAD`` when a detached HEAD could not be described.
            Never empty.
        dirty: Worst classification seen in the status report.
        remote: Upstream counts, or None when no upstream is configured or
            remote reporting is disabled.
    """

    branch: str
    dirty: DirtyState = DirtyState.CLEAN
    remote: RemoteCounts | None = None


@dataclass(frozen=True, slots=True)
class HeaderLine:
    """Parsed ``## ...`` branch header.

    Attributes:
        branch: Branch short name, or ``HEAD`` when detached.
        upstream: Upstream name, or None when none is configured.
        ahead: Ahead count from the bracketed annotation, if present.
        behind: Behind count from the bracketed annotation, if present.
        gone: Whether the upstream is configured but no longer exists.
    """

    branch: str
    upstream: str | None = None
    ahead: int | None = None
    behind: int | None = None
    gone: bool = False


@dataclass(frozen=True, slots=True)
class FileStatusLine:
    """Parsed short-format file status line.

    Attributes:
        index: Status of the index (staging area) column.
        worktree: Status of the working tree column.
        path: Path portion of the line, verbatim.
    """

    index: str
    worktree: str
    path: str

    @property
    def code(self) -> str:
        """The two-character status code."""
        return self.index + self.worktree


@dataclass(frozen=True, slots=True)
class MalformedLine:
    """A line that matches no known shape."""

    text: str


type StatusLine = HeaderLine | FileStatusLine | MalformedLine
