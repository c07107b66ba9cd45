"""Enumeration types for gitprompt."""

from enum import IntEnum, StrEnum


class DirtyState(IntEnum):
    """Working tree classification, ordered by severity.

    Comparison follows severity, so folding a sequence of states with
    ``max`` yields the worst one.
    """

    CLEAN = 0
    WORKTREE_DIRTY = 1
    INDEX_DIRTY = 2


class ColorToken(StrEnum):
    """Symbolic colors used by the prompt tag."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    MUTED = "muted"
    RESET = "reset"


class ShellName(StrEnum):
    """Shells the prompt tag can be rendered for."""

    BASH = "bash"
    ZSH = "zsh"
    PLAIN = "plain"
