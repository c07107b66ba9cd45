"""Tag formatting.

The tag is ``[branch]`` in the color of the dirty state, optionally followed
by a muted ``|ahead,-behind`` fragment, closed by a color reset. Colors are
chosen as symbolic tokens and turned into escape strings by a per-shell
palette.

Branch names and tag descriptions come from the repository, so they must
never be read as prompt syntax. Shells that expand variables in the prompt
get a reference to ``$_GITPROMPT_BRANCH`` instead of the name itself; the
value of a variable is not expanded again. Otherwise the name is inlined
with the shell's prompt escapes quoted.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from gitprompt.enums import ColorToken, DirtyState, ShellName
from gitprompt.status import RemoteCounts, StatusSummary

BRANCH_VARIABLE: Final = "_GITPROMPT_BRANCH"
BRANCH_REFERENCE: Final = f"${{{BRANCH_VARIABLE}}}"

STATE_COLORS: MappingProxyType[DirtyState, ColorToken] = MappingProxyType(
    {
        DirtyState.CLEAN: ColorToken.GREEN,
        DirtyState.WORKTREE_DIRTY: ColorToken.YELLOW,
        DirtyState.INDEX_DIRTY: ColorToken.RED,
    }
)


@dataclass(frozen=True, slots=True)
class Palette:
    """Escape strings for each color token in one shell's prompt syntax.

    Attributes:
        backslash_escapes: ``\\`` starts a prompt escape (bash).
        percent_escapes: ``%`` starts a prompt escape (zsh).
        substitutes: The prompt can reference shell variables.
    """

    green: str = ""
    yellow: str = ""
    red: str = ""
    muted: str = ""
    reset: str = ""
    backslash_escapes: bool = False
    percent_escapes: bool = False
    substitutes: bool = False

    def __getitem__(self, token: ColorToken) -> str:
        return getattr(self, token.value)  # pyright: ignore[reportAny]

    def literal(self, text: str, *, substituted: bool = False) -> str:
        """Quote text so the prompt shows it verbatim.

        Args:
            text: Text to display.
            substituted: The text is the value of a variable referenced from
                the prompt. bash decodes backslashes before substituting, zsh
                reads ``%`` escapes after it.

        Returns:
            The quoted text.
        """
        if self.backslash_escapes and not substituted:
            text = text.replace("\\", "\\\\")
        if self.percent_escapes:
            text = text.replace("%", "%%")
        return text


def _bash(code: str) -> str:
    # \[ \] mark the sequence as zero-width for line editing
    return f"\\[\\e[{code}m\\]"


BASH_PALETTE = Palette(
    green=_bash("0;32"),
    yellow=_bash("0;33"),
    red=_bash("0;31"),
    muted=_bash("0;90"),
    reset=_bash("0"),
    backslash_escapes=True,
    substitutes=True,
)

ZSH_PALETTE = Palette(
    green="%F{green}",
    yellow="%F{yellow}",
    red="%F{red}",
    muted="%F{242}",
    reset="%f",
    percent_escapes=True,
    substitutes=True,
)

PLAIN_PALETTE = Palette()

PALETTES: MappingProxyType[ShellName, Palette] = MappingProxyType(
    {
        ShellName.BASH: BASH_PALETTE,
        ShellName.ZSH: ZSH_PALETTE,
        ShellName.PLAIN: PLAIN_PALETTE,
    }
)


def get_palette(shell: ShellName | str) -> Palette:
    """Get the palette for a shell name.

    Raises:
        ValueError: If the shell is not supported.
    """
    return PALETTES[ShellName(shell)]


def format_remote(remote: RemoteCounts) -> str:
    """Format upstream counts as ``1``, ``-2`` or ``1,-2``.

    Returns:
        The counts fragment, empty when the branch is level with upstream.
    """
    parts: list[str] = []
    if remote.ahead:
        parts.append(str(remote.ahead))
    if remote.behind:
        parts.append(f"-{remote.behind}")
    return ",".join(parts)


def format_tag(
    summary: StatusSummary,
    palette: Palette = BASH_PALETTE,
    *,
    branch_variable: bool = False,
) -> str:
    """Build the colored tag for a status summary.

    Args:
        summary: The working tree summary.
        palette: Escape strings for the target shell.
        branch_variable: Reference ``BRANCH_VARIABLE`` instead of inlining
            the branch name. Ignored for palettes that cannot substitute.

    Returns:
        The tag text, ready to be spliced into a prompt.
    """
    if branch_variable and palette.substitutes:
        branch = BRANCH_REFERENCE
    else:
        branch = palette.literal(summary.branch)
    state_color = palette[STATE_COLORS[summary.dirty]]
    counts = format_remote(summary.remote) if summary.remote is not None else ""
    if counts:
        counts = f"{palette[ColorToken.MUTED]}|{counts}{state_color}"
    return f"{state_color}[{branch}{counts}]{palette[ColorToken.RESET]}"
