"""Prompt splicing state machine.

Each render receives the prompt as the shell currently has it, the state left
by the previous render and a fresh status summary, and returns the new prompt
with the state to carry forward. The transitions are:

1. If this is the first render, or the observed prompt is not the one the
   previous render produced, the template was changed externally: strip the
   previously injected fragment from it and adopt the result as the original
   template.
2. Without a summary (not a repository, git missing) or when disabled, the
   prompt is the original template.
3. Otherwise the tag is inserted before the first recognized prompt
   terminator at the end of the template, or appended with a trailing space.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from gitprompt.config import PromptConfig
from gitprompt.prompt._state import PromptState
from gitprompt.prompt._tag import BASH_PALETTE, Palette, format_tag

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitprompt.status import StatusSummary

# Checked in order against the end of the template; the first match wins
PROMPT_SUFFIXES: Final = (
    "\\$ ",
    "\\$",
    "%# ",
    "%#",
    "$ ",
    "$",
    "# ",
    "#",
    "% ",
    "%",
    "> ",
    ">",
)

FALLBACK_SEPARATOR: Final = " "


@dataclass(frozen=True, slots=True)
class SpliceResult:
    """Outcome of one render.

    Attributes:
        prompt: The prompt string to install.
        state: The state to pass to the next render.
        branch: Value for the branch variable the prompt references, or
            None when the prompt holds no reference.
    """

    prompt: str
    state: PromptState
    branch: str | None = None

    @property
    def injected(self) -> bool:
        """Whether a tag was inserted."""
        return self.state.last_injected_tag is not None


def strip_fragment(text: str, fragment: str | None) -> str:
    """Remove one exact occurrence of a fragment, searching from the end.

    Args:
        text: Text to strip.
        fragment: Exact text to remove; nothing is removed when None/empty
            or absent.

    Returns:
        The text without the fragment.
    """
    if not fragment:
        return text
    index = text.rfind(fragment)
    if index == -1:
        return text
    return text[:index] + text[index + len(fragment) :]


def find_suffix(template: str) -> str | None:
    """Return the first recognized prompt terminator ending the template."""
    for suffix in PROMPT_SUFFIXES:
        if template.endswith(suffix):
            return suffix
    return None


def inject_tag(template: str, tag: str) -> tuple[str, str]:
    """Insert a tag into a template.

    Args:
        template: The original prompt template.
        tag: The formatted tag.

    Returns:
        Tuple of (new prompt, exact fragment inserted).
    """
    suffix = find_suffix(template)
    if suffix is None:
        fragment = tag + FALLBACK_SEPARATOR
        return template + fragment, fragment
    cut = len(template) - len(suffix)
    return template[:cut] + tag + template[cut:], tag


def recapture_template(observed: str, state: PromptState) -> str:
    """Work out the original template for this render.

    Args:
        observed: The prompt as the shell currently has it.
        state: State left by the previous render.

    Returns:
        The original template.
    """
    if (
        state.is_initial
        or state.original_template is None
        or observed != state.last_output
    ):
        return strip_fragment(observed, state.last_injected_tag)
    return state.original_template


def splice_prompt(
    observed: str,
    state: PromptState,
    summary: "StatusSummary | None",
    config: PromptConfig | None = None,
    *,
    palette: Palette = BASH_PALETTE,
    branch_variable: bool = False,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> SpliceResult:
    """Produce the prompt for one render.

    Args:
        observed: The prompt as the shell currently has it.
        state: State left by the previous render.
        summary: Working tree summary, or None when it could not be obtained.
        config: Prompt configuration (defaults when None).
        palette: Escape strings for the target shell.
        branch_variable: Reference the branch through a shell variable
            (see ``format_tag``); the value is returned in the result.
        logger: Optional logger.

    Returns:
        SpliceResult with the new prompt and state.
    """
    if config is None:
        config = PromptConfig()

    original = recapture_template(observed, state)
    if logger is not None and not state.is_initial and observed != state.last_output:
        logger.info("template_recaptured", template=original)

    if config.disabled or summary is None:
        return SpliceResult(
            prompt=original,
            state=PromptState(original_template=original, last_output=original),
        )

    branch: str | None = None
    if branch_variable and palette.substitutes:
        branch = palette.literal(summary.branch, substituted=True)
    tag = format_tag(summary, palette, branch_variable=branch is not None)
    prompt, fragment = inject_tag(original, tag)
    return SpliceResult(
        prompt=prompt,
        branch=branch,
        state=PromptState(
            original_template=original,
            last_injected_tag=fragment,
            last_output=prompt,
        ),
    )
