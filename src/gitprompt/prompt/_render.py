"""Render pipeline.

Wires configuration loading, the status query, the summarizer and the
splicer together for one prompt render. Every expected failure ends in the
original template being shown without a tag.
"""

# ruff: noqa: TC003  # Path needed at runtime
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from gitprompt.config import PromptConfig, safe_load_config
from gitprompt.enums import ShellName
from gitprompt.exceptions import NotARepositoryError, ToolUnavailableError
from gitprompt.prompt._splicer import SpliceResult, splice_prompt
from gitprompt.prompt._state import PromptState
from gitprompt.prompt._tag import get_palette
from gitprompt.status import StatusSummary, summarize_status
from gitprompt.utils import DEFAULT_TIMEOUT_MS, describe_head, query_status

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def collect_summary(
    config: PromptConfig,
    cwd: Path | str | None = None,
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> StatusSummary | None:
    """Query git and summarize the working tree.

    Args:
        config: Prompt configuration.
        cwd: Working directory. If None, uses current directory.
        timeout_ms: Timeout for the status subprocess.
        logger: Optional logger.

    Returns:
        The StatusSummary, or None outside a repository or without git.
    """
    try:
        lines = query_status(
            cwd, untracked=config.untracked, timeout_ms=timeout_ms, logger=logger
        )
        return summarize_status(
            lines, config, describe=partial(describe_head, cwd, logger=logger)
        )
    except (NotARepositoryError, ToolUnavailableError):
        return None


def render_prompt(
    template: str,
    state: PromptState | None = None,
    *,
    cwd: Path | str | None = None,
    shell: ShellName | str = ShellName.BASH,
    config: PromptConfig | None = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    branch_variable: bool = False,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> SpliceResult:
    """Render the prompt for the current working tree.

    When the configuration disables the tag, git is not run at all.

    Args:
        template: The prompt as the shell currently has it.
        state: State left by the previous render (initial when None).
        cwd: Working directory. If None, uses current directory.
        shell: Shell whose escape syntax the tag uses.
        config: Configuration override; loaded from git config when None.
        timeout_ms: Timeout for the status subprocess.
        branch_variable: Reference the branch through a shell variable, for
            shells that expand variables in the prompt.
        logger: Optional logger.

    Returns:
        SpliceResult with the new prompt and state.
    """
    if state is None:
        state = PromptState()

    if config is None:
        config, config_error = safe_load_config(cwd)
        if config_error is not None and logger is not None:
            logger.warning("config_load_failed", error=config_error)

    summary: StatusSummary | None = None
    if not config.disabled:
        summary = collect_summary(config, cwd, timeout_ms=timeout_ms, logger=logger)

    result = splice_prompt(
        template,
        state,
        summary,
        config,
        palette=get_palette(shell),
        branch_variable=branch_variable,
        logger=logger,
    )
    if logger is not None:
        logger.debug(
            "prompt_rendered",
            branch=summary.branch if summary is not None else None,
            dirty=summary.dirty.name if summary is not None else None,
            injected=result.injected,
        )
    return result
