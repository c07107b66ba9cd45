# ruff: noqa: D415, BLE001
"""Prompt render command, run by the shell hook before every prompt."""

import os
import sys
from typing import TYPE_CHECKING, Annotated, Literal

from cyclopts import Parameter

from gitprompt.prompt import PromptState, render_prompt, splice_prompt
from gitprompt.shell import STATE_ENV, TEMPLATE_ENV, format_assignments
from gitprompt.utils import DEFAULT_TIMEOUT_MS

from ._context import CLIContext

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _restore_template(
    template: str,
    state: str | None,
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> None:
    # Splicing without a summary drops the previous tag
    try:
        result = splice_prompt(template, PromptState.decode(state), None)
        _ = sys.stdout.write(format_assignments(result))
    except Exception:
        logger.exception("restore_failed")


def render_command(
    *,
    shell: Annotated[
        Literal["bash", "zsh", "plain"],
        Parameter(help="Prompt escape syntax for the tag colors"),
    ] = "bash",
    template: Annotated[
        str | None,
        Parameter(
            name=["--template"],
            help=f"Current prompt string (default: ${TEMPLATE_ENV})",
            allow_leading_hyphen=True,
        ),
    ] = None,
    state: Annotated[
        str | None,
        Parameter(
            name=["--state"],
            help=f"State token from the previous render (default: ${STATE_ENV})",
        ),
    ] = None,
    timeout: Annotated[
        int,
        Parameter(name=["--timeout"], help="git status timeout in milliseconds"),
    ] = DEFAULT_TIMEOUT_MS,
    prompt_vars: Annotated[
        bool,
        Parameter(
            name=["--prompt-vars"],
            help="The shell expands variables in the prompt (bash promptvars, "
            "zsh promptsubst)",
        ),
    ] = True,
) -> None:
    """Print shell assignments for the next prompt

    Always exits successfully. When rendering fails the original template is
    printed without a tag, so a stale tag never outlives its repository.
    """
    logger = CLIContext.get_current().get_logger(command="render")

    if template is None:
        template = os.environ.get(TEMPLATE_ENV, "")
    if state is None:
        state = os.environ.get(STATE_ENV)

    try:
        result = render_prompt(
            template,
            PromptState.decode(state),
            shell=shell,
            timeout_ms=timeout,
            branch_variable=prompt_vars,
            logger=logger,
        )
        _ = sys.stdout.write(format_assignments(result))
    except Exception:
        logger.exception("render_failed")
        _restore_template(template, state, logger)
