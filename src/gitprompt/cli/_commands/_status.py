# ruff: noqa: D415, A002, TC003
"""Working tree status command."""

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import Parameter
from rich.console import Console
from rich.markup import escape

from gitprompt.config import safe_load_config
from gitprompt.enums import DirtyState
from gitprompt.exceptions import GitPromptError
from gitprompt.prompt import PLAIN_PALETTE, format_tag
from gitprompt.status import StatusSummary, summarize_status
from gitprompt.utils import describe_head, query_status

from ._context import CLIContext
from ._shared import JSONData, exit_code_for, exit_with_error, format_json

_DIRTY_STYLES = {
    DirtyState.CLEAN: ("green", "clean"),
    DirtyState.WORKTREE_DIRTY: ("yellow", "uncommitted changes"),
    DirtyState.INDEX_DIRTY: ("red", "staged changes or conflicts"),
}


def _summary_data(summary: StatusSummary) -> JSONData:
    remote = summary.remote
    return {
        "branch": summary.branch,
        "dirty": summary.dirty.name.lower(),
        "remote": None
        if remote is None
        else {"ahead": remote.ahead, "behind": remote.behind},
        "tag": format_tag(summary, PLAIN_PALETTE),
    }


def status_command(
    *,
    path: Annotated[
        Path | None,
        Parameter(name=["--path", "-C"], help="Directory to inspect"),
    ] = None,
    format: Annotated[
        Literal["text", "json"],
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = "text",
) -> None:
    """Show the summary the prompt tag is built from"""
    logger = CLIContext.get_current().get_logger(command="status")
    config, config_error = safe_load_config(path)
    if config_error is not None:
        logger.warning("config_load_failed", error=config_error)

    try:
        lines = query_status(path, untracked=config.untracked, logger=logger)
        summary = summarize_status(
            lines, config, describe=lambda: describe_head(path, logger=logger)
        )
    except GitPromptError as e:
        exit_with_error(str(e), exit_code_for(e))

    console = Console()
    if format == "json":
        console.print_json(format_json(_summary_data(summary)))
        return

    style, description = _DIRTY_STYLES[summary.dirty]
    console.print(f"[bold]Branch:[/bold] {escape(summary.branch)}", highlight=False)
    console.print(f"[bold]State:[/bold]  [{style}]{description}[/{style}]")
    if summary.remote is None:
        console.print("[bold]Remote:[/bold] [dim]not tracked[/dim]")
    elif summary.remote.is_zero:
        console.print("[bold]Remote:[/bold] up to date")
    else:
        console.print(
            f"[bold]Remote:[/bold] {summary.remote.ahead} ahead, "
            f"{summary.remote.behind} behind"
        )
    console.print(f"[bold]Tag:[/bold]    {escape(format_tag(summary, PLAIN_PALETTE))}")
