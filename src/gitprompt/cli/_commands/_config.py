# ruff: noqa: D415, A002, TC003
"""Effective configuration command."""

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import Parameter
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitprompt.config import CONFIG_SECTION, safe_load_config

from ._shared import get_error_console


def config_command(
    *,
    path: Annotated[
        Path | None,
        Parameter(name=["--path", "-C"], help="Directory whose config to read"),
    ] = None,
    format: Annotated[
        Literal["text", "json"],
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = "text",
) -> None:
    """Show the effective prompt configuration"""
    config, config_error = safe_load_config(path)
    if config_error is not None:
        message = escape(str(config_error))
        get_error_console().print(f"[yellow]Warning:[/yellow] {message}")

    values = config.model_dump(by_alias=True)
    console = Console()
    if format == "json":
        console.print_json(data=values)
        return

    section = CONFIG_SECTION.decode()
    table = Table(title=escape(f"[{section}]"), title_justify="left")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(f"{section}.{key}", str(value).lower())
    console.print(table)
