"""gitprompt CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._config import config_command
from ._context import CLIContext
from ._init import init_command
from ._render import render_command
from ._shared import ExitCode, JSONData, exit_code_for, exit_with_error, format_json
from ._status import status_command

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "JSONData",
    "config_command",
    "exit_code_for",
    "exit_with_error",
    "format_json",
    "init_command",
    "register_commands",
    "render_command",
    "status_command",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(init_command, name="init")
    app.command(render_command, name="render")
    app.command(status_command, name="status")
    app.command(config_command, name="config")
