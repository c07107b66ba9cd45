"""The command-line interface for gitprompt."""

from typing import Annotated, Literal

from cyclopts import App, Parameter
from rich.console import Console

from gitprompt.utils import create_logger

from ._commands import register_commands
from ._commands._context import CLIContext

APP_HELP = "Git status tag for shell prompts."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitprompt",
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        log_level: Annotated[
            Literal["debug", "info", "warning", "error"] | None,
            Parameter(name="--log-level", help="Log level for the log file"),
        ] = None,
        log_file: Annotated[
            str,
            Parameter(name="--log-file", help="Path to the log file"),
        ] = "",
    ) -> None:
        """Run gitprompt with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            log_level: Log level threshold for the log file.
            log_file: Log file path (defaults to the state directory).
        """
        ctx = CLIContext(
            log_level=log_level,
            log_file=log_file,
            logger=create_logger(level=log_level, log_file=log_file),
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `gitprompt` CLI."""
    app = create_app()
    app.meta()
