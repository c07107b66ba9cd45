# ruff: noqa: D415
"""Shell init script command."""

import sys
from typing import Annotated, Literal

from cyclopts import Parameter

from gitprompt.shell import render_init_script


def init_command(
    shell: Annotated[
        Literal["bash", "zsh"],
        Parameter(help="Shell to generate the init script for"),
    ],
    *,
    executable: Annotated[
        str,
        Parameter(
            name=["--executable"],
            help="Command the prompt hook uses to run gitprompt",
        ),
    ] = "gitprompt",
) -> None:
    """Print the shell init script

    Add `eval "$(gitprompt init bash)"` to ~/.bashrc, or the zsh equivalent
    to ~/.zshrc. Sourcing it more than once registers the hook only once.
    """
    _ = sys.stdout.write(render_init_script(shell, executable))
