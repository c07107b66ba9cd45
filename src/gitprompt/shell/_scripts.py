"""Shell integration scripts.

``gitprompt init <shell>`` prints a script meant to be evaluated from the
shell's startup file. It defines a hook function that runs ``gitprompt
render`` before each prompt and registers it once, no matter how often the
script is sourced. The splicing state travels between renders in a shell
variable, so the render process itself keeps nothing.
"""

import shlex
from string import Template
from typing import Final

from gitprompt.enums import ShellName
from gitprompt.prompt import BRANCH_VARIABLE, SpliceResult

HOOK_FUNCTION: Final = "_gitprompt_hook"
PROMPT_VARIABLE: Final = "PS1"
STATE_VARIABLE: Final = "_GITPROMPT_STATE"
TEMPLATE_ENV: Final = "GITPROMPT_TEMPLATE"
STATE_ENV: Final = "GITPROMPT_STATE"

_BASH_SCRIPT = Template("""\
# gitprompt: git status tag in the bash prompt
${hook}() {
    local __gitprompt_exit=$$?
    local __gitprompt_out __gitprompt_vars=--prompt-vars
    shopt -q promptvars || __gitprompt_vars=--no-prompt-vars
    if __gitprompt_out="$$(${template_env}="$$PS1" ${state_env}="$${${state_var}-}" command ${exe} render --shell bash "$$__gitprompt_vars")"; then
        eval "$$__gitprompt_out"
    fi
    return $$__gitprompt_exit
}
case ";$${PROMPT_COMMAND-};" in
    *";${hook};"*) ;;
    *) PROMPT_COMMAND="$${PROMPT_COMMAND:+$$PROMPT_COMMAND;}${hook}" ;;
esac
""")

_ZSH_SCRIPT = Template("""\
# gitprompt: git status tag in the zsh prompt
${hook}() {
    local __gitprompt_out __gitprompt_vars=--no-prompt-vars
    [[ -o promptsubst ]] && __gitprompt_vars=--prompt-vars
    __gitprompt_out="$$(${template_env}="$$PS1" ${state_env}="$${${state_var}-}" command ${exe} render --shell zsh "$$__gitprompt_vars")" && eval "$$__gitprompt_out"
}
autoload -Uz add-zsh-hook
add-zsh-hook precmd ${hook}
""")

_SCRIPTS: Final = {
    ShellName.BASH: _BASH_SCRIPT,
    ShellName.ZSH: _ZSH_SCRIPT,
}

SUPPORTED_SHELLS: Final = tuple(_SCRIPTS)


def render_init_script(shell: ShellName | str, executable: str = "gitprompt") -> str:
    """Render the init script for a shell.

    Args:
        shell: Target shell (bash or zsh).
        executable: Command used to invoke gitprompt from the hook.

    Returns:
        The script text.

    Raises:
        ValueError: If the shell has no init script.
    """
    name = ShellName(shell)
    script = _SCRIPTS.get(name)
    if script is None:
        msg = f"No init script for shell '{name}'"
        raise ValueError(msg)
    return script.substitute(
        hook=HOOK_FUNCTION,
        exe=shlex.quote(executable),
        template_env=TEMPLATE_ENV,
        state_env=STATE_ENV,
        state_var=STATE_VARIABLE,
    )


def format_assignments(result: SpliceResult) -> str:
    """Format a render result as shell assignments for ``eval``.

    Values are single-quoted, which both bash and zsh read literally. The
    branch variable is assigned only when the prompt references it.
    """
    lines = [
        f"{PROMPT_VARIABLE}={shlex.quote(result.prompt)}",
        f"{STATE_VARIABLE}={shlex.quote(result.state.encode())}",
    ]
    if result.branch is not None:
        lines.append(f"{BRANCH_VARIABLE}={shlex.quote(result.branch)}")
    return "".join(f"{line}\n" for line in lines)
