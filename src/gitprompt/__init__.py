"""Git status tag for interactive shell prompts.

Summarizes ``git status --porcelain --branch`` into a short colored tag and
splices it into the shell prompt before every render, without losing the
user's own prompt template.

Example:
    >>> from gitprompt import PromptState, render_prompt
    >>> result = render_prompt("~ $ ", PromptState(), shell="plain")
    >>> result.prompt  # doctest: +SKIP
    '~ [main]$ '
"""

from gitprompt.config import PromptConfig, load_config
from gitprompt.enums import ColorToken, DirtyState, ShellName
from gitprompt.exceptions import (
    ConfigError,
    GitPromptError,
    NotARepositoryError,
    ToolUnavailableError,
)
from gitprompt.prompt import (
    PromptState,
    SpliceResult,
    format_tag,
    render_prompt,
    splice_prompt,
)
from gitprompt.status import RemoteCounts, StatusSummary, summarize_status

__all__ = [
    "ColorToken",
    "ConfigError",
    "DirtyState",
    "GitPromptError",
    "NotARepositoryError",
    "PromptConfig",
    "PromptState",
    "RemoteCounts",
    "ShellName",
    "SpliceResult",
    "StatusSummary",
    "ToolUnavailableError",
    "format_tag",
    "load_config",
    "render_prompt",
    "splice_prompt",
    "summarize_status",
]
