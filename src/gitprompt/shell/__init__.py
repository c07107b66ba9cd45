"""Shell integration."""

from ._scripts import (
    HOOK_FUNCTION,
    PROMPT_VARIABLE,
    STATE_ENV,
    STATE_VARIABLE,
    SUPPORTED_SHELLS,
    TEMPLATE_ENV,
    format_assignments,
    render_init_script,
)

__all__ = [
    "HOOK_FUNCTION",
    "PROMPT_VARIABLE",
    "STATE_ENV",
    "STATE_VARIABLE",
    "SUPPORTED_SHELLS",
    "TEMPLATE_ENV",
    "format_assignments",
    "render_init_script",
]
