"""Prompt tag formatting and splicing."""

from ._render import collect_summary, render_prompt
from ._splicer import (
    PROMPT_SUFFIXES,
    SpliceResult,
    find_suffix,
    inject_tag,
    recapture_template,
    splice_prompt,
    strip_fragment,
)
from ._state import PromptState
from ._tag import (
    BASH_PALETTE,
    BRANCH_REFERENCE,
    BRANCH_VARIABLE,
    PALETTES,
    PLAIN_PALETTE,
    STATE_COLORS,
    ZSH_PALETTE,
    Palette,
    format_remote,
    format_tag,
    get_palette,
)

__all__ = [
    "BASH_PALETTE",
    "BRANCH_REFERENCE",
    "BRANCH_VARIABLE",
    "PALETTES",
    "PLAIN_PALETTE",
    "PROMPT_SUFFIXES",
    "STATE_COLORS",
    "ZSH_PALETTE",
    "Palette",
    "PromptState",
    "SpliceResult",
    "collect_summary",
    "find_suffix",
    "format_remote",
    "format_tag",
    "get_palette",
    "inject_tag",
    "recapture_template",
    "render_prompt",
    "splice_prompt",
    "strip_fragment",
]
