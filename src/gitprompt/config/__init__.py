"""gitprompt configuration.

Example:
    >>> from gitprompt.config import load_config
    >>> config = load_config()
    >>> config.branch_limit
    22
"""

from ._loader import (
    CONFIG_KEYS,
    CONFIG_SECTION,
    ENV_PREFIX,
    coerce_values,
    load_config,
    parse_env_vars,
    parse_git_bool,
    parse_git_int,
    read_git_config,
    safe_load_config,
)
from ._models import DEFAULT_BRANCH_LIMIT, PromptConfig

__all__ = [
    "CONFIG_KEYS",
    "CONFIG_SECTION",
    "DEFAULT_BRANCH_LIMIT",
    "ENV_PREFIX",
    "PromptConfig",
    "coerce_values",
    "load_config",
    "parse_env_vars",
    "parse_git_bool",
    "parse_git_int",
    "read_git_config",
    "safe_load_config",
]
