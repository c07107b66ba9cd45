# pyright: reportUnknownMemberType=false
"""Configuration loading from git config and the environment.

Values are read from the ``[gitprompt]`` section of the git configuration
stack (repository config over user config) and from ``GITPROMPT_*``
environment variables, which take precedence. Unknown keys are ignored and
malformed values fall back to their defaults.
"""

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

from dulwich.config import StackedConfig

from gitprompt.exceptions import ConfigError
from gitprompt.utils._git import decode_bytes, open_repo

from ._models import PromptConfig

CONFIG_SECTION: Final = b"gitprompt"
ENV_PREFIX: Final = "GITPROMPT_"

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0", ""})


def parse_git_bool(value: str | None) -> bool | None:
    """Parse a git-style boolean.

    A key given without a value (``None``) means true, as in git.

    Args:
        value: Raw config value.

    Returns:
        The boolean, or None if the value is not a recognized spelling.
    """
    if value is None:
        return True
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


def parse_git_int(value: str | None) -> int | None:
    """Parse a decimal integer, returning None when malformed."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


_PARSERS: Final[Mapping[str, Callable[[str | None], bool | int | None]]] = {
    "showremote": parse_git_bool,
    "branchlimit": parse_git_int,
    "untracked": parse_git_bool,
    "disabled": parse_git_bool,
}

CONFIG_KEYS: Final = tuple(_PARSERS)


def coerce_values(raw: Mapping[str, str | None]) -> dict[str, bool | int]:
    """Convert raw string values into typed config values.

    Args:
        raw: Mapping of key to raw string value (keys are case-insensitive).

    Returns:
        Typed values for the recognized, well-formed keys only.
    """
    values: dict[str, bool | int] = {}
    for key, value in raw.items():
        parser = _PARSERS.get(key.lower())
        if parser is None:
            continue
        parsed = parser(value)
        if parsed is not None:
            values[key.lower()] = parsed
    return values


def read_git_config(cwd: Path | str | None = None) -> dict[str, str | None]:
    """Read the raw ``[gitprompt]`` values visible from a directory.

    Outside a repository only the user and system configuration is read.

    Args:
        cwd: Directory to start repository discovery from.

    Returns:
        Mapping of recognized key to raw value.

    Raises:
        ConfigError: If a configuration file cannot be read or parsed.
    """
    values: dict[str, str | None] = {}
    with open_repo(cwd) as repo:
        try:
            stack = repo.get_config_stack() if repo is not None else StackedConfig.default()
            for key in CONFIG_KEYS:
                try:
                    raw = stack.get((CONFIG_SECTION,), key.encode())
                except KeyError:
                    continue
                values[key] = decode_bytes(raw) if raw is not None else None
        except (OSError, ValueError) as e:
            msg = f"Failed to read git configuration: {e}"
            raise ConfigError(msg) from e
    return values


def parse_env_vars(
    prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str | None]:
    """Collect config values from environment variables.

    Example: ``GITPROMPT_BRANCHLIMIT=30`` sets ``branchlimit``.

    Args:
        prefix: Environment variable prefix.
        environ: Environment to read (defaults to os.environ).

    Returns:
        Mapping of recognized key to raw value.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str | None] = {}
    for key in CONFIG_KEYS:
        value = env.get(f"{prefix}{key.upper()}")
        if value is not None:
            values[key] = value
    return values


def load_config(
    cwd: Path | str | None = None,
    *,
    include_env: bool = True,
    environ: Mapping[str, str] | None = None,
) -> PromptConfig:
    """Load the effective prompt configuration for a directory.

    Args:
        cwd: Directory to start repository discovery from.
        include_env: Apply ``GITPROMPT_*`` environment overrides.
        environ: Environment to read (defaults to os.environ).

    Returns:
        The effective PromptConfig.

    Raises:
        ConfigError: If a configuration file cannot be read or parsed.
    """
    values = coerce_values(read_git_config(cwd))
    if include_env:
        values.update(coerce_values(parse_env_vars(environ=environ)))
    return PromptConfig.model_validate(values)


def safe_load_config(
    cwd: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> tuple[PromptConfig, str | None]:
    """Load configuration, falling back to defaults on error.

    Returns:
        Tuple of (PromptConfig, error_message). On success, error_message is
        None. On failure, returns the default PromptConfig with the message.
    """
    try:
        return load_config(cwd, environ=environ), None
    except ConfigError as e:
        return PromptConfig(), str(e)
