from os import getenv
from pathlib import Path


def get_state_dir() -> Path:
    """Get the gitprompt state directory (``$XDG_STATE_HOME/gitprompt``)."""
    state_home = getenv("XDG_STATE_HOME")
    if state_home:
        return Path(state_home) / "gitprompt"
    return Path.home() / ".local" / "state" / "gitprompt"


def get_log_file() -> Path:
    """Get the path to the log file.

    ``GITPROMPT_LOG_FILE`` overrides the default location inside the state
    directory.
    """
    override = getenv("GITPROMPT_LOG_FILE")
    if override:
        return Path(override).expanduser()
    return get_state_dir() / "gitprompt.log"
