"""gitprompt exceptions."""


class GitPromptError(Exception):
    """Base exception for gitprompt errors."""


class NotARepositoryError(GitPromptError):
    """Raised when the status report carries no branch header.

    This is the normal outcome outside a git working tree, and also the
    outcome of a status report whose header cannot be parsed.
    """

    def __init__(self, message: str = "Not inside a git working tree") -> None:
        super().__init__(message)


class ToolUnavailableError(GitPromptError):
    """Raised when the git executable cannot be located or started."""

    def __init__(self, message: str, *, executable: str = "git") -> None:
        """Initialize with error message and the executable that was tried."""
        super().__init__(message)
        self.executable: str = executable


class ConfigError(GitPromptError):
    """Raised when configuration cannot be read."""
