"""Shared test fixtures for gitprompt tests."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from dulwich.repo import Repo

from gitprompt.config import CONFIG_KEYS, ENV_PREFIX


@dataclass(frozen=True, slots=True)
class GitRepo:
    """Paths for a test repository."""

    root: Path
    git_dir: Path
    config_file: Path


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's git config, log directory and env overrides out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in ("DEBUG", "LOG_LEVEL", "LOG_FILE", "TEMPLATE", "STATE"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
    for key in CONFIG_KEYS:
        monkeypatch.delenv(f"{ENV_PREFIX}{key.upper()}", raising=False)
    return home


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """Create an empty repository with dulwich.

    Structure:
        tmp_path/
            repo/
                .git/
    """
    root = tmp_path / "repo"
    root.mkdir()
    Repo.init(str(root)).close()
    git_dir = root / ".git"
    return GitRepo(root=root, git_dir=git_dir, config_file=git_dir / "config")


WriteConfigFunc = Callable[[dict[str, str]], None]


@pytest.fixture
def write_repo_config(git_repo: GitRepo) -> WriteConfigFunc:
    """Return a function appending a [gitprompt] section to the repo config."""

    def _write(values: dict[str, str]) -> None:
        lines = ["[gitprompt]"]
        lines.extend(f"\t{key} = {value}" for key, value in values.items())
        with git_repo.config_file.open("a") as f:
            _ = f.write("\n".join(lines) + "\n")

    return _write
