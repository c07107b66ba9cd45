import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            if shutil.which("git") is None:
                item.add_marker(pytest.mark.skip(reason="git executable not found"))


def git(path: Path, *args: str) -> str:
    """Run a git command in the given path and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(path),
        capture_output=True,
        check=True,
        text=True,
    )
    return result.stdout


def init_git_repo(path: Path) -> None:
    """Initialize a git repository with a committer identity."""
    path.mkdir(parents=True, exist_ok=True)
    _ = git(path, "init", "--initial-branch=main")
    _ = git(path, "config", "user.email", "test@example.com")
    _ = git(path, "config", "user.name", "Test User")
    _ = git(path, "config", "commit.gpgsign", "false")


def commit_file(path: Path, name: str, content: str = "content\n") -> None:
    """Write a file and commit it."""
    _ = (path / name).write_text(content)
    _ = git(path, "add", name)
    _ = git(path, "commit", "-m", f"Update {name}")


@dataclass(frozen=True, slots=True)
class ClonePair:
    """A bare upstream repository and a clone tracking it."""

    upstream: Path
    clone: Path


@pytest.fixture
def work_repo(tmp_path: Path) -> Path:
    """Create a repository with one commit on main."""
    root = tmp_path / "work"
    init_git_repo(root)
    commit_file(root, "README.md")
    return root


@pytest.fixture
def clone_pair(tmp_path: Path, work_repo: Path) -> ClonePair:
    """Create a bare upstream from work_repo and a clone tracking main."""
    upstream = tmp_path / "upstream.git"
    _ = git(tmp_path, "clone", "--bare", str(work_repo), str(upstream))
    clone = tmp_path / "clone"
    _ = git(tmp_path, "clone", str(upstream), str(clone))
    _ = git(clone, "config", "user.email", "test@example.com")
    _ = git(clone, "config", "user.name", "Test User")
    _ = git(clone, "config", "commit.gpgsign", "false")
    return ClonePair(upstream=upstream, clone=clone)
