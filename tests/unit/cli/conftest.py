from collections.abc import Iterator, Sequence
from pathlib import Path

import pytest
from cyclopts import App

from gitprompt.cli import CLIContext


@pytest.fixture(autouse=True)
def reset_cli_context() -> Iterator[None]:
    CLIContext.reset()
    yield
    CLIContext.reset()


@pytest.fixture
def outside_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into a directory that is not inside a git repository."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


def run_app(app: App, tokens: Sequence[str]) -> int:
    """Run the meta app and return its exit code (0 when it simply returns)."""
    try:
        _ = app.meta(list(tokens))
    except SystemExit as e:
        return int(e.code or 0)
    return 0
