"""Tests for gitprompt.utils._git._common module."""

from pathlib import Path

from pytest_mock import MockerFixture

from gitprompt.utils import decode_bytes, discover_repo
from gitprompt.utils._git import open_repo
from tests.conftest import GitRepo


class TestDecodeBytes:
    def test_bytes(self) -> None:
        assert decode_bytes(b"main") == "main"

    def test_str_passthrough(self) -> None:
        assert decode_bytes("main") == "main"

    def test_invalid_utf8_replaced(self) -> None:
        assert decode_bytes(b"ma\xffin") == "ma�in"


class TestDiscoverRepo:
    def test_finds_repository_from_subdirectory(self, git_repo: GitRepo) -> None:
        subdir = git_repo.root / "a" / "b"
        subdir.mkdir(parents=True)
        repo = discover_repo(subdir)
        assert repo is not None
        try:
            assert Path(repo.path).resolve() == git_repo.root.resolve()
        finally:
            repo.close()

    def test_outside_repository(self, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        assert discover_repo(outside) is None

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert discover_repo(tmp_path / "missing") is None


class TestOpenRepo:
    def test_yields_and_closes_repository(
        self, git_repo: GitRepo, mocker: MockerFixture
    ) -> None:
        close = mocker.patch("dulwich.repo.Repo.close")
        with open_repo(git_repo.root) as repo:
            assert repo is not None
            close.assert_not_called()
        close.assert_called_once_with()

    def test_yields_none_outside_repository(self, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        with open_repo(outside) as repo:
            assert repo is None
