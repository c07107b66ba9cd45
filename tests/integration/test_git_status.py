"""Integration tests running the status pipeline against real repositories."""

from pathlib import Path

import pytest

from gitprompt.config import PromptConfig, load_config
from gitprompt.enums import DirtyState
from gitprompt.exceptions import NotARepositoryError
from gitprompt.prompt import PromptState, collect_summary, render_prompt
from gitprompt.status import RemoteCounts, summarize_status
from gitprompt.utils import describe_head, query_status
from tests.integration.conftest import ClonePair, commit_file, git, init_git_repo


class TestQueryStatus:
    def test_clean_repository(self, work_repo: Path) -> None:
        assert query_status(work_repo) == ["## main"]

    def test_outside_repository(self, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        with pytest.raises(NotARepositoryError):
            _ = query_status(outside)

    def test_untracked_files_hidden(self, work_repo: Path) -> None:
        _ = (work_repo / "notes.txt").write_text("draft\n")
        assert "?? notes.txt" in query_status(work_repo)
        assert query_status(work_repo, untracked=False) == ["## main"]


class TestSummaries:
    def test_worktree_change(self, work_repo: Path) -> None:
        _ = (work_repo / "README.md").write_text("changed\n")
        summary = summarize_status(query_status(work_repo))
        assert summary.branch == "main"
        assert summary.dirty is DirtyState.WORKTREE_DIRTY

    def test_staged_change(self, work_repo: Path) -> None:
        _ = (work_repo / "README.md").write_text("changed\n")
        _ = git(work_repo, "add", "README.md")
        assert summarize_status(query_status(work_repo)).dirty is DirtyState.INDEX_DIRTY

    def test_unborn_branch(self, tmp_path: Path) -> None:
        root = tmp_path / "empty"
        init_git_repo(root)
        assert summarize_status(query_status(root)).branch == "main"

    def test_tracking_branch(self, clone_pair: ClonePair) -> None:
        summary = collect_summary(PromptConfig(), clone_pair.clone)
        assert summary is not None
        assert summary.remote == RemoteCounts()

    def test_diverged_branch(self, work_repo: Path, clone_pair: ClonePair) -> None:
        commit_file(work_repo, "upstream.txt")
        _ = git(work_repo, "push", str(clone_pair.upstream), "main")
        commit_file(clone_pair.clone, "local.txt")
        _ = git(clone_pair.clone, "fetch")

        summary = collect_summary(PromptConfig(), clone_pair.clone)

        assert summary is not None
        assert summary.remote == RemoteCounts(ahead=1, behind=1)

    def test_detached_head_at_tag(self, work_repo: Path) -> None:
        _ = git(work_repo, "tag", "v1.2")
        commit_file(work_repo, "CHANGES.md")
        _ = git(work_repo, "checkout", "--detach", "HEAD")
        sha = git(work_repo, "rev-parse", "--short=7", "HEAD").strip()

        summary = collect_summary(PromptConfig(), work_repo)

        assert summary is not None
        assert summary.branch == f"v1.2-1-g{sha}"

    def test_detached_head_without_tags(self, work_repo: Path) -> None:
        _ = git(work_repo, "checkout", "--detach", "HEAD")
        sha = git(work_repo, "rev-parse", "HEAD").strip()
        assert describe_head(work_repo) == sha[:7]


class TestConfigFromGit:
    def test_git_config_values(self, work_repo: Path) -> None:
        _ = git(work_repo, "config", "gitprompt.branchlimit", "4")
        _ = git(work_repo, "config", "gitprompt.showremote", "no")

        config = load_config(work_repo)

        assert config.branch_limit == 4
        assert config.show_remote is False

    def test_disabled_repository(self, work_repo: Path) -> None:
        _ = git(work_repo, "config", "gitprompt.disabled", "true")
        result = render_prompt("~ $ ", PromptState(), cwd=work_repo, shell="plain")
        assert result.prompt == "~ $ "


class TestRenderPrompt:
    def test_prompt_follows_repository(self, work_repo: Path) -> None:
        first = render_prompt("~ $ ", PromptState(), cwd=work_repo, shell="plain")
        assert first.prompt == "~ [main]$ "

        _ = (work_repo / "README.md").write_text("changed\n")
        second = render_prompt(first.prompt, first.state, cwd=work_repo, shell="plain")
        assert second.prompt == "~ [main]$ "
        assert second.state.original_template == "~ $ "

        _ = git(work_repo, "checkout", "-b", "feature/this-is-a-very-long-branch-name")
        third = render_prompt(second.prompt, second.state, cwd=work_repo, shell="plain")
        assert third.prompt == "~ [fea/this-is-a-very-lon..]$ "

    def test_leaving_repository(self, work_repo: Path, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        first = render_prompt("\\w\\$ ", PromptState(), cwd=work_repo)
        second = render_prompt(first.prompt, first.state, cwd=outside)
        assert second.prompt == "\\w\\$ "
