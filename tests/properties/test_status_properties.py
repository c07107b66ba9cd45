"""Property-based tests for status summarization."""

from hypothesis import given
from hypothesis import strategies as st

from gitprompt.config import PromptConfig
from gitprompt.enums import DirtyState
from gitprompt.status import ELLIPSIS, scan_status, shorten_branch, summarize_status

STAGED = "M  staged.py"
CHANGED = " M changed.py"
UNTRACKED = "?? new.txt"

file_lines = st.lists(st.sampled_from([STAGED, CHANGED, UNTRACKED, "UU both.py"]))
name_parts = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126, exclude_characters="/"),
    min_size=1,
    max_size=30,
)


def _expected(lines: list[str]) -> DirtyState:
    if STAGED in lines or "UU both.py" in lines:
        return DirtyState.INDEX_DIRTY
    if lines:
        return DirtyState.WORKTREE_DIRTY
    return DirtyState.CLEAN


class TestSeverityProperties:
    @given(lines=file_lines)
    def test_worst_state_regardless_of_order(self, lines: list[str]) -> None:
        _, dirty = scan_status(["## main", *lines])
        assert dirty is _expected(lines)

    @given(before=file_lines, after=file_lines)
    def test_index_dirty_is_never_downgraded(
        self, before: list[str], after: list[str]
    ) -> None:
        _, dirty = scan_status(["## main", *before, STAGED, *after])
        assert dirty is DirtyState.INDEX_DIRTY

    @given(lines=file_lines)
    def test_untracked_disabled_ignores_untracked(self, lines: list[str]) -> None:
        config = PromptConfig(untracked=False)
        summary = summarize_status(["## main", *lines], config)
        assert summary.dirty is _expected([line for line in lines if line != UNTRACKED])


class TestTruncationProperties:
    @given(prefix=name_parts, rest=name_parts, limit=st.integers(1, 40))
    def test_single_slash_bound(self, prefix: str, rest: str, limit: int) -> None:
        name = f"{prefix}/{rest}"
        result = shorten_branch(name, limit)

        assert len(result) <= max(len(name), limit + len(ELLIPSIS))
        if len(name) > limit:
            assert len(result) <= limit + len(ELLIPSIS)
            head = result.removesuffix(ELLIPSIS)
            if "/" in head:
                assert len(head.split("/")[0]) <= 3
        else:
            assert result == name

    @given(name=name_parts, limit=st.integers(1, 40))
    def test_result_is_prefix_plus_ellipsis(self, name: str, limit: int) -> None:
        result = shorten_branch(name, limit)
        if len(name) > limit:
            assert result == name[:limit] + ELLIPSIS
        else:
            assert result == name

    @given(name=st.text(min_size=1, max_size=60), limit=st.integers(-5, 0))
    def test_non_positive_limit_keeps_name(self, name: str, limit: int) -> None:
        assert shorten_branch(name, limit) == name
