"""Tests for gitprompt.prompt._state module."""

import base64

import orjson
import pytest

from gitprompt.prompt import PromptState


class TestPromptState:
    def test_initial_state(self) -> None:
        state = PromptState()
        assert state.is_initial
        assert state.original_template is None
        assert state.last_injected_tag is None
        assert state.last_output is None

    def test_rendered_state_is_not_initial(self) -> None:
        assert not PromptState(original_template="$ ", last_output="$ ").is_initial

    def test_frozen(self) -> None:
        state = PromptState()
        with pytest.raises(AttributeError):
            state.last_output = "x"  # pyright: ignore[reportAttributeAccessIssue]


class TestEncoding:
    def test_token_is_shell_safe(self) -> None:
        state = PromptState(
            original_template="\\u@\\h \\w\\$ ",
            last_injected_tag="\\[\\e[0;32m\\][main]\\[\\e[0m\\]",
            last_output="\\u@\\h \\w\\[\\e[0;32m\\][main]\\[\\e[0m\\]\\$ ",
        )
        token = state.encode()
        allowed = set(
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_="
        )
        assert set(token) <= allowed
        assert PromptState.decode(token) == state

    def test_unicode_template(self) -> None:
        state = PromptState(original_template="λ ", last_output="λ ")
        assert PromptState.decode(state.encode()) == state

    def test_initial_state_survives(self) -> None:
        assert PromptState.decode(PromptState().encode()) == PromptState()

    @pytest.mark.parametrize("token", [None, "", "not base64!", "e30", "é"])
    def test_undecodable_tokens_give_initial_state(self, token: str | None) -> None:
        assert PromptState.decode(token) == PromptState()

    @pytest.mark.parametrize(
        "payload",
        [
            b"[1, 2, 3]",
            b'"text"',
            b'{"original": 1, "tag": null, "output": null}',
            b"{not json",
        ],
    )
    def test_foreign_payloads_give_initial_state(self, payload: bytes) -> None:
        token = base64.urlsafe_b64encode(payload).decode("ascii")
        assert PromptState.decode(token) == PromptState()

    def test_missing_keys_are_none(self) -> None:
        token = base64.urlsafe_b64encode(orjson.dumps({"original": "$ "})).decode()
        state = PromptState.decode(token)
        assert state == PromptState(original_template="$ ")
