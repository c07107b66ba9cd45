"""Prompt splicing state.

PromptState is the only thing carried from one prompt render to the next.
It is an immutable value: the splicer receives one and returns a new one,
and the shell hook keeps it in a variable between renders as an opaque
token.
"""

import base64
from dataclasses import dataclass
from typing import Any

import orjson


@dataclass(frozen=True, slots=True)
class PromptState:
    """What the splicer knows about the prompt between renders.

    Attributes:
        original_template: The template believed to be user-authored, or None
            before the first render.
        last_injected_tag: The exact fragment inserted by the last render, or
            None when nothing was inserted.
        last_output: The full prompt produced by the last render, or None
            before the first render. An observed prompt that differs from it
            means the template was changed externally.
    """

    original_template: str | None = None
    last_injected_tag: str | None = None
    last_output: str | None = None

    @property
    def is_initial(self) -> bool:
        """Whether no render has happened yet."""
        return self.last_output is None

    def encode(self) -> str:
        """Serialize to a shell-safe token."""
        payload = orjson.dumps(
            {
                "original": self.original_template,
                "tag": self.last_injected_tag,
                "output": self.last_output,
            }
        )
        return base64.urlsafe_b64encode(payload).decode("ascii")

    @classmethod
    def decode(cls, token: str | None) -> "PromptState":  # noqa: UP037
        """Deserialize a token produced by ``encode``.

        Empty, truncated or foreign tokens yield the initial state, which
        makes the next render re-capture the template.
        """
        if not token:
            return cls()
        try:
            data: Any = orjson.loads(base64.urlsafe_b64decode(token.encode("ascii")))  # pyright: ignore[reportExplicitAny]
        except (ValueError, UnicodeEncodeError):
            return cls()
        if not isinstance(data, dict):
            return cls()

        values = [data.get(key) for key in ("original", "tag", "output")]  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        if not all(value is None or isinstance(value, str) for value in values):  # pyright: ignore[reportUnknownVariableType]
            return cls()
        original, tag, output = values  # pyright: ignore[reportUnknownVariableType]
        return cls(
            original_template=original,  # pyright: ignore[reportUnknownArgumentType]
            last_injected_tag=tag,  # pyright: ignore[reportUnknownArgumentType]
            last_output=output,  # pyright: ignore[reportUnknownArgumentType]
        )
