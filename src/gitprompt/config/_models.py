"""Prompt configuration model.

This module provides the PromptConfig Pydantic model holding the settings
read from the ``[gitprompt]`` git config section.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BRANCH_LIMIT = 22


class PromptConfig(BaseModel):
    """Settings for a single prompt render.

    Attributes:
        show_remote: Include ahead/behind counts in the tag.
        branch_limit: Maximum branch name length before shortening.
            Zero or negative disables shortening.
        untracked: Count untracked files as dirty.
        disabled: Skip the tag entirely.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True
    )

    show_remote: bool = Field(default=True, alias="showremote")
    branch_limit: int = Field(default=DEFAULT_BRANCH_LIMIT, alias="branchlimit")
    untracked: bool = True
    disabled: bool = False
