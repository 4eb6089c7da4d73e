"""
Delimiter configuration for gray-matter.

``DelimiterConfig`` holds the two fence strings a ``Matter`` uses:

- ``fence``: opens and closes the front matter block (default ``---``).
- ``excerpt_fence``: closes the excerpt. When unset, ``fence`` is used.

Both are compared against a whole line with trailing whitespace removed,
so a fence may not contain a line break and may not end in whitespace
(it could never match). The model is frozen: ``Matter`` replaces the
whole object when a field changes, and each parse reads a single
instance from start to finish.

Invalid fences raise ``pydantic.ValidationError``, both at construction
and when a ``Matter`` fence property is reassigned.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_FENCE = "---"


def _check_fence(value: str, field_name: str) -> str:
    if value == "":
        raise ValueError(f"{field_name} must not be empty")
    if "\n" in value or "\r" in value:
        raise ValueError(f"{field_name} must fit on a single line: {value!r}")
    if value != value.rstrip():
        raise ValueError(
            f"{field_name} must not end with whitespace, lines are "
            f"right-trimmed before comparison: {value!r}"
        )
    return value


class DelimiterConfig(BaseModel):
    """Fence strings used to find the front matter block and the excerpt."""

    model_config = ConfigDict(frozen=True)

    fence: str = Field(
        DEFAULT_FENCE,
        description="Line that opens and closes the front matter block",
    )
    excerpt_fence: str | None = Field(
        None,
        description="Line that ends the excerpt; falls back to 'fence' when unset",
    )

    @field_validator("fence")
    @classmethod
    def _validate_fence(cls, value: str) -> str:
        return _check_fence(value, "fence")

    @field_validator("excerpt_fence")
    @classmethod
    def _validate_excerpt_fence(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_fence(value, "excerpt_fence")

    @property
    def effective_excerpt_fence(self) -> str:
        """The excerpt fence in force for a parse."""
        return self.excerpt_fence if self.excerpt_fence is not None else self.fence

    def replace(self, **changes: str | None) -> DelimiterConfig:
        """Return a validated copy with *changes* applied.

        ``model_copy(update=...)`` skips validation, so the merged values
        are run through ``model_validate`` instead.
        """
        merged = {**self.model_dump(), **changes}
        updated = DelimiterConfig.model_validate(merged)
        logger.debug("Delimiter config updated: %s", updated)
        return updated
