"""
Parse results returned by ``Matter``.

Both result types are frozen dataclasses built once per call. Field
meanings are shared:

- ``metadata``: the decoded front matter.
- ``content``: body text, stripped of surrounding whitespace. Excerpt
  text is *not* removed from it.
- ``excerpt``: text before the excerpt fence, or ``None`` when there is
  no excerpt fence line.
- ``original``: the input, verbatim.
- ``raw_matter``: the front matter text as captured (comment lines
  removed, not decoded). Empty when no block was closed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from gray_matter.value import Pod

T = TypeVar("T")


@dataclass(frozen=True)
class ParsedEntity:
    """Result of ``Matter.parse()``.

    ``metadata`` is ``None`` when there was no block, when the block was
    blank or comment-only, or when the engine could not decode it. The
    last case is the only one that leaves ``raw_matter`` non-empty.
    """

    metadata: Pod | None
    content: str
    excerpt: str | None
    original: str
    raw_matter: str


@dataclass(frozen=True)
class ParsedEntityStruct(Generic[T]):
    """Result of ``Matter.parse_with_struct()``, with typed ``metadata``."""

    metadata: T
    content: str
    excerpt: str | None
    original: str
    raw_matter: str

    @classmethod
    def from_entity(cls, entity: ParsedEntity, metadata: T) -> ParsedEntityStruct[T]:
        return cls(
            metadata=metadata,
            content=entity.content,
            excerpt=entity.excerpt,
            original=entity.original,
            raw_matter=entity.raw_matter,
        )
