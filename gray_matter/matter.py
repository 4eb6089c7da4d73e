"""
Front matter parser for gray-matter.

``Matter`` couples an engine with a ``DelimiterConfig`` and splits a
document into front matter, excerpt and content.

Scanning algorithm (one pass over the lines):
1. If the first line, right-trimmed, is the fence, start in MATTER over
   the remaining lines. Otherwise start in MAYBE_EXCERPT over all lines.
2. Every visited line is appended to an accumulator.
3. MATTER: a fence line closes the block. Comment lines are removed,
   the text is decoded by the engine, the accumulator is reset and the
   scanner moves to MAYBE_EXCERPT.
4. MAYBE_EXCERPT: an excerpt fence line records everything accumulated
   so far as the excerpt and moves to CONTENT. The accumulator keeps
   going, so the excerpt stays part of the content.
5. CONTENT: lines are only accumulated.
6. Whatever is in the accumulator at the end is the content.

Fences are matched against raw lines only. A fence inside a quoted YAML
value cannot close the block, and ``---whatever`` is never a fence.

Nothing in here raises on bad input. A block the engine rejects leaves
``metadata`` as ``None`` with ``raw_matter`` still populated.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from enum import Enum, auto
from typing import TypeVar

from gray_matter.config import DEFAULT_FENCE, DelimiterConfig
from gray_matter.engines.base import Engine
from gray_matter.entity import ParsedEntity, ParsedEntityStruct
from gray_matter.exceptions import DeserializationError, EngineError
from gray_matter.registry import resolve_engine
from gray_matter.value import Pod

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Full-line comment inside the front matter block, including its line ending.
# A lone '#' with nothing after it is left in place.
_COMMENT_LINE = re.compile(r"^[ \t]*#[^\n]+\n?", re.MULTILINE)


class _Part(Enum):
    MATTER = auto()
    MAYBE_EXCERPT = auto()
    CONTENT = auto()


def _split_lines(text: str) -> Iterator[str]:
    """Yield lines split on '\\n', dropping one trailing '\\r' from each.

    A trailing newline does not produce a final empty line. Other
    separators recognised by ``str.splitlines()`` (form feed, U+2028, ...)
    are deliberately not line breaks here.
    """
    if not text:
        return
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def _strip_suffix(text: str, suffix: str) -> str | None:
    """Remove *suffix* from *text*, or return None if it is not there."""
    if not text.endswith(suffix):
        return None
    return text[: len(text) - len(suffix)]


class Matter:
    """Front matter parser bound to one engine.

    Args:
        engine: A registered engine name (``"yaml"``, ``"json"``,
            ``"toml"``, or a custom one), an ``Engine`` subclass, or an
            ``Engine`` instance. Fixed for the lifetime of the parser.
        fence: Line that opens and closes the front matter block.
        excerpt_fence: Line that ends the excerpt. Defaults to *fence*.

    The fences can be changed later through the ``fence`` and
    ``excerpt_fence`` properties. A ``Matter`` holds no per-parse state
    and can be shared between threads, as long as the fences are not
    reassigned while other threads are parsing.

    Example::

        matter = Matter()
        entity = matter.parse("---\\ntitle: Home\\n---\\nOther stuff")
        entity.metadata["title"] == "Home"
        entity.content == "Other stuff"
    """

    def __init__(
        self,
        engine: str | Engine | type[Engine] = "yaml",
        fence: str = DEFAULT_FENCE,
        excerpt_fence: str | None = None,
    ) -> None:
        self._engine = resolve_engine(engine)
        self._config = DelimiterConfig(fence=fence, excerpt_fence=excerpt_fence)

    @classmethod
    def from_config(
        cls,
        config: DelimiterConfig,
        engine: str | Engine | type[Engine] = "yaml",
    ) -> Matter:
        """Build a parser from an existing ``DelimiterConfig``."""
        matter = cls(engine=engine)
        matter._config = config
        return matter

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def config(self) -> DelimiterConfig:
        return self._config

    @property
    def fence(self) -> str:
        return self._config.fence

    @fence.setter
    def fence(self, value: str) -> None:
        self._config = self._config.replace(fence=value)

    @property
    def excerpt_fence(self) -> str | None:
        return self._config.excerpt_fence

    @excerpt_fence.setter
    def excerpt_fence(self, value: str | None) -> None:
        self._config = self._config.replace(excerpt_fence=value)

    def __repr__(self) -> str:
        return (
            f"Matter(engine={self._engine!r}, fence={self.fence!r}, "
            f"excerpt_fence={self.excerpt_fence!r})"
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParsedEntity:
        """Split *text* into front matter, excerpt and content.

        Never raises for string input. Missing pieces are reported as
        ``None`` (``metadata``, ``excerpt``) or ``""`` (``raw_matter``).

        Example::

            >>> Matter().parse("---\\ntitle: Home\\n---\\nOther stuff").content
            'Other stuff'
        """
        # One snapshot for the whole call
        config = self._config
        fence = config.fence

        # Too short to hold a fence and anything else. Short input keeps its
        # text as content.
        if not text or len(text) <= len(fence):
            return ParsedEntity(
                metadata=None,
                content=text.strip(),
                excerpt=None,
                original=text,
                raw_matter="",
            )

        excerpt_fence = config.effective_excerpt_fence

        first_line, newline, rest = text.partition("\n")
        if newline and first_line.rstrip() == fence:
            part, lines = _Part.MATTER, _split_lines(rest)
        else:
            part, lines = _Part.MAYBE_EXCERPT, _split_lines(text)

        metadata: Pod | None = None
        raw_matter = ""
        excerpt: str | None = None
        acc: list[str] = []

        for line_no, line in enumerate(lines, start=1):
            acc.append(line)

            if part is _Part.MATTER:
                if line.rstrip() == fence:
                    raw_matter, metadata = self._close_matter("\n".join(acc), fence)
                    logger.debug(
                        "Front matter closed at line %d (%d chars)", line_no, len(raw_matter)
                    )
                    acc = []
                    part = _Part.MAYBE_EXCERPT

            elif part is _Part.MAYBE_EXCERPT:
                if line.rstrip() == excerpt_fence:
                    excerpt = self._close_excerpt("\n".join(acc), excerpt_fence)
                    logger.debug("Excerpt closed at line %d", line_no)
                    part = _Part.CONTENT

        return ParsedEntity(
            metadata=metadata,
            content="\n".join(acc).strip(),
            excerpt=excerpt,
            original=text,
            raw_matter=raw_matter,
        )

    def _close_matter(self, block: str, fence: str) -> tuple[str, Pod | None]:
        """Clean up a closed front matter block and decode it.

        Returns ``(raw_matter, metadata)``. Blank and comment-only blocks
        give ``("", None)`` without calling the engine.
        """
        cleaned = _strip_suffix(_COMMENT_LINE.sub("", block).strip(), fence)
        if cleaned is None:
            # The closing fence itself looked like a comment (e.g. fence '###')
            logger.debug("Closing fence %r was consumed by comment removal", fence)
            return "", None

        matter = cleaned.strip("\n")
        if not matter:
            return "", None

        try:
            metadata = self._engine.parse(matter)
        except EngineError as e:
            logger.debug("Ignoring front matter the engine could not decode: %s", e)
            return matter, None
        return matter, metadata

    @staticmethod
    def _close_excerpt(block: str, excerpt_fence: str) -> str | None:
        excerpt = _strip_suffix(block.strip(), excerpt_fence)
        if excerpt is None:
            # Leading whitespace in the fence was eaten by strip()
            logger.debug("Could not remove excerpt fence %r; no excerpt recorded", excerpt_fence)
            return None
        return excerpt.strip("\n")

    def parse_with_struct(self, text: str, shape: type[T]) -> ParsedEntityStruct[T] | None:
        """Parse *text* and convert its front matter into *shape*.

        Args:
            text: The document.
            shape: Any type ``pydantic.TypeAdapter`` can validate into:
                a ``BaseModel``, a dataclass, a ``TypedDict``, ...

        Returns:
            A ``ParsedEntityStruct`` with typed ``metadata``, or ``None``
            when there is no front matter or it does not fit *shape*.
        """
        entity = self.parse(text)
        if entity.metadata is None:
            return None
        try:
            data = entity.metadata.deserialize(shape)
        except DeserializationError as e:
            logger.debug("Front matter does not fit the requested shape: %s", e)
            return None
        return ParsedEntityStruct.from_entity(entity, data)
