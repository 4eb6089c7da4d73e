"""
gray-matter: front matter and excerpt extraction for text documents.

Public API surface:

- ``Matter`` -- **recommended entry point**. A reusable parser bound to
  one engine and a pair of fences::

      matter = Matter("toml", fence="+++")
      entity = matter.parse(text)

- ``parse(text, ...)`` -- one-off parse with a throwaway ``Matter``.

- ``parse_with_struct(text, shape, ...)`` -- one-off parse that also
  validates the front matter into *shape* (a pydantic model, dataclass,
  ``TypedDict``...). Returns ``None`` when that is not possible.

- ``register_engine(name, engine_cls)`` -- plug in another format.

Results are ``ParsedEntity`` / ``ParsedEntityStruct`` instances; the
decoded front matter is a ``Pod``.
"""

from __future__ import annotations

from typing import TypeVar

from gray_matter.config import DEFAULT_FENCE, DelimiterConfig
from gray_matter.engines import JSON, TOML, YAML, Engine
from gray_matter.entity import ParsedEntity, ParsedEntityStruct
from gray_matter.exceptions import (
    DeserializationError,
    EngineError,
    GrayMatterError,
    PodTypeError,
    UnknownEngineError,
)
from gray_matter.matter import Matter
from gray_matter.registry import available_engines, get_engine, register_engine
from gray_matter.value import Pod

__all__ = [
    "Matter",
    "parse",
    "parse_with_struct",
    "ParsedEntity",
    "ParsedEntityStruct",
    "Pod",
    "DelimiterConfig",
    "Engine",
    "YAML",
    "JSON",
    "TOML",
    "register_engine",
    "get_engine",
    "available_engines",
    "GrayMatterError",
    "EngineError",
    "UnknownEngineError",
    "DeserializationError",
    "PodTypeError",
]

T = TypeVar("T")


def parse(
    text: str,
    engine: str | Engine | type[Engine] = "yaml",
    fence: str = DEFAULT_FENCE,
    excerpt_fence: str | None = None,
) -> ParsedEntity:
    """Parse *text* with a one-off ``Matter``.

    Prefer building a ``Matter`` once when parsing many documents.

    Examples::

        entity = gray_matter.parse("---\\ntitle: Home\\n---\\nHello")
        entity.metadata["title"].as_string()   # "Home"
        entity.content                         # "Hello"

        entity = gray_matter.parse(text, engine="toml", fence="+++")
    """
    return Matter(engine=engine, fence=fence, excerpt_fence=excerpt_fence).parse(text)


def parse_with_struct(
    text: str,
    shape: type[T],
    engine: str | Engine | type[Engine] = "yaml",
    fence: str = DEFAULT_FENCE,
    excerpt_fence: str | None = None,
) -> ParsedEntityStruct[T] | None:
    """Parse *text* and validate its front matter into *shape*.

    Returns ``None`` if there is no front matter or it does not fit.
    """
    matter = Matter(engine=engine, fence=fence, excerpt_fence=excerpt_fence)
    return matter.parse_with_struct(text, shape)
