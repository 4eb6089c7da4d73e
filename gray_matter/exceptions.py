"""
Custom exception hierarchy for gray-matter.

Most document-level problems are not exceptions at all: a missing or
empty front matter block, or a missing excerpt, is reported through the
optional fields of ``ParsedEntity``. The exceptions below cover the
narrower cases where a component needs to signal failure to its caller:

- Engines raise ``EngineError`` when text cannot be decoded.
  ``Matter.parse()`` catches it, so callers of ``parse()`` never see it.
- ``Pod.deserialize()`` raises ``DeserializationError``.
  ``Matter.parse_with_struct()`` catches it and returns ``None``.
- ``Pod`` accessors raise ``PodTypeError`` on a type mismatch.
- The registry raises ``UnknownEngineError`` for unregistered names.
"""


class GrayMatterError(Exception):
    """Base exception for all gray-matter errors."""


class EngineError(GrayMatterError):
    """Raised by a format engine when front matter text cannot be decoded.

    Carries the engine name so debug logs can say which format failed.
    """

    def __init__(self, message: str, engine: str | None = None) -> None:
        self.engine = engine
        super().__init__(f"[{engine}] {message}" if engine else message)


class UnknownEngineError(GrayMatterError, KeyError):
    """Raised when an engine name is not present in the registry."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message otherwise
        return str(self.args[0]) if self.args else ""


class DeserializationError(GrayMatterError):
    """Raised when a ``Pod`` cannot be converted into the requested shape.

    The underlying ``pydantic.ValidationError`` is chained as ``__cause__``.
    """


class PodTypeError(GrayMatterError, TypeError):
    """Raised by ``Pod.as_*`` accessors when the wrapped value has another type."""
