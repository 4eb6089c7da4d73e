"""
The decoded front matter value.

Every engine hands its result back as a ``Pod``: a thin wrapper around
the plain Python value the format library produced (``dict``, ``list``,
``str``, ``int``, ``float``, ``bool``, ``None``, plus whatever temporal
types the format knows about). Wrapping keeps the engine output
uniform and gives callers two ways out:

- ``deserialize(shape)`` -- validate into a typed shape with Pydantic.
- ``as_*`` accessors and indexing -- type-checked access without a model.

The raw value is always available as ``Pod.value``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from gray_matter.exceptions import DeserializationError, PodTypeError

T = TypeVar("T")


class Pod:
    """A decoded, self-describing front matter value."""

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value.value if isinstance(value, Pod) else value

    # ------------------------------------------------------------------
    # Typed conversion
    # ------------------------------------------------------------------

    def deserialize(self, shape: type[T]) -> T:
        """Convert the wrapped value into *shape*.

        Args:
            shape: Anything ``pydantic.TypeAdapter`` accepts -- a
                ``BaseModel`` subclass, a dataclass, a ``TypedDict``,
                or a builtin generic such as ``dict[str, int]``.

        Returns:
            An instance of *shape*.

        Raises:
            DeserializationError: If validation fails. The
                ``pydantic.ValidationError`` is chained.
        """
        try:
            return TypeAdapter(shape).validate_python(self.value)
        except ValidationError as e:
            name = getattr(shape, "__name__", repr(shape))
            raise DeserializationError(
                f"Cannot deserialize front matter into {name}: {e}"
            ) from e

    # ------------------------------------------------------------------
    # Type-checked accessors
    # ------------------------------------------------------------------

    def is_null(self) -> bool:
        return self.value is None

    def as_string(self) -> str:
        if isinstance(self.value, str):
            return self.value
        raise self._mismatch("str")

    def as_int(self) -> int:
        # bool is an int subclass; YAML 'yes' must not pass as 1
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return self.value
        raise self._mismatch("int")

    def as_float(self) -> float:
        if isinstance(self.value, bool):
            raise self._mismatch("float")
        if isinstance(self.value, (int, float)):
            return float(self.value)
        raise self._mismatch("float")

    def as_bool(self) -> bool:
        if isinstance(self.value, bool):
            return self.value
        raise self._mismatch("bool")

    def as_list(self) -> list[Pod]:
        if isinstance(self.value, list):
            return [Pod(item) for item in self.value]
        raise self._mismatch("list")

    def as_dict(self) -> dict[Any, Pod]:
        if isinstance(self.value, dict):
            return {key: Pod(item) for key, item in self.value.items()}
        raise self._mismatch("dict")

    def _mismatch(self, expected: str) -> PodTypeError:
        return PodTypeError(
            f"Expected {expected}, got {type(self.value).__name__}: {self.value!r}"
        )

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: Any) -> Pod:
        """Index a mapping by key or a sequence by position.

        Raises ``KeyError`` / ``IndexError`` like the wrapped container,
        and ``PodTypeError`` for scalars.
        """
        if isinstance(self.value, (dict, list)):
            return Pod(self.value[key])
        raise self._mismatch("dict or list")

    def get(self, key: Any, default: Any = None) -> Any:
        """Mapping lookup returning a ``Pod``, or *default* when missing."""
        if isinstance(self.value, dict) and key in self.value:
            return Pod(self.value[key])
        return default

    def __contains__(self, item: Any) -> bool:
        if isinstance(self.value, (dict, list)):
            return item in self.value
        return False

    def __iter__(self) -> Iterator[Any]:
        """Iterate like the wrapped container.

        A mapping yields its raw keys, as ``dict`` does, so the keys can
        index straight back into the ``Pod``. A sequence yields its items
        wrapped in ``Pod``, matching what ``pod[i]`` returns.
        """
        if isinstance(self.value, dict):
            return iter(self.value)
        if isinstance(self.value, list):
            return (Pod(item) for item in self.value)
        raise self._mismatch("dict or list")

    def __len__(self) -> int:
        if isinstance(self.value, (dict, list, str)):
            return len(self.value)
        raise self._mismatch("dict, list or str")

    def __bool__(self) -> bool:
        return bool(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pod):
            return self.value == other.value
        return self.value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pod({self.value!r})"
