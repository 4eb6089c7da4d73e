"""
Engine registry for gray-matter.

Maps engine names (``"yaml"``, ``"json"``, ``"toml"``) to ``Engine``
classes so a ``Matter`` can be built from a plain string, and lets
callers plug in their own formats:

    class INI(Engine):
        name = "ini"
        def parse(self, content): ...

    register_engine("ini", INI)
    Matter(engine="ini")

Names are case-insensitive. The built-in map is populated lazily on
first lookup to avoid circular imports between the engines and this
module.
"""

from __future__ import annotations

import logging

from gray_matter.engines.base import Engine
from gray_matter.exceptions import UnknownEngineError

logger = logging.getLogger(__name__)

# Maps lower-cased engine name to engine class
_ENGINE_MAP: dict[str, type[Engine]] = {}


def _get_engine_map() -> dict[str, type[Engine]]:
    """Lazily register the built-in engines."""
    if not _ENGINE_MAP:
        from gray_matter.engines.json_engine import JSON
        from gray_matter.engines.toml_engine import TOML
        from gray_matter.engines.yaml_engine import YAML

        _ENGINE_MAP["yaml"] = YAML
        _ENGINE_MAP["yml"] = YAML
        _ENGINE_MAP["json"] = JSON
        _ENGINE_MAP["toml"] = TOML
    return _ENGINE_MAP


def register_engine(name: str, engine_cls: type[Engine], replace: bool = False) -> None:
    """Register *engine_cls* under *name*.

    Args:
        name: Lookup name; stored lower-cased.
        engine_cls: An ``Engine`` subclass. Instantiated with no arguments
            when a ``Matter`` is built from *name*.
        replace: Allow overwriting an existing registration.

    Raises:
        TypeError: If *engine_cls* is not an ``Engine`` subclass.
        ValueError: If *name* is empty, or already taken and *replace* is False.
    """
    if not isinstance(engine_cls, type) or not issubclass(engine_cls, Engine):
        raise TypeError(f"Expected an Engine subclass, got {engine_cls!r}")
    key = name.strip().lower()
    if not key:
        raise ValueError("Engine name must not be empty")

    engines = _get_engine_map()
    if key in engines and not replace:
        raise ValueError(
            f"Engine '{key}' is already registered to {engines[key].__name__}; "
            "pass replace=True to override"
        )
    engines[key] = engine_cls
    logger.info("Registered engine '%s' -> %s", key, engine_cls.__name__)


def get_engine(name: str) -> Engine:
    """Instantiate the engine registered under *name*.

    Raises:
        UnknownEngineError: If no engine is registered under *name*.
    """
    engines = _get_engine_map()
    engine_cls = engines.get(name.strip().lower())
    if engine_cls is None:
        raise UnknownEngineError(
            f"Unknown engine '{name}'. Available engines: {available_engines()}"
        )
    return engine_cls()


def available_engines() -> list[str]:
    """Sorted list of registered engine names."""
    return sorted(_get_engine_map())


def resolve_engine(engine: str | Engine | type[Engine]) -> Engine:
    """Turn a name, class or instance into an ``Engine`` instance."""
    if isinstance(engine, Engine):
        return engine
    if isinstance(engine, type) and issubclass(engine, Engine):
        return engine()
    if isinstance(engine, str):
        return get_engine(engine)
    raise TypeError(f"Expected an engine name, Engine class or instance, got {engine!r}")
