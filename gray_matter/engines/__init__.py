"""
Engines sub-package for gray-matter.

Contains format-specific engines that decode a captured front matter
block into a ``Pod``.

Design: Strategy Pattern
- base.py defines the Engine ABC (protocol).
- yaml_engine.py implements YAML via PyYAML (the default).
- json_engine.py implements JSON via the standard library.
- toml_engine.py implements TOML via the standard library ``tomllib``.

The engine registry (registry.py in the parent package) maps names to
engine classes; ``Matter`` resolves its engine once, at construction.
"""

from gray_matter.engines.base import Engine
from gray_matter.engines.json_engine import JSON
from gray_matter.engines.toml_engine import TOML
from gray_matter.engines.yaml_engine import YAML

__all__ = ["Engine", "JSON", "TOML", "YAML"]
