"""
TOML engine, backed by the standard library ``tomllib``.

TOML documents are always tables, so the decoded ``Pod`` wraps a
``dict``. Dates and times come back as ``datetime`` objects.
"""

from __future__ import annotations

import tomllib

from gray_matter.engines.base import Engine
from gray_matter.exceptions import EngineError
from gray_matter.value import Pod


class TOML(Engine):
    """TOML front matter, commonly fenced with ``+++``."""

    name = "toml"

    def parse(self, content: str) -> Pod:
        try:
            return Pod(tomllib.loads(content))
        # ValueError: TOMLDecodeError, and int literals past the digit limit
        except (ValueError, RecursionError) as e:
            raise EngineError(f"Invalid TOML front matter: {e}", engine=self.name) from e
