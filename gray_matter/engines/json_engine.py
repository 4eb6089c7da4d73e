"""
JSON engine, backed by the standard library ``json`` module.
"""

from __future__ import annotations

import json

from gray_matter.engines.base import Engine
from gray_matter.exceptions import EngineError
from gray_matter.value import Pod


class JSON(Engine):
    """JSON front matter (``---\\n{"title": "Home"}\\n---``)."""

    name = "json"

    def parse(self, content: str) -> Pod:
        try:
            return Pod(json.loads(content))
        # ValueError: JSONDecodeError, and int literals past the digit limit
        except (ValueError, RecursionError) as e:
            raise EngineError(f"Invalid JSON front matter: {e}", engine=self.name) from e
