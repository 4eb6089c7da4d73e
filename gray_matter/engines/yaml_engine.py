"""
YAML engine.

Uses PyYAML's ``safe_load``: no arbitrary object construction, plain
Python containers and scalars out. A block that holds only a YAML null
(``~``, ``null``) decodes to ``Pod(None)``.
"""

from __future__ import annotations

import yaml

from gray_matter.engines.base import Engine
from gray_matter.exceptions import EngineError
from gray_matter.value import Pod


class YAML(Engine):
    """YAML front matter, the default engine."""

    name = "yaml"

    def parse(self, content: str) -> Pod:
        try:
            return Pod(yaml.safe_load(content))
        # ValueError: timestamps such as 2020-02-30 pass the resolver
        # but fail in the datetime constructor
        except (yaml.YAMLError, ValueError, RecursionError) as e:
            raise EngineError(f"Invalid YAML front matter: {e}", engine=self.name) from e
