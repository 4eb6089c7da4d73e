"""
Base engine protocol / ABC for gray-matter.

All format engines must implement this interface. The contract is:
1. parse() takes the captured front matter text and returns a Pod.
2. Malformed text raises EngineError, including text nested too deeply
   or holding numbers too large for the format library. ``Matter.parse()``
   relies on this to turn decode failures into "no metadata"; any other
   exception is treated as a bug in the engine and propagates.
3. Integer literals decode to ``int``, never ``float``, so that typed
   conversion keeps integer fields exact.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gray_matter.value import Pod


class Engine(ABC):
    """Abstract base class for front matter format engines.

    Engines are stateless; one instance may be shared by any number of
    ``Matter`` objects and threads.
    """

    #: Registry name, also used to tag ``EngineError`` messages.
    name: str = ""

    @abstractmethod
    def parse(self, content: str) -> Pod:
        """Decode front matter text.

        Args:
            content: The block between the fences, with comment lines
                removed. Never empty.

        Returns:
            The decoded value.

        Raises:
            EngineError: If *content* is not valid for this format.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
