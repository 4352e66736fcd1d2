"""Protocols for rant.

Defines the randomness capability that evaluation consumes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for the randomness source passed into evaluation.

    ``random.Random`` and ``random.SystemRandom`` conform out of the box.
    Tests may pass any object with a compatible ``randrange``.

    Thread Safety:
        Evaluation never shares a source between calls on its own. A source
        handed to several threads must be synchronized by the caller.

    """

    def randrange(self, stop: int) -> int:
        """Return an integer drawn uniformly from ``range(stop)``."""
        ...
