"""
Protocol definitions for the shift game engine.

Using protocols here lets callers and tests inject their own sources of
randomness without subclassing the engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ShiftSource(Protocol):
    """Callable that picks a secret shift.

    Implementations must return an integer in [low, high] inclusive.
    The default is ``random.Random().randint``.

    Example implementations:
        - random.Random(seed).randint: reproducible runs
        - FixedShiftSource(3): always the same shift (tests)
    """

    def __call__(self, low: int, high: int) -> int:
        """Return a shift in [low, high]."""
        ...
