"""
Abstract base class for input sources.

This module defines the InputSource interface that all input sources must
implement. The game session only ever asks whether a key is currently held,
so any device that can answer that (keyboard, gamepad, a scripted test
double) can drive the paddle.
"""

from abc import ABC, abstractmethod


class InputSource(ABC):
    """Abstract base class for polled key-state input sources.

    Subclasses must implement:
        - is_key_down(code): Whether the key with that code is held
        - update(dt): Update source state for time-based processing

    Examples:
        >>> class AlwaysSpace(InputSource):
        ...     def is_key_down(self, code: str) -> bool:
        ...         return code == 'Space'
        ...     def update(self, dt: float) -> None:
        ...         pass
    """

    @abstractmethod
    def is_key_down(self, code: str) -> bool:
        """Check whether a key is currently held.

        Args:
            code: Key code such as 'Space', 'ArrowLeft', 'ArrowRight'

        Returns:
            True while the key is held
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state (for time-based processing).

        Args:
            dt: Delta time in seconds since last update
        """
        pass

    def clear(self) -> None:
        """Forget all held keys."""
        pass
