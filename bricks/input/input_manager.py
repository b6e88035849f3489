"""
Input manager for the Bricks game.

This module provides the InputManager class that owns the active input
source. The game session receives an InputManager at construction and
polls it once per frame; there is no process-wide input singleton.
"""

from typing import Optional

from bricks.input.sources.base import InputSource


class InputManager:
    """Owns the active input source and answers key-state queries.

    Only one input source can be active at a time. With no source every
    key reads as released.

    Examples:
        >>> from bricks.input.sources.keyboard import KeyboardInputSource
        >>> manager = InputManager(KeyboardInputSource())
        >>> manager.is_key_down('Space')
        False
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize the input manager with an optional input source.

        Args:
            source: The initial input source, or None to start with no source
        """
        self._source: Optional[InputSource] = source

    def set_source(self, source: InputSource) -> None:
        """Set or change the active input source.

        Args:
            source: The new input source to use

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source, if any.

        Args:
            dt: Delta time in seconds since last update
        """
        if self._source is not None:
            self._source.update(dt)

    def is_key_down(self, code: str) -> bool:
        """Check whether a key is held on the active source.

        Args:
            code: Key code such as 'Space', 'ArrowLeft', 'ArrowRight'

        Returns:
            True while held, False if released or no source is set
        """
        if self._source is None:
            return False
        return self._source.is_key_down(code)

    def clear_keys(self) -> None:
        """Forget held keys on the active source.

        Useful when the window loses focus and KEYUP events may be missed.
        """
        if self._source is not None:
            self._source.clear()
