"""Input source implementations."""

from bricks.input.sources.base import InputSource
from bricks.input.sources.keyboard import KeyboardInputSource

__all__ = [
    'InputSource',
    'KeyboardInputSource',
]
