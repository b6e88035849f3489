"""Bricks input: key-state sources and the manager the session polls."""

from bricks.input.input_manager import InputManager
from bricks.input.sources import InputSource, KeyboardInputSource
from bricks.input import keys

__all__ = [
    'InputManager',
    'InputSource',
    'KeyboardInputSource',
    'keys',
]
