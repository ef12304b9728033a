"""
Keyboard protocol and key event types
"""

from dataclasses import dataclass
from enum import Enum
from enum import Flag
from typing import Protocol


class Key(Enum):
    """Named (non-character) keys the game understands"""

    UP = "up"
    DOWN = "down"


class Modifier(Flag):
    """Modifier keys held during a key press"""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


@dataclass(frozen=True)
class KeyEvent:
    """A single key press: a named key or a one-character string"""

    code: Key | str
    modifiers: Modifier = Modifier.NONE


class KeyboardProtocol(Protocol):
    """
    Protocol for keyboard input sources.
    """

    def poll(self, timeout: float) -> KeyEvent | None:
        """
        Wait up to `timeout` seconds for one key press.

        Returns:
            The key event, or None if the timeout elapsed without input

        Raises:
            OSError: If the input stream cannot be read
        """
        ...
