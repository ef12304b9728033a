"""
Protocols decoupling the game loop from the terminal and the clock

The renderer protocol lives in term_pong.core.interfaces.renderer and is not
re-exported here because it depends on the entities module.
"""

from term_pong.core.interfaces.clock import ClockProtocol
from term_pong.core.interfaces.clock import SeedSourceProtocol
from term_pong.core.interfaces.keyboard import Key
from term_pong.core.interfaces.keyboard import KeyboardProtocol
from term_pong.core.interfaces.keyboard import KeyEvent
from term_pong.core.interfaces.keyboard import Modifier

__all__ = [
    "ClockProtocol",
    "SeedSourceProtocol",
    "Key",
    "KeyEvent",
    "KeyboardProtocol",
    "Modifier",
]
