"""
Keyboard input for Terminal Pong: blessed keystrokes to paddle commands
"""

from enum import Enum

from blessed import Terminal
from blessed.keyboard import KittyModifierBits
from blessed.keyboard import Keystroke

from term_pong.core.interfaces.keyboard import Key
from term_pong.core.interfaces.keyboard import KeyEvent
from term_pong.core.interfaces.keyboard import Modifier
from term_pong.core.match import MatchState

# Modifier words blessed puts after KEY_ in names such as KEY_CTRL_ALT_UP
_MODIFIER_WORDS = {"SHIFT", "ALT", "CTRL", "SUPER", "HYPER", "META"}

# blessed sequence names to named keys
_SEQUENCE_KEYS = {
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
}


class Command(Enum):
    """Game commands triggered by keys"""

    QUIT = "quit"
    LEFT_UP = "left_up"
    LEFT_DOWN = "left_down"
    RIGHT_UP = "right_up"
    RIGHT_DOWN = "right_down"


# Bindings only match when no modifier is held
KEY_BINDINGS: dict[KeyEvent, Command] = {
    KeyEvent("q"): Command.QUIT,
    KeyEvent("w"): Command.LEFT_UP,
    KeyEvent("s"): Command.LEFT_DOWN,
    KeyEvent(Key.UP): Command.RIGHT_UP,
    KeyEvent(Key.DOWN): Command.RIGHT_DOWN,
}


def _modifiers_of(keystroke: Keystroke) -> Modifier:
    """Maps blessed modifier bits onto the game's modifier flags"""
    bits = keystroke.modifiers_bits
    modifiers = Modifier.NONE
    if bits & KittyModifierBits.shift:
        modifiers |= Modifier.SHIFT
    if bits & KittyModifierBits.ctrl:
        modifiers |= Modifier.CONTROL
    if bits & (KittyModifierBits.alt | KittyModifierBits.meta):
        modifiers |= Modifier.ALT
    return modifiers


def _base_key_name(name: str) -> str:
    """Strips modifier words from a key name: KEY_CTRL_ALT_UP -> KEY_UP"""
    if not name.startswith("KEY_"):
        return name
    words = name[len("KEY_"):].split("_")
    while len(words) > 1 and words[0] in _MODIFIER_WORDS:
        words.pop(0)
    return "KEY_" + "_".join(words)


def translate_keystroke(keystroke: Keystroke) -> KeyEvent | None:
    """
    Converts a blessed keystroke into a key event

    Modifiers come from blessed's own decoding (Ctrl+W arrives as 0x17,
    Alt+W as ESC w, Alt+Up as a CSI sequence with a modifier parameter).
    A plain upper-case letter carries no modifier in blessed and is
    reported here as SHIFT + lower-case letter.

    Args:
        keystroke: Value returned by Terminal.inkey (empty on timeout)

    Returns:
        KeyEvent | None: The event, or None if no key was pressed
    """
    if not keystroke:
        return None

    modifiers = _modifiers_of(keystroke)
    text = keystroke.value
    if len(text) == 1 and text.isprintable():
        if text.isalpha() and text.isupper():
            return KeyEvent(text.lower(), modifiers | Modifier.SHIFT)
        return KeyEvent(text, modifiers)

    name = keystroke.name
    if name is None:
        return KeyEvent(str(keystroke), modifiers)
    name = _base_key_name(name)
    return KeyEvent(_SEQUENCE_KEYS.get(name, name), modifiers)


class BlessedKeyboard:
    """Keyboard source reading keystrokes through blessed"""

    def __init__(self, term: Terminal):
        self.term = term

    def poll(self, timeout: float) -> KeyEvent | None:
        """Waits up to `timeout` seconds for a single key press"""
        return translate_keystroke(self.term.inkey(timeout=timeout))


class InputController:
    """Applies key events to the match state"""

    def __init__(self, bindings: dict[KeyEvent, Command] | None = None):
        self.bindings = bindings if bindings is not None else KEY_BINDINGS

    def get_command(self, event: KeyEvent) -> Command | None:
        """Returns the bound command, or None for unmapped keys"""
        return self.bindings.get(event)

    def handle_event(self, event: KeyEvent, state: MatchState) -> Command | None:
        """
        Handles one key event

        Returns:
            The command that was applied, or None if the key was ignored
        """
        command = self.get_command(event)

        if command is Command.QUIT:
            state.end()
        elif command is Command.LEFT_UP:
            state.left_paddle.move_up()
        elif command is Command.LEFT_DOWN:
            state.left_paddle.move_down()
        elif command is Command.RIGHT_UP:
            state.right_paddle.move_up()
        elif command is Command.RIGHT_DOWN:
            state.right_paddle.move_down()

        return command
