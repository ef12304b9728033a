"""
Terminal user interface of Terminal Pong
"""

from term_pong.tui.ansi_renderer import AnsiRenderer
from term_pong.tui.game_app import TerminalPongApp
from term_pong.tui.keyboard import BlessedKeyboard
from term_pong.tui.keyboard import Command
from term_pong.tui.keyboard import InputController
from term_pong.tui.terminal import TerminalError
from term_pong.tui.terminal import raw_terminal

__all__ = [
    "AnsiRenderer",
    "BlessedKeyboard",
    "Command",
    "InputController",
    "TerminalError",
    "TerminalPongApp",
    "raw_terminal",
]
