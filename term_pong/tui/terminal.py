"""
Raw terminal mode handling
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager

from blessed import Terminal


class TerminalError(RuntimeError):
    """The terminal cannot be put into raw input mode"""


@contextmanager
def raw_terminal(term: Terminal) -> Iterator[Terminal]:
    """
    Keeps the terminal in raw mode (no line buffering, no echo) for the block

    The previous mode is restored exactly once when the block exits, whether
    the match ended normally, was quit or raised.

    Raises:
        TerminalError: If standard input or the terminal's output stream is
            not an interactive terminal
    """
    if not sys.stdin.isatty():
        raise TerminalError("raw input mode requires an interactive terminal")
    if not term.is_a_tty:
        raise TerminalError("raw input mode requires terminal output")

    with term.raw():
        yield term
