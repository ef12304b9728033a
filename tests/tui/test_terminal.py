"""
Tests for raw terminal mode handling
"""

import io
from contextlib import contextmanager

import pytest
from blessed import Terminal

from term_pong.tui.terminal import TerminalError, raw_terminal


class FakeTerminal:
    """Records raw mode transitions"""

    def __init__(self, is_a_tty=True):
        self.is_a_tty = is_a_tty
        self.transitions = []

    @contextmanager
    def raw(self):
        self.transitions.append("raw")
        try:
            yield
        finally:
            self.transitions.append("restored")


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestRawTerminal:
    """Test the raw mode context manager"""

    def test_requires_interactive_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO())
        term = FakeTerminal()

        with pytest.raises(TerminalError):
            with raw_terminal(term):
                pass

        assert term.transitions == []

    def test_requires_terminal_output(self, monkeypatch):
        """Output redirected away from the terminal is rejected before raw mode"""
        monkeypatch.setattr("sys.stdin", FakeTTY())
        term = FakeTerminal(is_a_tty=False)

        with pytest.raises(TerminalError, match="terminal output"):
            with raw_terminal(term):
                pass

        assert term.transitions == []

    def test_redirected_blessed_terminal(self, monkeypatch):
        """A blessed terminal writing to a file is not interactive"""
        monkeypatch.setattr("sys.stdin", FakeTTY())

        with pytest.raises(TerminalError):
            with raw_terminal(Terminal(stream=io.StringIO())):
                pass

    def test_restores_on_normal_exit(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", FakeTTY())
        term = FakeTerminal()

        with raw_terminal(term) as entered:
            assert entered is term
            assert term.transitions == ["raw"]

        assert term.transitions == ["raw", "restored"]

    def test_restores_once_on_error(self, monkeypatch):
        """The terminal is restored exactly once when the loop raises"""
        monkeypatch.setattr("sys.stdin", FakeTTY())
        term = FakeTerminal()

        with pytest.raises(OSError):
            with raw_terminal(term):
                raise OSError("read failed")

        assert term.transitions == ["raw", "restored"]

    def test_terminal_error_is_runtime_error(self):
        assert issubclass(TerminalError, RuntimeError)
