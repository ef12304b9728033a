"""
Terminal Pong game loop and entry point
"""

import sys
import traceback

from blessed import Terminal

from term_pong.core.interfaces.keyboard import KeyboardProtocol
from term_pong.core.interfaces.keyboard import KeyEvent
from term_pong.core.interfaces.renderer import RendererProtocol
from term_pong.core.match import MatchState
from term_pong.tui.ansi_renderer import AnsiRenderer
from term_pong.tui.keyboard import BlessedKeyboard
from term_pong.tui.keyboard import Command
from term_pong.tui.keyboard import InputController
from term_pong.tui.terminal import raw_terminal
from term_pong.utils.config import game_config


class TerminalPongApp:
    """Runs one match: input, physics, rendering and scoring each frame"""

    def __init__(
        self,
        keyboard: KeyboardProtocol,
        renderer: RendererProtocol,
        state: MatchState | None = None,
        input_controller: InputController | None = None,
    ):
        self.keyboard = keyboard
        self.renderer = renderer
        self.state = state if state is not None else MatchState()
        self.input_controller = input_controller or InputController()
        self.frame_count = 0

    def step(self, event: KeyEvent | None) -> None:
        """
        Advances the match by one frame

        Args:
            event: Key pressed during the poll, or None if the poll timed out
        """
        if event is not None:
            command = self.input_controller.handle_event(event, self.state)
            if command is Command.QUIT:
                return

        state = self.state
        state.ball.update_position(state.paddles)
        self.renderer.draw(state.paddles, state.ball, state.score)
        state.check_goal()
        self.frame_count += 1

    def run(self) -> MatchState:
        """Loops until a player wins or quits, then returns the final state"""
        while self.state.is_running():
            event = self.keyboard.poll(game_config.POLL_TIMEOUT)
            self.step(event)

        return self.state


def main() -> int:
    """Plays one match in the current terminal and prints the outcome"""
    try:
        term = Terminal()
        with raw_terminal(term):
            app = TerminalPongApp(BlessedKeyboard(term), AnsiRenderer())
            state = app.run()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    print(state.summary())
    return 0
