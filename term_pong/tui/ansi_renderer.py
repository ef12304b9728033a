"""
ANSI renderer for Terminal Pong
"""

import sys
from collections.abc import Sequence
from typing import TextIO

from term_pong.core.entities import Ball
from term_pong.core.entities import Paddle
from term_pong.utils.config import game_config

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[1;1H"


def move_to(row: int, col: int) -> str:
    """Cursor positioning sequence, 1-indexed"""
    return f"\x1b[{row};{col}H"


def grid_index(value: float) -> int:
    """Truncates a coordinate to a cell index, negatives saturate to 0"""
    return max(int(value), 0)


class AnsiRenderer:
    """Full-screen clear-and-redraw renderer writing escape sequences"""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def render_frame(self, paddles: Sequence[Paddle], ball: Ball, score: Sequence[int]) -> str:
        """Builds the escape sequences for one frame"""
        parts = [CLEAR_SCREEN, CURSOR_HOME]

        # Paddles
        for paddle in paddles:
            for i in range(game_config.PADDLE_HEIGHT):
                parts.append(move_to(paddle.y + i + 1, paddle.x + 1) + game_config.PADDLE_GLYPH)

        # Ball
        parts.append(
            move_to(grid_index(ball.y) + 1, grid_index(ball.x) + 1) + game_config.BALL_GLYPH
        )

        # Scores
        footer_row = game_config.HEIGHT + 1
        parts.append(move_to(footer_row, game_config.WIDTH // 2 - 10) + f"Player 1: {score[0]}\n")
        parts.append(move_to(footer_row, game_config.WIDTH // 2 + 5) + f"Player 2: {score[1]}\n")

        return "".join(parts)

    def draw(self, paddles: Sequence[Paddle], ball: Ball, score: Sequence[int]) -> None:
        """Writes one frame and flushes; write errors propagate"""
        self.stream.write(self.render_frame(paddles, ball, score))
        self.stream.flush()
