"""
Renderer protocol - defines interface for frame rendering backends
"""

from collections.abc import Sequence
from typing import Protocol

from term_pong.core.entities import Ball
from term_pong.core.entities import Paddle


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The game loop only needs a full-frame redraw; the ANSI renderer is the
    terminal implementation and tests substitute recording fakes.
    """

    def draw(self, paddles: Sequence[Paddle], ball: Ball, score: Sequence[int]) -> None:
        """
        Render a single frame of the game.

        Args:
            paddles: Left and right paddles
            ball: Ball entity
            score: Current score [p1_score, p2_score]

        Raises:
            OSError: If the output stream can no longer be written
        """
        ...
