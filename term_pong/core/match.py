"""
Match state for Terminal Pong: paddles, ball, score and status
"""

from enum import Enum

from term_pong.core.entities import Ball
from term_pong.core.entities import Paddle
from term_pong.core.interfaces.clock import ClockProtocol
from term_pong.core.interfaces.clock import SeedSourceProtocol
from term_pong.core.timing import monotonic_seconds
from term_pong.core.timing import subsecond_micros
from term_pong.utils.config import game_config


class MatchStatus(Enum):
    """Match lifecycle"""

    RUNNING = "running"
    ENDED = "ended"


class MatchState:
    """Aggregate owning everything that changes during a match"""

    def __init__(
        self,
        clock: ClockProtocol = monotonic_seconds,
        seed_source: SeedSourceProtocol = subsecond_micros,
    ):
        paddle_y = game_config.HEIGHT // 2 - game_config.PADDLE_HEIGHT // 2
        self.paddles = (
            Paddle(game_config.PADDLE_OFFSET, paddle_y),
            Paddle(game_config.WIDTH - 1 - game_config.PADDLE_OFFSET, paddle_y),
        )
        center_x, center_y = game_config.center
        self.ball = Ball(center_x, center_y, clock=clock, seed_source=seed_source)
        self.score: list[int] = [0, 0]
        self.status = MatchStatus.RUNNING

        self.ball.start_random()

    @property
    def left_paddle(self) -> Paddle:
        return self.paddles[0]

    @property
    def right_paddle(self) -> Paddle:
        return self.paddles[1]

    def is_running(self) -> bool:
        return self.status is MatchStatus.RUNNING

    def end(self) -> None:
        """Ends the match (quit or win)"""
        self.status = MatchStatus.ENDED

    def check_goal(self) -> int:
        """
        Scores a point if the ball left the field, then checks for a winner

        The ball is reset right after the point is awarded and the match
        ends once a player reaches the winning score.

        Returns:
            int: Scoring player (1 or 2), or 0 if the ball is still in play
        """
        scorer = 0
        if self.ball.x <= 0:
            scorer = 2
        elif self.ball.x >= game_config.WIDTH - 1:
            scorer = 1

        if scorer:
            self.score[scorer - 1] += 1
            self.ball.reset()

        if self.is_game_over():
            self.end()

        return scorer

    def is_game_over(self) -> bool:
        """Checks if either player reached the winning score"""
        return max(self.score) >= game_config.WINNING_SCORE

    def get_winner(self) -> int:
        """
        Returns the winner (1 or 2)

        Player 1 wins only with a strictly higher score, so a tie goes to
        player 2.
        """
        return 1 if self.score[0] > self.score[1] else 2

    def summary(self) -> str:
        """Game-over message printed once the terminal is restored"""
        return f"\nGame Over!\nPlayer {self.get_winner()} wins!"
