"""
Terminal Pong game entities: ball and paddles
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from term_pong.core.interfaces.clock import ClockProtocol
from term_pong.core.interfaces.clock import SeedSourceProtocol
from term_pong.core.rng import XorShift
from term_pong.core.timing import monotonic_seconds
from term_pong.core.timing import subsecond_micros
from term_pong.utils.config import game_config


@dataclass
class Vector2D:
    """Simple 2D vector for launch directions"""

    x: float
    y: float

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Paddle:
    """Player paddle, one column wide, moving one row at a time"""

    def __init__(self, x: int, y: int):
        self._x = x
        self.y = y

    @property
    def x(self) -> int:
        """Fixed column of the paddle"""
        return self._x

    def move_up(self) -> None:
        """Moves one row up, no-op at the top edge"""
        if self.y > 0:
            self.y -= 1

    def move_down(self) -> None:
        """Moves one row down, no-op when the bottom edge reaches the grid"""
        if self.y + game_config.PADDLE_HEIGHT < game_config.HEIGHT:
            self.y += 1

    def contains(self, x: float, y: float) -> bool:
        """Checks whether a point lies on the paddle, edges included"""
        return (
            self.x <= x <= self.x + game_config.PADDLE_WIDTH
            and self.y <= y <= self.y + game_config.PADDLE_HEIGHT
        )


class Ball:
    """Game ball moving in grid cells per second"""

    def __init__(
        self,
        x: float,
        y: float,
        clock: ClockProtocol = monotonic_seconds,
        seed_source: SeedSourceProtocol = subsecond_micros,
    ):
        self.x = x
        self.y = y
        self.x_speed = game_config.BALL_START_SPEED
        self.y_speed = game_config.BALL_START_SPEED
        self.clock = clock
        self.seed_source = seed_source
        self.last_update_time = clock()

    def start_random(self) -> None:
        """
        Launches the ball in a random direction at the start speed

        A new generator is seeded from the seed source on every call. With the
        default clock-based source two launches close in time may share a seed.
        """
        rng = XorShift(self.seed_source())
        direction = Vector2D(0.0, 0.0)
        # A zero vector cannot be normalized, draw again
        while direction.magnitude() == 0:
            direction = Vector2D(rng.range(-1.0, 1.0), rng.range(-1.0, 1.0))

        velocity = direction.normalize() * game_config.BALL_START_SPEED
        self.x_speed, self.y_speed = velocity.to_tuple()

    def reset(self) -> None:
        """Recentres the ball and launches it again"""
        self.x, self.y = game_config.center
        self.start_random()

    def update_position(self, paddles: Sequence[Paddle]) -> None:
        """Integrates the position over the elapsed time, then bounces"""
        now = self.clock()
        time_delta = now - self.last_update_time
        self.last_update_time = now

        self.x += self.x_speed * time_delta
        self.y += self.y_speed * time_delta

        for paddle in paddles:
            if paddle.contains(self.x, self.y):
                self.bounce_horizontal()

        if self.y <= 0 or self.y >= game_config.HEIGHT - 1:
            self.bounce_vertical()

    def bounce_horizontal(self) -> None:
        """Paddle bounce: flips x and speeds up, clamped to the max speed"""
        self.x_speed = -self.x_speed
        speed = min(abs(self.x_speed) + game_config.BALL_ACCELERATION, game_config.BALL_MAX_SPEED)
        self.x_speed = math.copysign(speed, self.x_speed)

    def bounce_vertical(self) -> None:
        """Wall bounce: flips y, keeps the magnitude"""
        self.y_speed = -self.y_speed

    def speed(self) -> float:
        """Magnitude of the velocity vector"""
        return Vector2D(self.x_speed, self.y_speed).magnitude()
