"""
Terminal Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator


class GameConfig(BaseModel):
    """Compiled-in game constants with Pydantic validation"""

    # Allow mutation so tests can override values temporarily
    model_config = {"validate_assignment": True}

    # Grid dimensions
    WIDTH: int = Field(default=60, gt=0, description="Grid width in columns")
    HEIGHT: int = Field(default=30, gt=0, description="Grid height in rows")

    # Paddles
    PADDLE_HEIGHT: int = Field(default=4, gt=0, description="Paddle height in rows")
    PADDLE_WIDTH: int = Field(default=1, gt=0, description="Paddle width in columns")
    PADDLE_OFFSET: int = Field(default=2, ge=0, description="Paddle column offset from edge")

    # Ball physics (cells per second)
    BALL_MAX_SPEED: float = Field(default=25.0, gt=0, description="Maximum horizontal speed")
    BALL_START_SPEED: float = Field(default=5.0, gt=0, description="Launch speed")
    BALL_ACCELERATION: float = Field(default=5.0, ge=0, description="Speed gained per paddle hit")

    # Gameplay
    WINNING_SCORE: int = Field(default=5, gt=0, description="Points needed to win")
    POLL_TIMEOUT: float = Field(default=0.033, gt=0, description="Keyboard poll timeout (s)")

    # Display
    PADDLE_GLYPH: str = Field(default="█", description="Glyph drawn for paddle cells")
    BALL_GLYPH: str = Field(default="O", description="Glyph drawn for the ball")

    @field_validator("BALL_START_SPEED")
    @classmethod
    def validate_start_speed(cls, v: float, info: ValidationInfo) -> float:
        """Validate that the launch speed doesn't exceed the max speed"""
        max_speed = info.data.get("BALL_MAX_SPEED", 25.0) if info.data else 25.0
        if v > max_speed:
            raise ValueError(
                f"BALL_START_SPEED ({v}) must not exceed BALL_MAX_SPEED ({max_speed})"
            )
        return v

    @field_validator("PADDLE_GLYPH", "BALL_GLYPH")
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        """Glyphs occupy exactly one grid cell"""
        if len(v) != 1:
            raise ValueError(f"Glyph must be a single character, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_grid_dimensions(self) -> "GameConfig":
        """Validate the grid is large enough for both paddles"""
        if self.PADDLE_HEIGHT >= self.HEIGHT:
            raise ValueError(f"PADDLE_HEIGHT must be less than HEIGHT ({self.HEIGHT})")

        min_width = 2 * (self.PADDLE_OFFSET + self.PADDLE_WIDTH) + 1
        if self.WIDTH <= min_width:
            raise ValueError(f"WIDTH must be greater than {min_width} columns")

        return self

    @property
    def center(self) -> tuple[float, float]:
        """Grid centre as (x, y)"""
        return (self.WIDTH / 2, self.HEIGHT / 2)


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """
    Helper to change config values temporarily

    Either every value is applied or none is. If one assignment fails
    validation, the previous values (the failing field included) are put
    back before the error propagates.
    """
    old_values: dict[str, Any] = {}
    try:
        for name, new_value in kwargs.items():
            old_values[name] = getattr(obj, name)
            setattr(obj, name, new_value)
    except Exception:
        for name, old_value in reversed(list(old_values.items())):
            setattr(obj, name, old_value)
        raise
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
