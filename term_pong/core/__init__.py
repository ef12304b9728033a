"""
Core module of Terminal Pong
"""

from term_pong.core.entities import Ball
from term_pong.core.entities import Paddle
from term_pong.core.entities import Vector2D
from term_pong.core.match import MatchState
from term_pong.core.match import MatchStatus
from term_pong.core.rng import XorShift

__all__ = [
    "Ball",
    "Paddle",
    "Vector2D",
    "MatchState",
    "MatchStatus",
    "XorShift",
]
