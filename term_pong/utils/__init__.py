"""
Utility module of Terminal Pong
"""

from term_pong.utils.config import GameConfig
from term_pong.utils.config import game_config
from term_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
