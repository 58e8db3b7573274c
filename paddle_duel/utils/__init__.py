"""
Paddle Duel utility modules
"""

from paddle_duel.utils.config import GameConfig
from paddle_duel.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
