"""
Core module of Paddle Duel game
"""

from paddle_duel.core.entities import Ball
from paddle_duel.core.entities import Paddle
from paddle_duel.core.entities import Player
from paddle_duel.core.entities import Vector2D
from paddle_duel.core.entities import World
from paddle_duel.core.game_engine import GameEngine
from paddle_duel.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "Paddle",
    "Player",
    "Vector2D",
    "World",
    "GameEngine",
    "PhysicsEngine",
]
