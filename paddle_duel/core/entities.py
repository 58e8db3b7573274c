"""
Paddle Duel game entities: ball, paddles, players and the world
"""

from dataclasses import dataclass

import numpy as np

from paddle_duel.utils.config import GameConfig


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Game ball, a square whose position is its top-left corner"""

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float = 0.4):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.size = size

    def move(self, dt: float) -> None:
        """Advances the ball along its velocity"""
        self.position = self.position + self.velocity * dt

    def serve(self, x: float, y: float, vx: float) -> None:
        """Puts the ball back at the serve position with a horizontal velocity"""
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, 0.0)

    @property
    def center_y(self) -> float:
        return self.position.y + self.size / 2

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.size, self.size)


class Paddle:
    """Player paddle"""

    def __init__(self, x: float, y: float, width: float = 0.5, height: float = 3.0):
        self.position = Vector2D(x, y)
        self.width = width
        self.height = height

    def move(self, dy: float) -> None:
        self.position.y += dy

    def constrain_position(self, max_y: float) -> None:
        """Keeps the paddle inside ``[0, max_y]`` vertically"""
        self.position.y = max(0.0, min(max_y, self.position.y))

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


class Player:
    """A side of the game: one paddle and a score"""

    def __init__(self, paddle: Paddle):
        self.paddle = paddle
        # Whole points, kept as a float
        self.score = 0.0

    def add_point(self) -> None:
        self.score += 1.0


class World:
    """Complete game state, mutated in place by the physics engine"""

    def __init__(self, p1: Player, p2: Player, ball: Ball):
        self.p1 = p1
        self.p2 = p2
        self.ball = ball

    @classmethod
    def initial(cls, config: GameConfig) -> "World":
        """Builds the world at the start of a game session"""
        p1 = Player(Paddle(*config.P1_START, width=config.PADDLE_W, height=config.PADDLE_H))
        p2 = Player(Paddle(*config.P2_START, width=config.PADDLE_W, height=config.PADDLE_H))
        ball_x, ball_y = config.BALL_START
        ball = Ball(ball_x, ball_y, config.BALL_STARTV, 0.0, size=config.BALL_SIZE)
        return cls(p1, p2, ball)

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.p1, self.p2)

    @property
    def score(self) -> tuple[float, float]:
        return (self.p1.score, self.p2.score)
