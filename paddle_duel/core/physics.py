"""
Physics system for Paddle Duel
"""

from collections.abc import Callable
from typing import Any

from paddle_duel.core.collision import resolve_paddle_collision
from paddle_duel.core.entities import Paddle, World
from paddle_duel.core.geometry import absolute
from paddle_duel.utils.config import GameConfig

KeyDown = Callable[[str], bool]


class PhysicsEngine:
    """Per-frame world update"""

    def __init__(self, config: GameConfig):
        self.config = config
        self.arena_size = config.ARENA_SIZE

    def update(self, world: World, dt: float, key_down: KeyDown) -> dict[str, list[Any]]:
        """
        Advances the world by one frame.

        Args:
            world: World state, mutated in place
            dt: Seconds elapsed since the previous frame
            key_down: Returns the pressed state of a named key

        Returns:
            Dictionary with the events of the frame:
            {"wall_bounces": [...], "paddle_hits": [...], "goals": [...]}
        """
        events: dict[str, list[Any]] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
        }

        # Move players
        self._move_paddle(
            world.p1.paddle, dt, key_down(self.config.P1_UP_KEY), key_down(self.config.P1_DOWN_KEY)
        )
        self._move_paddle(
            world.p2.paddle, dt, key_down(self.config.P2_UP_KEY), key_down(self.config.P2_DOWN_KEY)
        )

        world.ball.move(dt)

        self._check_walls(world, events)
        self._check_goals(world, events)

        # Both paddles, always, in this order
        for player_id, player in enumerate(world.players, start=1):
            if resolve_paddle_collision(world.ball, player.paddle, self.config):
                events["paddle_hits"].append(
                    {"player": player_id, "speed": world.ball.velocity.magnitude()}
                )

        return events

    def _move_paddle(self, paddle: Paddle, dt: float, up: bool, down: bool) -> None:
        step = dt * self.config.SPEED
        if up:
            paddle.move(-step)
        if down:
            paddle.move(step)
        paddle.constrain_position(self.config.paddle_max_y)

    def _check_walls(self, world: World, events: dict[str, list[Any]]) -> None:
        """Top and bottom walls only flip the vertical velocity"""
        ball = world.ball
        if ball.position.y < 0:
            ball.velocity.y = absolute(ball.velocity.y)
            events["wall_bounces"].append("top")
        elif ball.position.y > self.arena_size - self.config.WALL_BOUNCE_MARGIN:
            ball.velocity.y = -absolute(ball.velocity.y)
            events["wall_bounces"].append("bottom")

    def _check_goals(self, world: World, events: dict[str, list[Any]]) -> None:
        ball = world.ball
        serve_x, serve_y = self.config.BALL_START

        if ball.position.x < 0:
            world.p1.add_point()
            ball.serve(serve_x, serve_y, -self.config.BALL_STARTV)
            events["goals"].append({"player": 1, "score": world.score})
        elif ball.position.x > self.arena_size:
            world.p2.add_point()
            ball.serve(serve_x, serve_y, self.config.BALL_STARTV)
            events["goals"].append({"player": 2, "score": world.score})

    def get_game_state(self, world: World) -> dict[str, Any]:
        """Returns a snapshot of the world"""
        return {
            "ball_position": world.ball.position.to_tuple(),
            "ball_velocity": world.ball.velocity.to_tuple(),
            "player1_position": world.p1.paddle.position.to_tuple(),
            "player2_position": world.p2.paddle.position.to_tuple(),
            "score": world.score,
            "field_bounds": (0.0, self.arena_size, 0.0, self.arena_size),
        }
