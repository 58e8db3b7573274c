"""
Draw commands for the current world state
"""

from paddle_duel.core.entities import Paddle, World
from paddle_duel.core.interfaces.host import HostProtocol
from paddle_duel.utils.config import GameConfig


class FrameRenderer:
    """Issues the draw commands of one frame through a host"""

    def __init__(self, config: GameConfig):
        self.config = config

    def render(self, world: World, host: HostProtocol) -> None:
        host.clear()

        self.draw_paddle(world.p1.paddle, host)
        self.draw_paddle(world.p2.paddle, host)
        self.draw_score(world, host)

        host.draw_rectangle(*world.ball.get_rect())

    def draw_paddle(self, paddle: Paddle, host: HostProtocol) -> None:
        host.draw_rectangle(*paddle.get_rect())

    def draw_score(self, world: World, host: HostProtocol) -> None:
        """Right player's points along the top edge, left player's along the bottom"""
        size = self.config.SCORE_MARKER_SIZE
        arena = self.config.ARENA_SIZE

        for i in range(int(world.p2.score)):
            host.draw_rectangle(i * size, 0.0, size, size)

        for i in range(int(world.p1.score)):
            host.draw_rectangle(arena - (i + 1) * size, arena - size, size, size)
