"""
Paddle Duel main game engine
"""

from collections.abc import Iterator
from typing import Any

from paddle_duel.core.entities import World
from paddle_duel.core.interfaces.host import HostProtocol
from paddle_duel.core.physics import PhysicsEngine
from paddle_duel.core.render import FrameRenderer
from paddle_duel.utils.config import GameConfig, game_config


class GameEngine:
    """Frame driver: owns the world and runs update then render each frame"""

    def __init__(self, host: HostProtocol, config: GameConfig | None = None):
        self.host = host
        self.config = config or game_config
        self.physics_engine = PhysicsEngine(self.config)
        self.renderer = FrameRenderer(self.config)
        self.world = World.initial(self.config)
        self.frame_count = 0

    def step(self) -> dict[str, list[Any]]:
        """
        Runs one frame: update with the host's delta and keys, then render.

        Returns:
            Events of the frame (see PhysicsEngine.update)
        """
        dt = self.host.get_delta()
        events = self.physics_engine.update(self.world, dt, self.host.key_down)
        self.renderer.render(self.world, self.host)
        self.frame_count += 1
        return events

    def frames(self) -> Iterator[dict[str, list[Any]]]:
        """
        Endless frame loop, suspended once per frame after update and render.

        Stopping is up to the caller, which simply stops resuming the iterator.
        """
        while True:
            yield self.step()

    def run(self) -> None:
        """Drives the frame loop with the host's scheduler until it asks to stop"""
        for _ in self.frames():
            if not self.host.next_frame():
                break

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return self.physics_engine.get_game_state(self.world)
