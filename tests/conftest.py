"""
Shared fixtures: a scripted host that records draw commands
"""

from collections.abc import Iterable

import pytest

from paddle_duel.utils.config import GameConfig


class RecordingHost:
    """Host double: scripted deltas and keys, records every draw command"""

    def __init__(
        self,
        deltas: Iterable[float] = (),
        default_delta: float = 0.1,
        keys: Iterable[str] = (),
        stop_after: int | None = None,
    ):
        self.deltas = list(deltas)
        self.default_delta = default_delta
        self.keys = set(keys)
        self.stop_after = stop_after
        self.commands: list[tuple] = []
        self.frames_presented = 0

    def get_delta(self) -> float:
        if self.deltas:
            return self.deltas.pop(0)
        return self.default_delta

    def key_down(self, name: str) -> bool:
        return name in self.keys

    def clear(self) -> None:
        self.commands.append(("clear",))

    def draw_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        self.commands.append(("rect", x, y, w, h))

    def next_frame(self) -> bool:
        self.frames_presented += 1
        return self.stop_after is None or self.frames_presented < self.stop_after

    @property
    def rectangles(self) -> list[tuple]:
        return [c[1:] for c in self.commands if c[0] == "rect"]


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def make_host():
    """Factory for RecordingHost instances"""
    return RecordingHost
