"""
Host protocol - defines the primitives a game host provides to the engine
"""

from typing import Protocol


class HostProtocol(Protocol):
    """
    Protocol for host implementations.

    The engine only reads input and time and issues draw commands through
    these primitives, so the same core runs in a pygame window, a headless
    test harness, or any other frame-driven environment.
    """

    def get_delta(self) -> float:
        """Seconds elapsed since the previous frame (>= 0)"""
        ...

    def key_down(self, name: str) -> bool:
        """
        Current pressed state of a named key.

        Args:
            name: Key name, e.g. "w", "s", "i", "k"
        """
        ...

    def clear(self) -> None:
        """Clear the drawing surface"""
        ...

    def draw_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        """Draw a filled rectangle in arena coordinates (origin top-left)"""
        ...

    def next_frame(self) -> bool:
        """
        Present the frame and wait for the next tick.

        Returns:
            False when the host wants the game loop to stop
        """
        ...
