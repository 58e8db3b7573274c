"""
Main game application with PyGame window
"""

import sys
import traceback

from paddle_duel.core.game_engine import GameEngine
from paddle_duel.gui.pygame_host import PygameHost
from paddle_duel.utils.config import GameConfig, game_config


def print_controls(config: GameConfig) -> None:
    print("CONTROLS:")
    print(f"  Player 1 (Left): {config.P1_UP_KEY.upper()}/{config.P1_DOWN_KEY.upper()}")
    print(f"  Player 2 (Right): {config.P2_UP_KEY.upper()}/{config.P2_DOWN_KEY.upper()}")
    print("  ESC: Quit")
    print()


def run_game(config: GameConfig | None = None) -> GameEngine:
    """Open a window and play until it is closed"""
    config = config or game_config
    host = PygameHost(config)
    engine = GameEngine(host, config)

    try:
        engine.run()
    finally:
        host.cleanup()

    return engine


def main() -> None:
    """Entry point of the application"""
    print("=== PADDLE DUEL ===")
    print()
    print_controls(game_config)

    try:
        engine = run_game(game_config)
    except Exception as e:
        print(f"Error: {e}")
        traceback.print_exc()
        sys.exit(1)

    p1_score, p2_score = engine.world.score
    print(f"Final score: {int(p1_score)} - {int(p2_score)}")
    print(f"Frames played: {engine.frame_count}")


if __name__ == "__main__":
    main()
