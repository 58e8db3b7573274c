"""
PyGame host for Paddle Duel
"""

import pygame

from paddle_duel.utils.config import GameConfig, game_config


class PygameHost:
    """PyGame-based host: keyboard input, frame timing and rectangle drawing"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize PyGame and open the game window"""
        self.config = config or game_config
        self.scale = self.config.PIXELS_PER_UNIT
        self.width, self.height = self.config.window_size

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Paddle Duel")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.foreground_color: tuple[int, int, int] = self.config.FOREGROUND_COLOR

        self._key_codes: dict[str, int] = {}
        self.active = True

    def get_delta(self) -> float:
        """Seconds between the two previous clock ticks"""
        return self.clock.get_time() / 1000.0

    def key_down(self, name: str) -> bool:
        """Pressed state of a key given by its pygame name (e.g. "w")"""
        if name not in self._key_codes:
            self._key_codes[name] = pygame.key.key_code(name)
        return bool(pygame.key.get_pressed()[self._key_codes[name]])

    def clear(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        """Draw a filled rectangle given in arena units"""
        rect = pygame.Rect(
            round(x * self.scale),
            round(y * self.scale),
            round(w * self.scale),
            round(h * self.scale),
        )
        pygame.draw.rect(self.screen, self.foreground_color, rect)

    def handle_events(self) -> None:
        """Process window events; closing the window or ESC ends the session"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.active = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.active = False

    def next_frame(self) -> bool:
        """Present the frame, wait for the next tick and report whether to go on"""
        pygame.display.flip()
        self.clock.tick(self.config.FPS)
        self.handle_events()
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
