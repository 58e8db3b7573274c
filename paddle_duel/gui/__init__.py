"""
PyGame front end of Paddle Duel
"""

from paddle_duel.gui.pygame_host import PygameHost

__all__ = ["PygameHost"]
