"""
Paddle-ball collision detection and bounce response
"""

from paddle_duel.core.entities import Ball, Paddle
from paddle_duel.core.geometry import absolute, rect_overlap
from paddle_duel.utils.config import GameConfig


def ball_touches_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Checks whether the ball and paddle rectangles overlap"""
    return rect_overlap(*ball.get_rect(), *paddle.get_rect())


def apply_paddle_bounce(ball: Ball, paddle: Paddle, config: GameConfig) -> None:
    """
    Applies the bounce on a paddle.

    The horizontal velocity is sent away from the paddle and its magnitude
    grows by ``BOUNCE_SPEEDUP``. The vertical velocity gets a spin
    proportional to the distance between the ball and paddle centers; it is
    not clamped. The ball position is left as is.
    """
    speed_x = absolute(ball.velocity.x) + config.BOUNCE_SPEEDUP
    if ball.position.x < paddle.position.x:
        # Struck on the paddle's left face
        ball.velocity.x = -speed_x
    else:
        ball.velocity.x = speed_x

    ball.velocity.y += (ball.center_y - paddle.center_y) * config.DEFLECTION_FACTOR


def resolve_paddle_collision(ball: Ball, paddle: Paddle, config: GameConfig) -> bool:
    """
    Checks and handles a ball-paddle collision.

    There is no continuous detection: a ball moving further than the paddle
    and ball widths in one frame can pass through.

    Returns:
        True if the ball bounced off the paddle
    """
    if not ball_touches_paddle(ball, paddle):
        return False

    apply_paddle_bounce(ball, paddle, config)
    return True
