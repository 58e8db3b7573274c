"""
Paddle Duel game configuration with Pydantic validation
"""

from typing import Any
from typing import ClassVar

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator


class GameConfig(BaseModel):
    """Immutable game configuration, passed explicitly to the engine"""

    model_config = {"frozen": True}

    # Arena (fixed, not a field)
    ARENA_SIZE: ClassVar[float] = 20.0

    # Paddles
    PADDLE_W: float = Field(default=0.5, gt=0, description="Paddle width in world units")
    PADDLE_H: float = Field(default=3.0, gt=0, description="Paddle height in world units")
    SPEED: float = Field(default=10.0, gt=0, description="Paddle speed in units per second")
    P1_START: tuple[float, float] = Field(default=(1.0, 10.0), description="Left paddle start")
    P2_START: tuple[float, float] = Field(default=(19.0, 10.0), description="Right paddle start")

    # Ball physics
    BALL_SIZE: float = Field(default=0.4, gt=0, description="Ball side length in world units")
    BALL_STARTV: float = Field(default=5.0, gt=0, description="Serve speed")
    BALL_START: tuple[float, float] = Field(default=(10.0, 10.0), description="Serve position")
    BOUNCE_SPEEDUP: float = Field(default=0.5, ge=0, description="Speed added per paddle hit")
    DEFLECTION_FACTOR: float = Field(default=3.0, ge=0, description="Vertical spin factor")
    WALL_BOUNCE_MARGIN: float = Field(default=0.2, ge=0, description="Bottom wall margin")

    # Controls
    P1_UP_KEY: str = Field(default="w", description="Left player up key")
    P1_DOWN_KEY: str = Field(default="s", description="Left player down key")
    P2_UP_KEY: str = Field(default="i", description="Right player up key")
    P2_DOWN_KEY: str = Field(default="k", description="Right player down key")

    # Display
    SCORE_MARKER_SIZE: float = Field(default=1.0, gt=0, description="Score marker side")
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    PIXELS_PER_UNIT: int = Field(default=30, gt=0, description="Window scale")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color"
    )

    @field_validator("PADDLE_H", "BALL_SIZE", "PADDLE_W")
    @classmethod
    def validate_fits_arena(cls, v: float, info: ValidationInfo) -> float:
        """Validate that an entity is smaller than the arena"""
        if v >= cls.ARENA_SIZE:
            raise ValueError(f"{info.field_name} ({v}) must be smaller than the arena")
        return v

    @field_validator("P1_UP_KEY", "P1_DOWN_KEY", "P2_UP_KEY", "P2_DOWN_KEY")
    @classmethod
    def validate_key_name(cls, v: str) -> str:
        """Validate key names are non-empty lowercase names"""
        if not v or v != v.lower():
            raise ValueError(f"Key name must be a non-empty lowercase name, got {v!r}")
        return v

    @field_validator("BACKGROUND_COLOR", "FOREGROUND_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate RGB components"""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"Color components must be in [0, 255], got {v}")
        return v

    @model_validator(mode="after")
    def validate_layout(self) -> "GameConfig":
        """Validate positions are inside the arena and key bindings are distinct"""
        bounds = {
            "P1_START": (self.PADDLE_W, self.PADDLE_H),
            "P2_START": (self.PADDLE_W, self.PADDLE_H),
            "BALL_START": (self.BALL_SIZE, self.BALL_SIZE),
        }
        for name, (width, height) in bounds.items():
            x, y = getattr(self, name)
            if not (
                0 <= x <= self.ARENA_SIZE - width and 0 <= y <= self.ARENA_SIZE - height
            ):
                raise ValueError(f"{name} {(x, y)} puts the rectangle outside the arena")

        keys = [self.P1_UP_KEY, self.P1_DOWN_KEY, self.P2_UP_KEY, self.P2_DOWN_KEY]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Key bindings must be distinct, got {keys}")

        return self

    @property
    def paddle_max_y(self) -> float:
        """Lowest allowed paddle top edge"""
        return self.ARENA_SIZE - self.PADDLE_H

    @property
    def window_size(self) -> tuple[int, int]:
        side = int(self.ARENA_SIZE * self.PIXELS_PER_UNIT)
        return (side, side)

    def with_overrides(self, **kwargs: Any) -> "GameConfig":
        """Return a validated copy with some fields replaced"""
        return type(self)(**{**self.model_dump(), **kwargs})



game_config = GameConfig()
