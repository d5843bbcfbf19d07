"""Paddle, ball and block entities.

Entities only know their own geometry and motion. Collision response, scoring
and block removal belong to the orchestrator in ``breakout.game``.
"""

import math
from dataclasses import dataclass


def _require_positive(**values):
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value!r}")


class Paddle:
    """Horizontal-only paddle. ``x``/``y`` is the top-left corner."""

    def __init__(self, x, y, width, height, speed=8):
        _require_positive(width=width, height=height, speed=speed)
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed

    @property
    def center_x(self):
        return self.x + self.width / 2

    def move_left(self, canvas_width):
        self.x -= self.speed
        self.constrain_to_canvas(canvas_width)

    def move_right(self, canvas_width):
        self.x += self.speed
        self.constrain_to_canvas(canvas_width)

    def move_to(self, center_x, canvas_width):
        """Centers the paddle on a pointer coordinate."""
        self.x = center_x - self.width / 2
        self.constrain_to_canvas(canvas_width)

    def constrain_to_canvas(self, canvas_width):
        if self.x < 0:
            self.x = 0
        if self.x + self.width > canvas_width:
            self.x = canvas_width - self.width

    def reset(self, x, y):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Paddle(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class Ball:
    """Moving circle with a velocity vector and a speed limit."""

    INITIAL_DX = 4
    INITIAL_DY = -4

    def __init__(self, x, y, radius, max_speed=8):
        _require_positive(radius=radius, max_speed=max_speed)
        self.x = x
        self.y = y
        self.radius = radius
        self.dx = self.INITIAL_DX
        self.dy = self.INITIAL_DY
        self.max_speed = max_speed

    @property
    def speed(self):
        return math.hypot(self.dx, self.dy)

    def update(self):
        self.x += self.dx
        self.y += self.dy

        # Rescale to exactly max_speed, keeping the direction
        speed = self.speed
        if speed > self.max_speed:
            self.dx = (self.dx / speed) * self.max_speed
            self.dy = (self.dy / speed) * self.max_speed

    def reset(self, x, y):
        self.x = x
        self.y = y
        self.dx = self.INITIAL_DX
        self.dy = self.INITIAL_DY

    def __repr__(self):
        return f"Ball(x={self.x}, y={self.y}, dx={self.dx}, dy={self.dy})"


@dataclass(frozen=True)
class Block:
    x: float
    y: float
    width: float
    height: float
    color: str
    points: int


def hex_to_rgb(color):
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected a #RRGGBB color, got {color!r}")
    try:
        num = int(value, 16)
    except ValueError:
        raise ValueError(f"expected a #RRGGBB color, got {color!r}") from None
    return (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF


def darken_color(color, percent):
    """
    Returns ``color`` (``#RRGGBB``) with every channel lowered by
    ``2.55 * percent`` rounded half up, clamped to the 0..255 range.
    """
    amount = math.floor(2.55 * percent + 0.5)
    r, g, b = (max(0, min(255, c - amount)) for c in hex_to_rgb(color))
    return f"#{r:02x}{g:02x}{b:02x}"
