"""Mutable state of the bounce demo, separated from the event handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Neutral fill shown before the first interaction and during the scripted bounce
PLACEHOLDER_FILL = "white"


class CircleColor(str, Enum):
    RED = "red"
    BLUE = "blue"

    @property
    def other(self) -> "CircleColor":
        return CircleColor.BLUE if self is CircleColor.RED else CircleColor.RED


@dataclass(frozen=True)
class CircleRender:
    """What the host paints: centre, radius and fill of the circle."""

    x: float
    y: float
    r: float
    fill: str


@dataclass
class BounceState:
    """Pure-data state for one bounce demo instance.

    Blue starts at the left edge and red at the right edge, each inset by
    the radius. The circle itself starts at the left edge with the
    placeholder fill.
    """

    width: float = 500
    height: float = 100
    radius: float = 50
    current_color: CircleColor = CircleColor.RED
    blue_x: float = field(init=False)
    red_x: float = field(init=False)
    x: float = field(init=False)
    fill: str = PLACEHOLDER_FILL

    def __post_init__(self) -> None:
        self.blue_x = self.radius
        self.red_x = self.width - self.radius
        self.x = self.radius

    @property
    def cy(self) -> float:
        return self.height * 0.5

    def remembered_x(self, color: CircleColor) -> float:
        return self.red_x if color is CircleColor.RED else self.blue_x

    def remember(self, color: CircleColor, x: float) -> None:
        if color is CircleColor.RED:
            self.red_x = x
        else:
            self.blue_x = x

    def render(self) -> CircleRender:
        return CircleRender(x=self.x, y=self.cy, r=self.radius, fill=self.fill)
