"""Interactive bounce demo: state and event handling."""

from .machine import BounceDemo, CancellationToken, Transition
from .state import PLACEHOLDER_FILL, BounceState, CircleColor, CircleRender

__all__ = [
    "BounceDemo",
    "BounceState",
    "CancellationToken",
    "CircleColor",
    "CircleRender",
    "PLACEHOLDER_FILL",
    "Transition",
]
