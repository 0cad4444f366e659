"""Categorical colour mapping for data marks."""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence, Tuple

import plotly.express as px
from matplotlib import colors as mcolors

from .scales import OrdinalScale

# Ten-colour qualitative scheme (#1f77b4, #ff7f0e, ...)
CATEGORY10: list[str] = [c.lower() for c in px.colors.qualitative.D3]


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert a colour string (e.g. ``'#1f77b4'`` or ``'red'``) to ``(R, G, B)``."""
    try:
        rgb_float = mcolors.to_rgb(hex_color)
        return tuple(int(round(c * 255)) for c in rgb_float)
    except ValueError:
        return (0, 0, 0)


def to_rgba_string(color: str, alpha: float = 1.0) -> str:
    """Return a CSS ``rgba(...)`` string for *color* with opacity *alpha*."""
    r, g, b = hex_to_rgb(color)
    return f"rgba({r},{g},{b},{alpha:g})"


class CategoryColorMap:
    """Assigns palette colours to category labels in first-seen order.

    Labels keep their colour across calls; the palette cycles after its
    last entry.
    """

    def __init__(
        self,
        categories: Iterable[Hashable] = (),
        palette: Sequence[str] = CATEGORY10,
    ) -> None:
        self._scale = OrdinalScale(categories, palette)

    @property
    def mapping(self) -> dict:
        """Return a copy of the current label -> colour mapping."""
        return {label: self._scale(label) for label in self._scale.domain}

    @property
    def scale(self) -> OrdinalScale:
        return self._scale

    def __call__(self, label: Hashable) -> str:
        return self._scale(label)
