"""Scales, colours and the strip plot pipeline."""

from .colors import CATEGORY10, CategoryColorMap, hex_to_rgb, to_rgba_string
from .scales import LinearScale, OrdinalScale, extent, ticks
from .stripplot import (
    StripLayout,
    StripMargin,
    StripMark,
    build_strip_figure,
    build_strip_layout,
)

__all__ = [
    "CATEGORY10",
    "CategoryColorMap",
    "hex_to_rgb",
    "to_rgba_string",
    "LinearScale",
    "OrdinalScale",
    "extent",
    "ticks",
    "StripLayout",
    "StripMargin",
    "StripMark",
    "build_strip_figure",
    "build_strip_layout",
]
