"""vizlab: a bouncing-circle interaction demo and a jittered strip plot."""

from .easing import ease_elastic, elastic, elastic_in, elastic_in_out, elastic_out, linear
from .io import IRIS_PATH, load_dataset, prepare_strip_dataframe
from .interaction import (
    PLACEHOLDER_FILL,
    BounceDemo,
    BounceState,
    CancellationToken,
    CircleColor,
    CircleRender,
    Transition,
)
from .visualization import (
    CATEGORY10,
    CategoryColorMap,
    LinearScale,
    OrdinalScale,
    StripLayout,
    StripMargin,
    StripMark,
    build_strip_figure,
    build_strip_layout,
)

__all__ = [
    # easing
    "ease_elastic",
    "elastic",
    "elastic_in",
    "elastic_out",
    "elastic_in_out",
    "linear",
    # io
    "IRIS_PATH",
    "load_dataset",
    "prepare_strip_dataframe",
    # interaction
    "BounceDemo",
    "BounceState",
    "CancellationToken",
    "CircleColor",
    "CircleRender",
    "PLACEHOLDER_FILL",
    "Transition",
    # visualization
    "CATEGORY10",
    "CategoryColorMap",
    "LinearScale",
    "OrdinalScale",
    "StripLayout",
    "StripMargin",
    "StripMark",
    "build_strip_figure",
    "build_strip_layout",
]
