"""Jittered strip plot: dataset -> scales -> marks -> plotly figure.

:func:`build_strip_layout` is the pure part of the pipeline (apart from the
jitter draws) and works in pixel coordinates. :func:`build_strip_figure`
turns a layout into a plotly figure whose data units are those pixels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .colors import CategoryColorMap, to_rgba_string
from .scales import LinearScale, OrdinalScale, extent

# Horizontal slots for the first three categories
BAND_FRACTIONS = (0.25, 0.5, 0.75)

MARK_WIDTH = 2
MARK_HEIGHT = 15
MARK_OPACITY = 0.5


@dataclass(frozen=True)
class StripMargin:
    top: float = 25
    right: float = 20
    bottom: float = 35
    left: float = 40


@dataclass(frozen=True)
class StripMark:
    """One data row drawn as a thin vertical rectangle (pixel coordinates)."""

    category: Hashable
    value: float
    x: float
    y: float
    fill: str
    jitter: float
    width: float = MARK_WIDTH
    height: float = MARK_HEIGHT

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass
class StripLayout:
    """Everything needed to draw the strip plot."""

    marks: List[StripMark]
    x: OrdinalScale
    y: LinearScale
    color: CategoryColorMap
    width: float
    height: float
    margin: StripMargin
    x_label: str = "Species"
    y_label: str = "↑ Sepal width (cm)"
    x_ticks: List[Tuple[Hashable, float]] = field(default_factory=list)
    y_ticks: List[Tuple[float, float, str]] = field(default_factory=list)

    @property
    def categories(self) -> list:
        return self.x.domain


def build_strip_layout(
    df: pd.DataFrame,
    *,
    category: str = "species",
    value: str = "sepalWidth",
    width: float = 928,
    height: float = 600,
    margin: StripMargin = StripMargin(),
    jitter_width: float = 15,
    random_state: Optional[int] = None,
    x_label: str = "Species",
    y_label: str = "↑ Sepal width (cm)",
) -> StripLayout:
    """Place one mark per row of *df*.

    Parameters
    ----------
    df : pd.DataFrame
        Must have *category* and numeric *value* columns.
    width, height : float
        Chart size in px.
    margin : StripMargin
        Space reserved for the axes.
    jitter_width : float
        Marks are shifted right by a uniform draw from ``[0, jitter_width)``.
    random_state : int, optional
        Seed for the jitter draws.

    Returns
    -------
    StripLayout
        Marks in row order plus the scales and axis ticks derived from them.
    """
    categories = list(pd.unique(df[category])) if len(df) else []
    values = df[value].to_numpy(dtype=float) if len(df) else np.array([])

    x = OrdinalScale(
        categories,
        [margin.left + f * (width - margin.right) for f in BAND_FRACTIONS],
    )
    bounds = extent(values)
    y = LinearScale(
        bounds if bounds is not None else (0.0, 1.0),
        (height - margin.bottom, margin.top),
    ).nice()
    color = CategoryColorMap(categories)

    rng = np.random.default_rng(random_state)
    jitter = rng.uniform(0, jitter_width, size=len(values))

    marks = [
        StripMark(
            category=cat,
            value=float(val),
            x=x(cat) + float(jit) - MARK_WIDTH / 2,
            y=y(val) - MARK_HEIGHT / 2,
            fill=color(cat),
            jitter=float(jit),
        )
        for cat, val, jit in zip(df[category] if len(df) else [], values, jitter)
    ]

    fmt = y.tick_format()
    return StripLayout(
        marks=marks,
        x=x,
        y=y,
        color=color,
        width=width,
        height=height,
        margin=margin,
        x_label=x_label,
        y_label=y_label,
        x_ticks=[(cat, x(cat)) for cat in x.domain],
        y_ticks=[(t, y(t), fmt(t)) for t in y.ticks()],
    )


def build_strip_figure(layout: StripLayout, *, opacity: float = MARK_OPACITY) -> go.Figure:
    """Render *layout* as a fixed-size plotly figure."""
    fig = go.Figure()
    m = layout.margin

    for cat in layout.categories:
        marks = [mk for mk in layout.marks if mk.category == cat]
        if not marks:
            continue
        fig.add_trace(go.Scatter(
            x=[mk.center_x for mk in marks],
            y=[mk.center_y for mk in marks],
            mode="markers",
            name=str(cat),
            marker=dict(
                symbol="line-ns",
                size=MARK_HEIGHT,
                line=dict(width=MARK_WIDTH, color=to_rgba_string(layout.color(cat), opacity)),
            ),
            customdata=[mk.value for mk in marks],
            hovertemplate=f"{cat}<br>%{{customdata}}<extra></extra>",
        ))

    axis_common = dict(
        tickmode="array",
        showline=False,
        showgrid=False,
        zeroline=False,
        ticks="outside",
        ticklen=6,
        fixedrange=True,
    )
    fig.update_layout(
        width=layout.width,
        height=layout.height,
        autosize=False,
        showlegend=False,
        margin=dict(l=m.left, r=m.right, t=m.top, b=m.bottom, pad=0),
        paper_bgcolor="white",
        plot_bgcolor="white",
        font=dict(size=10),
        xaxis=dict(
            range=[m.left, layout.width - m.right],
            tickvals=[pos for _, pos in layout.x_ticks],
            ticktext=[str(cat) for cat, _ in layout.x_ticks],
            **axis_common,
        ),
        yaxis=dict(
            # reversed so that y grows downward like pixel rows
            range=[layout.height - m.bottom, m.top],
            tickvals=[pos for _, pos, _ in layout.y_ticks],
            ticktext=[label for _, _, label in layout.y_ticks],
            **axis_common,
        ),
        annotations=[
            dict(
                x=layout.width, y=layout.height - 4,
                xref="x", yref="y",
                text=layout.x_label,
                showarrow=False, xanchor="right", yanchor="bottom",
            ),
            dict(
                x=0, y=10,
                xref="x", yref="y",
                text=layout.y_label,
                showarrow=False, xanchor="left", yanchor="bottom",
            ),
        ],
    )
    return fig
