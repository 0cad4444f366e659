"""Build the plotly figures shown by the app."""

from __future__ import annotations

from typing import TYPE_CHECKING

import plotly.graph_objects as go

from ..interaction import CircleRender
from ..visualization.colors import to_rgba_string
from ..visualization.stripplot import build_strip_figure
from . import theme

if TYPE_CHECKING:
    from .app import ServerState

# Room on each side of the canvas for the elastic overshoot
OVERFLOW_PX = 160

# Width of the draggable rim around the circle
RIM_WIDTH = 8

# Trace index of the clickable circle body
CIRCLE_TRACE = 0


def build_bounce_figure(
    render: CircleRender,
    *,
    width: float = 500,
    height: float = 100,
) -> go.Figure:
    """Draw the bounce circle in a fixed, pixel-unit canvas.

    The filled body is a marker trace (clicks land on it); the rim is an
    editable shape with a transparent fill, so only its outline can be
    dragged and the body stays clickable.
    """
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[render.x],
        y=[render.y],
        mode="markers",
        name="circle",
        showlegend=False,
        marker=dict(
            size=2 * render.r,
            color=render.fill,
            line=dict(width=1, color=theme.CIRCLE_OUTLINE),
        ),
        # "none" keeps click events while hiding the hover label
        hoverinfo="none",
    ))

    fig.update_layout(
        width=width + 2 * OVERFLOW_PX,
        height=height,
        autosize=False,
        margin=dict(l=0, r=0, t=0, b=0, pad=0),
        paper_bgcolor=theme.BACKGROUND,
        plot_bgcolor=theme.BACKGROUND,
        dragmode=False,
        hovermode="closest",
        showlegend=False,
        xaxis=dict(
            range=[-OVERFLOW_PX, width + OVERFLOW_PX],
            visible=False,
            fixedrange=True,
        ),
        yaxis=dict(
            range=[height, 0],
            visible=False,
            fixedrange=True,
        ),
        shapes=[
            dict(
                type="circle",
                xref="x",
                yref="y",
                x0=render.x - render.r,
                x1=render.x + render.r,
                y0=render.y - render.r,
                y1=render.y + render.r,
                fillcolor="rgba(0,0,0,0)",
                line=dict(width=RIM_WIDTH, color=to_rgba_string(theme.MUTED, 0.25)),
                layer="above",
            ),
        ],
    )
    return fig


def build_demo_figure(state: ServerState) -> go.Figure:
    s = state.demo.state
    return build_bounce_figure(state.demo.render(), width=s.width, height=s.height)


def build_stripplot_figure(state: ServerState) -> go.Figure:
    return build_strip_figure(state.strip)
