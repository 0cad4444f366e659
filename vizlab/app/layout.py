"""Dash layout: the bounce demo above the strip plot.

``build_solution`` and ``build_stripplot`` return the two self-contained
components so a host page can embed either one on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from . import theme
from .figures import build_demo_figure, build_stripplot_figure

if TYPE_CHECKING:
    from .app import ServerState


def build_layout(state: ServerState, *, frame_interval_ms: int = theme.FRAME_INTERVAL_MS) -> html.Div:
    """Return the complete app layout."""
    return html.Div(
        className="app-container",
        style={"fontFamily": theme.FONT_STACK, "color": theme.TEXT, "padding": "16px"},
        children=[
            build_solution(state, frame_interval_ms=frame_interval_ms),
            html.Hr(),
            build_stripplot(state),
        ],
    )


def build_solution(state: ServerState, *, frame_interval_ms: int = theme.FRAME_INTERVAL_MS) -> html.Div:
    """The bounce demo: replay button, draggable circle, frame timer."""
    return html.Div(
        id="solution",
        children=[
            html.Button(
                "Bounce!",
                id="bounce-btn",
                n_clicks=0,
                style={"marginBottom": theme.BUTTON_MARGIN_BOTTOM},
            ),
            dcc.Graph(
                id="bounce-graph",
                figure=build_demo_figure(state),
                config={
                    "displayModeBar": False,
                    "scrollZoom": False,
                    "edits": {"shapePosition": True},
                },
            ),
            html.Div(
                id="bounce-status",
                style={"color": theme.MUTED, "fontSize": "11px"},
                children=status_text(state),
            ),
            dcc.Interval(
                id="bounce-interval",
                interval=frame_interval_ms,
                n_intervals=0,
                disabled=True,
            ),
        ],
    )


def build_stripplot(state: ServerState) -> html.Div:
    """The static strip plot."""
    return html.Div(
        id="stripplot",
        children=[
            dcc.Graph(
                id="strip-graph",
                figure=build_stripplot_figure(state),
                config={"displayModeBar": False, "staticPlot": False},
            ),
        ],
    )


def status_text(state: ServerState) -> str:
    demo = state.demo
    if demo.animating:
        return f"bouncing, {state.legs_completed} legs completed"
    return f"color: {demo.state.current_color.value}"
