"""All Dash callbacks for the vizlab app."""

from __future__ import annotations

import re
from typing import Optional

from dash import Input, Output, callback_context
from dash.exceptions import PreventUpdate

from ..interaction import BounceDemo, CircleRender
from .figures import CIRCLE_TRACE, build_demo_figure
from .layout import status_text

_SHAPE_KEY = re.compile(r"^shapes\[0\]\.(x0|x1)$")


def drag_position(relayout_data: Optional[dict]) -> Optional[float]:
    """Return the new circle centre from a shape-drag relayout, if any."""
    if not relayout_data:
        return None

    edges = {}
    for key, value in relayout_data.items():
        match = _SHAPE_KEY.match(key)
        if match:
            edges[match.group(1)] = value
    if "shapes" in relayout_data and relayout_data["shapes"]:
        shape = relayout_data["shapes"][0]
        edges.setdefault("x0", shape.get("x0"))
        edges.setdefault("x1", shape.get("x1"))

    if edges.get("x0") is None or edges.get("x1") is None:
        return None
    return (float(edges["x0"]) + float(edges["x1"])) / 2


def clicked_circle(click_data: Optional[dict]) -> bool:
    if not click_data:
        return False
    points = click_data.get("points") or []
    return any(p.get("curveNumber") == CIRCLE_TRACE for p in points)


def dispatch_bounce_event(
    demo: BounceDemo,
    prop_id: str,
    *,
    click_data: Optional[dict] = None,
    relayout_data: Optional[dict] = None,
    now: Optional[float] = None,
) -> CircleRender:
    """Route one triggered Dash property to the matching demo operation.

    Raises ``PreventUpdate`` for triggers that do not concern the circle.
    """
    if prop_id == "bounce-btn.n_clicks":
        return demo.replay(now)

    if prop_id == "bounce-graph.clickData":
        if not clicked_circle(click_data):
            raise PreventUpdate
        return demo.toggle()

    if prop_id == "bounce-graph.relayoutData":
        x = drag_position(relayout_data)
        if x is None:
            raise PreventUpdate
        return demo.drag(x)

    if prop_id == "bounce-interval.n_intervals":
        if not demo.animating:
            raise PreventUpdate
        return demo.tick(now)

    raise PreventUpdate


def register(app):
    """Register all callbacks on the Dash app instance."""

    # ------------------------------------------------------------------ #
    #  Bounce demo: click, drag, replay and animation frames
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("bounce-graph", "figure"),
        Output("bounce-interval", "disabled"),
        Output("bounce-status", "children"),
        Input("bounce-btn", "n_clicks"),
        Input("bounce-graph", "clickData"),
        Input("bounce-graph", "relayoutData"),
        Input("bounce-interval", "n_intervals"),
        prevent_initial_call=True,
    )
    def on_bounce_event(n_clicks, click_data, relayout_data, n_intervals):
        from .app import state

        if state is None:
            raise PreventUpdate

        ctx = callback_context
        if not ctx.triggered:
            raise PreventUpdate

        prop_id = ctx.triggered[0]["prop_id"]
        dispatch_bounce_event(
            state.demo,
            prop_id,
            click_data=click_data,
            relayout_data=relayout_data,
        )
        return build_demo_figure(state), not state.demo.animating, status_text(state)
