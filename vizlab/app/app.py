"""Dash app factory and server-side state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from ..interaction import BounceDemo
from ..visualization.stripplot import StripLayout, build_strip_layout
from . import theme


@dataclass
class ServerState:
    """Mutable server-side state for the single-user Dash app."""

    data: pd.DataFrame
    random_state: Optional[int] = None
    demo: BounceDemo = field(default_factory=BounceDemo)
    strip: StripLayout = field(init=False)
    legs_completed: int = 0

    def __post_init__(self) -> None:
        self.strip = build_strip_layout(self.data, random_state=self.random_state)
        self.demo.on_leg_end(self._count_leg)

    def _count_leg(self, transition) -> None:
        self.legs_completed += 1


# Module-level singleton, set by create_app()
state: ServerState | None = None


def create_app(
    df: pd.DataFrame,
    *,
    random_state: Optional[int] = None,
    frame_interval_ms: int = theme.FRAME_INTERVAL_MS,
) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    df : pd.DataFrame
        Strip plot data, as returned by :func:`vizlab.io.load_dataset`.
    random_state : int, optional
        Seed for the strip plot jitter.
    frame_interval_ms : int
        Animation frame period while a bounce is running.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global state
    state = ServerState(data=df, random_state=random_state)

    app = dash.Dash(__name__, title="vizlab")
    app.layout = build_layout(state, frame_interval_ms=frame_interval_ms)
    callbacks.register(app)

    return app
