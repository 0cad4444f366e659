"""Dash app serving the bounce demo and the strip plot."""

from .app import ServerState, create_app
from .layout import build_solution, build_stripplot

__all__ = ["ServerState", "create_app", "build_solution", "build_stripplot"]
