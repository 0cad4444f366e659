"""Easing curves for scripted transitions.

Each curve maps normalized progress ``t`` in ``[0, 1]`` to eased progress.
The elastic family overshoots before settling and is exactly 0 at ``t=0``
and 1 at ``t=1``.
"""

from __future__ import annotations

import math
from typing import Callable, Literal

Easing = Callable[[float], float]

_TAU = 2 * math.pi


def _clamp(t: float) -> float:
    return min(1.0, max(0.0, float(t)))


def _tpmt(x: float) -> float:
    # 2^-10x rescaled so that it hits exactly 1 at x=0 and 0 at x=1
    return (math.pow(2, -10 * x) - 0.0009765625) * 1.0009775171065494


def linear(t: float) -> float:
    return _clamp(t)


def elastic(
    amplitude: float = 1.0,
    period: float = 0.3,
    mode: Literal["in", "out", "in-out"] = "out",
) -> Easing:
    """Build an elastic easing curve.

    Parameters
    ----------
    amplitude : float
        Overshoot amplitude; values below 1 are raised to 1.
    period : float
        Oscillation period in units of normalized time.
    mode : str
        ``"in"``, ``"out"`` or ``"in-out"``.
    """
    a = max(1.0, amplitude)
    p = period / _TAU
    s = math.asin(1 / a) * p

    def elastic_in(t: float) -> float:
        t = _clamp(t) - 1
        return a * _tpmt(-t) * math.sin((s - t) / p)

    def elastic_out(t: float) -> float:
        t = _clamp(t)
        return 1 - a * _tpmt(t) * math.sin((t + s) / p)

    def elastic_in_out(t: float) -> float:
        t = _clamp(t) * 2 - 1
        if t < 0:
            return a * _tpmt(-t) * math.sin((s - t) / p) / 2
        return (2 - a * _tpmt(t) * math.sin((s + t) / p)) / 2

    curves = {"in": elastic_in, "out": elastic_out, "in-out": elastic_in_out}
    if mode not in curves:
        raise ValueError(f"Invalid mode '{mode}'. Choose 'in', 'out' or 'in-out'.")
    return curves[mode]


elastic_in = elastic(mode="in")
elastic_out = elastic(mode="out")
elastic_in_out = elastic(mode="in-out")

# Default curve for the bounce animation
ease_elastic = elastic_out
