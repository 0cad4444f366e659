"""Event handling for the bounce demo: toggle, drag and the scripted replay.

The demo is driven by discrete events (click, drag movement, animation
frame). Every event runs to completion before the next one, so the only
coordination needed is cancellation: a user event or a new replay cancels
the token of the running chain, and ``tick`` never advances a cancelled
chain.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..easing import Easing, ease_elastic
from .state import PLACEHOLDER_FILL, BounceState, CircleRender

LegListener = Callable[["Transition"], None]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class CancellationToken:
    """Shared flag telling an animation chain to stop."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


@dataclass
class Transition:
    """One eased leg of horizontal motion."""

    start_x: float
    end_x: float
    start_ms: float
    duration_ms: float
    easing: Easing
    token: CancellationToken
    leg: int = 1

    @property
    def end_ms(self) -> float:
        return self.start_ms + self.duration_ms

    def progress(self, now: float) -> float:
        return min(1.0, max(0.0, (now - self.start_ms) / self.duration_ms))

    def finished(self, now: float) -> bool:
        return now >= self.end_ms

    def value_at(self, now: float) -> float:
        eased = self.easing(self.progress(now))
        return self.start_x + (self.end_x - self.start_x) * eased


class BounceDemo:
    """Click/drag/replay state machine for a single circle.

    Parameters
    ----------
    state : BounceState, optional
        State to drive; a fresh default state when omitted.
    duration_ms : float
        Length of each replay leg.
    easing : callable
        Easing curve applied to both legs.
    clock : callable, optional
        Returns the current time in milliseconds. ``replay`` and ``tick``
        also accept an explicit ``now``; toggle and drag are timeless.
    """

    def __init__(
        self,
        state: Optional[BounceState] = None,
        *,
        duration_ms: float = 2000,
        easing: Easing = ease_elastic,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self.state = state if state is not None else BounceState()
        self.duration_ms = duration_ms
        self.easing = easing
        self._clock = clock or _monotonic_ms
        self._token: Optional[CancellationToken] = None
        self._active: Optional[Transition] = None
        self._leg_listeners: List[LegListener] = []

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    @property
    def animating(self) -> bool:
        return self._active is not None and not self._active.token.cancelled

    @property
    def active_transition(self) -> Optional[Transition]:
        return self._active if self.animating else None

    def render(self) -> CircleRender:
        return self.state.render()

    def on_leg_end(self, listener: LegListener) -> LegListener:
        """Register *listener* to be called with each completed leg."""
        self._leg_listeners.append(listener)
        return listener

    # ------------------------------------------------------------------ #
    #  Events
    # ------------------------------------------------------------------ #

    def interrupt(self) -> None:
        """Cancel the running chain, leaving the circle where it is."""
        if self._token is not None:
            self._token.cancel()
        self._token = None
        self._active = None

    def toggle(self) -> CircleRender:
        """Flip the colour in place."""
        self.interrupt()
        s = self.state
        s.current_color = s.current_color.other
        s.fill = s.current_color.value
        return s.render()

    def drag(self, x: float) -> CircleRender:
        """Move the circle to *x* and remember it for the current colour."""
        x = float(x)
        if not math.isfinite(x):
            raise ValueError(f"Drag position must be finite, got {x}")
        self.interrupt()
        s = self.state
        s.x = x
        s.fill = s.current_color.value
        s.remember(s.current_color, x)
        return s.render()

    def replay(self, now: Optional[float] = None) -> CircleRender:
        """Start the endless red -> blue bounce, replacing any running one."""
        now = self._now(now)
        self.interrupt()
        self._token = CancellationToken()
        self._start_cycle(now)
        return self.state.render()

    def tick(self, now: Optional[float] = None) -> CircleRender:
        """Advance the running chain to *now*."""
        now = self._now(now)
        while True:
            done = self._active
            if done is None or done.token.cancelled or not done.finished(now):
                break
            self.state.x = done.end_x
            for listener in list(self._leg_listeners):
                listener(done)
            if self._active is not done:
                # a listener interrupted or restarted the chain
                continue
            if done.leg == 1:
                self._active = self._leg(2, done.end_ms)
            else:
                self._start_cycle(done.end_ms)

        active = self._active
        if active is not None and not active.token.cancelled:
            self.state.x = active.value_at(now)
        return self.state.render()

    # ------------------------------------------------------------------ #
    #  Internals
    # ------------------------------------------------------------------ #

    def _now(self, now: Optional[float]) -> float:
        return self._clock() if now is None else now

    def _start_cycle(self, start_ms: float) -> None:
        self.state.fill = PLACEHOLDER_FILL
        self._active = self._leg(1, start_ms)

    def _leg(self, leg: int, start_ms: float) -> Transition:
        s = self.state
        target = s.red_x if leg == 1 else s.blue_x
        return Transition(
            start_x=s.x,
            end_x=target,
            start_ms=start_ms,
            duration_ms=self.duration_ms,
            easing=self.easing,
            token=self._token,
            leg=leg,
        )
