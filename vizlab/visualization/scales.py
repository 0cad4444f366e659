"""Ordinal and linear scales with nice domains and 1-2-5 ticks."""

from __future__ import annotations

import math
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def extent(values: Iterable[float]) -> Optional[Tuple[float, float]]:
    """Return ``(min, max)`` of *values* ignoring NaN, or ``None`` if empty."""
    arr = np.asarray(list(values), dtype=float)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        return None
    return float(arr.min()), float(arr.max())


def _tick_bounds(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    """Integer bounds and increment for ticks between *start* and *stop*.

    A negative increment ``-k`` means ticks are ``i / k`` (avoids binary
    rounding noise for steps below 1); a positive one means ``i * inc``.
    """
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_bounds(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    return _tick_bounds(start, stop, count)[2]


def tick_step(start: float, stop: float, count: float) -> float:
    reverse = stop < start
    inc = tick_increment(stop, start, count) if reverse else tick_increment(start, stop, count)
    step = -1 / inc if inc < 0 else inc
    return -step if reverse else step


def ticks(start: float, stop: float, count: float = 10) -> List[float]:
    """Evenly spaced, human-friendly values between *start* and *stop*."""
    if not count > 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    i1, i2, inc = _tick_bounds(stop, start, count) if reverse else _tick_bounds(start, stop, count)
    if not i2 >= i1:
        return []
    n = i2 - i1 + 1
    if reverse:
        idx = [i2 - i for i in range(n)]
    else:
        idx = [i1 + i for i in range(n)]
    if inc < 0:
        return [i / -inc for i in idx]
    return [i * inc for i in idx]


class OrdinalScale:
    """Maps discrete values to a discrete range.

    The domain keeps first-seen order. Values not yet in the domain are
    appended on lookup, and the range cycles when the domain is longer.
    """

    def __init__(self, domain: Iterable[Hashable], range: Sequence) -> None:
        if len(range) == 0:
            raise ValueError("OrdinalScale range must not be empty")
        self._index: dict = {}
        self._domain: list = []
        for value in domain:
            if value not in self._index:
                self._index[value] = len(self._domain)
                self._domain.append(value)
        self._range = list(range)

    @property
    def domain(self) -> list:
        return list(self._domain)

    @property
    def range(self) -> list:
        return list(self._range)

    def __call__(self, value: Hashable):
        i = self._index.get(value)
        if i is None:
            i = self._index[value] = len(self._domain)
            self._domain.append(value)
        return self._range[i % len(self._range)]

    def __repr__(self) -> str:
        return f"<OrdinalScale domain={self._domain!r} range={self._range!r}>"


class LinearScale:
    """Continuous linear map from a two-value domain to a two-value range."""

    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range: Sequence[float] = (0.0, 1.0),
    ) -> None:
        if len(domain) != 2 or len(range) != 2:
            raise ValueError("LinearScale domain and range must have two values")
        self.domain: Tuple[float, float] = (float(domain[0]), float(domain[1]))
        self.range: Tuple[float, float] = (float(range[0]), float(range[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (float(value) - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (float(pixel) - r0) / (r1 - r0) * (d1 - d0)

    def nice(self, count: int = 10) -> "LinearScale":
        """Return a copy whose domain is extended outward to round values."""
        start, stop = self.domain
        reverse = stop < start
        if reverse:
            start, stop = stop, start
        prestep = None
        for _ in range(10):
            if stop == start:
                break
            step = tick_increment(start, stop, count)
            if step == prestep:
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step
        domain = (stop, start) if reverse else (start, stop)
        return LinearScale(domain, self.range)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10):
        """Return a formatter with just enough decimals for the tick step."""
        d0, d1 = self.domain
        if d0 == d1:
            precision = 0
        else:
            step = abs(tick_step(d0, d1, count))
            precision = max(0, -int(math.floor(math.log10(step))))
        return lambda value: f"{value:,.{precision}f}"

    def __repr__(self) -> str:
        return f"<LinearScale domain={self.domain} range={self.range}>"
