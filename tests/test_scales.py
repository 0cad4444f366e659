from __future__ import annotations

import math

import pytest

from vizlab.visualization.scales import LinearScale, OrdinalScale, extent, ticks


def test_ticks_use_round_steps() -> None:
    assert ticks(0, 1, 5) == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])
    assert ticks(0, 100, 10) == pytest.approx(list(range(0, 101, 10)))
    assert ticks(2, 4.4, 10) == pytest.approx([2 + 0.2 * i for i in range(13)])


def test_ticks_reverse_and_degenerate_inputs() -> None:
    assert ticks(10, 0, 5) == pytest.approx([10, 8, 6, 4, 2, 0])
    assert ticks(3, 3, 10) == [3.0]
    assert ticks(0, 1, 0) == []


def test_ticks_avoid_binary_rounding_noise() -> None:
    values = ticks(0, 1, 10)
    assert values[3] == 0.3


def test_linear_scale_maps_and_inverts() -> None:
    y = LinearScale((2, 4.4), (565, 25))
    assert y(2) == pytest.approx(565)
    assert y(4.4) == pytest.approx(25)
    assert y(3.2) == pytest.approx(295)
    assert y.invert(295) == pytest.approx(3.2)


def test_nice_extends_domain_outward() -> None:
    assert LinearScale((0.3, 9.7)).nice().domain == pytest.approx((0, 10))
    assert LinearScale((9.7, 0.3)).nice().domain == pytest.approx((10, 0))
    assert LinearScale((-13, 87)).nice().domain == pytest.approx((-20, 90))


def test_nice_keeps_range_and_returns_new_scale() -> None:
    scale = LinearScale((0.3, 9.7), (100, 0))
    niced = scale.nice()
    assert niced is not scale
    assert scale.domain == (0.3, 9.7)
    assert niced.range == (100, 0)


def test_nice_on_flat_domain_is_unchanged() -> None:
    assert LinearScale((5, 5)).nice().domain == (5, 5)


def test_tick_format_precision_follows_step() -> None:
    assert LinearScale((0, 1)).tick_format()(0.5) == "0.5"
    assert LinearScale((2, 4.4)).tick_format()(3) == "3.0"
    assert LinearScale((0, 5000)).tick_format()(1000) == "1,000"
    assert LinearScale((0, 0.05)).tick_format()(0.01) == "0.010"


def test_flat_domain_maps_to_range_midpoint() -> None:
    assert LinearScale((1, 1), (0, 10))(1) == 5


def test_linear_scale_requires_pairs() -> None:
    with pytest.raises(ValueError):
        LinearScale((0, 1, 2))


def test_ordinal_scale_keeps_first_seen_order_and_cycles() -> None:
    scale = OrdinalScale(["b", "a", "b", "c", "d"], [1, 2, 3])
    assert scale.domain == ["b", "a", "c", "d"]
    assert [scale(v) for v in ["b", "a", "c", "d"]] == [1, 2, 3, 1]


def test_ordinal_scale_grows_domain_on_lookup() -> None:
    scale = OrdinalScale([], ["x", "y"])
    assert scale("q") == "x"
    assert scale("r") == "y"
    assert scale("q") == "x"
    assert scale.domain == ["q", "r"]


def test_ordinal_scale_requires_range() -> None:
    with pytest.raises(ValueError):
        OrdinalScale(["a"], [])


def test_extent_ignores_nan() -> None:
    assert extent([3, math.nan, 1, 2]) == (1, 3)
    assert extent([]) is None
    assert extent([math.nan]) is None
