from __future__ import annotations

import pytest

from vizlab import easing


@pytest.mark.parametrize(
    "curve",
    [easing.linear, easing.elastic_in, easing.elastic_out, easing.elastic_in_out],
)
def test_curves_hit_endpoints(curve) -> None:
    assert curve(0.0) == pytest.approx(0.0, abs=1e-12)
    assert curve(1.0) == pytest.approx(1.0, abs=1e-12)


def test_elastic_out_overshoots_before_settling() -> None:
    samples = [easing.elastic_out(i / 100) for i in range(101)]
    assert max(samples) > 1.0
    assert min(samples) > -1e-9


def test_elastic_in_out_is_half_way_at_midpoint() -> None:
    assert easing.elastic_in_out(0.5) == pytest.approx(0.5)


def test_progress_is_clamped() -> None:
    assert easing.elastic_out(-1.0) == pytest.approx(0.0, abs=1e-12)
    assert easing.elastic_out(2.0) == pytest.approx(1.0, abs=1e-12)
    assert easing.linear(1.5) == 1.0


def test_default_bounce_curve_is_elastic_out() -> None:
    assert easing.ease_elastic is easing.elastic_out


def test_custom_elastic_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        easing.elastic(mode="sideways")


def test_larger_period_oscillates_less() -> None:
    tight = easing.elastic(period=0.3)
    loose = easing.elastic(period=1.0)
    tight_peak = max(tight(i / 200) for i in range(201))
    loose_peak = max(loose(i / 200) for i in range(201))
    assert tight_peak > 1.0
    assert loose_peak >= 1.0
