from __future__ import annotations

import math

import pytest

from vizlab.interaction import (
    PLACEHOLDER_FILL,
    BounceDemo,
    BounceState,
    CircleColor,
)


@pytest.fixture
def demo() -> BounceDemo:
    return BounceDemo(clock=lambda: 0.0)


def test_initial_state_matches_canvas() -> None:
    state = BounceState()
    assert state.blue_x == 50
    assert state.red_x == 450
    assert state.current_color is CircleColor.RED

    render = state.render()
    assert (render.x, render.y, render.r) == (50, 50, 50)
    assert render.fill == PLACEHOLDER_FILL


def test_toggle_never_moves_and_two_toggles_restore_color(demo: BounceDemo) -> None:
    demo.drag(321)
    start_color = demo.state.current_color

    for _ in range(7):
        render = demo.toggle()
        assert render.x == 321
        assert render.fill == demo.state.current_color.value

    assert demo.state.current_color is start_color.other
    demo.toggle()
    assert demo.state.current_color is start_color


def test_toggle_does_not_touch_remembered_positions(demo: BounceDemo) -> None:
    demo.toggle()
    assert demo.state.red_x == 450
    assert demo.state.blue_x == 50


def test_drag_updates_only_current_color_slot(demo: BounceDemo) -> None:
    render = demo.drag(200)
    assert render.x == 200
    assert render.fill == "red"
    assert demo.state.red_x == 200
    assert demo.state.blue_x == 50

    demo.toggle()
    render = demo.drag(75)
    assert render.fill == "blue"
    assert demo.state.blue_x == 75
    assert demo.state.red_x == 200
    assert demo.state.current_color is CircleColor.BLUE


def test_drag_rejects_non_finite_positions(demo: BounceDemo) -> None:
    with pytest.raises(ValueError):
        demo.drag(math.nan)
    with pytest.raises(ValueError):
        demo.drag(math.inf)


def test_replay_cycles_red_then_blue_indefinitely() -> None:
    demo = BounceDemo()
    legs = []
    demo.on_leg_end(lambda t: legs.append((t.leg, t.end_x)))

    render = demo.replay(now=0)
    assert render.fill == PLACEHOLDER_FILL
    assert demo.animating

    assert demo.tick(now=2000).x == pytest.approx(450)
    assert demo.tick(now=4000).x == pytest.approx(50)
    assert demo.tick(now=6000).x == pytest.approx(450)
    assert legs == [(1, 450), (2, 50), (1, 450)]

    assert demo.animating
    assert demo.render().fill == PLACEHOLDER_FILL


def test_replay_uses_remembered_positions() -> None:
    demo = BounceDemo()
    demo.drag(300)          # red slot
    demo.toggle()
    demo.drag(120)          # blue slot

    demo.replay(now=0)
    assert demo.tick(now=2000).x == pytest.approx(300)
    assert demo.tick(now=4000).x == pytest.approx(120)


def test_tick_catches_up_over_several_legs() -> None:
    demo = BounceDemo()
    legs = []
    demo.on_leg_end(lambda t: legs.append(t.leg))

    demo.replay(now=0)
    demo.tick(now=9000)
    assert legs == [1, 2, 1, 2]
    transition = demo.active_transition
    assert transition.leg == 1
    assert transition.start_ms == 8000


def test_first_leg_starts_from_current_position() -> None:
    demo = BounceDemo()
    demo.drag(200)
    demo.replay(now=0)
    transition = demo.active_transition
    assert transition.start_x == 200
    assert transition.end_x == 200  # the red slot was just set by the drag


def test_mid_leg_position_follows_the_easing() -> None:
    demo = BounceDemo(easing=lambda t: t)
    demo.replay(now=0)
    assert demo.tick(now=1000).x == pytest.approx(250)
    assert demo.tick(now=3000).x == pytest.approx(250)


def test_toggle_during_replay_wins() -> None:
    demo = BounceDemo()
    demo.replay(now=0)
    x_mid = demo.tick(now=500).x

    render = demo.toggle()
    assert render.x == x_mid
    assert render.fill == "blue"
    assert not demo.animating

    later = demo.tick(now=3000)
    assert later.x == x_mid
    assert later.fill == "blue"


def test_drag_during_replay_wins() -> None:
    demo = BounceDemo()
    demo.replay(now=0)
    demo.tick(now=700)

    render = demo.drag(123)
    assert render.x == 123
    assert render.fill == "red"
    assert demo.state.red_x == 123

    later = demo.tick(now=5000)
    assert later.x == 123
    assert not demo.animating


def test_replay_cancels_previous_chain() -> None:
    demo = BounceDemo()
    demo.replay(now=0)
    first = demo.active_transition

    demo.replay(now=1000)
    second = demo.active_transition
    assert first.token.cancelled
    assert not second.token.cancelled
    assert second.start_ms == 1000

    legs = []
    demo.on_leg_end(lambda t: legs.append(t.start_ms))
    demo.tick(now=3000)
    assert legs == [1000]


def test_listener_can_interrupt_the_chain() -> None:
    demo = BounceDemo()

    @demo.on_leg_end
    def stop(transition) -> None:
        demo.interrupt()

    demo.replay(now=0)
    render = demo.tick(now=10_000)
    assert render.x == pytest.approx(450)
    assert not demo.animating


def test_interrupt_is_idempotent(demo: BounceDemo) -> None:
    demo.interrupt()
    demo.replay()
    demo.interrupt()
    demo.interrupt()
    assert not demo.animating
    assert demo.active_transition is None


def test_tick_without_animation_is_a_no_op(demo: BounceDemo) -> None:
    before = demo.render()
    assert demo.tick() == before


def test_clock_is_used_when_now_is_omitted() -> None:
    times = iter([0.0, 2000.0])
    demo = BounceDemo(clock=lambda: next(times))
    demo.replay()
    assert demo.tick().x == pytest.approx(450)


def test_duration_must_be_positive() -> None:
    with pytest.raises(ValueError):
        BounceDemo(duration_ms=0)


def test_independent_instances_do_not_share_state() -> None:
    a = BounceDemo()
    b = BounceDemo()
    a.drag(222)
    assert b.state.red_x == 450
    assert b.render().x == 50


def test_tick_ignores_a_chain_cancelled_from_outside() -> None:
    demo = BounceDemo()
    demo.replay(now=0)
    x = demo.tick(now=500).x

    demo.active_transition.token.cancel()
    render = demo.tick(now=10_000)
    assert render.x == x
    assert not demo.animating
