import pytest
from coulomb_sim.clock import SimulationClock


def test_initial_state():
    clock = SimulationClock(base_tick_duration=0.02)
    assert clock.time_scale == 1.0
    assert clock.saved_time_scale == 0.0
    assert not clock.is_paused
    assert clock.effective_tick_duration == 0.02
    assert clock.display_text == "Time Scale: 1.0"


def test_halve_then_double_is_exact():
    """Scaling by powers of two round-trips exactly."""
    clock = SimulationClock(base_tick_duration=0.02)
    original = clock.effective_tick_duration

    clock.halve()
    assert clock.effective_tick_duration == 0.01
    clock.double()
    assert clock.effective_tick_duration == original

    for _ in range(30):
        clock.halve()
    for _ in range(30):
        clock.double()
    assert clock.time_scale == 1.0
    assert clock.effective_tick_duration == original


def test_no_clamping():
    clock = SimulationClock()
    for _ in range(40):
        clock.double()
    assert clock.time_scale == 2.0 ** 40


def test_toggle_pause_twice_restores_scale():
    clock = SimulationClock(base_tick_duration=0.02)
    clock.halve()
    clock.halve()
    scale = clock.time_scale

    clock.toggle_pause()
    assert clock.is_paused
    assert clock.time_scale == 0.0
    assert clock.saved_time_scale == scale
    assert clock.effective_tick_duration == 0.0

    clock.toggle_pause()
    assert not clock.is_paused
    assert clock.time_scale == scale
    assert clock.saved_time_scale == 0.0
    assert clock.effective_tick_duration == 0.02 * scale


def test_rescale_while_paused_keeps_saved_scale():
    """Halving or doubling while paused changes nothing; resume restores the paused-at scale."""
    clock = SimulationClock(base_tick_duration=0.02)
    clock.halve()
    seen = []
    clock.subscribe(lambda c: seen.append(c.effective_tick_duration))
    clock.toggle_pause()

    clock.double()
    clock.double()
    clock.halve()

    assert clock.time_scale == 0.0
    assert clock.saved_time_scale == 0.5
    assert clock.effective_tick_duration == 0.0
    assert seen == [0.0, 0.0, 0.0, 0.0]

    clock.toggle_pause()
    assert clock.time_scale == 0.5
    assert clock.effective_tick_duration == 0.01


def test_listeners_get_display_updates():
    clock = SimulationClock()
    seen = []
    clock.subscribe(lambda c: seen.append(c.display_text))

    clock.double()
    clock.toggle_pause()
    clock.toggle_pause()
    clock.halve()

    assert seen == [
        "Time Scale: 2.0",
        "Time Scale: 0.0",
        "Time Scale: 2.0",
        "Time Scale: 1.0",
    ]


def test_base_tick_must_be_positive():
    with pytest.raises(ValueError):
        SimulationClock(base_tick_duration=0.0)
