from __future__ import annotations

import pytest

from endless_runner.difficulty import (
    DifficultyController,
    DifficultyCurve,
    spawn_rate_bounds,
    speed_ratio,
)


def test_speed_ratio_is_clamped() -> None:
    assert speed_ratio(5.0, 20.0) == pytest.approx(0.25)
    assert speed_ratio(30.0, 20.0) == 1.0
    assert speed_ratio(-1.0, 20.0) == 0.0
    assert speed_ratio(5.0, 0.0) == 0.0


def test_bounds_interpolate_with_speed_and_grow_with_phase() -> None:
    assert spawn_rate_bounds(1, 0.0, 0.3, 2.0, 0.2) == pytest.approx((0.3, 0.3))
    assert spawn_rate_bounds(1, 1.0, 0.3, 2.0, 0.2) == pytest.approx((0.3, 2.0))
    assert spawn_rate_bounds(3, 0.5, 0.3, 2.0, 0.2) == pytest.approx((0.3, 1.15 * 1.4))


def test_ceiling_is_non_decreasing_in_phase() -> None:
    for ratio in (0.0, 0.3, 1.0):
        ceilings = [spawn_rate_bounds(p, ratio, 0.2, 1.0, 0.1)[1] for p in range(1, 12)]
        assert ceilings == sorted(ceilings)


def test_repeated_phase_change_is_idempotent() -> None:
    once = DifficultyCurve()
    twice = DifficultyCurve()
    for curve in (once, twice):
        curve.advance(0.5, 10.0, 20.0)
    once.on_phase_change(3)
    twice.on_phase_change(3)
    twice.on_phase_change(3)

    assert once.spawn_rate_bounds(0.3, 2.0, 0.2) == twice.spawn_rate_bounds(0.3, 2.0, 0.2)


def test_curve_adopts_latest_phase_even_if_lower() -> None:
    curve = DifficultyCurve()
    curve.on_phase_change(4)
    curve.on_phase_change(2)
    assert curve.phase == 2


def test_curve_tracks_elapsed_time_and_speed() -> None:
    curve = DifficultyCurve()
    curve.advance(0.25, 5.0, 20.0)
    curve.advance(0.25, 10.0, 20.0)
    assert curve.state.elapsed_time == pytest.approx(0.5)
    assert curve.state.speed_ratio == pytest.approx(0.5)


class _Recorder:
    def __init__(self) -> None:
        self.phases: list[int] = []

    def on_difficulty_phase_change(self, new_phase: int) -> None:
        self.phases.append(new_phase)


def test_controller_advances_phase_on_timer_and_broadcasts_in_order() -> None:
    ctrl = DifficultyController(phase_duration=10.0, score_multiplier_per_phase=1.1)
    first, second = _Recorder(), _Recorder()
    ctrl.subscribe(first)
    ctrl.subscribe(second)

    assert not ctrl.update(9.0)
    assert ctrl.update(1.0)
    assert ctrl.phase == 2
    assert ctrl.phase_timer == 0.0
    assert ctrl.score_multiplier == pytest.approx(1.1)
    assert first.phases == [2]
    assert second.phases == [2]


def test_controller_is_frozen_after_game_over_and_reset_rebroadcasts() -> None:
    ctrl = DifficultyController(phase_duration=1.0)
    listener = _Recorder()
    ctrl.subscribe(listener)
    ctrl.update(1.0)
    ctrl.game_over = True
    assert not ctrl.update(5.0)
    assert ctrl.phase == 2

    ctrl.reset()
    assert ctrl.phase == 1
    assert ctrl.score_multiplier == 1.0
    assert listener.phases == [2, 1]
