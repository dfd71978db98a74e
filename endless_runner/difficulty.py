"""Difficulty progression: speed-driven spawn-rate curve and the time-based phase driver."""

from __future__ import annotations

from typing import Protocol

from .constants import PHASE_DURATION, SCORE_MULTIPLIER_PER_PHASE
from .models import DifficultyState


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def speed_ratio(current_speed: float, max_speed: float) -> float:
    """current / max clamped to [0, 1]; a non-positive max counts as standing still."""
    if max_speed <= 0:
        return 0.0
    return clamp(current_speed / max_speed, 0.0, 1.0)


def spawn_rate_bounds(phase: int, ratio: float, min_base: float, max_base: float,
                      increase_per_phase: float) -> tuple[float, float]:
    """
    Spawn interval bounds (seconds) for the given phase and speed ratio.

    The ceiling interpolates between ``min_base`` and ``max_base`` with the
    speed ratio, then grows by ``increase_per_phase`` for every phase past
    the first. The floor is always ``min_base``.
    """
    max_rate = lerp(min_base, max_base, ratio)
    max_rate *= 1.0 + (phase - 1) * increase_per_phase
    return min_base, max_rate


class DifficultyCurve:
    """
    Per-spawner view of difficulty.

    Time and speed are pushed in every tick through ``advance``; the phase is
    only ever adopted from ``on_phase_change`` and never decided here.
    """

    def __init__(self) -> None:
        self.state = DifficultyState()

    @property
    def phase(self) -> int:
        return self.state.phase

    def on_phase_change(self, new_phase: int) -> None:
        # Latest value wins, no ordering checks.
        self.state.phase = new_phase

    def advance(self, dt: float, current_speed: float, max_speed: float) -> None:
        if dt > 0:
            self.state.elapsed_time += dt
        self.state.speed_ratio = speed_ratio(current_speed, max_speed)

    def spawn_rate_bounds(self, min_base: float, max_base: float,
                          increase_per_phase: float) -> tuple[float, float]:
        return spawn_rate_bounds(self.state.phase, self.state.speed_ratio,
                                 min_base, max_base, increase_per_phase)

    def reset(self) -> None:
        self.state = DifficultyState()


class PhaseListener(Protocol):
    def on_difficulty_phase_change(self, new_phase: int) -> None: ...


class DifficultyController:
    """
    Advances the difficulty phase on a fixed timer and broadcasts it.

    Listeners are notified synchronously, in subscription order, within the
    ``update`` call that crossed the phase boundary.
    """

    def __init__(self, phase_duration: float = PHASE_DURATION,
                 score_multiplier_per_phase: float = SCORE_MULTIPLIER_PER_PHASE) -> None:
        self.phase_duration = phase_duration
        self.score_multiplier_per_phase = score_multiplier_per_phase
        self.listeners: list[PhaseListener] = []
        self.phase = 1
        self.phase_timer = 0.0
        self.score_multiplier = 1.0
        self.game_over = False

    def subscribe(self, listener: PhaseListener) -> None:
        self.listeners.append(listener)

    def update(self, dt: float) -> bool:
        """Accumulate ``dt``; returns True when this call advanced the phase."""
        if self.game_over:
            return False

        self.phase_timer += dt
        if self.phase_timer < self.phase_duration:
            return False

        self.phase_timer = 0.0
        self.phase += 1
        self.score_multiplier *= self.score_multiplier_per_phase
        self.broadcast()
        return True

    def broadcast(self) -> None:
        for listener in self.listeners:
            listener.on_difficulty_phase_change(self.phase)

    def reset(self) -> None:
        self.phase = 1
        self.phase_timer = 0.0
        self.score_multiplier = 1.0
        self.game_over = False
        self.broadcast()
