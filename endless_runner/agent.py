"""Kinematic runner: forward speed ramp, smoothed lateral steering, stall detection."""

from __future__ import annotations

from pygame.math import Vector3

from .constants import (
    PLAYER_INITIAL_SPEED, PLAYER_MAX_SPEED, PLAYER_SPEED_INCREASE_INTERVAL,
    PLAYER_SPEED_INCREASE_AMOUNT, PLAYER_MOVE_SPEED, PLAYER_MAX_HORIZONTAL_SPEED,
    PLAYER_SMOOTH_TIME, PLAYER_SCORE_MULTIPLIER, STOPPED_TIME_THRESHOLD,
    STOPPED_DISTANCE_THRESHOLD,
)
from .difficulty import clamp
from .models import AgentSnapshot, RoadDescriptor


def smooth_damp(current: float, target: float, velocity: float, smooth_time: float,
                dt: float) -> tuple[float, float]:
    """
    Critically damped ease of ``current`` toward ``target``.

    Returns the new value and the new velocity to feed into the next call.
    """
    smooth_time = max(0.0001, smooth_time)
    omega = 2.0 / smooth_time
    x = omega * dt
    decay = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)
    change = current - target
    temp = (velocity + omega * change) * dt
    velocity = (velocity - omega * temp) * decay
    return target + (change + temp) * decay, velocity


class RunnerAgent:
    """
    The player-controlled runner.

    Speed rises by a fixed amount every ``speed_increase_interval`` seconds of
    game time until ``max_speed``. Steering sets a target sideways velocity
    that the actual velocity eases toward.
    """

    def __init__(self, position: Vector3 | None = None, forward: Vector3 | None = None,
                 right: Vector3 | None = None,
                 initial_speed: float = PLAYER_INITIAL_SPEED,
                 max_speed: float = PLAYER_MAX_SPEED,
                 speed_increase_interval: float = PLAYER_SPEED_INCREASE_INTERVAL,
                 speed_increase_amount: float = PLAYER_SPEED_INCREASE_AMOUNT) -> None:
        self.start_position = Vector3(position) if position is not None else Vector3(0, 0.5, 0)
        self.forward = Vector3(forward) if forward is not None else Vector3(0, 0, 1)
        self.right = Vector3(right) if right is not None else Vector3(1, 0, 0)
        self.initial_speed = initial_speed
        self.max_speed = max_speed
        self.speed_increase_interval = speed_increase_interval
        self.speed_increase_amount = speed_increase_amount
        self.move_speed = PLAYER_MOVE_SPEED
        self.max_horizontal_speed = PLAYER_MAX_HORIZONTAL_SPEED
        self.smooth_time = PLAYER_SMOOTH_TIME
        self.reset()

    def reset(self) -> None:
        self.position = Vector3(self.start_position)
        self.forward_speed = self.initial_speed
        self.game_time = 0.0
        self.next_speed_increase_at = self.speed_increase_interval
        self.lateral_velocity = 0.0
        self.target_lateral_velocity = 0.0
        self.smooth_velocity = 0.0
        self.time_stopped = 0.0
        self.is_stalled = False

    def steer(self, direction: float) -> None:
        """Steer in [-1, 1]; negative is left."""
        target = clamp(direction, -1.0, 1.0) * self.move_speed
        self.target_lateral_velocity = clamp(target, -self.max_horizontal_speed,
                                             self.max_horizontal_speed)

    def update(self, dt: float, road: RoadDescriptor | None = None) -> None:
        if dt <= 0:
            return

        self.game_time += dt
        if self.game_time >= self.next_speed_increase_at and self.forward_speed < self.max_speed:
            self.forward_speed = min(self.max_speed, self.forward_speed + self.speed_increase_amount)
            self.next_speed_increase_at = self.game_time + self.speed_increase_interval

        self.lateral_velocity, self.smooth_velocity = smooth_damp(
            self.lateral_velocity, self.target_lateral_velocity, self.smooth_velocity,
            self.smooth_time, dt)

        previous = Vector3(self.position)
        self.position += self.forward * (self.forward_speed * dt)
        self.position += self.right * (self.lateral_velocity * dt)
        if road is not None:
            self.keep_on_road(road)

        # Stall check is per second of travel so it does not depend on frame rate.
        if self.position.distance_to(previous) < STOPPED_DISTANCE_THRESHOLD * dt:
            self.time_stopped += dt
            if self.time_stopped >= STOPPED_TIME_THRESHOLD:
                self.is_stalled = True
        else:
            self.time_stopped = 0.0

    def keep_on_road(self, road: RoadDescriptor) -> None:
        half_width = road.width / 2.0
        offset = (self.position - road.center).dot(road.right)
        if abs(offset) > half_width:
            self.position -= road.right * (offset - clamp(offset, -half_width, half_width))
            self.lateral_velocity = 0.0

    def distance_points(self, dt: float, score_multiplier: float = PLAYER_SCORE_MULTIPLIER) -> float:
        return self.forward_speed * score_multiplier * dt

    def snapshot(self) -> AgentSnapshot:
        return AgentSnapshot(Vector3(self.position), Vector3(self.forward), Vector3(self.right),
                             self.forward_speed, self.max_speed)
