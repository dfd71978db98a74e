from __future__ import annotations

import random

from pygame.math import Vector3

from .agent import smooth_damp
from .constants import CAMERA_OFFSET, CAMERA_SMOOTH_TIME


class FollowCamera:
    """
    Trails a target at a fixed offset with per-axis smoothing.

    ``shake`` starts a timed jitter whose strength fades linearly to zero;
    it is advanced by ``update`` like any other per-frame timer.
    """

    def __init__(self, offset: tuple[float, float, float] = CAMERA_OFFSET,
                 smooth_time: float = CAMERA_SMOOTH_TIME,
                 rng: random.Random | None = None) -> None:
        self.offset = Vector3(offset)
        self.smooth_time = smooth_time
        self.rng = rng or random.Random()
        self.position = Vector3()
        self.velocity = Vector3()
        self.shake_duration = 0.0
        self.shake_elapsed = 0.0
        self.shake_magnitude = 0.0
        self.shake_offset = Vector3()

    def snap_to(self, target: Vector3) -> None:
        self.position = Vector3(target) + self.offset
        self.velocity = Vector3()

    def shake(self, duration: float, magnitude: float) -> None:
        self.shake_duration = duration
        self.shake_elapsed = 0.0
        self.shake_magnitude = magnitude

    @property
    def is_shaking(self) -> bool:
        return self.shake_elapsed < self.shake_duration

    def update(self, target: Vector3, dt: float) -> Vector3:
        """Move toward ``target + offset``; returns the view position including shake."""
        desired = Vector3(target) + self.offset
        for axis in range(3):
            self.position[axis], self.velocity[axis] = smooth_damp(
                self.position[axis], desired[axis], self.velocity[axis], self.smooth_time, dt)

        self.shake_offset = Vector3()
        if self.is_shaking:
            self.shake_elapsed += dt
            strength = self.shake_magnitude * max(0.0, 1.0 - self.shake_elapsed / self.shake_duration)
            self.shake_offset = Vector3(self.rng.uniform(-1, 1), self.rng.uniform(-1, 1), 0) * strength

        return self.position + self.shake_offset
