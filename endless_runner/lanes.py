"""Lane layout: lateral lane offsets and projection onto the road frame."""

from __future__ import annotations

from pygame.math import Vector3

from .difficulty import clamp


def lane_offset(lane_index: int, number_of_lanes: int, lane_width: float,
                road_width: float) -> float:
    """
    Signed lateral offset of a lane's center from the road center.

    Lanes are centered symmetrically around 0 and the result never leaves
    the road: it is clamped to +/- half the road width whatever lane count
    or width is configured.
    """
    half_width = road_width / 2.0
    position = lane_index - (number_of_lanes - 1) / 2.0
    return clamp(position * lane_width, -half_width, half_width)


def project(center: Vector3, forward: Vector3, right: Vector3,
            point: Vector3, offset: float) -> Vector3:
    """
    Snap ``point`` onto the road's forward axis, then shift it ``offset`` along ``right``.

    Keeps spawns lined up with a road that is not axis-aligned with the world.
    """
    along = (point - center).dot(forward)
    return center + forward * along + right * offset
