"""Road frame resolution: the lane coordinate system spawns are projected onto."""

from __future__ import annotations

from typing import NamedTuple

from pygame.math import Vector3

from .constants import DEFAULT_ROAD_WIDTH
from .models import AgentSnapshot, RoadDescriptor


class RoadFrame(NamedTuple):
    center: Vector3
    forward: Vector3
    right: Vector3
    width: float


def resolve(road: RoadDescriptor | None, agent: AgentSnapshot,
            default_width: float = DEFAULT_ROAD_WIDTH) -> RoadFrame:
    """
    Resolve the frame lanes are laid out in.

    Without a road the agent's own position and axes are used with
    ``default_width``, so spawning degrades to agent-relative lanes rather
    than failing.
    """
    if road is None:
        return RoadFrame(Vector3(agent.position), Vector3(agent.forward),
                         Vector3(agent.right), default_width)
    return RoadFrame(Vector3(road.center), Vector3(road.forward),
                     Vector3(road.right), road.width)


def road_width_from_bounds(size_x: float, scale_x: float = 1.0) -> float:
    """Road width from a box collider's local x size and the object's world x scale."""
    return abs(size_x * scale_x)


def to_road_space(road: RoadDescriptor, point: Vector3) -> tuple[float, float]:
    """(distance along ``road.forward``, lateral offset along ``road.right``) of a world point."""
    delta = point - road.center
    return delta.dot(road.forward), delta.dot(road.right)
