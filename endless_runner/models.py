"""Lightweight data models used across the runner core."""

from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector3

# (lane index, along-path step) pair produced by the pattern libraries.
PatternStep = tuple[int, int]


@dataclass(frozen=True)
class RoadDescriptor:
    """
    Oriented lane coordinate basis of the road.

    Attributes
    ----------
    center : Vector3
        World position of the road's center line origin.
    forward : Vector3
        Unit vector along the direction of travel.
    right : Vector3
        Unit vector across the road, perpendicular to ``forward``.
    width : float
        Full road width in world units.
    """
    center: Vector3
    forward: Vector3
    right: Vector3
    width: float

    @classmethod
    def from_yaw(cls, center: Vector3, yaw_degrees: float, width: float) -> RoadDescriptor:
        """Build a road whose axes are world +z / +x rotated by ``yaw_degrees`` about +y."""
        forward = Vector3(0, 0, 1).rotate_y(yaw_degrees)
        right = Vector3(1, 0, 0).rotate_y(yaw_degrees)
        return cls(Vector3(center), forward, right, width)


@dataclass(frozen=True)
class AgentSnapshot:
    """Read-only view of the controlled runner, refreshed once per tick."""
    position: Vector3
    forward: Vector3
    right: Vector3
    current_speed: float
    max_speed: float


@dataclass(frozen=True)
class SpawnRequest:
    """
    A single item the host should instantiate.

    Attributes
    ----------
    world_position : Vector3
        Where to place the item.
    lane_index : int
        Lane the item was placed in.
    value : float
        Difficulty-scaled metadata: a uniform scale multiplier for
        obstacles, the rounded pickup value for coins.
    """
    world_position: Vector3
    lane_index: int
    value: float


@dataclass
class DifficultyState:
    phase: int = 1
    elapsed_time: float = 0.0
    speed_ratio: float = 0.0


@dataclass
class SpawnCadenceState:
    next_spawn_time: float = 0.0
    current_spawn_rate_ceiling: float = 0.0


@dataclass(frozen=True)
class SpawnerConfig:
    """Tunables for one spawner instance. Build variants with ``dataclasses.replace``."""
    name: str
    number_of_lanes: int
    lane_width: float
    default_road_width: float
    min_spawn_rate: float
    max_spawn_rate: float
    spawn_rate_increase_per_phase: float
    min_spawn_distance: float
    max_spawn_distance: float
    pattern_chance: float
    min_in_pattern: int
    max_in_pattern: int
    pattern_spacing: float
    spawn_height: float
    allow_consecutive_same_lane: bool = True
