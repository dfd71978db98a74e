from __future__ import annotations

import pytest
from pygame.math import Vector3

from endless_runner.lanes import lane_offset, project


def test_three_lanes_are_centered_around_zero() -> None:
    assert lane_offset(0, 3, 3.0, 9.0) == pytest.approx(-3.0)
    assert lane_offset(1, 3, 3.0, 9.0) == pytest.approx(0.0)
    assert lane_offset(2, 3, 3.0, 9.0) == pytest.approx(3.0)


def test_even_lane_count_has_no_center_lane() -> None:
    assert lane_offset(0, 2, 3.0, 9.0) == pytest.approx(-1.5)
    assert lane_offset(1, 2, 3.0, 9.0) == pytest.approx(1.5)


def test_offset_never_leaves_the_road() -> None:
    for lanes in range(1, 8):
        for width in (0.5, 3.0, 10.0):
            for road_width in (1.0, 4.0, 9.0):
                for lane in range(-2, lanes + 4):
                    assert abs(lane_offset(lane, lanes, width, road_width)) <= road_width / 2.0


def test_wide_lanes_clamp_to_road_edge() -> None:
    assert lane_offset(0, 3, 10.0, 9.0) == pytest.approx(-4.5)
    assert lane_offset(5, 3, 3.0, 9.0) == pytest.approx(4.5)


def test_project_on_axis_aligned_road() -> None:
    center = Vector3(0, 0, 0)
    point = Vector3(7.0, 0.0, 25.0)
    out = project(center, Vector3(0, 0, 1), Vector3(1, 0, 0), point, -3.0)
    assert (out.x, out.y, out.z) == pytest.approx((-3.0, 0.0, 25.0))


def test_project_on_rotated_road_keeps_lateral_offset_along_right_axis() -> None:
    center = Vector3(10, 0, 10)
    forward = Vector3(0, 0, 1).rotate_y(90)
    right = Vector3(1, 0, 0).rotate_y(90)
    point = center + forward * 20 + right * 2.5

    out = project(center, forward, right, point, 3.0)

    assert (out - center).dot(forward) == pytest.approx(20.0)
    assert (out - center).dot(right) == pytest.approx(3.0)
