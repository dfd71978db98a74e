from __future__ import annotations

import random
from dataclasses import replace

import pytest
from pygame.math import Vector3

from endless_runner.logger import GameLogger
from endless_runner.models import AgentSnapshot, RoadDescriptor
from endless_runner.spawner import (
    CoinTrait,
    ObstacleTrait,
    coin_config,
    make_coin_spawner,
    make_obstacle_spawner,
    obstacle_config,
)


def runner(x: float = 0.0, z: float = 0.0, speed: float = 10.0) -> AgentSnapshot:
    return AgentSnapshot(Vector3(x, 0.5, z), Vector3(0, 0, 1), Vector3(1, 0, 0), speed, 20.0)


def straight_road() -> RoadDescriptor:
    return RoadDescriptor(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(1, 0, 0), 9.0)


def test_obstacle_scale_grows_ten_percent_per_phase() -> None:
    assert ObstacleTrait(size_multiplier=1.0).value(4) == pytest.approx(1.3)
    assert ObstacleTrait(size_multiplier=2.0).value(2) == pytest.approx(1.2)
    assert ObstacleTrait().value(1) == 1.0


def test_coin_value_is_rounded() -> None:
    assert CoinTrait(base_value=1, value_multiplier=1.0).value(2) == 2
    assert CoinTrait(base_value=3, value_multiplier=0.5).value(2) == 4
    assert CoinTrait(base_value=1, value_multiplier=0.2).value(2) == 1


def test_tick_without_runner_is_a_no_op() -> None:
    spawner = make_obstacle_spawner(rng=random.Random(0), road=straight_road())
    assert spawner.tick(0.0, None) == []
    assert spawner.tick(100.0, None) == []
    assert spawner.next_spawn_time == 0.0


def test_first_tick_fires_and_schedules_strictly_later() -> None:
    spawner = make_coin_spawner(rng=random.Random(0), road=straight_road())
    requests = spawner.tick(0.0, runner())
    assert requests
    assert spawner.next_spawn_time > 0.0


def test_tick_only_fires_once_next_spawn_time_is_reached() -> None:
    rng = random.Random(11)
    for spawner in (make_obstacle_spawner(rng=rng), make_coin_spawner(rng=rng)):
        fired = 0
        for frame in range(3000):
            now = frame * 0.01
            due = spawner.next_spawn_time
            requests = spawner.tick(now, runner(z=now * 10.0))
            if now < due:
                assert requests == []
            else:
                assert len(requests) >= 1
                assert spawner.next_spawn_time > now
                fired += 1
        assert fired > 10


def test_single_spawns_land_in_lane_centers_ahead_of_runner() -> None:
    config = replace(obstacle_config(), pattern_chance=0.0)
    spawner = make_obstacle_spawner(config, rng=random.Random(5), road=straight_road())
    now = 0.0
    for _ in range(40):
        now = spawner.next_spawn_time
        (request,) = spawner.tick(now, runner())
        expected_x = {0: -3.0, 1: 0.0, 2: 3.0}[request.lane_index]
        assert request.world_position.x == pytest.approx(expected_x)
        assert request.world_position.y == pytest.approx(0.5)
        assert 20.0 <= request.world_position.z <= 40.0
        assert request.value == 1.0


def test_coin_pattern_steps_are_spaced_along_runner_forward() -> None:
    config = replace(coin_config(), pattern_chance=1.0)
    spawner = make_coin_spawner(config, rng=random.Random(2), road=straight_road())
    spawner.on_difficulty_phase_change(3)

    requests = spawner.tick(0.0, runner())

    assert [r.lane_index for r in requests] == [1, 0, 1, 2, 1]
    first_z = requests[0].world_position.z
    assert [r.world_position.z - first_z for r in requests] == pytest.approx([0.0, 2.0, 4.0, 6.0, 8.0])
    assert all(r.world_position.y == pytest.approx(1.0) for r in requests)
    assert all(r.value == 3 for r in requests)


def test_obstacle_wall_is_scaled_by_phase() -> None:
    config = replace(obstacle_config(), pattern_chance=1.0)
    spawner = make_obstacle_spawner(config, rng=random.Random(2), road=straight_road())
    spawner.on_difficulty_phase_change(3)
    spawner.on_difficulty_phase_change(3)

    requests = spawner.tick(0.0, runner())

    assert [r.lane_index for r in requests] == [0, 1, 2]
    assert len({round(r.world_position.z, 6) for r in requests}) == 1
    assert all(r.value == pytest.approx(1.2) for r in requests)


def test_spawns_follow_a_rotated_road() -> None:
    road = RoadDescriptor.from_yaw(Vector3(0, 0, 0), 90.0, 9.0)
    config = replace(obstacle_config(), pattern_chance=0.0)
    spawner = make_obstacle_spawner(config, rng=random.Random(8), road=road)
    agent = AgentSnapshot(Vector3(0, 0.5, 0), Vector3(road.forward), Vector3(road.right), 10.0, 20.0)

    for _ in range(20):
        (request,) = spawner.tick(spawner.next_spawn_time, agent)
        lateral = (request.world_position - road.center).dot(road.right)
        expected = {0: -3.0, 1: 0.0, 2: 3.0}[request.lane_index]
        assert lateral == pytest.approx(expected)
        assert 20.0 <= (request.world_position - road.center).dot(road.forward) <= 40.0


def test_missing_road_lays_lanes_around_runner() -> None:
    config = replace(coin_config(), pattern_chance=0.0)
    spawner = make_coin_spawner(config, rng=random.Random(4))
    for _ in range(20):
        (request,) = spawner.tick(spawner.next_spawn_time, runner(x=5.0))
        assert request.world_position.x == pytest.approx(5.0 + (request.lane_index - 1) * 3.0)


def test_inverted_rate_range_clamps_to_minimum() -> None:
    config = replace(obstacle_config(), min_spawn_rate=1.0, max_spawn_rate=0.5)
    spawner = make_obstacle_spawner(config, rng=random.Random(0), road=straight_road())
    spawner.tick(0.0, runner())
    assert spawner.next_spawn_time == pytest.approx(1.0)


def test_consecutive_single_spawns_can_be_forced_apart() -> None:
    config = replace(obstacle_config(), pattern_chance=0.0, allow_consecutive_same_lane=False)
    spawner = make_obstacle_spawner(config, rng=random.Random(9), road=straight_road())
    lanes = []
    for _ in range(60):
        (request,) = spawner.tick(spawner.next_spawn_time, runner())
        lanes.append(request.lane_index)
    assert all(a != b for a, b in zip(lanes, lanes[1:]))


def test_same_seed_gives_same_spawns() -> None:
    outputs = []
    for _ in range(2):
        spawner = make_coin_spawner(rng=random.Random(123), road=straight_road())
        out = []
        for frame in range(500):
            now = frame * 0.02
            for r in spawner.tick(now, runner(z=now * 10.0)):
                out.append((now, r.lane_index, tuple(r.world_position), r.value))
        outputs.append(out)
    assert outputs[0] == outputs[1]
    assert outputs[0]


def test_spawn_handler_and_logger_receive_fired_items(tmp_path) -> None:
    received = []
    log_file = tmp_path / "log.md"
    spawner = make_coin_spawner(rng=random.Random(1), road=straight_road(),
                                spawn_handler=received.append, logger=GameLogger(str(log_file)))

    requests = spawner.tick(0.0, runner())

    assert received == requests
    text = log_file.read_text(encoding="utf-8")
    assert f"| SPAWN | coins | {len(requests)} item(s) at phase 1 |" in text


def test_reset_restores_initial_cadence_and_phase() -> None:
    spawner = make_obstacle_spawner(rng=random.Random(0), road=straight_road())
    spawner.on_difficulty_phase_change(5)
    spawner.tick(0.0, runner())
    spawner.reset()
    assert spawner.phase == 1
    assert spawner.next_spawn_time == 0.0
    assert spawner.tick(0.0, runner())


def test_set_road_moves_subsequent_spawns() -> None:
    config = replace(obstacle_config(), pattern_chance=0.0)
    spawner = make_obstacle_spawner(config, rng=random.Random(6))
    spawner.set_road(RoadDescriptor(Vector3(100, 0, 0), Vector3(0, 0, 1), Vector3(1, 0, 0), 9.0))
    (request,) = spawner.tick(0.0, runner())
    assert request.world_position.x == pytest.approx(100.0 + (request.lane_index - 1) * 3.0)


def test_inverted_pattern_size_does_not_break_tick() -> None:
    config = replace(coin_config(), pattern_chance=1.0, min_in_pattern=6, max_in_pattern=3)
    spawner = make_coin_spawner(config, rng=random.Random(0), road=straight_road())
    requests = spawner.tick(0.0, runner())
    assert len(requests) == 6
    assert spawner.next_spawn_time > 0.0


def test_zero_lanes_fires_empty_and_keeps_cadence() -> None:
    config = replace(obstacle_config(), number_of_lanes=0)
    spawner = make_obstacle_spawner(config, rng=random.Random(0), road=straight_road())
    assert spawner.tick(0.0, runner()) == []
    assert spawner.next_spawn_time > 0.0
