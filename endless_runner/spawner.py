from __future__ import annotations

import random
from typing import Callable, Protocol

from .constants import (
    NUMBER_OF_LANES, LANE_WIDTH, DEFAULT_ROAD_WIDTH, MIN_SPAWN_DISTANCE, MAX_SPAWN_DISTANCE,
    MIN_SPAWN_INTERVAL,
    OBSTACLE_MIN_SPAWN_RATE, OBSTACLE_MAX_SPAWN_RATE, OBSTACLE_SPAWN_RATE_INCREASE_PER_PHASE,
    OBSTACLE_PATTERN_CHANCE, OBSTACLE_MIN_IN_PATTERN, OBSTACLE_MAX_IN_PATTERN,
    OBSTACLE_SIZE_MULTIPLIER, OBSTACLE_SIZE_STEP_PER_PHASE, OBSTACLE_PATTERN_SPACING,
    OBSTACLE_SPAWN_HEIGHT,
    COIN_MIN_SPAWN_RATE, COIN_MAX_SPAWN_RATE, COIN_SPAWN_RATE_INCREASE_PER_PHASE,
    COIN_PATTERN_CHANCE, COIN_MIN_IN_PATTERN, COIN_MAX_IN_PATTERN, COIN_VALUE_MULTIPLIER,
    COIN_BASE_VALUE, COIN_PATTERN_SPACING, COIN_SPAWN_HEIGHT,
)
from .difficulty import DifficultyCurve
from .lanes import lane_offset, project
from .logger import GameLogger
from .models import AgentSnapshot, PatternStep, RoadDescriptor, SpawnCadenceState, SpawnerConfig, SpawnRequest
from .patterns import CoinPatterns, ObstaclePatterns, PatternLibrary
from .road import RoadFrame, resolve


class ItemTrait(Protocol):
    def value(self, phase: int) -> float: ...


class ObstacleTrait:
    """Obstacles grow by ``step_per_phase * size_multiplier`` per phase past the first."""

    def __init__(self, size_multiplier: float = OBSTACLE_SIZE_MULTIPLIER,
                 step_per_phase: float = OBSTACLE_SIZE_STEP_PER_PHASE) -> None:
        self.size_multiplier = size_multiplier
        self.step_per_phase = step_per_phase

    def value(self, phase: int) -> float:
        return 1.0 + (phase - 1) * self.step_per_phase * self.size_multiplier


class CoinTrait:
    """Coins are worth more each phase; the value is rounded to a whole number."""

    def __init__(self, base_value: int = COIN_BASE_VALUE,
                 value_multiplier: float = COIN_VALUE_MULTIPLIER) -> None:
        self.base_value = base_value
        self.value_multiplier = value_multiplier

    def value(self, phase: int) -> float:
        return round(self.base_value * (1.0 + (phase - 1) * self.value_multiplier))


class SpawnScheduler:
    """
    Decides when and where to spawn items ahead of the runner.

    Each tick the difficulty curve is refreshed from the runner's speed.
    Once ``now`` reaches the scheduled time, either a single item in a
    random lane or a phase-dependent pattern is emitted, every item tagged
    with the trait's difficulty-scaled value, and the next spawn time is
    drawn from the current interval bounds.

    Notes
    - ``now`` is the host's game clock; freezing it (pause, game over)
      freezes spawning.
    - Without a runner snapshot ``tick`` does nothing and returns ``[]``.
    - A missing road falls back to lanes laid out around the runner.
    """

    def __init__(self, config: SpawnerConfig, patterns: PatternLibrary, trait: ItemTrait,
                 rng: random.Random | None = None, road: RoadDescriptor | None = None,
                 spawn_handler: Callable[[SpawnRequest], None] | None = None,
                 logger: GameLogger | None = None) -> None:
        self.config = config
        self.patterns = patterns
        self.trait = trait
        self.rng = rng or random.Random()
        self.road = road
        self.spawn_handler = spawn_handler
        self.logger = logger
        self.difficulty = DifficultyCurve()
        self.cadence = SpawnCadenceState()
        self.last_tick_at: float | None = None
        self.last_single_lane = -1

    @property
    def phase(self) -> int:
        return self.difficulty.phase

    @property
    def next_spawn_time(self) -> float:
        return self.cadence.next_spawn_time

    def set_road(self, road: RoadDescriptor | None) -> None:
        """Swap the road frame, e.g. when a new level is loaded."""
        self.road = road

    def on_difficulty_phase_change(self, new_phase: int) -> None:
        self.difficulty.on_phase_change(new_phase)

    def reset(self) -> None:
        self.difficulty.reset()
        self.cadence = SpawnCadenceState()
        self.last_tick_at = None
        self.last_single_lane = -1

    # ------------------------------- Cadence -------------------------------------

    def spawn_rate_bounds(self) -> tuple[float, float]:
        cfg = self.config
        return self.difficulty.spawn_rate_bounds(cfg.min_spawn_rate, cfg.max_spawn_rate,
                                                 cfg.spawn_rate_increase_per_phase)

    def schedule_next(self, now: float, min_rate: float, ceiling: float) -> None:
        """
        Draw the next spawn time from ``[min_rate, ceiling]``.

        An inverted range is clamped to ``min_rate`` and the interval never
        drops below ``MIN_SPAWN_INTERVAL``.
        """
        interval = self.rng.uniform(min_rate, max(ceiling, min_rate))
        self.cadence.next_spawn_time = now + max(MIN_SPAWN_INTERVAL, interval)

    # ------------------------------- Update --------------------------------------

    def tick(self, now: float, agent: AgentSnapshot | None) -> list[SpawnRequest]:
        """
        Advance one simulation step.

        Parameters
        ----------
        now : float
            Current game clock in seconds.
        agent : AgentSnapshot | None
            The runner this spawner places items ahead of.

        Returns
        -------
        list[SpawnRequest]
            Items to instantiate this step; empty while waiting.
        """
        if agent is None:
            return []

        dt = 0.0 if self.last_tick_at is None else now - self.last_tick_at
        self.last_tick_at = now
        self.difficulty.advance(dt, agent.current_speed, agent.max_speed)

        min_rate, ceiling = self.spawn_rate_bounds()
        self.cadence.current_spawn_rate_ceiling = ceiling

        if now < self.cadence.next_spawn_time:
            return []

        frame = resolve(self.road, agent, self.config.default_road_width)
        if self.rng.random() < self.config.pattern_chance:
            steps = self.patterns.generate(self.phase, self.config.number_of_lanes,
                                           self.config.min_in_pattern, self.config.max_in_pattern,
                                           self.rng)
        else:
            steps = self.single_step()

        requests = self.build_requests(steps, frame, agent)
        self.schedule_next(now, min_rate, ceiling)

        if self.spawn_handler is not None:
            for request in requests:
                self.spawn_handler(request)
        if self.logger is not None:
            self.logger.log_spawn(self.config.name, len(requests), self.phase)
        return requests

    # ------------------------------- Placement -----------------------------------

    def single_step(self) -> list[PatternStep]:
        lanes = self.config.number_of_lanes
        if lanes <= 0:
            return []
        if self.config.allow_consecutive_same_lane or lanes == 1:
            lane = self.rng.randrange(lanes)
        else:
            lane = self.rng.choice([i for i in range(lanes) if i != self.last_single_lane])
        self.last_single_lane = lane
        return [(lane, 0)]

    def build_requests(self, steps: list[PatternStep], frame: RoadFrame,
                       agent: AgentSnapshot) -> list[SpawnRequest]:
        """Place every step; one spawn-ahead distance is shared by the whole batch."""
        cfg = self.config
        distance = self.rng.uniform(cfg.min_spawn_distance, cfg.max_spawn_distance)
        base = agent.position + agent.forward * distance
        value = self.trait.value(self.phase)

        requests = []
        for lane, step in steps:
            offset = lane_offset(lane, cfg.number_of_lanes, cfg.lane_width, frame.width)
            position = project(frame.center, frame.forward, frame.right, base, offset)
            position += agent.forward * (step * cfg.pattern_spacing)
            position.y = cfg.spawn_height
            requests.append(SpawnRequest(position, lane, value))
        return requests


# --------------------------------- Factories ------------------------------------

def obstacle_config() -> SpawnerConfig:
    return SpawnerConfig(
        name="obstacles",
        number_of_lanes=NUMBER_OF_LANES,
        lane_width=LANE_WIDTH,
        default_road_width=DEFAULT_ROAD_WIDTH,
        min_spawn_rate=OBSTACLE_MIN_SPAWN_RATE,
        max_spawn_rate=OBSTACLE_MAX_SPAWN_RATE,
        spawn_rate_increase_per_phase=OBSTACLE_SPAWN_RATE_INCREASE_PER_PHASE,
        min_spawn_distance=MIN_SPAWN_DISTANCE,
        max_spawn_distance=MAX_SPAWN_DISTANCE,
        pattern_chance=OBSTACLE_PATTERN_CHANCE,
        min_in_pattern=OBSTACLE_MIN_IN_PATTERN,
        max_in_pattern=OBSTACLE_MAX_IN_PATTERN,
        pattern_spacing=OBSTACLE_PATTERN_SPACING,
        spawn_height=OBSTACLE_SPAWN_HEIGHT,
    )


def coin_config() -> SpawnerConfig:
    return SpawnerConfig(
        name="coins",
        number_of_lanes=NUMBER_OF_LANES,
        lane_width=LANE_WIDTH,
        default_road_width=DEFAULT_ROAD_WIDTH,
        min_spawn_rate=COIN_MIN_SPAWN_RATE,
        max_spawn_rate=COIN_MAX_SPAWN_RATE,
        spawn_rate_increase_per_phase=COIN_SPAWN_RATE_INCREASE_PER_PHASE,
        min_spawn_distance=MIN_SPAWN_DISTANCE,
        max_spawn_distance=MAX_SPAWN_DISTANCE,
        pattern_chance=COIN_PATTERN_CHANCE,
        min_in_pattern=COIN_MIN_IN_PATTERN,
        max_in_pattern=COIN_MAX_IN_PATTERN,
        pattern_spacing=COIN_PATTERN_SPACING,
        spawn_height=COIN_SPAWN_HEIGHT,
    )


def make_obstacle_spawner(config: SpawnerConfig | None = None,
                          trait: ObstacleTrait | None = None, **kwargs) -> SpawnScheduler:
    return SpawnScheduler(config or obstacle_config(), ObstaclePatterns(),
                          trait or ObstacleTrait(), **kwargs)


def make_coin_spawner(config: SpawnerConfig | None = None,
                      trait: CoinTrait | None = None, **kwargs) -> SpawnScheduler:
    return SpawnScheduler(config or coin_config(), CoinPatterns(),
                          trait or CoinTrait(), **kwargs)
