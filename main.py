"""Game entry point: top-down endless runner preview"""

from __future__ import annotations

import pygame
from pygame.math import Vector3

from endless_runner.constants import *
from endless_runner.agent import RunnerAgent
from endless_runner.camera import FollowCamera
from endless_runner.difficulty import DifficultyController
from endless_runner.lanes import lane_offset
from endless_runner.logger import GameLogger
from endless_runner.models import RoadDescriptor, SpawnRequest
from endless_runner.road import to_road_space
from endless_runner.scoring import ScoreBoard
from endless_runner.spawner import make_coin_spawner, make_obstacle_spawner
from ui import HUD, GameOverScreen


class WorldItem:
    """A spawned coin or obstacle living on the road until collected or passed."""

    def __init__(self, kind: str, request: SpawnRequest) -> None:
        self.kind = kind
        self.position = request.world_position
        self.lane = request.lane_index
        self.value = request.value
        self.dead = False

    def half_extent(self) -> float:
        if self.kind == "obstacle":
            return OBSTACLE_HALF_SIZE * self.value
        return COIN_RADIUS

    def touches(self, position: Vector3, road: RoadDescriptor) -> bool:
        reach = self.half_extent() + PLAYER_RADIUS
        item_along, item_lateral = to_road_space(road, self.position)
        along, lateral = to_road_space(road, position)
        return abs(item_lateral - lateral) < reach and abs(item_along - along) < reach

    def is_behind(self, position: Vector3, road: RoadDescriptor) -> bool:
        return to_road_space(road, self.position)[0] < to_road_space(road, position)[0] - DESPAWN_BEHIND


class Game:
    """
    Main game controller: wires the runner, difficulty driver, spawners and
    score board together, runs the loop, handles input and draws the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Endless Runner")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = self.load_font(FONT_SIZE_MEDIUM)
        self.font_big = self.load_font(FONT_SIZE_LARGE)
        self.logger = GameLogger(LOG_FILE)

        self.road = RoadDescriptor.from_yaw(Vector3(0, 0, 0), 0.0, DEFAULT_ROAD_WIDTH)
        self.player = RunnerAgent()
        self.camera = FollowCamera()
        self.scoreboard = ScoreBoard()
        self.difficulty = DifficultyController()

        self.obstacle_spawner = make_obstacle_spawner(
            road=self.road, spawn_handler=lambda r: self.add_item("obstacle", r), logger=self.logger)
        self.coin_spawner = make_coin_spawner(
            road=self.road, spawn_handler=lambda r: self.add_item("coin", r), logger=self.logger)
        self.difficulty.subscribe(self.obstacle_spawner)
        self.difficulty.subscribe(self.coin_spawner)
        self.difficulty.subscribe(self)

        self.hud = HUD(self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)

        self.paused = False
        self.show_fps = False
        self.fps_samples = []
        self.reset_game()

    def load_font(self, size: int) -> pygame.font.Font:
        try:
            return pygame.font.Font(FONT_NAME, size)
        except (OSError, FileNotFoundError) as e:
            print(f"Failed to load font {FONT_NAME}: {e}")
            return pygame.font.Font(None, size)

    def reset_game(self) -> None:
        """Reset all game state to initial values."""
        self.items: list[WorldItem] = []
        self.game_time = 0.0
        self.player.reset()
        self.scoreboard.reset()
        self.obstacle_spawner.reset()
        self.coin_spawner.reset()
        self.difficulty.reset()
        self.camera.snap_to(self.player.position)
        self.view = Vector3(self.camera.position)

    def add_item(self, kind: str, request: SpawnRequest) -> None:
        self.items.append(WorldItem(kind, request))

    def on_difficulty_phase_change(self, new_phase: int) -> None:
        if new_phase > 1:
            self.logger.log_phase_change(new_phase)

    def end_run(self) -> None:
        if not self.scoreboard.game_over():
            return
        self.difficulty.game_over = True
        self.camera.shake(GAME_OVER_SHAKE_DURATION, GAME_OVER_SHAKE_MAGNITUDE)
        self.logger.log_game_over(self.scoreboard.last_score, self.scoreboard.high_score)

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            current_fps = self.clock.get_fps()

            self.fps_samples.append(current_fps)
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples) if self.fps_samples else 0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and self.scoreboard.is_game_over:
                        self.logger.log_restart()
                        self.reset_game()
                    elif event.key == pygame.K_p and not self.scoreboard.is_game_over:
                        self.paused = not self.paused
                    elif event.key == pygame.K_f:
                        self.show_fps = not self.show_fps

            if not self.paused and not self.scoreboard.is_game_over:
                self.update(dt)

            # The camera keeps easing (and shaking) after the run ends.
            if not self.paused:
                self.view = self.camera.update(self.player.position, dt)
            self.draw(avg_fps)

        pygame.quit()

    def update(self, dt: float) -> None:
        """Advance one frame of game time; the clock stops while paused or game over."""
        self.game_time += dt

        keys = pygame.key.get_pressed()
        steer = 0.0
        if keys[pygame.K_LEFT] or keys[pygame.K_a]:
            steer -= 1.0
        if keys[pygame.K_RIGHT] or keys[pygame.K_d]:
            steer += 1.0
        self.player.steer(steer)
        self.player.update(dt, self.road)
        self.scoreboard.add_distance(self.player.distance_points(dt, self.difficulty.score_multiplier))

        self.difficulty.update(dt)
        snapshot = self.player.snapshot()
        self.obstacle_spawner.tick(self.game_time, snapshot)
        self.coin_spawner.tick(self.game_time, snapshot)

        for item in self.items:
            if item.is_behind(self.player.position, self.road):
                item.dead = True
            elif item.touches(self.player.position, self.road):
                if item.kind == "coin":
                    item.dead = True
                    self.scoreboard.value_collected(item.value)
                    self.logger.log_coin(item.value, self.scoreboard.coin_score)
                else:
                    self.end_run()
        self.items = [item for item in self.items if not item.dead]

        if self.player.is_stalled:
            self.end_run()

    # --------------------------------- Rendering ------------------------------------

    def world_to_screen(self, position: Vector3) -> tuple[int, int]:
        """Top-down: world x to screen x, world z (ahead) to screen up."""
        focus = self.view - self.camera.offset
        sx = WIDTH // 2 + (position.x - focus.x) * PIXELS_PER_UNIT
        sy = int(HEIGHT * 0.8) - (position.z - focus.z) * PIXELS_PER_UNIT
        return int(sx), int(sy)

    def draw_road(self, surf: pygame.Surface) -> None:
        half = self.road.width / 2.0
        left, _ = self.world_to_screen(self.road.center - self.road.right * half)
        right, _ = self.world_to_screen(self.road.center + self.road.right * half)
        pygame.draw.rect(surf, ROAD_COLOR, pygame.Rect(left, 0, right - left, HEIGHT))

        lanes = self.obstacle_spawner.config.number_of_lanes
        lane_width = self.obstacle_spawner.config.lane_width
        for lane in range(lanes):
            offset = lane_offset(lane, lanes, lane_width, self.road.width)
            x, _ = self.world_to_screen(self.road.center + self.road.right * offset)
            pygame.draw.line(surf, LANE_LINE_COLOR, (x, 0), (x, HEIGHT), 1)

    def draw(self, fps: float) -> None:
        """Compose the frame: road → items → player → HUD → overlays."""
        self.screen.fill(BG_COLOR)
        self.draw_road(self.screen)

        for item in self.items:
            center = self.world_to_screen(item.position)
            size = int(item.half_extent() * PIXELS_PER_UNIT)
            if item.kind == "coin":
                pygame.draw.circle(self.screen, COIN_COLOR, center, size)
            else:
                rect = pygame.Rect(0, 0, size * 2, size * 2)
                rect.center = center
                pygame.draw.rect(self.screen, OBSTACLE_COLOR, rect, border_radius=3)

        pygame.draw.circle(self.screen, PLAYER_COLOR, self.world_to_screen(self.player.position),
                           int(PLAYER_RADIUS * PIXELS_PER_UNIT))

        self.hud.draw(self.screen, self.scoreboard.score, self.scoreboard.coin_score,
                      self.player.forward_speed, self.difficulty.phase,
                      self.scoreboard.high_score, self.show_fps, fps, self.paused)

        if self.scoreboard.is_game_over:
            self.game_over_screen.draw(self.screen, self.scoreboard.last_score,
                                       self.scoreboard.high_score, self.scoreboard.coin_score)
        else:
            hint = self.font_small.render("[A/D] steer | [P] pause | [F] fps | [ESC] quit", True, (200, 200, 200))
            self.screen.blit(hint, hint.get_rect(center=(WIDTH // 2, HEIGHT - HUD_PADDING - hint.get_height() // 2)))

        pygame.display.flip()


if __name__ == "__main__":
    Game().run()
