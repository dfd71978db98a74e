"""HUD and Game Over screen"""

import pygame

from endless_runner.constants import HUD_PADDING, TEXT_COLOR, FONT_NAME, FONT_SIZE_SMALL


class HUD:
    """Heads-Up Display with left/right split layout."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, score: int, coins: float, speed: float,
             phase: int, high_score: int, show_fps: bool = False, fps: float = 0.0,
             paused: bool = False) -> None:
        """Render score/coins/speed/phase on the left and session stats on the right."""
        current_width = surf.get_width()
        current_height = surf.get_height()

        # LEFT SIDE: run stats
        responsive_padding = max(8, int(HUD_PADDING * (min(current_width, current_height) / 540)))
        left_x = responsive_padding
        left_y = responsive_padding

        for line in (f"Score: {score}", f"Coin: {coins:g}", f"Speed: {speed:.1f}", f"Phase: {phase}"):
            text_surf = self.font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (left_x, left_y))
            left_y += text_surf.get_height() + 4

        # RIGHT SIDE: high score and optional indicators
        high_text = self.font.render(f"Best: {high_score}", True, TEXT_COLOR)
        right_x = current_width - high_text.get_width() - responsive_padding
        right_y = responsive_padding
        surf.blit(high_text, (right_x, right_y))
        right_y += high_text.get_height() + 8

        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (right_x, right_y))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))
            text_rect = pause_text.get_rect(center=(current_width//2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class GameOverScreen:
    """Game over screen with final score and restart option."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, final_score: int, high_score: int, coins: float) -> None:
        current_width = surf.get_width()
        current_height = surf.get_height()

        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.25))
        game_over_rect = game_over_text.get_rect(center=(current_width//2, title_y))
        surf.blit(game_over_text, game_over_rect)

        stats_lines = [
            f"Final Score: {final_score}",
            f"High Score: {high_score}",
            f"Coins: {coins:g}",
        ]

        y_offset = max(title_y + 80, int(current_height * 0.4))
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Press R to restart or ESC to quit", True, (150, 150, 150))
        inst_rect = inst_text.get_rect(center=(current_width // 2, y_offset + 30))
        surf.blit(inst_text, inst_rect)
