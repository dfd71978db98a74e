"""Score keeping for a run: coin and distance points, game-over latch, session high score."""

from __future__ import annotations


class ScoreBoard:
    """
    Tracks the running score and receives gameplay notifications.

    Passed explicitly to whoever reports points instead of living as a
    global. High scores are kept in memory for the session only.
    """

    def __init__(self, high_score: int = 0) -> None:
        self.high_score = high_score
        self.last_score = 0
        self.reset()

    def reset(self) -> None:
        """Start a new run; the high score survives."""
        self.coin_score = 0.0
        self.distance_score = 0.0
        self.score = 0
        self.is_game_over = False

    def value_collected(self, value: float) -> None:
        if self.is_game_over:
            return
        self.coin_score += value
        self.update_total()

    def add_distance(self, value: float) -> None:
        if self.is_game_over:
            return
        self.distance_score += value
        self.update_total()

    def update_total(self) -> None:
        self.score = round(self.coin_score + self.distance_score)
        if self.score > self.high_score:
            self.high_score = self.score

    def game_over(self) -> bool:
        """Latch the final score. Returns False if the run had already ended."""
        if self.is_game_over:
            return False
        self.is_game_over = True
        self.last_score = self.score
        self.high_score = max(self.high_score, self.score)
        return True
