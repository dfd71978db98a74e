"""Markdown logger for gameplay events (spawns, phase changes, pickups, game over)."""

import datetime


class GameLogger:
    """Appends game events as rows of a markdown table."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Endless Runner Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Event | Source | Details |\n")
                f.write("|-----------|-------|--------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def write_row(self, event: str, source: str, details: str = "") -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {source} | {details} |\n")

        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_spawn(self, spawner: str, count: int, phase: int) -> None:
        """
        Log a fired spawn event.

        Parameters
        ----------
        spawner : str
            Name of the spawner that fired
        count : int
            Number of items emitted
        phase : int
            Difficulty phase at the time of spawning
        """
        self.write_row("SPAWN", spawner, f"{count} item(s) at phase {phase}")

    def log_phase_change(self, phase: int) -> None:
        self.write_row("PHASE", "SYSTEM", f"Reached phase {phase}")

    def log_coin(self, value: int, coin_score: float) -> None:
        self.write_row("COIN", "PLAYER", f"+{value} (coins: {coin_score:g})")

    def log_game_over(self, final_score: int, high_score: int) -> None:
        self.write_row("GAME OVER", "SYSTEM", f"Final score {final_score}, high score {high_score}")

    def log_restart(self) -> None:
        self.write_row("RESTART", "SYSTEM")
