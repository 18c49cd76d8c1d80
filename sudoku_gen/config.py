import os

# Number of filled cells left in the puzzle printed by the entry point
DEFAULT_DIFFICULTY = 40

# Random cell picks per outer pass of the removal driver
ATTEMPTS_PER_PASS = 100

# Named targets (filled cells to keep); lower means harder
DIFFICULTY_LEVELS = {
    "easy": 40,
    "medium": 32,
    "hard": 27,
}

LOG_LEVEL = os.environ.get("SUDOKU_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
