import logging

from sudoku_gen.config import DEFAULT_DIFFICULTY, LOG_FORMAT, LOG_LEVEL
from sudoku_gen.game_logic.sudoku import filled_count, format_board_pretty, format_grid, generate_puzzle

logger = logging.getLogger(__name__)


def main() -> None:
    """Generate one puzzle and print it to stdout."""
    # Logs go to stderr so stdout only carries the puzzle
    logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)

    try:
        logger.info(f"Generating puzzle with {DEFAULT_DIFFICULTY} filled cells")
        puzzle, solution = generate_puzzle(DEFAULT_DIFFICULTY)
    except Exception as e:
        logger.error(f"Error generating puzzle for difficulty {DEFAULT_DIFFICULTY}: {e}", exc_info=True)
        raise

    logger.info(f"Puzzle generated with {filled_count(puzzle)} filled cells.")
    logger.debug("Solution:\n%s", format_board_pretty(solution))

    print("Generated Sudoku Puzzle:")
    print(format_grid(puzzle))


if __name__ == "__main__":
    main()
