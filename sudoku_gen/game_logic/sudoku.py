import logging
import random

import numpy as np

from sudoku_gen.config import ATTEMPTS_PER_PASS, DEFAULT_DIFFICULTY, DIFFICULTY_LEVELS

logger = logging.getLogger(__name__)

# Box size and grid side
BASE = 3
SIDE = BASE * BASE


# --- Grid ---

def new_grid() -> list[list[int]]:
    """Returns an empty 9x9 grid (0 marks an empty cell)."""
    return [[0 for _ in range(SIDE)] for _ in range(SIDE)]

def copy_grid(grid: list[list[int]]) -> list[list[int]]:
    return [row[:] for row in grid]

def find_empty(grid: list[list[int]]):
    """Finds the first empty cell (represented by 0) in row-major order."""
    for i in range(SIDE):
        for j in range(SIDE):
            if grid[i][j] == 0:
                return (i, j)  # row, col
    return None

def filled_count(grid: list[list[int]]) -> int:
    return int(np.count_nonzero(np.asarray(grid)))

def is_solved_board(grid: list[list[int]]) -> bool:
    """
    Checks that every row, column and 3x3 box of the grid holds
    each of the digits 1..9 exactly once.
    """
    board = np.asarray(grid)
    if board.shape != (SIDE, SIDE):
        return False
    # One row per box: (band, row-in-band, stack, col-in-stack) -> (band, stack, ...)
    boxes = board.reshape(BASE, BASE, BASE, BASE).swapaxes(1, 2).reshape(SIDE, SIDE)
    expected = np.arange(1, SIDE + 1)
    for group in (board, board.T, boxes):
        if not (np.sort(group, axis=1) == expected).all():
            return False
    return True


# --- Constraint checker ---

def is_safe(grid: list[list[int]], row: int, col: int, num: int) -> bool:
    """
    Checks if placing a number in a given cell is a valid Sudoku move
    according to Sudoku rules (row, column, and 3x3 subgrid).
    The cell itself is not compared against.
    """
    # Check row
    for x in range(SIDE):
        if grid[row][x] == num and x != col:
            return False
    # Check column
    for y in range(SIDE):
        if grid[y][col] == num and y != row:
            return False

    # Check 3x3 subgrid
    start_row, start_col = row - row % BASE, col - col % BASE
    for i in range(BASE):
        for j in range(BASE):
            if grid[i + start_row][j + start_col] == num and (i + start_row != row or j + start_col != col):
                return False
    return True


# --- Generator: full-grid filler ---

def fill_grid(grid: list[list[int]], rng=None) -> bool:
    """
    Fills the grid in place with randomized backtracking.

    One permutation of 1..9 is drawn up front and used as the candidate
    order for every cell. Returns True if the grid was completed.
    """
    rng = rng or random
    numbers = list(range(1, SIDE + 1))
    rng.shuffle(numbers)
    return _fill_recursive(grid, numbers)

def _fill_recursive(grid, numbers):
    find = find_empty(grid)
    if not find:
        return True  # Grid is complete
    row, col = find

    for num in numbers:
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _fill_recursive(grid, numbers):
                return True
            grid[row][col] = 0  # Backtrack
    return False

def create_sudoku(rng=None) -> list[list[int]]:
    """Creates a new grid and fills it completely."""
    grid = new_grid()
    fill_grid(grid, rng)
    return grid


# --- Uniqueness oracle ---

def count_solutions(grid: list[list[int]], limit: int = None) -> int:
    """
    Counts the complete, rule-valid assignments that extend the grid.

    Every branch works on its own copy, so the grid passed in is left untouched.
    With limit set, the search stops as soon as that many solutions are found;
    otherwise the exact count is returned.
    """
    return _solve_count(grid, 0, 0, limit)

def _solve_count(grid, row, col, limit):
    # The cursor only reaches (8, 9) after the last cell has been assigned
    if row == SIDE - 1 and col == SIDE:
        return 1

    if col == SIDE:
        row, col = row + 1, 0

    if grid[row][col] != 0:
        return _solve_count(grid, row, col + 1, limit)

    count = 0
    for num in range(1, SIDE + 1):
        if is_safe(grid, row, col, num):
            branch = copy_grid(grid)
            branch[row][col] = num
            remaining = None if limit is None else limit - count
            count += _solve_count(branch, row, col + 1, remaining)
            if limit is not None and count >= limit:
                break
    return count


# --- Generator: cell removal ---

def remove_cells(grid: list[list[int]], difficulty: int, rng=None,
                 attempts_per_pass: int = ATTEMPTS_PER_PASS) -> list[list[int]]:
    """
    Removes cells from a filled grid while the puzzle keeps exactly one solution.

    The grid is modified in place; a copy of the result is returned.
    `difficulty` is the number of filled cells to keep. Removal is best-effort:
    if a whole pass of random picks cannot remove anything, the puzzle is
    returned with more filled cells than requested.
    """
    if not 0 <= difficulty <= SIDE * SIDE:
        raise ValueError(f"difficulty must be between 0 and {SIDE * SIDE}, got {difficulty}")
    rng = rng or random

    cells = filled_count(grid)
    while cells > difficulty:
        old_cells = cells
        for _ in range(attempts_per_pass):
            if cells <= difficulty:
                break
            row = rng.randint(0, SIDE - 1)
            col = rng.randint(0, SIDE - 1)
            if grid[row][col] == 0:
                continue

            backup = grid[row][col]
            grid[row][col] = 0
            # Only equality to 1 matters, so stop counting at 2
            if count_solutions(copy_grid(grid), limit=2) != 1:
                grid[row][col] = backup
            else:
                cells -= 1

        logger.debug(f"Removal pass finished with {cells} filled cells (was {old_cells}).")
        if cells == old_cells:
            logger.info(f"No removable cell found in a full pass; stopping at {cells} filled cells (target {difficulty}).")
            break

    return copy_grid(grid)


def generate_puzzle(difficulty=DEFAULT_DIFFICULTY, rng=None):
    """
    Generates a Sudoku puzzle and its solution.
    `difficulty` is a filled-cell target or one of the names in DIFFICULTY_LEVELS.
    A cell with 0 means it's empty.
    """
    if isinstance(difficulty, str):
        if difficulty in DIFFICULTY_LEVELS:
            difficulty = DIFFICULTY_LEVELS[difficulty]
        else:
            logger.warning(f"Unknown difficulty '{difficulty}', using {DEFAULT_DIFFICULTY} filled cells.")
            difficulty = DEFAULT_DIFFICULTY

    solution_board = create_sudoku(rng)
    puzzle_board = remove_cells(copy_grid(solution_board), difficulty, rng)
    return puzzle_board, solution_board


# --- Formatting ---

def format_grid(grid: list[list[int]]) -> str:
    """One line per row, digits separated by spaces, 0 for blank."""
    return "\n".join(" ".join(str(num) for num in row) for row in grid)

def format_board_pretty(board: list[list[int]]) -> str:
    """Formats the Sudoku board with box borders in a readable format."""
    horiz_line = "  " + "+-------" * BASE + "+"
    lines = []
    for r in range(SIDE):
        if r % BASE == 0:
            lines.append(horiz_line)
        row_str = ""
        for c in range(SIDE):
            if c % BASE == 0:
                row_str += "|| " if c == 0 else "| "
            num = board[r][c]
            row_str += str(num) if num != 0 else "."
            row_str += " "
        lines.append(row_str + "||")
    lines.append(horiz_line)
    return "\n".join(lines)
