"""Working-grid primitives shared by the word search and crossword placers.

A working grid is a square ``list[list[str | None]]``; ``None`` marks an
empty cell and a filled cell holds a single uppercase character.
"""

from __future__ import annotations

from models import WorkingGrid


def create_empty_grid(size: int) -> WorkingGrid:
    """Return a size x size grid with every cell empty."""
    return [[None] * size for _ in range(size)]


def in_bounds(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def can_place_word(
    grid: WorkingGrid, word: str, row: int, col: int, d_row: int, d_col: int,
) -> bool:
    """Check that *word* fits from (row, col) along (d_row, d_col).

    Every cell must be inside the grid and either empty or already holding
    the same letter. Bounds are checked before content for each cell.
    """
    size = len(grid)
    for i, letter in enumerate(word):
        r = row + d_row * i
        c = col + d_col * i
        if not in_bounds(size, r, c):
            return False
        existing = grid[r][c]
        if existing is not None and existing != letter:
            return False
    return True


def write_word(
    grid: WorkingGrid, word: str, row: int, col: int, d_row: int, d_col: int,
) -> list[tuple[int, int]]:
    """Write *word* into the grid; return the cells that were previously empty.

    Callers must check with :func:`can_place_word` first.
    """
    newly_filled: list[tuple[int, int]] = []
    for i, letter in enumerate(word):
        r = row + d_row * i
        c = col + d_col * i
        if grid[r][c] is None:
            newly_filled.append((r, c))
        grid[r][c] = letter
    return newly_filled


def clear_cells(grid: WorkingGrid, cells: list[tuple[int, int]]) -> None:
    for r, c in cells:
        grid[r][c] = None
