"""Build the Grid model from placed entries, assign cell numbers, build clue lists."""

from __future__ import annotations

import random

from grid_placer import DEFAULT_CROSSWORD_SIZE, place_words
from models import (
    CellType,
    ClueEntry,
    CrosswordError,
    CrosswordPuzzle,
    Direction,
    Grid,
    NumberedClue,
    PlacedEntry,
)


def generate_crossword(
    clues: list[ClueEntry],
    grid_size: int = DEFAULT_CROSSWORD_SIZE,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> CrosswordPuzzle:
    """Place, build, number and collect clues in one call."""
    placed, unused, _ = place_words(clues, grid_size, seed=seed, rng=rng)
    grid = build_grid(placed, grid_size)
    number_grid(grid)
    across, down = build_clue_lists(grid, placed)
    return CrosswordPuzzle(
        grid=grid, across=across, down=down, placed=placed, unused=unused,
    )


def build_grid(placed: list[PlacedEntry], grid_size: int) -> Grid:
    """Create a Grid and write letters from each PlacedEntry."""
    grid = Grid.create(grid_size)

    for entry in placed:
        dr = 1 if entry.direction == Direction.DOWN else 0
        dc = 1 if entry.direction == Direction.ACROSS else 0

        for i, letter in enumerate(entry.answer):
            r = entry.row + dr * i
            c = entry.col + dc * i
            if not (0 <= r < grid_size and 0 <= c < grid_size):
                raise CrosswordError(
                    f"'{entry.answer}' runs off the {grid_size}x{grid_size} grid at ({r},{c})"
                )
            cell = grid.cells[r][c]
            if cell.letter is not None and cell.letter != letter:
                raise CrosswordError(
                    f"Letter conflict at ({r},{c}): existing '{cell.letter}' vs '{letter}'"
                )
            cell.cell_type = CellType.WHITE
            cell.letter = letter

    return grid


def number_grid(grid: Grid) -> None:
    """Scan L→R, T→B and assign sequential numbers where a word starts."""
    counter = 1
    for r in range(grid.size):
        for c in range(grid.size):
            cell = grid.cells[r][c]
            cell.number = None
            if cell.cell_type != CellType.WHITE:
                continue
            if _starts_across(grid, r, c) or _starts_down(grid, r, c):
                cell.number = counter
                counter += 1


def build_clue_lists(
    grid: Grid, placed: list[PlacedEntry]
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Walk numbered cells in order and attach the entry starting there.

    A start with no matching entry is skipped.  Two entries claiming the
    same start cell and direction is an invariant violation.
    """
    by_start: dict[tuple[int, int, Direction], PlacedEntry] = {}
    for entry in placed:
        key = (entry.row, entry.col, entry.direction)
        if key in by_start:
            raise CrosswordError(
                f"'{by_start[key].answer}' and '{entry.answer}' both start "
                f"{entry.direction.value.lower()} at ({entry.row},{entry.col})"
            )
        by_start[key] = entry

    across: list[NumberedClue] = []
    down: list[NumberedClue] = []

    for r in range(grid.size):
        for c in range(grid.size):
            number = grid.cells[r][c].number
            if number is None:
                continue
            if _starts_across(grid, r, c):
                clue = _clue_at(by_start, number, r, c, Direction.ACROSS)
                if clue is not None:
                    across.append(clue)
            if _starts_down(grid, r, c):
                clue = _clue_at(by_start, number, r, c, Direction.DOWN)
                if clue is not None:
                    down.append(clue)

    return across, down


def _clue_at(
    by_start: dict[tuple[int, int, Direction], PlacedEntry],
    number: int, r: int, c: int, direction: Direction,
) -> NumberedClue | None:
    entry = by_start.get((r, c, direction))
    if entry is None:
        return None
    return NumberedClue(
        number=number,
        clue_text=entry.clue_text,
        answer=entry.answer,
        direction=direction,
    )


def _is_white(grid: Grid, r: int, c: int) -> bool:
    """Off-grid cells count as black."""
    return (0 <= r < grid.size and 0 <= c < grid.size
            and grid.cells[r][c].cell_type == CellType.WHITE)


def _starts_across(grid: Grid, r: int, c: int) -> bool:
    return (_is_white(grid, r, c)
            and not _is_white(grid, r, c - 1)
            and _is_white(grid, r, c + 1))


def _starts_down(grid: Grid, r: int, c: int) -> bool:
    return (_is_white(grid, r, c)
            and not _is_white(grid, r - 1, c)
            and _is_white(grid, r + 1, c))
