"""Crossword word placement: centred seed word + first-fit intersection search."""

from __future__ import annotations

import random
from typing import Optional

from grid import can_place_word, create_empty_grid, write_word
from models import MIN_ANSWER_LENGTH, ClueEntry, Direction, PlacedEntry, WorkingGrid

DEFAULT_CROSSWORD_SIZE = 15


def place_words(
    clues: list[ClueEntry],
    grid_size: int = DEFAULT_CROSSWORD_SIZE,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> tuple[list[PlacedEntry], list[ClueEntry], WorkingGrid]:
    """Lay out as many entries as possible with letter-sharing crossings.

    Returns ``(placed, unused, working_grid)``.  ``placed`` is in placement
    order (shuffled, then longest first); answers too long for the grid
    lead ``unused``, as do answers shorter than MIN_ANSWER_LENGTH.
    """
    if rng is None:
        rng = random.Random(seed)

    working = create_empty_grid(grid_size)
    placed: list[PlacedEntry] = []
    # Answers that can never fit, or never carry a numbered clue, are unused
    # up front so the seed always fits.
    unused = [c for c in clues if not _fits_grid(c.answer, grid_size)]
    ordered = _placement_order(
        [c for c in clues if _fits_grid(c.answer, grid_size)], rng,
    )
    if not ordered:
        return placed, unused, working

    first = ordered[0]
    row = grid_size // 2
    col = (grid_size - len(first.answer)) // 2
    placed.append(_commit(first, row, col, Direction.ACROSS, working))

    for clue in ordered[1:]:
        entry = _find_crossing(clue, working, placed)
        if entry is None:
            unused.append(clue)
        else:
            placed.append(entry)

    return placed, unused, working


def _placement_order(clues: list[ClueEntry], rng: random.Random) -> list[ClueEntry]:
    """Shuffle, then stable-sort longest first; the shuffle breaks length ties."""
    shuffled = list(clues)
    rng.shuffle(shuffled)
    shuffled.sort(key=lambda c: len(c.answer), reverse=True)
    return shuffled


def _fits_grid(answer: str, grid_size: int) -> bool:
    return MIN_ANSWER_LENGTH <= len(answer) <= grid_size


# ── Intersection search ──────────────────────────────────────────────

def _find_crossing(
    clue: ClueEntry, working: WorkingGrid, placed: list[PlacedEntry],
) -> Optional[PlacedEntry]:
    """Scan letters left-to-right, grid row-major; first valid crossing wins."""
    answer = clue.answer
    size = len(working)
    starts = {(p.row, p.col, p.direction) for p in placed}
    caps = {
        cell for p in placed for cell in _end_caps(p.answer, p.row, p.col, p.direction)
    }

    for index, letter in enumerate(answer):
        for r in range(size):
            for c in range(size):
                if working[r][c] != letter:
                    continue
                for direction in (Direction.ACROSS, Direction.DOWN):
                    start = _start_through(r, c, direction, index)
                    if (*start, direction) in starts:
                        continue
                    if (_can_place(answer, *start, direction, working)
                            and _keeps_clues(answer, *start, direction, working, caps)):
                        return _commit(clue, *start, direction, working)
    return None


def _keeps_clues(
    answer: str, row: int, col: int, direction: Direction,
    working: WorkingGrid, caps: set[tuple[int, int]],
) -> bool:
    """True when placing here leaves every entry, old and new, a numbered start.

    The run must add at least one letter, the cells just before and after it
    must be empty, and it must not fill the cell just before or after an
    entry that is already placed.
    """
    dr, dc = _vector(direction)
    cells = [(row + dr * i, col + dc * i) for i in range(len(answer))]
    if all(working[r][c] is not None for r, c in cells):
        return False
    if caps.intersection(cells):
        return False
    size = len(working)
    return not any(
        0 <= r < size and 0 <= c < size and working[r][c] is not None
        for r, c in _end_caps(answer, row, col, direction)
    )


def _end_caps(
    answer: str, row: int, col: int, direction: Direction,
) -> tuple[tuple[int, int], tuple[int, int]]:
    """The cells just before the first letter and just after the last."""
    dr, dc = _vector(direction)
    n = len(answer)
    return (row - dr, col - dc), (row + dr * n, col + dc * n)


def _start_through(
    row: int, col: int, direction: Direction, index_in_word: int,
) -> tuple[int, int]:
    """Start cell of a word crossing (row, col) with its *index_in_word* letter."""
    if direction == Direction.ACROSS:
        return row, col - index_in_word
    return row - index_in_word, col


# ── Grid manipulation ─────────────────────────────────────────────────

def _vector(direction: Direction) -> tuple[int, int]:
    return (1, 0) if direction == Direction.DOWN else (0, 1)


def _can_place(
    answer: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> bool:
    dr, dc = _vector(direction)
    return can_place_word(working, answer, row, col, dr, dc)


def _commit(
    clue: ClueEntry, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> PlacedEntry:
    dr, dc = _vector(direction)
    write_word(working, clue.answer, row, col, dr, dc)
    return PlacedEntry(
        number=clue.number, clue_text=clue.clue_text, answer=clue.answer,
        row=row, col=col, direction=direction,
    )
