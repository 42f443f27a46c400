"""Word search placement: bounded random retry per word, then random letter fill."""

from __future__ import annotations

import random
import string
from typing import Iterable, Optional

from grid import can_place_word, clear_cells, create_empty_grid, write_word
from models import DirectionOptions, PlacedWord, WordSearchPuzzle, WorkingGrid

WORD_SEARCH_ATTEMPTS = 200
BACKTRACK_MAX_STEPS = 20_000
ALPHABET = string.ascii_uppercase


class _SearchBudgetExhausted(Exception):
    pass


def clean_words(raw_words: Iterable[str], size: int) -> list[str]:
    """Trim, uppercase, drop blanks and words longer than the grid."""
    words = (w.strip().upper() for w in raw_words)
    return [w for w in words if 0 < len(w) <= size]


def generate_word_search(
    raw_words: Iterable[str],
    size: int = 10,
    directions: DirectionOptions | None = None,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    backtrack: bool = False,
    attempts: int = WORD_SEARCH_ATTEMPTS,
) -> WordSearchPuzzle:
    """Place every word that fits, then fill the rest with random letters.

    Words that could not be placed are returned in ``unused``.  With
    ``backtrack=True`` a deterministic depth-first search over all candidate
    positions is tried first (see :func:`place_with_backtracking`).
    """
    if rng is None:
        rng = random.Random(seed)
    if directions is None:
        directions = DirectionOptions()

    words = clean_words(raw_words, size)
    vectors = directions.vectors()
    grid = create_empty_grid(size)

    if backtrack:
        results = place_with_backtracking(grid, words, vectors, rng)
    else:
        results = [place_word(grid, word, vectors, rng, attempts) for word in words]

    fill_empty_cells(grid, rng)

    placements = [p for p in results if p is not None]
    unused = [w for w, p in zip(words, results) if p is None]
    return WordSearchPuzzle(
        grid=grid,
        words=[p.word for p in placements],
        unused=unused,
        placements=placements,
    )


def place_word(
    grid: WorkingGrid,
    word: str,
    vectors: list[tuple[int, int]],
    rng: random.Random,
    attempts: int = WORD_SEARCH_ATTEMPTS,
) -> Optional[PlacedWord]:
    """Try up to *attempts* random direction/anchor pairs; write the first fit."""
    if not vectors or not word:
        return None

    size = len(grid)
    for _ in range(attempts):
        d_row, d_col = rng.choice(vectors)
        row = rng.randrange(size)
        col = rng.randrange(size)
        if can_place_word(grid, word, row, col, d_row, d_col):
            write_word(grid, word, row, col, d_row, d_col)
            return PlacedWord(word, row, col, d_row, d_col)

    return None


def fill_empty_cells(grid: WorkingGrid, rng: random.Random) -> None:
    for row in grid:
        for c, cell in enumerate(row):
            if cell is None:
                row[c] = rng.choice(ALPHABET)


# ── Deterministic backtracking mode ──────────────────────────────────

def place_with_backtracking(
    grid: WorkingGrid,
    words: list[str],
    vectors: list[tuple[int, int]],
    rng: random.Random,
    max_steps: int = BACKTRACK_MAX_STEPS,
) -> list[Optional[PlacedWord]]:
    """Search all candidate positions for a layout that fits every word.

    Candidates for each word are enumerated once and shuffled by *rng*.  If
    no complete layout exists, or the search takes more than *max_steps*
    placements, each word instead takes its first candidate that still fits,
    in input order.  Returns one entry per word, ``None`` where it failed.
    """
    candidates = [_candidate_placements(len(grid), w, vectors, rng) for w in words]

    scratch = [row[:] for row in grid]
    stack: list[PlacedWord] = []
    steps = 0

    def solve(index: int) -> bool:
        nonlocal steps
        if index == len(words):
            return True
        word = words[index]
        for row, col, d_row, d_col in candidates[index]:
            if not can_place_word(scratch, word, row, col, d_row, d_col):
                continue
            steps += 1
            if steps > max_steps:
                raise _SearchBudgetExhausted
            filled = write_word(scratch, word, row, col, d_row, d_col)
            stack.append(PlacedWord(word, row, col, d_row, d_col))
            if solve(index + 1):
                return True
            stack.pop()
            clear_cells(scratch, filled)
        return False

    try:
        solved = solve(0)
    except _SearchBudgetExhausted:
        solved = False

    if solved:
        grid[:] = scratch
        return list(stack)

    results: list[Optional[PlacedWord]] = []
    for word, options in zip(words, candidates):
        placed = None
        for row, col, d_row, d_col in options:
            if can_place_word(grid, word, row, col, d_row, d_col):
                write_word(grid, word, row, col, d_row, d_col)
                placed = PlacedWord(word, row, col, d_row, d_col)
                break
        results.append(placed)
    return results


def _candidate_placements(
    size: int, word: str, vectors: list[tuple[int, int]], rng: random.Random,
) -> list[tuple[int, int, int, int]]:
    """All (row, col, d_row, d_col) whose full span lies inside the grid."""
    span = len(word) - 1
    options = [
        (row, col, d_row, d_col)
        for d_row, d_col in vectors
        for row in range(size)
        for col in range(size)
        if 0 <= row + d_row * span < size and 0 <= col + d_col * span < size
    ]
    rng.shuffle(options)
    return options
