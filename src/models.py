"""Data models for the puzzle generators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

WorkingGrid = list[list[Optional[str]]]

# Shortest crossword answer that can start a numbered entry.
MIN_ANSWER_LENGTH = 2


class CellType(Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"


@dataclass(frozen=True)
class DirectionOptions:
    """Which word-search directions are enabled.

    ``diagonal`` covers both diagonal senses (down-right and up-right).
    ``reverse`` adds the backwards variant of every enabled direction.
    """

    horizontal: bool = True
    vertical: bool = True
    diagonal: bool = True
    reverse: bool = False

    def vectors(self) -> list[tuple[int, int]]:
        """Return the enabled (d_row, d_col) direction vectors."""
        forward: list[tuple[int, int]] = []
        if self.horizontal:
            forward.append((0, 1))
        if self.vertical:
            forward.append((1, 0))
        if self.diagonal:
            forward.extend([(1, 1), (-1, 1)])
        if not self.reverse:
            return forward
        return forward + [(-dr, -dc) for dr, dc in forward]


@dataclass(frozen=True)
class PlacedWord:
    """A word-search word and where it landed."""

    word: str
    row: int
    col: int
    d_row: int
    d_col: int

    def cells(self) -> list[tuple[int, int]]:
        return [
            (self.row + self.d_row * i, self.col + self.d_col * i)
            for i in range(len(self.word))
        ]


@dataclass(frozen=True)
class WordSearchPuzzle:
    grid: list[list[str]]
    words: list[str]  # placed, in input order
    unused: list[str] = field(default_factory=list)
    placements: list[PlacedWord] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.grid)


@dataclass(frozen=True)
class ClueEntry:
    """A clue/answer pair. ``number`` is the input id, an ordering hint only."""

    number: int
    clue_text: str
    answer: str  # uppercase, A-Z0-9 only


@dataclass(frozen=True)
class PlacedEntry(ClueEntry):
    """A ClueEntry that has been assigned a position on the grid."""

    row: int = 0
    col: int = 0
    direction: Direction = Direction.ACROSS


@dataclass
class Cell:
    """A single cell in the crossword grid."""

    cell_type: CellType = CellType.BLACK
    letter: str | None = None
    number: int | None = None


@dataclass
class Grid:
    """An NxN crossword grid of Cell objects."""

    size: int
    cells: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def create(cls, size: int) -> Grid:
        """Create a grid of all-BLACK cells."""
        cells = [[Cell() for _ in range(size)] for _ in range(size)]
        return cls(size=size, cells=cells)


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its grid-assigned display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


@dataclass
class CrosswordPuzzle:
    grid: Grid
    across: list[NumberedClue]
    down: list[NumberedClue]
    placed: list[PlacedEntry]
    unused: list[ClueEntry]


@dataclass(frozen=True)
class BingoCard:
    """A square bingo card. ``pool`` is the cleaned word list it was drawn from."""

    cells: tuple[tuple[str, ...], ...]
    pool: tuple[str, ...]
    free_center: bool = True

    @property
    def size(self) -> int:
        return len(self.cells)


class PuzzleError(Exception):
    """Fatal error during puzzle generation."""


class CrosswordError(PuzzleError):
    """Fatal error during crossword generation or clue loading."""


class NotEnoughWordsError(PuzzleError):
    """The word pool is too small for the requested card."""

    def __init__(self, required: int, available: int, message: str | None = None):
        self.required = required
        self.available = available
        super().__init__(
            message
            or f"Need at least {required} words for the card, got {available}"
        )
