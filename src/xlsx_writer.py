"""Write puzzle answer sheets to XLSX."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font

from models import CrosswordPuzzle, WordSearchPuzzle

HEADER_FONT = Font(bold=True, size=12)


def write_crossword_xlsx(puzzle: CrosswordPuzzle, output_path: str) -> None:
    """Across and down clues on a 'Clues' sheet; unplaced entries on 'Not placed'.

    Numbering is embedded in the clue cell: '1. Clue text'.  Answers are in
    column B.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    row = 1
    for label, clues in (("ACROSS", puzzle.across), ("DOWN", puzzle.down)):
        ws.cell(row=row, column=1, value=label).font = HEADER_FONT
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1
        row += 1

    _set_widths(ws)

    if puzzle.unused:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Clue").font = HEADER_FONT
        ws2.cell(row=1, column=2, value="Answer").font = HEADER_FONT
        for i, entry in enumerate(puzzle.unused, start=2):
            ws2.cell(row=i, column=1, value=entry.clue_text)
            ws2.cell(row=i, column=2, value=entry.answer)
        _set_widths(ws2)

    wb.save(output_path)


def write_word_search_xlsx(puzzle: WordSearchPuzzle, output_path: str) -> None:
    """Placed words with start cell and direction; unplaced words on 'Not placed'."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Words"

    for col, label in enumerate(("Word", "Row", "Column", "Direction"), start=1):
        ws.cell(row=1, column=col, value=label).font = HEADER_FONT
    for i, placed in enumerate(puzzle.placements, start=2):
        ws.cell(row=i, column=1, value=placed.word)
        ws.cell(row=i, column=2, value=placed.row + 1)
        ws.cell(row=i, column=3, value=placed.col + 1)
        ws.cell(row=i, column=4, value=_compass(placed.d_row, placed.d_col))
    ws.column_dimensions["A"].width = 25

    if puzzle.unused:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Word").font = HEADER_FONT
        for i, word in enumerate(puzzle.unused, start=2):
            ws2.cell(row=i, column=1, value=word)
        ws2.column_dimensions["A"].width = 25

    wb.save(output_path)


def _set_widths(ws) -> None:
    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15


_COMPASS = {
    (0, 1): "E", (0, -1): "W", (1, 0): "S", (-1, 0): "N",
    (1, 1): "SE", (-1, 1): "NE", (1, -1): "SW", (-1, -1): "NW",
}


def _compass(d_row: int, d_col: int) -> str:
    return _COMPASS[(d_row, d_col)]
