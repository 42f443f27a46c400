"""Tests for xlsx_writer.py."""

import os
import tempfile

import openpyxl
import pytest

from models import (
    ClueEntry,
    CrosswordPuzzle,
    Direction,
    Grid,
    NumberedClue,
    PlacedWord,
    WordSearchPuzzle,
)
from xlsx_writer import write_crossword_xlsx, write_word_search_xlsx


def _sample_crossword(unused=None):
    across = [
        NumberedClue(1, "Feline pet", "CAT", Direction.ACROSS),
        NumberedClue(5, "Man's best friend", "DOG", Direction.ACROSS),
    ]
    down = [
        NumberedClue(1, "Automobile", "CAR", Direction.DOWN),
        NumberedClue(3, "Large body of water", "OCEAN", Direction.DOWN),
    ]
    return CrosswordPuzzle(
        grid=Grid.create(5), across=across, down=down, placed=[], unused=unused or [],
    )


@pytest.fixture
def xlsx_path():
    with tempfile.NamedTemporaryFile(suffix=".xlsx", delete=False) as f:
        path = f.name
    yield path
    os.unlink(path)


class TestWriteCrosswordXlsx:
    def test_across_section(self, xlsx_path):
        write_crossword_xlsx(_sample_crossword(), xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path)["Clues"]
        assert ws.cell(row=1, column=1).value == "ACROSS"
        assert ws.cell(row=2, column=1).value == "1. Feline pet"
        assert ws.cell(row=2, column=2).value == "CAT"
        assert ws.cell(row=3, column=1).value == "5. Man's best friend"

    def test_down_section_after_blank_row(self, xlsx_path):
        write_crossword_xlsx(_sample_crossword(), xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path)["Clues"]
        assert ws.cell(row=4, column=1).value is None
        assert ws.cell(row=5, column=1).value == "DOWN"
        assert ws.cell(row=7, column=1).value == "3. Large body of water"
        assert ws.cell(row=7, column=2).value == "OCEAN"

    def test_bold_headers(self, xlsx_path):
        write_crossword_xlsx(_sample_crossword(), xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path)["Clues"]
        assert ws.cell(row=1, column=1).font.bold is True
        assert ws.cell(row=5, column=1).font.bold is True

    def test_unplaced_sheet(self, xlsx_path):
        unused = [ClueEntry(10, "Not used clue", "UNUSED")]
        write_crossword_xlsx(_sample_crossword(unused), xlsx_path)
        ws2 = openpyxl.load_workbook(xlsx_path)["Not placed"]
        assert ws2.cell(row=1, column=1).value == "Clue"
        assert ws2.cell(row=2, column=1).value == "Not used clue"
        assert ws2.cell(row=2, column=2).value == "UNUSED"

    def test_no_unplaced_sheet_when_empty(self, xlsx_path):
        write_crossword_xlsx(_sample_crossword(), xlsx_path)
        assert "Not placed" not in openpyxl.load_workbook(xlsx_path).sheetnames


class TestWriteWordSearchXlsx:
    def test_words_and_unused(self, xlsx_path):
        puzzle = WordSearchPuzzle(
            grid=[["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]],
            words=["CAT"],
            unused=["ELEPHANT"],
            placements=[PlacedWord("CAT", 0, 0, 0, 1)],
        )
        write_word_search_xlsx(puzzle, xlsx_path)
        wb = openpyxl.load_workbook(xlsx_path)
        ws = wb["Words"]
        assert [c.value for c in ws[2]] == ["CAT", 1, 1, "E"]
        assert wb["Not placed"].cell(row=2, column=1).value == "ELEPHANT"
