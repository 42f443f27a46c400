"""Tests for pdf_renderer.py."""

import os
import re
import tempfile

import pytest

from bingo import generate_bingo_cards
from grid_builder import generate_crossword
from models import ClueEntry, Direction, NumberedClue
from pdf_renderer import (
    ColumnLayout,
    _cell_size,
    _fit_columns,
    render_bingo_pdf,
    render_crossword_pdf,
    render_word_search_pdf,
)
from word_search import generate_word_search


_CLUES = [
    ClueEntry(0, "Greeting", "HELLO"),
    ClueEntry(1, "Cheerful", "HAPPY"),
    ClueEntry(2, "Large body of water", "OCEAN"),
    ClueEntry(3, "You read this", "BOOK"),
]


@pytest.fixture
def pdf_path():
    with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
        path = f.name
    yield path
    os.unlink(path)


def _page_count(path) -> int:
    with open(path, "rb") as f:
        return len(re.findall(rb"/Type\s*/Page[^s]", f.read()))


def _is_pdf(path) -> bool:
    with open(path, "rb") as f:
        return f.read(5) == b"%PDF-"


class TestRenderCrosswordPdf:
    def test_two_pages(self, pdf_path):
        puzzle = generate_crossword(_CLUES, 15, seed=1)
        render_crossword_pdf(puzzle, "TEST", pdf_path)
        assert _is_pdf(pdf_path)
        assert _page_count(pdf_path) == 2

    def test_page_size(self, pdf_path):
        puzzle = generate_crossword(_CLUES, 15, seed=1)
        render_crossword_pdf(puzzle, "TEST", pdf_path)
        with open(pdf_path, "rb") as f:
            content = f.read()
        assert b"612" in content
        assert b"792" in content

    def test_empty_puzzle(self, pdf_path):
        render_crossword_pdf(generate_crossword([], 15), "EMPTY", pdf_path)
        assert _is_pdf(pdf_path)


class TestRenderWordSearchPdf:
    def test_two_pages(self, pdf_path):
        puzzle = generate_word_search(["CAT", "DOG", "BIRD"], 20, seed=1)
        render_word_search_pdf(puzzle, "ANIMALS", pdf_path)
        assert _is_pdf(pdf_path)
        assert _page_count(pdf_path) == 2


class TestRenderBingoPdf:
    def test_one_page_per_card(self, pdf_path):
        cards = generate_bingo_cards([f"Long bingo phrase number {i}" for i in range(30)], 3, seed=1)
        render_bingo_pdf(cards, "BINGO", pdf_path)
        assert _is_pdf(pdf_path)
        assert _page_count(pdf_path) == 3


class TestLayout:
    def test_cell_size_caps(self):
        assert _cell_size(8) == 28.0
        assert _cell_size(20) == 19.0

    def test_fit_keeps_font_when_short(self):
        items = [("header", "ACROSS"), ("text", "<b>1.</b> Short clue")]
        layout, columns = _fit_columns(items, ColumnLayout(top_y=400, cols=3))
        assert layout.font_size == 9.0
        assert columns[0][0][1] == "ACROSS"

    def test_fit_shrinks_when_crowded(self):
        clue = NumberedClue(1, "A fairly long clue that will wrap over a line or two", "X", Direction.ACROSS)
        items = [("header", "ACROSS")] + [("text", f"<b>{clue.number}.</b> {clue.clue_text}")] * 80
        layout, _ = _fit_columns(items, ColumnLayout(top_y=300, cols=3))
        assert layout.font_size < 9.0

    def test_header_not_left_at_column_bottom(self):
        items = [("text", "x")] * 10 + [("header", "DOWN")] + [("text", "y")] * 10
        _, columns = _fit_columns(items, ColumnLayout(top_y=700, cols=2))
        for col in columns:
            if col:
                assert col[-1][0] != "header"
