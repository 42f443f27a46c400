"""Integration tests: end-to-end word list → PDF/SVG/XLSX."""

import openpyxl
import pytest

from puzzle_generator import main


def _pdf_ok(path) -> bool:
    return path.exists() and path.read_bytes()[:5] == b"%PDF-"


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "animals.txt"
    path.write_text("cat\ndog\nbird\n\nhorse\nmouse\n", encoding="utf-8")
    return path


@pytest.fixture
def clue_file(tmp_path):
    path = tmp_path / "clues.txt"
    path.write_text(
        "HELLO | Greeting\n"
        "HAPPY | Cheerful\n"
        "OCEAN | Large body of water\n"
        "no separator on this line\n"
        "BOOK | You read this\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def bingo_file(tmp_path):
    path = tmp_path / "bingo.txt"
    path.write_text("\n".join(f"Phrase {i}" for i in range(30)), encoding="utf-8")
    return path


@pytest.mark.slow
class TestWordSearchCommand:
    def test_writes_all_outputs(self, word_file):
        main(["wordsearch", str(word_file), "--seed", "42"])
        out = word_file.parent / "output"
        assert _pdf_ok(out / "animals.pdf")
        assert (out / "animals_puzzle.svg").exists()
        assert (out / "animals_answer.svg").exists()
        ws = openpyxl.load_workbook(out / "animals_answers.xlsx")["Words"]
        assert ws.max_row == 6

    def test_explicit_output_name(self, word_file, tmp_path):
        main(["wordsearch", str(word_file), str(tmp_path / "zoo.pdf"),
              "--size", "12", "--reverse", "--seed", "1"])
        assert _pdf_ok(tmp_path / "output" / "zoo.pdf")

    def test_backtracking(self, word_file):
        main(["wordsearch", str(word_file), "--backtrack", "--seed", "7"])
        assert _pdf_ok(word_file.parent / "output" / "animals.pdf")

    def test_no_directions(self, word_file, capsys):
        with pytest.raises(SystemExit):
            main(["wordsearch", str(word_file),
                  "--no-horizontal", "--no-vertical", "--no-diagonal"])
        assert "Select at least one direction." in capsys.readouterr().err

    def test_size_out_of_range(self, word_file):
        with pytest.raises(SystemExit):
            main(["wordsearch", str(word_file), "--size", "30"])

    def test_empty_word_list(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n  \n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["wordsearch", str(path)])


@pytest.mark.slow
class TestCrosswordCommand:
    def test_writes_all_outputs(self, clue_file, capsys):
        main(["crossword", str(clue_file), "--grid-size", "11", "--seed", "3"])
        out = clue_file.parent / "output"
        assert _pdf_ok(out / "clues.pdf")
        assert (out / "clues_puzzle.svg").exists()
        assert (out / "clues_answer.svg").exists()
        assert (out / "clues_answers.xlsx").exists()
        assert "no separator on this line" in capsys.readouterr().err

    def test_nothing_parsed(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("just words\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["crossword", str(path)])

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main(["crossword", str(tmp_path / "missing.txt")])
        assert "File not found" in capsys.readouterr().err


@pytest.mark.slow
class TestBingoCommand:
    def test_one_page_per_card(self, bingo_file):
        main(["bingo", str(bingo_file), "--cards", "4", "--seed", "5"])
        out = bingo_file.parent / "output"
        assert _pdf_ok(out / "bingo.pdf")
        assert (out / "bingo_puzzle.svg").exists()

    def test_comma_separated_pool(self, tmp_path):
        path = tmp_path / "pool.txt"
        path.write_text(", ".join(f"Word {i}" for i in range(24)), encoding="utf-8")
        main(["bingo", str(path), "--seed", "2"])
        assert _pdf_ok(tmp_path / "output" / "pool.pdf")

    def test_too_few_words(self, word_file, capsys):
        with pytest.raises(SystemExit):
            main(["bingo", str(word_file)])
        assert "at least 24 words" in capsys.readouterr().err

    def test_zero_cards(self, bingo_file):
        with pytest.raises(SystemExit):
            main(["bingo", str(bingo_file), "--cards", "0"])
