"""Read crossword clues or plain word lists from an XLSX workbook."""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import MIN_ANSWER_LENGTH, ClueEntry, CrosswordError, PuzzleError
from text_reader import normalize_answer


def read_clues(path: str | Path, grid_size: int = 15) -> list[ClueEntry]:
    """Open *path*, detect header, parse number/clue/answer rows, validate."""
    wb = _open(path)
    ws = wb.active

    header_row = _detect_header_row(ws)
    entries: list[ClueEntry] = []

    for row in ws.iter_rows(min_row=header_row + 1, values_only=True):
        if len(row) < 3 or row[0] is None:
            continue
        try:
            number = int(row[0])
        except (ValueError, TypeError):
            continue
        clue_text = str(row[1]).strip() if row[1] is not None else ""
        answer = normalize_answer(str(row[2])) if row[2] is not None else ""
        if not answer:
            continue
        entries.append(ClueEntry(number=number, clue_text=clue_text, answer=answer))

    wb.close()
    return _validate_and_filter(entries, grid_size)


def read_words(path: str | Path) -> list[str]:
    """Return the non-blank cells of the first column, top to bottom."""
    wb = _open(path)
    ws = wb.active
    words: list[str] = []
    for row in ws.iter_rows(min_col=1, max_col=1, values_only=True):
        value = row[0] if row else None
        if value is None:
            continue
        word = str(value).strip()
        if word:
            words.append(word)
    wb.close()
    return words


def _open(path: str | Path):
    path = Path(path)
    if not path.exists():
        raise PuzzleError(f"File not found: {path}")
    return openpyxl.load_workbook(path, read_only=True, data_only=True)


def _detect_header_row(sheet) -> int:
    """Return the 1-based row index of the header.

    The header is the row before the first row whose column A is an int.
    Returns 0 (no header) when the very first row is data.
    """
    for index, row in enumerate(
        sheet.iter_rows(min_row=1, max_row=20, max_col=1, values_only=True), start=1
    ):
        try:
            int(row[0])
        except (ValueError, TypeError, IndexError):
            continue
        return index - 1
    return 1


def _validate_and_filter(
    entries: list[ClueEntry], grid_size: int
) -> list[ClueEntry]:
    """Keep answers of length 2..grid_size, first occurrence wins.

    Every dropped entry is reported on stderr.  Raises CrosswordError when
    nothing survives.
    """
    seen: set[str] = set()
    kept: list[ClueEntry] = []

    for entry in entries:
        reason = _skip_reason(entry.answer, grid_size, seen)
        if reason:
            print(f"Warning: skipping '{entry.answer}' ({reason})", file=sys.stderr)
            continue
        seen.add(entry.answer)
        kept.append(entry)

    if not kept:
        raise CrosswordError("No valid clue entries after filtering")
    return kept


def _skip_reason(answer: str, grid_size: int, seen: set[str]) -> str | None:
    if len(answer) < MIN_ANSWER_LENGTH:
        return f"too short, <{MIN_ANSWER_LENGTH} letters"
    if len(answer) > grid_size:
        return f"too long for {grid_size}x{grid_size} grid"
    if answer in seen:
        return "duplicate answer"
    return None
