"""Parse pasted or file text into word lists and crossword clue entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from models import MIN_ANSWER_LENGTH, ClueEntry, PuzzleError

_NON_ANSWER_RE = re.compile(r"[^A-Z0-9]")
_WORD_SEPARATOR_RE = re.compile(r"[\n,]")


@dataclass(frozen=True)
class ClueParseResult:
    entries: list[ClueEntry]
    bad_lines: list[str]


def _iter_nonempty_lines(text: str) -> Iterable[str]:
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        yield line


def normalize_answer(raw: str) -> str:
    """Uppercase and keep only A-Z and 0-9 (spaces and punctuation go)."""
    return _NON_ANSWER_RE.sub("", raw.strip().upper())


def parse_word_list_text(text: str) -> list[str]:
    """Words or phrases separated by newlines or commas; blanks are skipped."""
    words = (w.strip() for w in _WORD_SEPARATOR_RE.split(text))
    return [w for w in words if w]


def parse_clue_lines(text: str) -> ClueParseResult:
    """Parse ``ANSWER | clue`` lines.

    Everything after the first ``|`` is the clue.  Lines without a ``|`` or
    whose answer normalizes to fewer than MIN_ANSWER_LENGTH characters are
    returned in ``bad_lines``.
    """
    entries: list[ClueEntry] = []
    bad: list[str] = []

    for idx, line in enumerate(_iter_nonempty_lines(text)):
        answer_raw, sep, clue = line.partition("|")
        if not sep:
            bad.append(line)
            continue
        answer = normalize_answer(answer_raw)
        if len(answer) < MIN_ANSWER_LENGTH:
            bad.append(line)
            continue
        entries.append(ClueEntry(number=idx, clue_text=clue.strip(), answer=answer))

    return ClueParseResult(entries=entries, bad_lines=bad)


def read_text(path: str | Path) -> str:
    path = Path(path)
    if not path.exists():
        raise PuzzleError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PuzzleError(f"Unable to read {path} as UTF-8 text") from e
