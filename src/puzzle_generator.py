#!/usr/bin/env python3
"""CLI entry point for printable puzzle generation.

Three subcommands, each reading a .txt or .xlsx word list:
  wordsearch: words hidden in a letter grid
  crossword:  'ANSWER | clue' lines laid out with crossings
  bingo:      5x5 cards dealt from a word pool
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from models import MIN_ANSWER_LENGTH, DirectionOptions, PuzzleError

WORD_SEARCH_SIZES = range(8, 21)
CROSSWORD_SIZES = range(5, 26)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate printable puzzle sheets (PDF + SVG + XLSX)."
    )
    sub = p.add_subparsers(dest="command", required=True)

    ws = sub.add_parser("wordsearch", help="Hide words in a grid of random letters")
    _add_common(ws, default_title="WORD SEARCH")
    ws.add_argument("--size", type=int, default=10,
                    help="Grid size NxN, 8-20 (default: 10)")
    ws.add_argument("--no-horizontal", action="store_true",
                    help="Do not place words left to right")
    ws.add_argument("--no-vertical", action="store_true",
                    help="Do not place words top to bottom")
    ws.add_argument("--no-diagonal", action="store_true",
                    help="Do not place words on either diagonal")
    ws.add_argument("--reverse", action="store_true",
                    help="Also allow every enabled direction backwards")
    ws.add_argument("--backtrack", action="store_true",
                    help="Search all positions instead of 200 random tries per word")

    cw = sub.add_parser("crossword", help="Lay out 'ANSWER | clue' lines as a crossword")
    _add_common(cw, default_title="CROSSWORD")
    cw.add_argument("--grid-size", type=int, default=15,
                    help="Grid size NxN, 5-25 (default: 15)")

    bg = sub.add_parser("bingo", help="Deal 5x5 bingo cards from a word pool")
    _add_common(bg, default_title="BINGO")
    bg.add_argument("--cards", type=int, default=1,
                    help="Number of cards, one per page (default: 1)")
    bg.add_argument("--no-free-center", action="store_true",
                    help="Fill the centre square from the word pool too")
    return p


def _add_common(p: argparse.ArgumentParser, default_title: str) -> None:
    p.add_argument("input", help="Word list: .txt (one entry per line) or .xlsx")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: input with .pdf extension)",
    )
    p.add_argument("--title", default=default_title,
                   help=f'Title text (default: "{default_title}")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    output_path = args.output or str(Path(args.input).with_suffix(".pdf"))
    t0 = time.time()

    runners = {
        "wordsearch": _run_word_search,
        "crossword": _run_crossword,
        "bingo": _run_bingo,
    }
    try:
        runners[args.command](args, seed, output_path)
    except PuzzleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Done in {time.time() - t0:.1f}s", file=sys.stderr)


# ── Input ─────────────────────────────────────────────────────────────

def _load_words(path: str) -> list[str]:
    from text_reader import parse_word_list_text, read_text
    from xlsx_reader import read_words

    if Path(path).suffix.lower() == ".xlsx":
        words = read_words(path)
    else:
        words = parse_word_list_text(read_text(path))
    if not words:
        raise PuzzleError("Provide at least one word (one per line).")
    return words


def _load_clues(path: str, grid_size: int):
    from text_reader import parse_clue_lines, read_text
    from xlsx_reader import read_clues

    if Path(path).suffix.lower() == ".xlsx":
        return read_clues(path, grid_size)

    parsed = parse_clue_lines(read_text(path))
    for line in parsed.bad_lines:
        print(f"Warning: could not parse '{line}' "
              f"(expected 'ANSWER | clue', answer of {MIN_ANSWER_LENGTH}+ letters)",
              file=sys.stderr)
    if not parsed.entries:
        raise PuzzleError(
            "Could not parse any valid entries. Use the format: ANSWER | clue."
        )
    return parsed.entries


def _check_size(value: int, allowed: range, what: str) -> None:
    if value not in allowed:
        raise PuzzleError(
            f"{what} must be between {allowed.start} and {allowed.stop - 1}, got {value}"
        )


def _output_paths(output_path: str) -> dict[str, str]:
    """Everything goes to an 'output' folder beside *output_path*."""
    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(parents=True, exist_ok=True)
    return {
        "pdf": str(out_dir / f"{stem}.pdf"),
        "xlsx": str(out_dir / f"{stem}_answers.xlsx"),
        "puzzle_svg": str(out_dir / f"{stem}_puzzle.svg"),
        "answer_svg": str(out_dir / f"{stem}_answer.svg"),
    }


def _report(paths: list[str]) -> None:
    for path in paths:
        print(f"Output: {path}", file=sys.stderr)


# ── Subcommands ──────────────────────────────────────────────────────

def _run_word_search(args, seed: int, output_path: str) -> None:
    from pdf_renderer import render_word_search_pdf
    from svg_renderer import render_word_search_svg
    from word_search import generate_word_search
    from xlsx_writer import write_word_search_xlsx

    _check_size(args.size, WORD_SEARCH_SIZES, "Grid size")
    directions = DirectionOptions(
        horizontal=not args.no_horizontal,
        vertical=not args.no_vertical,
        diagonal=not args.no_diagonal,
        reverse=args.reverse,
    )
    if not directions.vectors():
        raise PuzzleError("Select at least one direction.")

    words = _load_words(args.input)
    print(f"Generating {args.size}x{args.size} word search (seed={seed})...",
          file=sys.stderr)
    puzzle = generate_word_search(
        words, args.size, directions, seed=seed, backtrack=args.backtrack,
    )

    paths = _output_paths(output_path)
    render_word_search_pdf(puzzle, args.title, paths["pdf"])
    write_word_search_xlsx(puzzle, paths["xlsx"])
    render_word_search_svg(puzzle, paths["puzzle_svg"])
    render_word_search_svg(puzzle, paths["answer_svg"], show_answers=True)
    _report(list(paths.values()))

    print(f"Placed {len(puzzle.words)}/{len(puzzle.words) + len(puzzle.unused)} words",
          file=sys.stderr)
    for word in puzzle.unused:
        print(f"Warning: could not place '{word}'", file=sys.stderr)


def _run_crossword(args, seed: int, output_path: str) -> None:
    from grid_builder import generate_crossword
    from pdf_renderer import render_crossword_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_crossword_xlsx

    _check_size(args.grid_size, CROSSWORD_SIZES, "Grid size")
    clues = _load_clues(args.input, args.grid_size)
    print(f"Read {len(clues)} clue entries", file=sys.stderr)

    puzzle = generate_crossword(clues, args.grid_size, seed=seed)

    paths = _output_paths(output_path)
    render_crossword_pdf(puzzle, args.title, paths["pdf"])
    write_crossword_xlsx(puzzle, paths["xlsx"])
    render_puzzle_svg(puzzle.grid, paths["puzzle_svg"])
    render_answer_svg(puzzle.grid, paths["answer_svg"])
    _report(list(paths.values()))

    print(f"Placed {len(puzzle.placed)}/{len(clues)} words", file=sys.stderr)
    for entry in puzzle.unused:
        print(f"Warning: could not place '{entry.answer}'", file=sys.stderr)


def _run_bingo(args, seed: int, output_path: str) -> None:
    from bingo import generate_bingo_cards
    from pdf_renderer import render_bingo_pdf
    from svg_renderer import render_bingo_svg

    if args.cards <= 0:
        raise PuzzleError("Number of cards must be at least 1.")
    words = _load_words(args.input)
    cards = generate_bingo_cards(
        words, args.cards, free_center=not args.no_free_center, seed=seed,
    )

    paths = _output_paths(output_path)
    render_bingo_pdf(cards, args.title, paths["pdf"])
    render_bingo_svg(cards[0], paths["puzzle_svg"])
    _report([paths["pdf"], paths["puzzle_svg"]])
    print(f"Dealt {len(cards)} card(s) from {len(cards[0].pool)} words", file=sys.stderr)


if __name__ == "__main__":
    main()
