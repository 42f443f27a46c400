"""Render puzzle grids as standalone SVG."""

from __future__ import annotations

from xml.sax.saxutils import escape

from models import BingoCard, CellType, Grid, WordSearchPuzzle

FONT_FAMILY = "Helvetica, Arial, sans-serif"


def render_crossword_svg(
    grid: Grid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    if cell_size is None:
        cell_size = _default_cell_size(grid.size)

    number_font = _number_font_size(grid.size)
    letter_font = cell_size * 0.45
    grid_dim = cell_size * grid.size

    parts = [_svg_header(grid_dim, grid_dim)]

    for r in range(grid.size):
        for c in range(grid.size):
            cell = grid.cells[r][c]
            x = c * cell_size
            y = r * cell_size

            if cell.cell_type == CellType.BLACK:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="black"/>\n'
                )
                continue

            parts.append(_cell_rect(x, y, cell_size))

            if cell.number is not None:
                tx = x + 1.5
                ty = y + number_font + 1
                parts.append(
                    f'  <text x="{tx}" y="{ty}" '
                    f'font-family="{FONT_FAMILY}" '
                    f'font-weight="bold" font-size="{number_font}" '
                    f'fill="black">{cell.number}</text>\n'
                )

            if show_answers and cell.letter:
                parts.append(_centered_text(
                    x + cell_size * 0.55, y + cell_size * 0.58, cell.letter, letter_font,
                ))

    parts.append(_outer_border(grid_dim, grid_dim))
    parts.append('</svg>\n')
    _write(parts, output_path)


def render_word_search_svg(
    puzzle: WordSearchPuzzle,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the letter grid; with *show_answers*, outline each placed word."""
    size = puzzle.size
    if cell_size is None:
        cell_size = _default_cell_size(size)
    grid_dim = cell_size * size
    letter_font = cell_size * 0.55

    parts = [_svg_header(grid_dim, grid_dim)]

    for r, row in enumerate(puzzle.grid):
        for c, letter in enumerate(row):
            x = c * cell_size
            y = r * cell_size
            parts.append(_cell_rect(x, y, cell_size))
            parts.append(_centered_text(
                x + cell_size / 2, y + cell_size / 2, letter, letter_font,
            ))

    if show_answers:
        half = cell_size / 2
        for placed in puzzle.placements:
            (r0, c0), (r1, c1) = placed.cells()[0], placed.cells()[-1]
            parts.append(
                f'  <line x1="{c0 * cell_size + half}" y1="{r0 * cell_size + half}" '
                f'x2="{c1 * cell_size + half}" y2="{r1 * cell_size + half}" '
                f'stroke="black" stroke-opacity="0.35" '
                f'stroke-width="{cell_size * 0.7}" stroke-linecap="round"/>\n'
            )

    parts.append(_outer_border(grid_dim, grid_dim))
    parts.append('</svg>\n')
    _write(parts, output_path)


def render_bingo_svg(card: BingoCard, output_path: str, cell_size: float = 90.0) -> None:
    """Write a bingo card; long entries are split over up to three lines."""
    grid_dim = cell_size * card.size
    font = cell_size * 0.14

    parts = [_svg_header(grid_dim, grid_dim)]
    for r, row in enumerate(card.cells):
        for c, text in enumerate(row):
            x = c * cell_size
            y = r * cell_size
            parts.append(_cell_rect(x, y, cell_size))
            lines = _split_lines(text, max_chars=12, max_lines=3)
            line_h = font * 1.2
            top = y + cell_size / 2 - line_h * (len(lines) - 1) / 2
            for i, line in enumerate(lines):
                parts.append(_centered_text(x + cell_size / 2, top + i * line_h, line, font))

    parts.append(_outer_border(grid_dim, grid_dim))
    parts.append('</svg>\n')
    _write(parts, output_path)


def render_puzzle_svg(grid: Grid, output_path: str) -> None:
    """Render puzzle grid (no answers) to SVG."""
    render_crossword_svg(grid, output_path, show_answers=False)


def render_answer_svg(grid: Grid, output_path: str) -> None:
    """Render answer grid (with letters) to SVG."""
    render_crossword_svg(grid, output_path, show_answers=True)


def _svg_header(width: float, height: float) -> str:
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )


def _cell_rect(x: float, y: float, cell_size: float) -> str:
    return (
        f'  <rect x="{x}" y="{y}" width="{cell_size}" '
        f'height="{cell_size}" fill="white" '
        f'stroke="black" stroke-width="0.5"/>\n'
    )


def _centered_text(x: float, y: float, text: str, font_size: float) -> str:
    return (
        f'  <text x="{x}" y="{y}" '
        f'text-anchor="middle" dominant-baseline="central" '
        f'font-family="{FONT_FAMILY}" '
        f'font-size="{font_size}" '
        f'fill="black">{escape(text)}</text>\n'
    )


def _outer_border(width: float, height: float) -> str:
    return (
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )


def _split_lines(text: str, max_chars: int, max_lines: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split():
        trial = f"{current} {word}".strip()
        if len(trial) <= max_chars or not current:
            current = trial
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = lines[-1][: max_chars - 1] + "…"
    return lines or [""]


def _write(parts: list[str], output_path: str) -> None:
    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def _default_cell_size(grid_size: int) -> float:
    if grid_size <= 15:
        return 24.0
    elif grid_size <= 17:
        return 21.0
    else:
        return 17.0


def _number_font_size(grid_size: int) -> float:
    if grid_size <= 13:
        return 8.5
    elif grid_size <= 15:
        return 8.0
    elif grid_size <= 17:
        return 7.0
    else:
        return 6.0
