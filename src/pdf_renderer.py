"""Render printable puzzle pages to PDF using ReportLab.

Every document is letter-sized with a black title banner.  Crossword and
word search documents get a second page with the answer key; bingo
documents get one page per card.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import BingoCard, CellType, CrosswordPuzzle, Grid, NumberedClue, WordSearchPuzzle

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
BANNER_H = 28.0
SECTION_HEADER_H = 14.0
MAX_GRID_DIM = 380.0
MAX_CELL_SIZE = 28.0


@dataclass
class ColumnLayout:
    """Text flowed into equal-width columns below the grid."""

    top_y: float
    cols: int
    font_size: float = 9.0
    gutter: float = 12.0

    @property
    def col_w(self) -> float:
        return (PAGE_W - 2 * MARGIN - self.gutter * (self.cols - 1)) / self.cols

    @property
    def leading(self) -> float:
        return self.font_size + 1.5


def render_crossword_pdf(puzzle: CrosswordPuzzle, title: str, output_path: str) -> None:
    """Page 1: grid with numbers and all clues. Page 2: answer key."""
    from reportlab.pdfgen.canvas import Canvas

    c = Canvas(output_path, pagesize=letter)
    cs = _cell_size(puzzle.grid.size)

    grid_top = _draw_title_banner(c, title) - 8
    _draw_crossword_grid(c, puzzle.grid, cs, grid_top, show_answers=False)

    items: list[tuple[str, str]] = [("header", "ACROSS")]
    items += [("text", _clue_markup(clue)) for clue in puzzle.across]
    items += [("header", "DOWN")]
    items += [("text", _clue_markup(clue)) for clue in puzzle.down]
    cols = 3 if len(puzzle.across) + len(puzzle.down) < 40 else 4
    layout = ColumnLayout(top_y=grid_top - cs * puzzle.grid.size - 12, cols=cols)
    _draw_columns(c, _fit_columns(items, layout))
    c.showPage()

    grid_top = _draw_title_banner(c, "ANSWER KEY") - 20
    _draw_crossword_grid(c, puzzle.grid, cs, grid_top, show_answers=True)
    c.showPage()

    c.save()


def render_word_search_pdf(puzzle: WordSearchPuzzle, title: str, output_path: str) -> None:
    """Page 1: letter grid and the words to find. Page 2: answers outlined."""
    from reportlab.pdfgen.canvas import Canvas

    c = Canvas(output_path, pagesize=letter)
    cs = _cell_size(puzzle.size)

    grid_top = _draw_title_banner(c, title) - 8
    _draw_letter_grid(c, puzzle, cs, grid_top, show_answers=False)
    items = [("header", "FIND THESE WORDS")]
    items += [("text", escape(word)) for word in sorted(puzzle.words)]
    layout = ColumnLayout(top_y=grid_top - cs * puzzle.size - 12, cols=4)
    _draw_columns(c, _fit_columns(items, layout))
    c.showPage()

    grid_top = _draw_title_banner(c, "ANSWER KEY") - 20
    _draw_letter_grid(c, puzzle, cs, grid_top, show_answers=True)
    c.showPage()

    c.save()


def render_bingo_pdf(cards: list[BingoCard], title: str, output_path: str) -> None:
    """One card per page, square cells with wrapped, centred text."""
    from reportlab.pdfgen.canvas import Canvas

    c = Canvas(output_path, pagesize=letter)
    for i, card in enumerate(cards, start=1):
        grid_top = _draw_title_banner(c, title) - 24
        dim = PAGE_W - 2 * MARGIN
        cs = dim / card.size
        x0 = MARGIN

        for r, row in enumerate(card.cells):
            for col, text in enumerate(row):
                cx = x0 + col * cs
                cy = grid_top - (r + 1) * cs
                c.setStrokeColorRGB(0, 0, 0)
                c.setLineWidth(1)
                c.rect(cx, cy, cs, cs, fill=0, stroke=1)
                _draw_wrapped_text(c, text, cx + 4, cy + 4, cs - 8, cs - 8)

        c.setLineWidth(2)
        c.rect(x0, grid_top - dim, dim, dim, fill=0, stroke=1)

        if len(cards) > 1:
            c.setFont("Helvetica", 8)
            c.drawRightString(PAGE_W - MARGIN, MARGIN - 12, f"Card {i:03d}")
        c.showPage()

    c.save()


# ─── Layout ─────────────────────────────────────────────────────────────────


def _cell_size(grid_size: int) -> float:
    return min(MAX_CELL_SIZE, MAX_GRID_DIM / grid_size)


def _clue_style(layout: ColumnLayout) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.font_size,
        leading=layout.leading,
        spaceAfter=1.0,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)}"


def _fit_columns(
    items: list[tuple[str, str]], layout: ColumnLayout
) -> tuple[ColumnLayout, list[list[tuple[str, str, float]]]]:
    """Shrink the font, then add columns, until the text fits above the margin."""
    available = layout.top_y - MARGIN
    while True:
        columns = _flow(items, layout)
        tallest = max(sum(h for _, _, h in col) for col in columns)
        if tallest <= available:
            break
        if layout.font_size > 6.0:
            layout.font_size -= 0.5
        elif layout.cols < 5:
            layout.cols += 1
        else:
            break
    return layout, columns


def _flow(
    items: list[tuple[str, str]], layout: ColumnLayout
) -> list[list[tuple[str, str, float]]]:
    """Distribute items over columns, keeping headers with their first line."""
    style = _clue_style(layout)
    measured: list[tuple[str, str, float]] = []
    for kind, content in items:
        if kind == "header":
            measured.append((kind, content, SECTION_HEADER_H + 4))
        else:
            _, h = Paragraph(content, style).wrap(layout.col_w, 10000)
            measured.append((kind, content, h + style.spaceAfter))

    target = sum(h for _, _, h in measured) / layout.cols
    columns: list[list[tuple[str, str, float]]] = [[] for _ in range(layout.cols)]
    col_idx = 0
    height = 0.0
    for item in measured:
        if (col_idx < layout.cols - 1 and columns[col_idx]
                and height + item[2] > target * 1.05):
            carried = []
            if columns[col_idx][-1][0] == "header":
                carried.append(columns[col_idx].pop())
            col_idx += 1
            columns[col_idx].extend(carried)
            height = sum(h for _, _, h in carried)
        columns[col_idx].append(item)
        height += item[2]
    return columns


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, title: str) -> float:
    """Black rect + white centered bold text. Returns the banner's bottom y."""
    x = MARGIN
    w = PAGE_W - 2 * MARGIN
    y = PAGE_H - MARGIN - BANNER_H

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, BANNER_H, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(title, "Helvetica-Bold", 16)
    c.drawString(x + (w - text_w) / 2, y + (BANNER_H - 16) / 2 + 2, title)
    c.setFillColorRGB(0, 0, 0)
    return y


def _draw_crossword_grid(c, grid: Grid, cs: float, top_y: float, show_answers: bool) -> None:
    """Black/white cells, numbers, optional letters; grid centred horizontally."""
    x0 = (PAGE_W - cs * grid.size) / 2
    number_font = max(5.0, cs * 0.3)

    for r in range(grid.size):
        for col in range(grid.size):
            cell = grid.cells[r][col]
            cx = x0 + col * cs
            cy = top_y - (r + 1) * cs

            if cell.cell_type == CellType.BLACK:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)

            if cell.number is not None:
                c.setFont("Helvetica-Bold", number_font)
                c.drawString(cx + 1.5, cy + cs - number_font - 1, str(cell.number))

            if show_answers and cell.letter:
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                c.drawCentredString(cx + cs * 0.55, cy + cs * 0.42 - font_size / 2, cell.letter)

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, top_y - grid.size * cs, grid.size * cs, grid.size * cs, fill=0, stroke=1)


def _draw_letter_grid(
    c, puzzle: WordSearchPuzzle, cs: float, top_y: float, show_answers: bool,
) -> None:
    size = puzzle.size
    x0 = (PAGE_W - cs * size) / 2

    if show_answers:
        c.setStrokeColorRGB(0.75, 0.75, 0.75)
        c.setLineWidth(cs * 0.7)
        c.setLineCap(1)
        for placed in puzzle.placements:
            (r0, c0), (r1, c1) = placed.cells()[0], placed.cells()[-1]
            c.line(
                x0 + (c0 + 0.5) * cs, top_y - (r0 + 0.5) * cs,
                x0 + (c1 + 0.5) * cs, top_y - (r1 + 0.5) * cs,
            )
        c.setLineCap(0)

    font_size = cs * 0.55
    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica-Bold", font_size)
    for r, row in enumerate(puzzle.grid):
        for col, ch in enumerate(row):
            c.drawCentredString(
                x0 + (col + 0.5) * cs, top_y - (r + 0.5) * cs - font_size * 0.35, ch,
            )

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, top_y - size * cs, size * cs, size * cs, fill=0, stroke=1)


def _draw_columns(
    c, fitted: tuple[ColumnLayout, list[list[tuple[str, str, float]]]],
) -> None:
    layout, columns = fitted
    style = _clue_style(layout)
    for i, col_items in enumerate(columns):
        col_x = MARGIN + i * (layout.col_w + layout.gutter)
        current_y = layout.top_y
        for kind, content, h in col_items:
            if kind == "header":
                _draw_section_header(c, content, col_x, current_y, layout.col_w)
            else:
                p = Paragraph(content, style)
                p.wrap(layout.col_w, 10000)
                p.drawOn(c, col_x, current_y - h)
            current_y -= h


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> None:
    """Black rect + white bold text."""
    h = SECTION_HEADER_H
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - h, width, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - h + 3.5, text)
    c.setFillColorRGB(0, 0, 0)


def _draw_wrapped_text(
    c, text: str, x: float, y: float, w: float, h: float,
    font_name: str = "Helvetica", font_size: float = 14, min_font_size: float = 7,
) -> None:
    """Word-wrap *text* into the box, shrinking the font until it fits."""
    words = text.split()
    if not words:
        return

    def wrap_lines(size: float) -> list[str]:
        lines: list[str] = []
        current: list[str] = []
        for word in words:
            trial = " ".join(current + [word])
            if current and stringWidth(trial, font_name, size) > w:
                lines.append(" ".join(current))
                current = [word]
            else:
                current.append(word)
        if current:
            lines.append(" ".join(current))
        return lines

    def fits(size: float, lines: list[str]) -> bool:
        widest = max(stringWidth(line, font_name, size) for line in lines)
        return widest <= w and len(lines) * size * 1.15 <= h

    size = font_size
    lines = wrap_lines(size)
    while size > min_font_size and not fits(size, lines):
        size -= 0.5
        lines = wrap_lines(size)

    line_h = size * 1.15
    c.setFont(font_name, size)
    total_h = len(lines) * line_h
    start_y = y + (h + total_h) / 2 - size
    for i, line in enumerate(lines):
        c.drawCentredString(x + w / 2, start_y - i * line_h, line)
