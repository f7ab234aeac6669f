"""Render the game board to a one-page PDF using ReportLab.

Layout: title banner at the top, the 6x5 board centered below it and the
current message (if any) centered under the board.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth

from board_engine import Game
from color_scheme import MOCHA, ColorScheme, cell_colors
from models import MAX_GUESSES, WORD_LENGTH

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN

    # Board
    cell_size: float = 56.0
    gap: float = 6.0
    board_w: float = 0.0
    board_h: float = 0.0
    board_x: float = 0.0
    board_y: float = 0.0  # top of board in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Fonts
    letter_font_size: float = 28.0
    message_font_size: float = 14.0
    message_y: float = 0.0

    title: str = "WORDLE"


def render_board_pdf(
    game: Game,
    output_path: str,
    title: str = "WORDLE",
    colors: ColorScheme = MOCHA,
) -> None:
    """Compute layout and draw the board page."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(title)

    c = Canvas(output_path, pagesize=letter)
    _draw_background(c, layout, colors)
    _draw_title_banner(c, layout, colors)
    _draw_board(c, game, layout, colors)
    if game.message:
        _draw_message(c, game.message, layout, colors)
    c.showPage()
    c.save()


def _compute_layout(title: str, cell_size: float = 56.0) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(title=title, cell_size=cell_size)
    lp.gap = cell_size * 0.1
    lp.letter_font_size = cell_size * 0.5

    pitch = lp.cell_size + lp.gap
    lp.board_w = pitch * WORD_LENGTH - lp.gap
    lp.board_h = pitch * MAX_GUESSES - lp.gap

    lp.banner_y = lp.page_h - lp.margin - lp.banner_h
    lp.board_x = (lp.page_w - lp.board_w) / 2
    lp.board_y = lp.banner_y - 24
    lp.message_y = lp.board_y - lp.board_h - 12 - lp.message_font_size
    return lp


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_background(c, layout: LayoutParams, colors: ColorScheme) -> None:
    c.setFillColor(HexColor(colors.game_bg))
    c.rect(0, 0, layout.page_w, layout.page_h, fill=1, stroke=0)


def _draw_title_banner(c, layout: LayoutParams, colors: ColorScheme) -> None:
    """Filled rect + centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColor(HexColor(colors.cell_base))
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColor(HexColor(colors.text_base))
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_board(c, game: Game, layout: LayoutParams, colors: ColorScheme) -> None:
    """Draw every cell with its state color and letter."""
    cs = layout.cell_size
    pitch = cs + layout.gap
    font_size = layout.letter_font_size

    for r, row in enumerate(game.rows):
        row_active = not game.is_over and r == game.active_row
        for col, cell in enumerate(row.cells):
            cx = layout.board_x + col * pitch
            cy = layout.board_y - r * pitch - cs
            fill, text = cell_colors(
                colors, cell.state, row_active, row_active and row.cursor == col
            )

            c.setFillColor(HexColor(fill))
            c.roundRect(cx, cy, cs, cs, layout.gap, fill=1, stroke=0)

            if cell.letter:
                c.setFillColor(HexColor(text))
                c.setFont("Helvetica-Bold", font_size)
                lw = stringWidth(cell.letter, "Helvetica-Bold", font_size)
                c.drawString(cx + (cs - lw) / 2, cy + (cs - font_size) / 2 + 3, cell.letter)


def _draw_message(c, message: str, layout: LayoutParams, colors: ColorScheme) -> None:
    size = layout.message_font_size
    c.setFillColor(HexColor(colors.text_base))
    c.setFont("Helvetica", size)
    text_w = stringWidth(message, "Helvetica", size)
    c.drawString((layout.page_w - text_w) / 2, layout.message_y, message)
