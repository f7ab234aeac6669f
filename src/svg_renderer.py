"""Render the game board as standalone SVG."""

from __future__ import annotations

from xml.sax.saxutils import escape

from board_engine import Game
from color_scheme import MOCHA, ColorScheme, cell_colors
from models import MAX_GUESSES, WORD_LENGTH

DEFAULT_CELL_SIZE = 48.0


def render_board_svg(
    game: Game,
    output_path: str,
    colors: ColorScheme = MOCHA,
    cell_size: float | None = None,
) -> None:
    """Write the board (and the current message, if any) to an SVG file."""
    if cell_size is None:
        cell_size = DEFAULT_CELL_SIZE

    gap = cell_size * 0.1
    pitch = cell_size + gap
    letter_font = cell_size * 0.5
    message_font = cell_size * 0.3
    width = pitch * WORD_LENGTH + gap
    board_h = pitch * MAX_GUESSES + gap
    height = board_h + message_font * 2 + gap

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )
    parts.append(
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="{colors.game_bg}"/>\n'
    )

    for r, row in enumerate(game.rows):
        row_active = not game.is_over and r == game.active_row
        for c, cell in enumerate(row.cells):
            x = gap + c * pitch
            y = gap + r * pitch
            fill, text = cell_colors(
                colors, cell.state, row_active, row_active and row.cursor == c
            )
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" rx="{gap}" fill="{fill}"/>\n'
            )
            if cell.letter:
                cx = x + cell_size / 2
                cy = y + cell_size / 2
                parts.append(
                    f'  <text x="{cx}" y="{cy}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-weight="bold" font-size="{letter_font}" '
                    f'fill="{text}">{cell.letter}</text>\n'
                )

    if game.message:
        parts.append(
            f'  <text x="{width / 2}" y="{board_h + message_font}" '
            f'text-anchor="middle" '
            f'font-family="Helvetica, Arial, sans-serif" '
            f'font-size="{message_font}" '
            f'fill="{colors.text_base}">{escape(game.message)}</text>\n'
        )

    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)
