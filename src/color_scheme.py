"""Board colors, keyed by cell state and edit focus."""

from __future__ import annotations

from dataclasses import dataclass

from models import CellState


@dataclass(frozen=True)
class ColorScheme:
    """Hex colors (``#rrggbb``) used by the board exporters."""

    game_bg: str
    cell_base: str
    cell_row_active: str
    cell_active: str
    cell_present: str
    cell_correct: str
    text_base: str
    text_inverted: str


# Catppuccin Mocha
MOCHA = ColorScheme(
    game_bg="#1e1e2e",
    cell_base="#45475a",
    cell_row_active="#585b70",
    cell_active="#7f849c",
    cell_present="#f9e2af",
    cell_correct="#a6e3a1",
    text_base="#cdd6f4",
    text_inverted="#1e1e2e",
)

# Catppuccin Latte
LATTE = ColorScheme(
    game_bg="#eff1f5",
    cell_base="#bcc0cc",
    cell_row_active="#acb0be",
    cell_active="#8c8fa1",
    cell_present="#df8e1d",
    cell_correct="#40a02b",
    text_base="#4c4f69",
    text_inverted="#eff1f5",
)

SCHEMES = {"mocha": MOCHA, "latte": LATTE}


def cell_colors(
    scheme: ColorScheme,
    state: CellState,
    row_active: bool = False,
    cell_active: bool = False,
) -> tuple[str, str]:
    """Return ``(fill, text)`` colors for one cell."""
    if state == CellState.PRESENT:
        return scheme.cell_present, scheme.text_inverted
    if state == CellState.CORRECT:
        return scheme.cell_correct, scheme.text_inverted

    if row_active:
        fill = scheme.cell_active if cell_active else scheme.cell_row_active
    else:
        fill = scheme.cell_base
    return fill, scheme.text_base
