"""Tests for svg_renderer.py and color_scheme.py."""

import os
import tempfile
import xml.etree.ElementTree as ET

import pytest

from board_engine import new_game
from color_scheme import LATTE, MOCHA, cell_colors
from models import CellState
from svg_renderer import render_board_svg
from word_bank import WordBank

NS = {"svg": "http://www.w3.org/2000/svg"}


def _make_game():
    """Game on 'cacti' with one submitted guess and two pending letters."""
    bank = WordBank(["cacti", "heart"], ["gucci"])
    game = new_game(bank, answer="cacti")
    for ch in "gucci":
        game.accept_letter(ch)
    game.submit_guess()
    game.accept_letter("h")
    game.accept_letter("e")
    return game


def _render(game, **kwargs):
    with tempfile.NamedTemporaryFile(suffix=".svg", delete=False) as f:
        path = f.name
    try:
        render_board_svg(game, path, **kwargs)
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    finally:
        os.unlink(path)


class TestRenderBoardSvg:
    def test_creates_valid_svg(self):
        root = ET.fromstring(_render(_make_game()))
        assert root.tag == "{http://www.w3.org/2000/svg}svg"

    def test_one_rect_per_cell(self):
        root = ET.fromstring(_render(_make_game()))
        rects = root.findall(".//svg:rect", NS)
        # background + 6x5 cells
        assert len(rects) == 31

    def test_custom_cell_size(self):
        root = ET.fromstring(_render(_make_game(), cell_size=10.0))
        assert root.get("width") == str(11.0 * 5 + 1.0)

    def test_letters_present(self):
        root = ET.fromstring(_render(_make_game()))
        letters = [t.text for t in root.findall(".//svg:text", NS)]
        assert letters == ["G", "U", "C", "C", "I", "H", "E"]

    def test_state_colors(self):
        content = _render(_make_game())
        assert f'fill="{MOCHA.cell_correct}"' in content
        assert f'fill="{MOCHA.cell_present}"' in content
        assert f'fill="{MOCHA.cell_active}"' in content

    def test_other_scheme(self):
        content = _render(_make_game(), colors=LATTE)
        assert f'fill="{LATTE.game_bg}"' in content
        assert MOCHA.game_bg not in content

    def test_message_escaped(self):
        game = _make_game()
        for ch in "xyz":
            game.accept_letter(ch)
        game.submit_guess()
        content = _render(game)
        root = ET.fromstring(content)
        texts = [t.text for t in root.findall(".//svg:text", NS)]
        assert texts[-1] == "'hexyz' is not a valid word!"


class TestCellColors:
    def test_highlight_states(self):
        assert cell_colors(MOCHA, CellState.CORRECT) == (MOCHA.cell_correct, MOCHA.text_inverted)
        assert cell_colors(MOCHA, CellState.PRESENT, True, True) == (
            MOCHA.cell_present, MOCHA.text_inverted,
        )

    @pytest.mark.parametrize("state", [CellState.EMPTY, CellState.PENDING, CellState.ABSENT])
    def test_base_states_follow_focus(self, state):
        assert cell_colors(MOCHA, state)[0] == MOCHA.cell_base
        assert cell_colors(MOCHA, state, row_active=True)[0] == MOCHA.cell_row_active
        assert cell_colors(MOCHA, state, True, True)[0] == MOCHA.cell_active
        assert cell_colors(MOCHA, state)[1] == MOCHA.text_base
