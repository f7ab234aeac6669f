"""Tests for pdf_renderer.py."""

import os
import re
import tempfile

import pytest

from board_engine import new_game
from pdf_renderer import PAGE_H, PAGE_W, _compute_layout, render_board_pdf
from word_bank import WordBank


def _make_game():
    bank = WordBank(["heart", "earth"])
    game = new_game(bank, answer="heart")
    for ch in "earth":
        game.accept_letter(ch)
    game.submit_guess()
    return game


class TestRenderBoardPdf:
    def test_creates_valid_pdf(self):
        with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
            path = f.name
        try:
            render_board_pdf(_make_game(), path, title="TEST")
            assert os.path.exists(path)
            with open(path, "rb") as f:
                assert f.read(5) == b"%PDF-"
        finally:
            os.unlink(path)

    def test_one_page(self):
        with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
            path = f.name
        try:
            render_board_pdf(_make_game(), path)
            with open(path, "rb") as f:
                content = f.read()
                pages = len(re.findall(rb'/Type\s*/Page[^s]', content))
                assert pages == 1
        finally:
            os.unlink(path)

    def test_page_size(self):
        with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
            path = f.name
        try:
            render_board_pdf(_make_game(), path)
            with open(path, "rb") as f:
                content = f.read()
                assert b"612" in content
                assert b"792" in content
        finally:
            os.unlink(path)


class TestComputeLayout:
    def test_board_centered(self):
        layout = _compute_layout("WORDLE")
        assert layout.board_x == pytest.approx((PAGE_W - layout.board_w) / 2)

    def test_board_dimensions(self):
        layout = _compute_layout("WORDLE", cell_size=50.0)
        assert layout.gap == pytest.approx(5.0)
        assert layout.board_w == pytest.approx(55.0 * 5 - 5.0)
        assert layout.board_h == pytest.approx(55.0 * 6 - 5.0)

    def test_board_below_banner(self):
        layout = _compute_layout("WORDLE")
        assert layout.board_y < layout.banner_y
        assert layout.banner_y + layout.banner_h <= PAGE_H - layout.margin
        assert layout.message_y < layout.board_y - layout.board_h
        assert layout.message_y > layout.margin
