#!/usr/bin/env python3
"""CLI entry point: play the word-guessing game line by line.

Each input line is typed into the active row and submitted.  The board is
printed as plain text after every change.  Once a game ends, an empty
line (or "y") starts a new one; anything else, "quit" or EOF exits.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from board_engine import Game, new_game
from color_scheme import SCHEMES
from models import WORD_LENGTH, CellState, Row, WordleError
from word_bank import WordBank

_CELL_FORMATS = {
    CellState.EMPTY: " . ",
    CellState.PENDING: " {} ",
    CellState.ABSENT: " {} ",
    CellState.PRESENT: "({})",
    CellState.CORRECT: "[{}]",
}
_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Guess the five-letter word in six tries."
    )
    p.add_argument("--answers", default=None,
                   help="Answer pool word list (.txt or .xlsx; default: bundled list)")
    p.add_argument("--guesses", default=None,
                   help="Extra accepted guesses (.txt or .xlsx; default: bundled list)")
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--export", default=None,
                   help="Write the finished board to this .svg or .pdf path")
    p.add_argument("--colors", choices=sorted(SCHEMES), default="mocha",
                   help='Export color scheme (default: "mocha")')
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.export and Path(args.export).suffix.lower() not in (".svg", ".pdf"):
        parser.error("--export must end in .svg or .pdf")

    try:
        bank = WordBank.from_files(
            args.answers, args.guesses, rng=random.Random(args.seed)
        )
    except WordleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Loaded {bank.answer_count} answers, {bank.guess_count} valid guesses",
        file=sys.stderr,
    )
    _play(new_game(bank), args)


def _play(game: Game, args) -> None:
    _print_board(game)

    for line in sys.stdin:
        text = line.strip()
        if text.lower() == "quit":
            break

        if game.is_over:
            if text.lower() not in ("", "y"):
                break
            game.restart()
            _print_board(game)
            continue

        if _enter_guess(game, text):
            _print_board(game)
            if game.is_over:
                if args.export:
                    _export(game, args)
                print("ENTER: new game, anything else: quit")


def _enter_guess(game: Game, text: str) -> bool:
    """Replace the active row's letters with *text* and submit it.

    A line that is not exactly one word's worth of letters is rejected
    before the board is touched.
    """
    if len(text) != WORD_LENGTH or not (text.isascii() and text.isalpha()):
        print(f"Enter a {WORD_LENGTH}-letter word.")
        return False

    changed = False
    while game.delete_letter():
        changed = True
    for ch in text:
        changed = game.accept_letter(ch) or changed
    return game.submit_guess() or changed


def _export(game: Game, args) -> None:
    colors = SCHEMES[args.colors]
    if Path(args.export).suffix.lower() == ".pdf":
        from pdf_renderer import render_board_pdf
        render_board_pdf(game, args.export, colors=colors)
    else:
        from svg_renderer import render_board_svg
        render_board_svg(game, args.export, colors=colors)
    print(f"Output: {args.export}", file=sys.stderr)


def format_row(row: Row) -> str:
    return "".join(
        _CELL_FORMATS[cell.state].format(cell.display) for cell in row.cells
    )


def format_hints(game: Game) -> str:
    """Alphabet with eliminated letters hidden and found letters marked."""
    out = []
    for letter in _ALPHABET:
        state = game.letter_hints.get(letter)
        if state == CellState.ABSENT:
            out.append(" ")
        elif state is None:
            out.append(letter.lower())
        else:
            out.append(letter)
    return "".join(out)


def _print_board(game: Game) -> None:
    for i, row in enumerate(game.rows):
        marker = ">" if not game.is_over and i == game.active_row else " "
        print(f"{marker} {format_row(row)}")
    print(f"  {format_hints(game)}")
    if game.message:
        print(game.message)


if __name__ == "__main__":
    main()
