"""Board state machine: letter edits, guess submission and game outcome.

The engine never performs I/O.  Every mutating method returns True when
the observable state changed and a presentation layer should repaint.
"""

from __future__ import annotations

from models import (
    MAX_GUESSES,
    WORD_LENGTH,
    Board,
    CellState,
    GameOutcome,
    Row,
)
from classifier import classify_guess, merge_letter_hints
from word_bank import WordBank


class Game:
    """One game session: a board paired with its secret answer."""

    def __init__(self, word_bank: WordBank, answer: str | None = None) -> None:
        self.word_bank = word_bank
        self._start(answer)

    def _start(self, answer: str | None = None) -> None:
        if answer is None:
            answer = self.word_bank.select_answer()
        elif len(answer) != WORD_LENGTH or not (answer.isascii() and answer.isalpha()):
            raise ValueError(f"Answer must be {WORD_LENGTH} letters, got '{answer}'")

        self.answer = answer.lower()
        self.board = Board.create()
        self.outcome = GameOutcome.IN_PROGRESS
        self.message: str | None = None
        self.guesses: list[str] = []
        self.letter_hints: dict[str, CellState] = {}

    # ── Queries ──────────────────────────────────────────────────────

    @property
    def rows(self) -> list[Row]:
        return self.board.rows

    @property
    def active_row(self) -> int:
        return self.board.active_row

    @property
    def cursor(self) -> int | None:
        return self.board.current.cursor

    @property
    def is_over(self) -> bool:
        return self.outcome != GameOutcome.IN_PROGRESS

    # ── Events ───────────────────────────────────────────────────────

    def accept_letter(self, ch: str) -> bool:
        """Type *ch* into the next cell of the active row."""
        if self.is_over:
            return False
        if not (isinstance(ch, str) and len(ch) == 1 and ch.isascii() and ch.isalpha()):
            return False

        row = self.board.current
        if row.cursor is None or row.cursor >= WORD_LENGTH:
            return False

        cell = row.cells[row.cursor]
        cell.state = CellState.PENDING
        cell.letter = ch.upper()
        row.cursor += 1
        self.message = None
        return True

    def delete_letter(self) -> bool:
        """Erase the last typed letter of the active row."""
        if self.is_over:
            return False

        row = self.board.current
        if not row.cursor:
            return False

        row.cursor -= 1
        cell = row.cells[row.cursor]
        cell.state = CellState.EMPTY
        cell.letter = None
        self.message = None
        return True

    def submit_guess(self) -> bool:
        """Submit a full active row.

        An unknown word only sets an advisory message and keeps the row
        editable.  A known word finalizes the row and either ends the game
        or moves editing to the next row.
        """
        if self.is_over:
            return False

        row = self.board.current
        if row.cursor != WORD_LENGTH:
            return False

        self.message = None
        guess = row.word
        if not self.word_bank.is_valid_guess(guess):
            self.message = f"'{guess}' is not a valid word!"
            return True

        self._finalize_row(row, guess)
        row.cursor = None

        if guess == self.answer:
            self.outcome = GameOutcome.WON
            self.message = "You win!"
        elif self.board.active_row == MAX_GUESSES - 1:
            self.outcome = GameOutcome.LOST
            self.message = f"The word was '{self.answer}'."
        else:
            self.board.active_row += 1
            self.board.current.cursor = 0
        return True

    def restart(self) -> bool:
        """Start over with a fresh board and answer once the game has ended."""
        if not self.is_over:
            return False
        self._start()
        return True

    def _finalize_row(self, row: Row, guess: str) -> None:
        if any(cell.state != CellState.PENDING for cell in row.cells):
            raise ValueError("Only a fully typed row can be classified")

        states = classify_guess(guess, self.answer)
        for cell, state in zip(row.cells, states):
            cell.finalize(state)
        self.guesses.append(guess)
        merge_letter_hints(self.letter_hints, guess, states)


def new_game(word_bank: WordBank, answer: str | None = None) -> Game:
    """Create a game with a randomly chosen answer (or the given one)."""
    return Game(word_bank, answer)
