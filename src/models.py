"""Data models for the word-guessing game board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

WORD_LENGTH = 5
MAX_GUESSES = 6


class CellState(Enum):
    EMPTY = "EMPTY"
    PENDING = "PENDING"
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"


SUBMITTED_STATES = frozenset({CellState.ABSENT, CellState.PRESENT, CellState.CORRECT})


class GameOutcome(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass
class Cell:
    """A single letter slot. ``letter`` is uppercase, or None while EMPTY."""

    state: CellState = CellState.EMPTY
    letter: str | None = None

    def finalize(self, state: CellState) -> None:
        """Move a PENDING cell to a submitted state."""
        if self.state != CellState.PENDING:
            raise ValueError(f"Cannot finalize a {self.state.value} cell")
        if state not in SUBMITTED_STATES:
            raise ValueError(f"{state.value} is not a submitted state")
        self.state = state

    @property
    def display(self) -> str:
        return self.letter or " "


@dataclass
class Row:
    """One guess row. ``cursor`` is None unless the row is being edited."""

    cells: list[Cell] = field(default_factory=list)
    cursor: int | None = None

    @classmethod
    def create(cls) -> Row:
        return cls(cells=[Cell() for _ in range(WORD_LENGTH)])

    @property
    def word(self) -> str | None:
        """Lowercase word spelled by the row, or None if any cell is empty."""
        if any(cell.letter is None for cell in self.cells):
            return None
        return "".join(cell.letter for cell in self.cells).lower()

    @property
    def is_submitted(self) -> bool:
        return all(cell.state in SUBMITTED_STATES for cell in self.cells)


@dataclass
class Board:
    """Six rows of five cells plus the index of the row being edited."""

    rows: list[Row] = field(default_factory=list)
    active_row: int = 0

    @classmethod
    def create(cls) -> Board:
        """Create an empty board with the cursor at the start of row 0."""
        rows = [Row.create() for _ in range(MAX_GUESSES)]
        rows[0].cursor = 0
        return cls(rows=rows, active_row=0)

    @property
    def current(self) -> Row:
        return self.rows[self.active_row]


class WordleError(Exception):
    """Fatal error: dictionary data missing or unusable."""
