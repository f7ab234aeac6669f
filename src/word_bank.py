"""Load dictionary word lists, pick answers and validate guesses."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable
from pathlib import Path
from zipfile import BadZipFile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from models import WORD_LENGTH, WordleError

WORDS_DIR = Path(__file__).resolve().parent / "words"
DEFAULT_ANSWERS_PATH = WORDS_DIR / "answers.txt"
DEFAULT_GUESSES_PATH = WORDS_DIR / "guesses.txt"


def load_word_list(path: str | Path) -> list[str]:
    """Read *path* (.txt, one word per line, or .xlsx column A) into lowercase words."""
    path = Path(path)
    if not path.exists():
        raise WordleError(f"File not found: {path}")

    try:
        if path.suffix.lower() == ".xlsx":
            raw = _read_xlsx_column(path)
        else:
            raw = path.read_text(encoding="utf-8").splitlines()
    except (InvalidFileException, BadZipFile, KeyError, UnicodeDecodeError, OSError) as e:
        raise WordleError(f"Cannot read {path}: {e}") from e

    words = _validate_and_filter(raw, source=path.name)
    if not words:
        raise WordleError(f"No valid {WORD_LENGTH}-letter words in {path}")
    return words


def _read_xlsx_column(path: Path) -> list[str]:
    """Return the text of every non-empty cell in column A of the active sheet."""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active
    values = [
        str(row[0])
        for row in ws.iter_rows(min_col=1, max_col=1, values_only=True)
        if row and row[0] is not None
    ]
    wb.close()
    return values


def _normalize_word(raw: str) -> str:
    return raw.strip().lower()


def _is_well_formed(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


def _validate_and_filter(raw: Iterable[str], source: str = "") -> list[str]:
    """Normalize, drop blanks and duplicates, warn about malformed entries."""
    seen: set[str] = set()
    result: list[str] = []

    for line in raw:
        word = _normalize_word(line)
        if not word:
            continue
        if not _is_well_formed(word):
            print(
                f"Warning: skipping '{word}' in {source or 'word list'} "
                f"(not {WORD_LENGTH} letters)",
                file=sys.stderr,
            )
            continue
        if word in seen:
            continue
        seen.add(word)
        result.append(word)

    return result


class WordBank:
    """Answer pool plus the (larger) set of words accepted as guesses.

    The valid-guess set is the union of both lists, so every answer is
    guessable while extra dictionary words are never chosen as answers.
    """

    def __init__(
        self,
        answers: Iterable[str],
        extra_guesses: Iterable[str] = (),
        rng: random.Random | None = None,
    ) -> None:
        self._answers = tuple(_validate_and_filter(answers, source="answer pool"))
        if not self._answers:
            raise WordleError("Answer pool is empty")
        self._valid_guesses = frozenset(self._answers).union(
            _validate_and_filter(extra_guesses, source="guess list")
        )
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_files(
        cls,
        answers_path: str | Path | None = None,
        guesses_path: str | Path | None = None,
        rng: random.Random | None = None,
    ) -> WordBank:
        """Load the answer pool and extra guesses, defaulting to the bundled lists."""
        answers = load_word_list(answers_path or DEFAULT_ANSWERS_PATH)
        guesses = load_word_list(guesses_path or DEFAULT_GUESSES_PATH)
        return cls(answers, guesses, rng=rng)

    @property
    def answer_count(self) -> int:
        return len(self._answers)

    @property
    def guess_count(self) -> int:
        return len(self._valid_guesses)

    def select_answer(self) -> str:
        """Pick a lowercase answer uniformly at random from the pool."""
        return self._rng.choice(self._answers)

    def is_valid_guess(self, word: str) -> bool:
        if not isinstance(word, str):
            return False
        return word.lower() in self._valid_guesses
