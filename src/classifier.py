"""Per-letter feedback for a guess against the answer."""

from __future__ import annotations

from models import WORD_LENGTH, CellState

# Keyboard hints only ever move up this ladder.
_HINT_RANK = {
    CellState.ABSENT: 1,
    CellState.PRESENT: 2,
    CellState.CORRECT: 3,
}


def classify_guess(guess: str, answer: str) -> list[CellState]:
    """Return ABSENT/PRESENT/CORRECT for every position of *guess*.

    Repeated letters are handled letter by letter: exact positions are
    marked CORRECT first, then the remaining occurrences are marked
    PRESENT from left to right while the answer still has unclaimed
    copies of that letter.  Everything else is ABSENT.
    """
    guess = guess.lower()
    answer = answer.lower()
    if len(guess) != WORD_LENGTH or len(answer) != WORD_LENGTH:
        raise ValueError(
            f"Expected two {WORD_LENGTH}-letter words, got '{guess}' and '{answer}'"
        )

    guess_positions = _positions_by_letter(guess)
    answer_positions = _positions_by_letter(answer)
    result: list[CellState | None] = [None] * WORD_LENGTH

    for letter, positions in guess_positions.items():
        in_answer = answer_positions.get(letter)
        if not in_answer:
            for i in positions:
                result[i] = CellState.ABSENT
            continue

        consumed = 0
        leftovers: list[int] = []
        for i in positions:
            if i in in_answer:
                result[i] = CellState.CORRECT
                consumed += 1
            else:
                leftovers.append(i)

        for i in leftovers:
            if consumed < len(in_answer):
                result[i] = CellState.PRESENT
                consumed += 1
            else:
                result[i] = CellState.ABSENT

    return result  # type: ignore[return-value]


def merge_letter_hints(
    hints: dict[str, CellState], guess: str, states: list[CellState]
) -> None:
    """Fold one classified guess into *hints* (uppercase letter -> best state)."""
    for letter, state in zip(guess.upper(), states):
        current = hints.get(letter)
        if current is None or _HINT_RANK[state] > _HINT_RANK[current]:
            hints[letter] = state


def _positions_by_letter(word: str) -> dict[str, list[int]]:
    """Map letter -> ascending positions where it occurs."""
    idx: dict[str, list[int]] = {}
    for i, ch in enumerate(word):
        idx.setdefault(ch, []).append(i)
    return idx
