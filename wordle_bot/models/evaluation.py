"""
Guess Evaluation

Letter classification rules shared by every game session.
"""

from collections import Counter
from enum import Enum
from typing import List, Optional

from ..errors import LengthMismatchError


class LetterStatus(Enum):
    """Per-letter verdict for a guessed word."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


def evaluate_guess(target: str, guess: str) -> List[LetterStatus]:
    """
    Classifies every letter of ``guess`` against ``target``.

    Exact position matches are marked first and consume their letter from the
    target. Remaining letters are then marked PRESENT only while unmatched
    copies of that letter are still available, so a repeated guessed letter
    is never credited more times than it occurs in the target.

    Args:
        target: The hidden word
        guess: The submitted word, same length as target

    Returns:
        List[LetterStatus]: One entry per position in guess

    Raises:
        LengthMismatchError: If the words differ in length
    """
    target = target.upper()
    guess = guess.upper()
    if len(guess) != len(target):
        raise LengthMismatchError(f"Guess must be {len(target)} letters long")

    result: List[Optional[LetterStatus]] = [None] * len(guess)
    available = Counter(target)

    # First pass: exact matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = LetterStatus.CORRECT
            available[letter] -= 1

    # Second pass: present or absent, limited by what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if available[letter] > 0:
            result[i] = LetterStatus.PRESENT
            available[letter] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return [status for status in result if status is not None]


def is_winning(classifications: List[LetterStatus]) -> bool:
    """True when every letter is CORRECT."""
    return bool(classifications) and all(status == LetterStatus.CORRECT for status in classifications)
