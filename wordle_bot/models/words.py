"""
Word Set

Immutable collection of target words and allowed guesses, shared read-only
by every game session.
"""

import random
from typing import FrozenSet, Iterable, Sequence, Tuple

from ..errors import InvalidWordListError


def _normalize_words(words: Iterable[str], label: str) -> Tuple[str, ...]:
    normalized = []
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise InvalidWordListError(f"{label} word at index {index} is not a string")
        word = word.strip().upper()
        if not word:
            raise InvalidWordListError(f"{label} word at index {index} is empty")
        if not word.isalpha():
            raise InvalidWordListError(f"{label} word '{word}' contains non-alphabetic characters")
        normalized.append(word)
    if not normalized:
        raise InvalidWordListError(f"{label} word list cannot be empty")
    return tuple(normalized)


class WordSet:
    """
    Validated target and guess vocabularies.

    Targets keep their given order. All words are stored upper-case, so
    lookups are case-insensitive.
    """

    __slots__ = ("_targets", "_valid", "_allowed")

    def __init__(self, targets: Sequence[str], valid: Iterable[str]):
        targets = _normalize_words(targets, "Target")
        valid = frozenset(_normalize_words(valid, "Valid"))
        object.__setattr__(self, "_targets", targets)
        object.__setattr__(self, "_valid", valid)
        object.__setattr__(self, "_allowed", valid | frozenset(targets))

    def __setattr__(self, name, value):
        raise AttributeError("WordSet is immutable")

    @property
    def targets(self) -> Tuple[str, ...]:
        return self._targets

    @property
    def valid(self) -> FrozenSet[str]:
        return self._valid

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.is_valid_guess(word)

    def pick_random_target(self, exclude: Iterable[str] = ()) -> str:
        """
        Picks a target word uniformly at random.

        Args:
            exclude: Words to avoid (e.g. already played by this player).
                When every target is excluded, all targets are eligible again.

        Returns:
            str: Upper-case target word
        """
        excluded = {word.upper() for word in exclude}
        candidates = [word for word in self._targets if word not in excluded] if excluded else None
        return random.choice(candidates or self._targets)

    def is_valid_guess(self, word: str) -> bool:
        """Case-insensitive membership test against valid words and targets."""
        return word.strip().upper() in self._allowed
