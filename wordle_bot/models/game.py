"""
Game Data Models

Contains the single-player game session and its state machine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..errors import GameNotInProgressError, InvalidGuessError
from .evaluation import LetterStatus, evaluate_guess, is_winning
from .words import WordSet


class GameStatus(Enum):
    """Session status. WON and LOST are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass
class GuessRecord:
    """One submitted guess and its per-letter result."""
    word: str
    classifications: List[LetterStatus]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "classifications": [status.value for status in self.classifications],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GuessRecord":
        word = data["word"]
        classifications = [LetterStatus(value) for value in data["classifications"]]
        if not isinstance(word, str) or len(classifications) != len(word):
            raise ValueError("Malformed guess record")
        return cls(word=word, classifications=classifications)


@dataclass
class GameSession:
    """
    One game attempt for a single player.

    The only mutation is ``submit_guess``; a finished session stays WON or
    LOST until it is replaced by a new one.
    """
    target: str
    max_attempts: int
    guesses: List[GuessRecord] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS

    @classmethod
    def new_game(cls, target: str, max_attempts: int) -> "GameSession":
        """Creates an in-progress session with an empty history."""
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        return cls(target=target.strip().upper(), max_attempts=max_attempts)

    @property
    def word_length(self) -> int:
        return len(self.target)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    @property
    def remaining_attempts(self) -> int:
        return self.max_attempts - len(self.guesses)

    def submit_guess(self, word: str, word_set: WordSet) -> Tuple[List[LetterStatus], GameStatus]:
        """
        Scores a guess and advances the session.

        Args:
            word: Raw guess text
            word_set: Vocabulary used to validate the guess

        Returns:
            Tuple of (classifications, new status)

        Raises:
            GameNotInProgressError: If the session is already WON or LOST
            InvalidGuessError: If the guess has the wrong length or is unknown
        """
        if self.is_over:
            raise GameNotInProgressError("This game is over. Start a new game to play again")

        normalized = (word or "").strip().upper()
        if len(normalized) != self.word_length:
            raise InvalidGuessError(f"The word must be {self.word_length} letters long")
        if not word_set.is_valid_guess(normalized):
            raise InvalidGuessError("That's not a valid word")

        classifications = evaluate_guess(self.target, normalized)
        self.guesses.append(GuessRecord(word=normalized, classifications=classifications))

        if is_winning(classifications):
            self.status = GameStatus.WON
        elif len(self.guesses) >= self.max_attempts:
            self.status = GameStatus.LOST

        return list(classifications), self.status

    def attempted_letters(self) -> List[str]:
        """Sorted, deduplicated letters guessed so far."""
        return sorted({letter for guess in self.guesses for letter in guess.word})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "guesses": [guess.to_dict() for guess in self.guesses],
            "status": self.status.value,
            "max_attempts": self.max_attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSession":
        """
        Rebuilds a session saved with ``to_dict``.

        The stored status must be the one the guess history leads to.

        Raises:
            KeyError, TypeError, ValueError: If the data is malformed
        """
        target = data["target"]
        max_attempts = data["max_attempts"]
        if not isinstance(target, str) or not target or not isinstance(max_attempts, int) or max_attempts < 1:
            raise ValueError("Malformed game session")
        if not isinstance(data["guesses"], list):
            raise ValueError("Malformed guess history")
        guesses = [GuessRecord.from_dict(item) for item in data["guesses"]]
        if len(guesses) > max_attempts:
            raise ValueError("Game session has more guesses than allowed")

        status = GameStatus(data["status"])
        expected = GameStatus.IN_PROGRESS
        for number, guess in enumerate(guesses, start=1):
            if len(guess.word) != len(target):
                raise ValueError(f"Guess {guess.word!r} does not match the target length")
            if guess.classifications != evaluate_guess(target, guess.word):
                raise ValueError(f"Stored result for {guess.word!r} does not match the target")
            if expected.is_terminal:
                raise ValueError("Game session has guesses after it ended")
            if is_winning(guess.classifications):
                expected = GameStatus.WON
            elif number == max_attempts:
                expected = GameStatus.LOST
        if status is not expected:
            raise ValueError(f"Stored status {status.value} does not match the guesses ({expected.value})")

        return cls(
            target=target,
            max_attempts=max_attempts,
            guesses=guesses,
            status=status,
        )
