"""
Rendering Helpers

Turns game results into chat text.
"""

from typing import Dict, Iterable, List

from ..models.evaluation import LetterStatus
from ..models.game import GuessRecord

REGIONAL_INDICATOR_A = 0x1F1E6

SQUARES = {
    LetterStatus.CORRECT: "\U0001F7E9",
    LetterStatus.PRESENT: "\U0001F7E8",
    LetterStatus.ABSENT: "⬛",
}


def emoji_letter(letter: str) -> str:
    """Maps A-Z to the matching regional indicator symbol, '?' otherwise."""
    letter = letter.upper()
    if len(letter) != 1 or not 'A' <= letter <= 'Z':
        return '?'
    return chr(REGIONAL_INDICATOR_A + ord(letter) - ord('A'))


def render_letter(letter: str, status: LetterStatus) -> str:
    if status is LetterStatus.CORRECT:
        return emoji_letter(letter)
    if status is LetterStatus.PRESENT:
        return f"`{letter}`"
    return f"~{letter}~"


def render_guess(guess: GuessRecord) -> str:
    return " ".join(render_letter(letter, status) for letter, status in zip(guess.word, guess.classifications))


def render_squares(guess: GuessRecord) -> str:
    return "".join(SQUARES[status] for status in guess.classifications)


def render_board(guesses: Iterable[GuessRecord]) -> str:
    lines: List[str] = ["Your attempts:", ""]
    for guess in guesses:
        lines.append(f"{render_guess(guess)}   {render_squares(guess)}")
    return "\n".join(lines)


def render_known_letters(known_letters: Dict[str, LetterStatus]) -> str:
    """Letter summary in alphabetical order, e.g. ``A `E` ~S~``."""
    return " ".join(render_letter(letter, status) for letter, status in sorted(known_letters.items()))
