"""
Game Configuration Module

Defines the game defaults, the word-file loader used at startup and the
immutable context object shared by every component.
"""

import json
import os
from dataclasses import dataclass
from typing import Final, List, Optional

from ..errors import InvalidWordListError
from ..models.words import WordSet

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Default number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_GAME_NAME: Final[str] = "Bad Wordle \U0001F608"


def load_word_list(path: str) -> List[str]:
    """
    Load a word list from disk.

    Plain text files hold one word per line; blank lines and lines starting
    with '#' are skipped. Files ending in ``.json`` must contain an array of
    words.

    Args:
        path: Location of the word file

    Returns:
        List[str]: Words in file order, stripped

    Raises:
        InvalidWordListError: If the file is missing, malformed or empty
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.endswith('.json'):
                words = json.load(f)
                if not isinstance(words, list):
                    raise InvalidWordListError(f"JSON file must contain an array of words: {path}")
                words = [str(word).strip() for word in words]
            else:
                words = [line.strip() for line in f if not line.startswith('#')]
    except FileNotFoundError:
        raise InvalidWordListError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise InvalidWordListError(f"Invalid JSON in {path}: {e}")

    words = [word for word in words if word]
    if not words:
        raise InvalidWordListError(f"No words found in {path}")
    return words


@dataclass(frozen=True)
class GameContext:
    """
    Process-wide game settings, built once at startup.

    Attributes:
        game_name: Name shown in welcome messages
        word_set: Shared target and guess vocabulary
        max_attempts: Guesses allowed per game
        save_dir: Directory for player records, None when kept in memory
    """
    game_name: str
    word_set: WordSet
    max_attempts: int = MAX_ATTEMPTS
    save_dir: Optional[str] = None

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")


def build_game_context(config_class) -> GameContext:
    """
    Creates the game context from a configuration class.

    The valid-word file is optional: when it is missing the targets alone
    are accepted as guesses.

    Raises:
        InvalidWordListError: If the target word file yields no words
    """
    targets = load_word_list(config_class.TARGET_WORDS_FILE)

    valid_file = getattr(config_class, 'VALID_WORDS_FILE', None)
    valid = load_word_list(valid_file) if valid_file and os.path.exists(valid_file) else list(targets)

    save_dir = getattr(config_class, 'SAVE_DIR', '') or None

    return GameContext(
        game_name=getattr(config_class, 'GAME_NAME', DEFAULT_GAME_NAME),
        word_set=WordSet(targets, valid),
        max_attempts=getattr(config_class, 'MAX_ATTEMPTS', MAX_ATTEMPTS),
        save_dir=save_dir,
    )
