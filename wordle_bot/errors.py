"""
Error Types

All errors raised by the game core. Each one carries a message that can be
shown to the player as-is; adapters map them to chat replies or HTTP codes.
"""


class WordleError(Exception):
    """Base class for all game errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidWordListError(WordleError):
    """Raised at startup when a word source is empty or malformed."""


class LengthMismatchError(WordleError):
    """Raised when a guess and the target differ in length."""


class InvalidGuessError(WordleError):
    """Raised when a guess is rejected. No state is changed."""


class GameNotInProgressError(WordleError):
    """Raised when guessing without an active game."""


class PersistenceError(WordleError):
    """
    Raised when a player record could not be saved or loaded.

    Attributes:
        corrupt: True when the stored record exists but cannot be decoded
    """

    def __init__(self, message: str = "", corrupt: bool = False):
        super().__init__(message)
        self.corrupt = corrupt
