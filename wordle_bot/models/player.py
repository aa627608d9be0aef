"""
Player Data Models

Contains the durable per-player record and its statistics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .evaluation import LetterStatus
from .game import GameSession, GameStatus


@dataclass(frozen=True)
class Score:
    """Read-only statistics snapshot."""
    games_played: int = 0
    wins: int = 0
    losses: int = 0

    @property
    def win_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.wins / self.games_played

    def to_dict(self) -> Dict[str, int]:
        return {
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
        }

    def __str__(self) -> str:
        return f"{self.win_rate * 100:.0f}% ({self.wins}/{self.games_played})"


@dataclass
class PlayerRecord:
    """
    Everything kept about one player.

    ``known_letters`` holds the best classification seen per letter during
    the active session and is cleared when a new game starts.
    ``played_words`` and ``won_words`` remember targets across games so new
    games can prefer words the player has not seen.
    """
    player_id: str
    display_name: Optional[str] = None
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    known_letters: Dict[str, LetterStatus] = field(default_factory=dict)
    active_session: Optional[GameSession] = None
    played_words: List[str] = field(default_factory=list)
    won_words: List[str] = field(default_factory=list)

    def record_game_end(self, outcome: GameStatus) -> None:
        """Counts a finished game. Must be called once per terminal transition."""
        if outcome is GameStatus.WON:
            self.wins += 1
            if self.active_session and self.active_session.target not in self.won_words:
                self.won_words.append(self.active_session.target)
        elif outcome is GameStatus.LOST:
            self.losses += 1
        else:
            raise ValueError(f"Cannot record a game end with status {outcome.value}")
        self.games_played += 1

    def update_known_letters(self, classifications: Iterable[LetterStatus], guess: str) -> None:
        for letter, status in zip(guess.upper(), classifications):
            current = self.known_letters.get(letter)
            # never downgrade
            if current is None or status.rank > current.rank:
                self.known_letters[letter] = status

    def reset_known_letters(self) -> None:
        self.known_letters = {}

    def mark_played(self, target: str) -> None:
        if target not in self.played_words:
            self.played_words.append(target)

    def score(self) -> Score:
        return Score(games_played=self.games_played, wins=self.wins, losses=self.losses)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "display_name": self.display_name,
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "known_letters": {letter: status.value for letter, status in sorted(self.known_letters.items())},
            "active_session": self.active_session.to_dict() if self.active_session else None,
            "played_words": list(self.played_words),
            "won_words": list(self.won_words),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerRecord":
        """
        Rebuilds a record saved with ``to_dict``.

        Raises:
            KeyError, TypeError, ValueError: If the data is malformed
        """
        counters = {name: data[name] for name in ("games_played", "wins", "losses")}
        for name, value in counters.items():
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"Invalid {name}: {value!r}")

        known_letters = data.get("known_letters", {})
        if not isinstance(known_letters, dict):
            raise ValueError(f"Invalid known_letters: {known_letters!r}")
        played_words = data.get("played_words", [])
        won_words = data.get("won_words", [])
        if not isinstance(played_words, list) or not isinstance(won_words, list):
            raise ValueError("Invalid word history")

        session_data = data.get("active_session")
        if session_data is not None and not isinstance(session_data, dict):
            raise ValueError(f"Invalid active_session: {session_data!r}")
        return cls(
            player_id=str(data["player_id"]),
            display_name=data.get("display_name"),
            known_letters={letter: LetterStatus(value) for letter, value in known_letters.items()},
            active_session=GameSession.from_dict(session_data) if session_data else None,
            played_words=list(played_words),
            won_words=list(won_words),
            **counters,
        )
