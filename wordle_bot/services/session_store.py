"""
Session Store

Owns every player record. Operations on one player run one at a time, in
arrival order, and each one is persisted before it returns. Different
players never wait on each other.
"""

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config.game_settings import GameContext
from ..errors import GameNotInProgressError, PersistenceError
from ..models.evaluation import LetterStatus
from ..models.game import GameSession, GameStatus, GuessRecord
from ..models.player import PlayerRecord, Score
from ..models.words import WordSet
from ..storage.base import MemoryRecordStorage, RecordStorage
from ..utils.game_logger import game_logger


class PlayerLock:
    """
    Exclusive lock that admits waiters in the order they arrived.

    Each caller draws a ticket and waits until that ticket is served.
    """

    def __init__(self):
        self._condition = threading.Condition()
        self._next_ticket = 0
        self._now_serving = 0

    def take_ticket(self) -> int:
        with self._condition:
            ticket = self._next_ticket
            self._next_ticket += 1
            return ticket

    def wait_turn(self, ticket: int) -> None:
        with self._condition:
            while self._now_serving != ticket:
                self._condition.wait()

    def release(self) -> None:
        with self._condition:
            self._now_serving += 1
            self._condition.notify_all()

    @property
    def idle(self) -> bool:
        """True when nobody holds or waits for the lock."""
        with self._condition:
            return self._now_serving == self._next_ticket

    def __enter__(self):
        self.wait_turn(self.take_ticket())
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


@dataclass
class GuessResult:
    """Outcome of one accepted guess, ready for rendering."""
    word: str
    classifications: List[LetterStatus]
    status: GameStatus
    remaining_attempts: int
    max_attempts: int
    guesses: List[GuessRecord]
    known_letters: Dict[str, LetterStatus]
    attempted_letters: List[str]
    score: Score
    target: Optional[str] = None  # Only set when the game is over

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "classifications": [status.value for status in self.classifications],
            "status": self.status.value,
            "remaining_attempts": self.remaining_attempts,
            "max_attempts": self.max_attempts,
            "guesses": [guess.to_dict() for guess in self.guesses],
            "known_letters": {letter: status.value for letter, status in sorted(self.known_letters.items())},
            "attempted_letters": list(self.attempted_letters),
            "score": self.score.to_dict(),
            "target": self.target,
        }


def _copy_record(record: PlayerRecord) -> PlayerRecord:
    return PlayerRecord.from_dict(record.to_dict())


def _copy_session(session: GameSession) -> GameSession:
    return GameSession.from_dict(session.to_dict())


class SessionStore:
    """
    Identity-keyed access to player records with durable persistence.

    Records handed out by the public methods are copies; the store is the
    only owner of the live records.
    """

    def __init__(self,
                 context: GameContext,
                 storage: Optional[RecordStorage] = None,
                 persist_retries: int = 3,
                 retry_delay: float = 0.05):
        self.context = context
        self.storage = storage if storage is not None else MemoryRecordStorage()
        self.persist_retries = max(1, persist_retries)
        self.retry_delay = retry_delay
        self._records: Dict[str, PlayerRecord] = {}
        self._locks: Dict[str, PlayerLock] = {}
        # guards the lock map, ticket draws and lock removal
        self._locks_guard = threading.Lock()

    def _lock_for(self, player_id: str) -> PlayerLock:
        with self._locks_guard:
            return self._locks.setdefault(player_id, PlayerLock())

    @contextmanager
    def _player_lock(self, player_id: str, forget: bool = False):
        """
        Holds the player's lock for the duration of the block.

        With ``forget`` the lock is dropped from the map on release, unless
        another caller already holds a ticket for it.
        """
        with self._locks_guard:
            lock = self._locks.setdefault(player_id, PlayerLock())
            ticket = lock.take_ticket()
        lock.wait_turn(ticket)
        try:
            yield lock
        finally:
            with self._locks_guard:
                lock.release()
                if forget and lock.idle and self._locks.get(player_id) is lock:
                    del self._locks[player_id]

    def _load_record(self, player_id: str, display_name: Optional[str] = None) -> PlayerRecord:
        """Cache, then storage, then a fresh record. Caller holds the player lock."""
        record = self._records.get(player_id)
        if record is None:
            record = self._read_stored_record(player_id)
            if record is None:
                record = PlayerRecord(player_id=player_id)
                game_logger.log_game_event(player_id, 'player_created')
            self._records[player_id] = record

        if display_name and record.display_name != display_name:
            record.display_name = display_name
        return record

    def _read_stored_record(self, player_id: str) -> Optional[PlayerRecord]:
        try:
            data = self.storage.load(player_id)
        except PersistenceError as e:
            if not e.corrupt:
                raise
            game_logger.log_warning(player_id, 'Corrupt saved record ignored', error=str(e))
            return None

        if data is None:
            return None

        try:
            record = PlayerRecord.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            game_logger.log_warning(player_id, 'Malformed saved record ignored', error=str(e))
            return None

        if record.player_id != player_id:
            game_logger.log_warning(player_id, 'Saved record belongs to another player', stored_id=record.player_id)
            return None
        return record

    def _commit(self, player_id: str, record: PlayerRecord, snapshot: Dict[str, Any]) -> None:
        """
        Persists a mutated record, retrying a bounded number of times.

        On final failure the in-memory record is restored from ``snapshot``
        and the error is raised, so the caller never reports an unsaved change.
        """
        data = record.to_dict()
        last_error: Optional[PersistenceError] = None
        for attempt in range(1, self.persist_retries + 1):
            try:
                self.storage.save(player_id, data)
                return
            except PersistenceError as e:
                last_error = e
                game_logger.log_error(player_id, e, 'save', attempt=attempt)
                if attempt < self.persist_retries and self.retry_delay:
                    time.sleep(self.retry_delay * attempt)

        self._records[player_id] = PlayerRecord.from_dict(snapshot)
        raise PersistenceError(f"Could not save your game, please try again ({last_error})")

    def get_or_create(self, player_id: str, display_name: Optional[str] = None) -> PlayerRecord:
        """
        Returns a copy of the player's record, loading or creating it as needed.

        Raises:
            PersistenceError: If stored data exists but cannot be read
        """
        player_id = str(player_id)
        with self._player_lock(player_id):
            return _copy_record(self._load_record(player_id, display_name))

    def start_new_game(self,
                       player_id: str,
                       word_set: Optional[WordSet] = None,
                       display_name: Optional[str] = None) -> GameSession:
        """
        Replaces the player's session with a fresh one.

        An unfinished session is abandoned, not counted as a loss. The new
        target prefers words this player has not played yet.

        Returns:
            GameSession: Copy of the new in-progress session

        Raises:
            PersistenceError: If the new game could not be saved
        """
        player_id = str(player_id)
        word_set = word_set or self.context.word_set

        with self._player_lock(player_id):
            record = self._load_record(player_id, display_name)
            snapshot = record.to_dict()

            previous = record.active_session
            if previous is not None and not previous.is_over:
                game_logger.log_game_event(
                    player_id, 'game_abandoned',
                    target_word=previous.target, rounds_used=len(previous.guesses)
                )

            target = word_set.pick_random_target(exclude=record.played_words)
            session = GameSession.new_game(target, self.context.max_attempts)
            record.active_session = session
            record.reset_known_letters()
            record.mark_played(session.target)

            self._commit(player_id, record, snapshot)
            game_logger.log_game_event(
                player_id, 'game_started',
                target_word=session.target, word_length=session.word_length,
                max_attempts=session.max_attempts
            )
            return _copy_session(session)

    def submit_guess(self, player_id: str, word: str) -> GuessResult:
        """
        Applies a guess to the player's active session and persists it.

        Raises:
            GameNotInProgressError: If there is no session or it is over
            InvalidGuessError: If the guess is rejected (nothing changes)
            PersistenceError: If the result could not be saved (rolled back)
        """
        player_id = str(player_id)

        with self._player_lock(player_id):
            record = self._load_record(player_id)
            session = record.active_session
            if session is None:
                raise GameNotInProgressError("You have no game in progress. Start a new game to play")

            snapshot = record.to_dict()
            classifications, status = session.submit_guess(word, self.context.word_set)
            guessed = session.guesses[-1].word

            record.update_known_letters(classifications, guessed)
            if status.is_terminal:
                record.record_game_end(status)

            self._commit(player_id, record, snapshot)

            result = GuessResult(
                word=guessed,
                classifications=classifications,
                status=status,
                remaining_attempts=session.remaining_attempts,
                max_attempts=session.max_attempts,
                guesses=[GuessRecord(g.word, list(g.classifications)) for g in session.guesses],
                known_letters=dict(record.known_letters),
                attempted_letters=session.attempted_letters(),
                score=record.score(),
                target=session.target if status.is_terminal else None,
            )

        if status is GameStatus.WON:
            game_logger.log_game_event(
                player_id, 'game_won',
                rounds_used=len(result.guesses), target_word=result.target, winning_guess=guessed
            )
        elif status is GameStatus.LOST:
            game_logger.log_game_event(
                player_id, 'game_lost',
                rounds_used=len(result.guesses), target_word=result.target, final_guess=guessed
            )
        return result

    def get_session(self, player_id: str) -> Optional[GameSession]:
        """Returns a copy of the player's current (or last finished) session."""
        player_id = str(player_id)
        with self._player_lock(player_id):
            session = self._load_record(player_id).active_session
            return _copy_session(session) if session is not None else None

    def score(self, player_id: str) -> Score:
        player_id = str(player_id)
        with self._player_lock(player_id):
            return self._load_record(player_id).score()

    def delete(self, player_id: str) -> bool:
        """
        Removes the player's record from memory and storage and drops its idle lock.

        Returns:
            bool: True if anything was removed
        """
        player_id = str(player_id)
        with self._player_lock(player_id, forget=True):
            removed = self.storage.delete(player_id)
            removed = self._records.pop(player_id, None) is not None or removed
        if removed:
            game_logger.log_game_event(player_id, 'player_deleted')
        return removed

    def active_players(self) -> int:
        """Number of player records currently cached."""
        return len(self._records)
