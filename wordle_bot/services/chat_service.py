"""
Chat Service

Maps chat messages from a player to game operations and renders the reply.
Every game error becomes a reply; nothing raised by the game core reaches
the transport.
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import GameNotInProgressError, InvalidGuessError, PersistenceError, WordleError
from ..models.game import GameStatus
from ..utils.game_logger import game_logger
from ..utils.rendering import render_board, render_known_letters
from .session_store import SessionStore


@dataclass
class ChatReply:
    """Text to send back, plus the game status for transports that want it."""
    text: str
    status: Optional[str] = None
    error: Optional[str] = None


class ChatService:
    """
    Chat front-end for the session store.

    Commands: /help, /new, /start, /score, /state. Any other text is a
    guess, or starts a game when the player has none in progress.
    """

    def __init__(self, store: SessionStore):
        self.store = store
        self.context = store.context

    def handle_message(self, player_id: str, text: str, display_name: Optional[str] = None) -> ChatReply:
        player_id = str(player_id)
        text = (text or "").strip()
        game_logger.log_player_action(player_id, 'chat_message', text=text)

        try:
            if text.startswith('/'):
                return self._handle_command(player_id, text.split()[0].lower(), display_name)

            session = self.store.get_session(player_id)
            if session is None or session.is_over:
                return self.new_game(player_id, display_name)
            return self.guess(player_id, text, display_name)
        except WordleError as e:
            game_logger.log_error(player_id, e, 'chat_message', text=text)
            return ChatReply(text=self.error_text(e, display_name), error=type(e).__name__)

    def _handle_command(self, player_id: str, command: str, display_name: Optional[str]) -> ChatReply:
        if command == '/help':
            return ChatReply(text=self.help_text())
        if command in ('/new', '/start'):
            return self.new_game(player_id, display_name)
        if command == '/score':
            return self.score(player_id)
        if command == '/state':
            return self.state(player_id)
        return ChatReply(text="I don't know that command.")

    def help_text(self) -> str:
        return (
            f"Welcome to {self.context.game_name}! The goal of the game is to guess the target word "
            f"within {self.context.max_attempts} tries.\n\n"
            "Type /new to restart the game or /score to see your score"
        )

    def new_game(self, player_id: str, display_name: Optional[str] = None) -> ChatReply:
        session = self.store.start_new_game(player_id, display_name=display_name)
        score = self.store.score(player_id)

        if score.games_played == 0:
            history = "This is your first game."
        else:
            history = f"Your score: {score}."

        text = (
            f"Hi {display_name or 'there'}, Welcome to {self.context.game_name}!\n\n"
            f"{history}\nGuess the {session.word_length}-letter word."
        )
        return ChatReply(text=text, status=session.status.value)

    def guess(self, player_id: str, word: str, display_name: Optional[str] = None) -> ChatReply:
        result = self.store.submit_guess(player_id, word)
        lines = [render_board(result.guesses), ""]

        if result.status is GameStatus.WON:
            lines.append(f"You won! Target word: {result.target} \U0001F46F")
            lines.append(f"Your score: {result.score}")
        elif result.status is GameStatus.LOST:
            lines.append(f"You lost! Target word: {result.target} \U0001F979")
            lines.append(f"Your score: {result.score}")
        else:
            lines.append("Nice try. Guess another word?")
            lines.append(f"Attempts left: {result.remaining_attempts}")
            lines.append(f"Letters: {render_known_letters(result.known_letters)}")

        return ChatReply(text="\n".join(lines), status=result.status.value)

    def score(self, player_id: str) -> ChatReply:
        score = self.store.score(player_id)
        if score.games_played == 0:
            return ChatReply(text="You have not played any games yet.")
        return ChatReply(text=f"Your score: {score}")

    def state(self, player_id: str) -> ChatReply:
        session = self.store.get_session(player_id)
        if session is None:
            return ChatReply(text="You have no game in progress. Type /new to start one.")

        lines = [render_board(session.guesses), ""]
        if session.is_over:
            lines.append(f"This game is over. Target word: {session.target}. Type /new to play again.")
        else:
            lines.append(f"Attempts left: {session.remaining_attempts}")
        return ChatReply(text="\n".join(lines), status=session.status.value)

    def error_text(self, error: WordleError, display_name: Optional[str] = None) -> str:
        """User-facing text for a game error."""
        name = display_name or 'there'
        if isinstance(error, InvalidGuessError):
            message = error.message or "that's not a valid word"
            return f"Sorry {name}, {message[0].lower()}{message[1:]}. Try again."
        if isinstance(error, GameNotInProgressError):
            return f"{error.message}. Type /new to play."
        if isinstance(error, PersistenceError):
            return "Sorry, your game could not be saved right now. Please try again."
        return f"Sorry {name}, something went wrong: {error.message}"
