"""
Game Logger Module for the Wordle bot

This module provides logging for player actions, game events and errors.
Entries are JSON structured so the daily log file is easy to parse.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for the Wordle bot.

    Features:
    - Player action tracking keyed by player id
    - Game event logging (new games, wins, losses)
    - Error logging with the failing action
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_bot')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # File handler for detailed logs
        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          player_id: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'player_id': player_id,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_player_action(self, player_id: str, action: str, **kwargs):
        """
        Log an action requested by a player.

        Args:
            player_id: Player identifier
            action: Type of action (e.g., 'new_game', 'submit_guess', 'score')
            **kwargs: Additional details to log
        """
        self.logger.info(self._create_log_entry('PLAYER_ACTION', action, player_id, kwargs))

    def log_game_event(self, player_id: Optional[str], event: str, **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            player_id: Player identifier, None for process-wide events
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, player_id, kwargs))

    def log_warning(self, player_id: Optional[str], message: str, **kwargs):
        """Log a recoverable problem, such as a corrupt saved record."""
        details = {'message': message, **kwargs}
        self.logger.warning(self._create_log_entry('WARNING', 'warning', player_id, details))

    def log_error(self, player_id: Optional[str], error: Exception, action: str, **kwargs):
        """
        Log errors with full context.

        Args:
            player_id: Player identifier if applicable
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, player_id, details))

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'player_actions': 0,
            'game_events': 0,
            'warnings': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    if '"PLAYER_ACTION"' in line:
                        stats['player_actions'] += 1
                    elif '"GAME_EVENT"' in line:
                        stats['game_events'] += 1
                    elif '"WARNING"' in line:
                        stats['warnings'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
