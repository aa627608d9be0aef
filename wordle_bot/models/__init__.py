"""
Data Models Package

Contains the word set, the guess evaluator, game sessions and player records.
"""

from .evaluation import LetterStatus, evaluate_guess
from .game import GameSession, GameStatus, GuessRecord
from .player import PlayerRecord, Score
from .words import WordSet

__all__ = [
    'LetterStatus', 'evaluate_guess',
    'GameSession', 'GameStatus', 'GuessRecord',
    'PlayerRecord', 'Score',
    'WordSet'
]
