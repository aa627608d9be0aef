"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game defaults, word loading and the shared game context
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import MAX_ATTEMPTS, DEFAULT_GAME_NAME, GameContext, build_game_context, load_word_list

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game settings
    'MAX_ATTEMPTS', 'DEFAULT_GAME_NAME', 'GameContext', 'build_game_context', 'load_word_list'
]
