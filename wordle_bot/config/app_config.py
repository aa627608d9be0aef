"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    GAME_NAME = os.getenv('GAME_NAME', 'Bad Wordle \U0001F608')
    TARGET_WORDS_FILE = os.getenv('TARGET_WORDS_FILE', 'target_words.txt')
    VALID_WORDS_FILE = os.getenv('VALID_WORDS_FILE', 'valid_words.txt')
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', 6))

    # Persistence Settings (empty SAVE_DIR and MONGO_URI keep state in memory only)
    SAVE_DIR = os.getenv('SAVE_DIR', '')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'wordle_game')
    PERSIST_RETRIES = int(os.getenv('PERSIST_RETRIES', 3))
    PERSIST_RETRY_DELAY = float(os.getenv('PERSIST_RETRY_DELAY', 0.05))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    SAVE_DIR = ''
    MONGO_URI = None
    PERSIST_RETRY_DELAY = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
