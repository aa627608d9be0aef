"""
Utilities Package

Contains utility functions, decorators, rendering and logging helpers.
"""

from .decorators import require_store, websocket_player_required
from .helpers import get_chat_service, get_display_name, get_request_data, get_session_store
from .game_logger import game_logger

__all__ = [
    'require_store', 'websocket_player_required',
    'get_chat_service', 'get_display_name', 'get_request_data', 'get_session_store',
    'game_logger'
]
