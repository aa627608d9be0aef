"""
Service Decorators

Contains decorators that make sure the game services are available for HTTP
and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit

from .helpers import get_chat_service, get_session_store


def require_store(f):
    """
    Decorator for HTTP endpoints that need the session store.

    Passes the store to the view as the ``store`` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        store = get_session_store()
        if not store:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['store'] = store
        return f(*args, **kwargs)

    return decorated_function


def websocket_player_required(f):
    """Decorator for WebSocket events carrying a ``player_id``."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        chat_service = get_chat_service()
        if not chat_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not args or not isinstance(args[0], dict) or not args[0].get('player_id'):
            emit('error', {'error': 'player_id is required'})
            return

        kwargs['chat_service'] = chat_service
        return f(*args, **kwargs)

    return decorated_function
