"""
Wordle Bot Application Package

Rule engine and per-player session state for a Wordle game played over chat,
with a Flask / Socket.IO front-end.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, session_store=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        session_store: Ready-made SessionStore; built from config_class when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    from .services.chat_service import ChatService

    app = Flask(__name__)
    app.config.from_object(config_class)

    if session_store is None:
        session_store = create_session_store(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store shared instances for use in other modules
    app.session_store = session_store
    app.chat_service = ChatService(session_store)
    app.socketio = socketio

    return app, socketio


def create_session_store(config_class=Config):
    """
    Builds the game context, storage backend and session store from configuration.

    Raises:
        InvalidWordListError: If the word files are missing or empty
        PersistenceError: If the configured storage cannot be reached
    """
    from .config.game_settings import build_game_context
    from .services.session_store import SessionStore
    from .storage import create_storage

    context = build_game_context(config_class)
    storage = create_storage(config_class)
    return SessionStore(
        context,
        storage,
        persist_retries=getattr(config_class, 'PERSIST_RETRIES', 3),
        retry_delay=getattr(config_class, 'PERSIST_RETRY_DELAY', 0.05),
    )
