"""
Wordle Bot - Main Entry Point

This is the main entry point for the Wordle chat bot.
It loads the word lists, restores player state and starts the Flask-SocketIO application.
"""

import sys
from wordle_bot import create_app, create_session_store
from wordle_bot.config import Config
from wordle_bot.errors import InvalidWordListError, PersistenceError
from wordle_bot.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        try:
            session_store = create_session_store(Config)
        except InvalidWordListError as e:
            print(f"✗ Failed to load word lists: {e}")
            game_logger.log_error(None, e, 'startup')
            return 1
        except PersistenceError as e:
            print(f"✗ Failed to initialize storage: {e}")
            game_logger.log_error(None, e, 'startup')
            return 1

        context = session_store.context
        print(f"✓ Loaded {len(context.word_set)} target words and {len(context.word_set.valid)} valid words")
        if context.save_dir is None and not Config.MONGO_URI:
            print("✗ No save directory configured. Not saving state.")
        else:
            print(f"✓ Player state saved with {type(session_store.storage).__name__}")

        print("Creating Flask application...")
        app, socketio = create_app(Config, session_store=session_store)
        print("✓ Flask application created successfully")

        game_logger.log_game_event(
            None, 'server_started',
            game_name=context.game_name, max_attempts=context.max_attempts
        )

        print(f"\nStarting {context.game_name} on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
        return 0

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle bot shutting down (KeyboardInterrupt)")
        return 0
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.log_error(None, e, 'startup')
        raise


if __name__ == '__main__':
    sys.exit(main())
