import os
import sys
import tempfile
import pytest

# Keep log files out of the working tree; must happen before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_bot_logs_'))

# Ensure the project root (containing the `wordle_bot` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wordle_bot import create_app
from wordle_bot.config import TestingConfig
from wordle_bot.config.game_settings import GameContext
from wordle_bot.models.words import WordSet
from wordle_bot.services.chat_service import ChatService
from wordle_bot.services.session_store import SessionStore
from wordle_bot.storage import FileRecordStorage, MemoryRecordStorage

VALID_WORDS = ['lolly', 'bolle', 'apple', 'slate', 'adieu', 'crane', 'world', 'hello', 'allow', 'hells']


@pytest.fixture()
def word_set():
    return WordSet(['HELLO'], VALID_WORDS)


@pytest.fixture()
def make_store(tmp_path):
    """Builds stores with a given vocabulary, attempt limit and storage."""
    def _make(targets=('HELLO',), max_attempts=6, storage=None, persist_retries=3):
        context = GameContext(
            game_name='Test Wordle',
            word_set=WordSet(list(targets), VALID_WORDS),
            max_attempts=max_attempts,
            save_dir=str(tmp_path) if isinstance(storage, FileRecordStorage) else None,
        )
        return SessionStore(
            context,
            storage if storage is not None else MemoryRecordStorage(),
            persist_retries=persist_retries,
            retry_delay=0.0,
        )
    return _make


@pytest.fixture()
def store(make_store):
    return make_store()


@pytest.fixture()
def file_storage(tmp_path):
    return FileRecordStorage(str(tmp_path / 'saves'))


@pytest.fixture()
def chat(store):
    return ChatService(store)


@pytest.fixture()
def flask_app(store):
    application, _ = create_app(TestingConfig, session_store=store)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
