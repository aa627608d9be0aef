"""
Storage Package

Durable player-record backends behind the ``RecordStorage`` interface.
"""

from .base import MemoryRecordStorage, RecordStorage
from .file_storage import FileRecordStorage
from .mongo_storage import MongoRecordStorage


def create_storage(config_class) -> RecordStorage:
    """
    Picks a storage backend from configuration.

    MONGO_URI wins over SAVE_DIR; with neither set records live in memory.
    """
    if getattr(config_class, 'MONGO_URI', None):
        return MongoRecordStorage.from_uri(config_class.MONGO_URI, getattr(config_class, 'MONGO_DB_NAME', 'wordle_game'))
    if getattr(config_class, 'SAVE_DIR', ''):
        return FileRecordStorage(config_class.SAVE_DIR)
    return MemoryRecordStorage()


__all__ = ['RecordStorage', 'MemoryRecordStorage', 'FileRecordStorage', 'MongoRecordStorage', 'create_storage']
