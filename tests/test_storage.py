import os

import pytest
from pymongo.errors import PyMongoError

from wordle_bot.config import app_config
from wordle_bot.errors import PersistenceError
from wordle_bot.storage import FileRecordStorage, MemoryRecordStorage, MongoRecordStorage, create_storage

RECORD = {
    'player_id': '42',
    'display_name': 'Ann',
    'games_played': 1,
    'wins': 1,
    'losses': 0,
    'known_letters': {'H': 'CORRECT'},
    'active_session': None,
    'played_words': ['HELLO'],
    'won_words': ['HELLO'],
}


def test_file_storage_round_trip(file_storage):
    file_storage.save('42', RECORD)
    assert file_storage.load('42') == RECORD


def test_file_storage_missing_record(file_storage):
    assert file_storage.load('nobody') is None


def test_file_storage_overwrites(file_storage):
    file_storage.save('42', RECORD)
    file_storage.save('42', dict(RECORD, wins=5))
    assert file_storage.load('42')['wins'] == 5


def test_file_storage_corrupt_record(file_storage):
    file_storage.path_for('42').write_text('{"player_id": "42", "wins"', encoding='utf-8')
    with pytest.raises(PersistenceError) as excinfo:
        file_storage.load('42')
    assert excinfo.value.corrupt


def test_file_storage_non_object_is_corrupt(file_storage):
    file_storage.path_for('42').write_text('[1, 2, 3]', encoding='utf-8')
    with pytest.raises(PersistenceError) as excinfo:
        file_storage.load('42')
    assert excinfo.value.corrupt


def test_failed_save_keeps_previous_record(file_storage, monkeypatch):
    file_storage.save('42', RECORD)

    def broken_replace(src, dst):
        raise OSError('disk full')

    monkeypatch.setattr(os, 'replace', broken_replace)
    with pytest.raises(PersistenceError):
        file_storage.save('42', dict(RECORD, wins=99))
    monkeypatch.undo()

    assert file_storage.load('42') == RECORD
    leftovers = [name for name in os.listdir(file_storage.save_dir) if name.endswith('.tmp')]
    assert leftovers == []


def test_unserializable_record_is_persistence_error(file_storage):
    with pytest.raises(PersistenceError):
        file_storage.save('42', {'bad': object()})
    assert file_storage.load('42') is None


def test_odd_player_ids_stay_inside_save_dir(file_storage):
    player_id = '../../etc/passwd'
    file_storage.save(player_id, RECORD)

    path = file_storage.path_for(player_id)
    assert path.parent == file_storage.save_dir
    assert file_storage.load(player_id) == RECORD


def test_file_storage_delete(file_storage):
    file_storage.save('42', RECORD)
    assert file_storage.delete('42')
    assert not file_storage.delete('42')
    assert file_storage.load('42') is None


def test_memory_storage_returns_copies():
    storage = MemoryRecordStorage()
    data = dict(RECORD, played_words=['HELLO'])
    storage.save('42', data)
    data['played_words'].append('WORLD')

    loaded = storage.load('42')
    assert loaded['played_words'] == ['HELLO']
    loaded['played_words'].append('CRANE')
    assert storage.load('42')['played_words'] == ['HELLO']


class FakeDeleteResult:
    def __init__(self, deleted_count):
        self.deleted_count = deleted_count


class FakeCollection:
    """Minimal stand-in for a pymongo collection."""

    def __init__(self):
        self.documents = {}

    def replace_one(self, query, document, upsert=False):
        self.documents[query['player_id']] = dict(document)

    def find_one(self, query, projection=None):
        document = self.documents.get(query['player_id'])
        return dict(document) if document is not None else None

    def delete_one(self, query):
        return FakeDeleteResult(1 if self.documents.pop(query['player_id'], None) else 0)


class BrokenCollection:
    def replace_one(self, *args, **kwargs):
        raise PyMongoError('connection refused')

    def find_one(self, *args, **kwargs):
        raise PyMongoError('connection refused')


def test_mongo_storage_round_trip():
    storage = MongoRecordStorage(FakeCollection())
    storage.save('42', RECORD)
    assert storage.load('42') == RECORD
    assert storage.load('7') is None
    assert storage.delete('42')
    assert storage.load('42') is None


def test_mongo_storage_errors_become_persistence_errors():
    storage = MongoRecordStorage(BrokenCollection())
    with pytest.raises(PersistenceError):
        storage.save('42', RECORD)
    with pytest.raises(PersistenceError) as excinfo:
        storage.load('42')
    assert not excinfo.value.corrupt


def test_create_storage_picks_backend(tmp_path):
    class FileConfig(app_config.TestingConfig):
        SAVE_DIR = str(tmp_path / 'players')

    assert isinstance(create_storage(app_config.TestingConfig), MemoryRecordStorage)
    storage = create_storage(FileConfig)
    assert isinstance(storage, FileRecordStorage)
    assert os.path.isdir(FileConfig.SAVE_DIR)
