"""
MongoDB Record Storage

Stores each player record as one document in a MongoDB collection. A single
document replace is atomic, which gives the all-or-nothing save guarantee.
"""

from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..errors import PersistenceError
from .base import RecordStorage


class MongoRecordStorage(RecordStorage):
    """Player records in a MongoDB collection, keyed by ``player_id``."""

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str = 'wordle_game', timeout_ms: int = 5000) -> "MongoRecordStorage":
        """
        Connects to MongoDB and prepares the player collection.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the ``players`` collection
            timeout_ms: Server selection and socket timeout, so writes fail fast

        Raises:
            PersistenceError: If the server cannot be reached
        """
        try:
            client = MongoClient(
                mongo_uri,
                server_api=ServerApi('1'),
                serverSelectionTimeoutMS=timeout_ms,
                socketTimeoutMS=timeout_ms,
            )
            client.admin.command('ping')
            collection = client[db_name].players
            collection.create_index("player_id", unique=True)
        except PyMongoError as e:
            raise PersistenceError(f"MongoDB connection error: {e}")
        return cls(collection)

    def save(self, player_id: str, data: Dict[str, Any]) -> None:
        document = dict(data, player_id=player_id)
        try:
            self.collection.replace_one({"player_id": player_id}, document, upsert=True)
        except PyMongoError as e:
            raise PersistenceError(f"Error saving game state for {player_id}: {e}")

    def load(self, player_id: str) -> Optional[Dict[str, Any]]:
        try:
            document = self.collection.find_one({"player_id": player_id}, {"_id": 0})
        except PyMongoError as e:
            raise PersistenceError(f"Error loading game state for {player_id}: {e}")
        return dict(document) if document is not None else None

    def delete(self, player_id: str) -> bool:
        try:
            result = self.collection.delete_one({"player_id": player_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting game state for {player_id}: {e}")
        return result.deleted_count > 0
