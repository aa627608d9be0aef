"""
File Record Storage

One JSON file per player inside a save directory. Writes go to a temporary
file in the same directory which then replaces the target in a single
rename, so a crash mid-write never corrupts the previous record.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote

from ..errors import PersistenceError
from .base import RecordStorage


class FileRecordStorage(RecordStorage):
    """
    File-per-player storage.

    Player ids are percent-encoded to build file names, so any opaque id
    maps to a single file inside ``save_dir``.
    """

    def __init__(self, save_dir: str):
        self.save_dir = Path(save_dir)
        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Cannot create save directory {save_dir}: {e}")

    def path_for(self, player_id: str) -> Path:
        return self.save_dir / f"{quote(str(player_id), safe='')}.json"

    def save(self, player_id: str, data: Dict[str, Any]) -> None:
        path = self.path_for(player_id)
        tmp_name = None
        try:
            payload = json.dumps(data, ensure_ascii=False, sort_keys=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix='.tmp', dir=self.save_dir)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Error writing game state for {player_id}: {e}")
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)

    def load(self, player_id: str) -> Optional[Dict[str, Any]]:
        path = self.path_for(player_id)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Error deserializing game state from {path}: {e}", corrupt=True)
        except OSError as e:
            raise PersistenceError(f"Error reading file {path}: {e}")

        if not isinstance(data, dict):
            raise PersistenceError(f"Unexpected game state format in {path}", corrupt=True)
        return data

    def delete(self, player_id: str) -> bool:
        try:
            self.path_for(player_id).unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            raise PersistenceError(f"Error deleting game state for {player_id}: {e}")
