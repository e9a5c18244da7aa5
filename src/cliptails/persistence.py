# region Docstring
"""
cliptails.persistence
Keyed state storage used to save and restore the clip history.
Overview:
- StateStorage is the host's "workspace state": load(key) and save(key, value)
    for JSON-compatible values under fixed string keys.
- MemoryStateStorage keeps values in a dict (tests, hosts without storage).
- SqlStateStorage stores each key as a WorkspaceStateEntity row through
    SQLAlchemy, creating the table on first use.
Contents:
- HISTORY_STATE_KEY (str): Key under which the history is saved.
- StateStorage, MemoryStateStorage, SqlStateStorage
Design notes:
- Values are round-tripped through JSON in both implementations so an in-memory
    store behaves like the database one (no shared mutable references).
- SQL errors are wrapped in StateStorageError; the session logs them and keeps
    running with the in-memory history.
"""
# endregion
# region Imports
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from cliptails.database import DatabaseSessionGenerator
from cliptails.errors import StateStorageError
from cliptails.models import WorkspaceStateEntity

# endregion

logger = logging.getLogger("cliptails.persistence")

HISTORY_STATE_KEY = "tails.history"


class StateStorage(ABC):
    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """Return the value saved under `key`, or None when absent."""

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Replace the value saved under `key`."""


class MemoryStateStorage(StateStorage):
    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def load(self, key: str) -> Optional[Any]:
        raw = self._values.get(key)
        return None if raw is None else json.loads(raw)

    def save(self, key: str, value: Any) -> None:
        self._values[key] = json.dumps(value)


class SqlStateStorage(StateStorage):
    """
    State storage backed by the `workspace_state` table.

    Attributes:
        db_session (DatabaseSessionGenerator): Source of SQLAlchemy sessions.
    """

    def __init__(self, db_session: DatabaseSessionGenerator) -> None:
        self.db_session = db_session
        self.db_session.init_db()

    def load(self, key: str) -> Optional[Any]:
        try:
            with self.db_session.get_session() as session:
                entity = session.scalars(
                    select(WorkspaceStateEntity).where(WorkspaceStateEntity.key == key)
                ).first()
                if entity is None:
                    return None
                return entity.model.value
        except (SQLAlchemyError, json.JSONDecodeError) as e:
            logger.exception(f"Failed to load state '{key}': {e}")
            raise StateStorageError(f"Failed to load state '{key}'") from e

    def save(self, key: str, value: Any) -> None:
        try:
            with self.db_session.get_session() as session:
                entity = session.get(WorkspaceStateEntity, key)
                if entity is None:
                    session.add(WorkspaceStateEntity(key=key, value=json.dumps(value)))
                else:
                    entity.value = json.dumps(value)
                session.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to save state '{key}': {e}")
            raise StateStorageError(f"Failed to save state '{key}'") from e
