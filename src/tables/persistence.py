"""Persistence of per-view column visibility.

The persisted layout is a mapping keyed by storage key, each value a
mapping from column id to bool. Nothing else about a table view is
persisted.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, MutableMapping, Optional
import sys

import duckdb

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

from src.database import DatabaseConnection, initialize_database

logger = get_logger("view_state")


class ViewStateError(Exception):
    """Raised when persisted view state cannot be read or written."""

    pass


class ViewStateStore(ABC):
    """Column visibility keyed by storage key."""

    @abstractmethod
    def load(self, storage_key: str) -> Dict[str, bool]:
        """Return the persisted column -> visible mapping (empty if none)."""

    @abstractmethod
    def save(self, storage_key: str, column_id: str, visible: bool) -> None:
        """Persist one column's visibility under a storage key."""

    @abstractmethod
    def clear(self, storage_key: str) -> None:
        """Forget everything persisted under a storage key."""

    def close(self) -> None:
        """Release any underlying resources."""


class InMemoryViewStateStore(ViewStateStore):
    """
    View state held in a mutable mapping.

    Pass a mapping that outlives the store (e.g. a dict kept in
    Streamlit session state) to persist for the lifetime of that mapping.
    """

    def __init__(self, backing: Optional[MutableMapping[str, Dict[str, bool]]] = None):
        self._data = backing if backing is not None else {}

    def load(self, storage_key: str) -> Dict[str, bool]:
        return dict(self._data.get(storage_key, {}))

    def save(self, storage_key: str, column_id: str, visible: bool) -> None:
        # Replace rather than mutate so earlier load() results never change
        entry = dict(self._data.get(storage_key, {}))
        entry[column_id] = bool(visible)
        self._data[storage_key] = entry

    def clear(self, storage_key: str) -> None:
        self._data.pop(storage_key, None)


class DuckDBViewStateStore(ViewStateStore):
    """View state stored in the view_column_state DuckDB table."""

    def __init__(
        self,
        db_path: Optional[Path] = None,
        connection: Optional[duckdb.DuckDBPyConnection] = None,
    ):
        """
        Initialize the store and make sure its schema exists.

        Args:
            db_path: Database file; defaults to the view-state config.
            connection: Existing connection to use instead of opening one.
        """
        self._db: Optional[DatabaseConnection] = None
        try:
            if connection is not None:
                self._conn = connection
                initialize_database(self._conn)
            else:
                self._db = DatabaseConnection(db_path, initialize=True)
                self._conn = self._db.connect()
        except duckdb.Error as e:
            raise ViewStateError(f"Could not open view state database: {e}") from e

    def load(self, storage_key: str) -> Dict[str, bool]:
        try:
            rows = self._conn.execute(
                "SELECT column_id, visible FROM view_column_state WHERE storage_key = ?",
                [storage_key],
            ).fetchall()
        except duckdb.Error as e:
            raise ViewStateError(f"Could not load view state '{storage_key}': {e}") from e
        return {column_id: bool(visible) for column_id, visible in rows}

    def save(self, storage_key: str, column_id: str, visible: bool) -> None:
        try:
            self._conn.execute(
                """
                INSERT OR REPLACE INTO view_column_state
                    (storage_key, column_id, visible, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                """,
                [storage_key, column_id, bool(visible)],
            )
        except duckdb.Error as e:
            raise ViewStateError(f"Could not save view state '{storage_key}': {e}") from e
        logger.info(f"Saved column '{column_id}' visible={visible} for view '{storage_key}'")

    def clear(self, storage_key: str) -> None:
        try:
            self._conn.execute(
                "DELETE FROM view_column_state WHERE storage_key = ?", [storage_key]
            )
        except duckdb.Error as e:
            raise ViewStateError(f"Could not clear view state '{storage_key}': {e}") from e

    def close(self) -> None:
        if self._db is not None:
            self._db.close()


def create_view_state_store(
    backend: Optional[str] = None,
    backing: Optional[MutableMapping[str, Dict[str, bool]]] = None,
) -> ViewStateStore:
    """
    Build the configured view state store.

    Args:
        backend: 'memory' or 'duckdb'; defaults to config.view_state.backend.
        backing: Mapping used by the memory backend.

    Returns:
        A ViewStateStore.
    """
    backend = (backend or config.view_state.backend).lower()
    if backend == "duckdb":
        return DuckDBViewStateStore(config.view_state.db_path)
    if backend != "memory":
        logger.warning(f"Unknown view state backend '{backend}', using memory")
    return InMemoryViewStateStore(backing)
