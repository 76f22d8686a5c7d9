"""DuckDB connection management for persisted view state."""

import duckdb
from pathlib import Path
from typing import Iterator, Optional, Union
from contextlib import contextmanager
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

from .schema import initialize_database

logger = get_logger("database")

MEMORY_PATH = ":memory:"


class DatabaseConnection:
    """
    Lazily opened DuckDB connection to the view state database.

    The path may be ``":memory:"`` (e.g. VIEW_STATE_DB_PATH=:memory:),
    in which case nothing touches the filesystem and the state lives
    only as long as the connection.
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        read_only: bool = False,
        initialize: bool = False,
    ):
        """
        Initialize database connection manager.

        Args:
            db_path: Database file or ":memory:". Defaults to the view
                state config.
            read_only: Open database in read-only mode.
            initialize: Create the view state schema on connect.
        """
        if db_path is None:
            db_path = config.view_state.db_path
        self.db_path = MEMORY_PATH if str(db_path) == MEMORY_PATH else Path(db_path)
        self.read_only = read_only
        self.initialize = initialize
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    @property
    def is_memory(self) -> bool:
        return self.db_path == MEMORY_PATH

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def connect(self) -> duckdb.DuckDBPyConnection:
        """
        Open the connection (once) and apply the schema if requested.

        Returns:
            DuckDB connection object.

        Raises:
            duckdb.Error: If the database cannot be opened or initialized.
        """
        if self._connection is not None:
            return self._connection

        if self.is_memory:
            self._connection = duckdb.connect(MEMORY_PATH)
        else:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = duckdb.connect(str(self.db_path), read_only=self.read_only)

        if self.initialize and not self.read_only:
            try:
                initialize_database(self._connection)
            except duckdb.Error:
                self.close()
                raise

        logger.info(f"Connected to view state database: {self.db_path}")
        return self._connection

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug(f"Closed view state database: {self.db_path}")

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get the current connection, establishing if needed."""
        return self.connect()

    def execute(self, query: str, parameters: Optional[list] = None):
        """Execute a SQL query on the (lazily opened) connection."""
        if parameters:
            return self.connection.execute(query, parameters)
        return self.connection.execute(query)

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


@contextmanager
def get_connection(
    db_path: Optional[Union[str, Path]] = None,
    read_only: bool = False,
    initialize: bool = False,
) -> Iterator[duckdb.DuckDBPyConnection]:
    """
    Context manager for database connections.

    Example:
        with get_connection(initialize=True) as conn:
            rows = conn.execute("SELECT * FROM view_column_state").fetchall()
    """
    db = DatabaseConnection(db_path, read_only, initialize)
    try:
        yield db.connect()
    finally:
        db.close()


def get_memory_connection(initialize: bool = False) -> duckdb.DuckDBPyConnection:
    """
    Get an in-memory database connection for testing.

    Args:
        initialize: Create the view state schema first.
    """
    conn = duckdb.connect(MEMORY_PATH)
    if initialize:
        initialize_database(conn)
    return conn
