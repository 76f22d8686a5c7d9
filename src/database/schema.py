"""DuckDB schema for persisted view state.

Only column visibility survives across sessions. One row per
(storage_key, column_id); a storage key scopes the state to one
logical table view.
"""

from typing import Optional
import duckdb
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger

logger = get_logger("schema")

SCHEMA_VERSION = "1.0"

CREATE_VIEW_COLUMN_STATE = """
CREATE TABLE IF NOT EXISTS view_column_state (
    storage_key VARCHAR NOT NULL,
    column_id VARCHAR NOT NULL,
    visible BOOLEAN NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (storage_key, column_id)
)
"""

CREATE_APP_SETTINGS = """
CREATE TABLE IF NOT EXISTS app_settings (
    key VARCHAR PRIMARY KEY,
    value VARCHAR,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

TABLES = [
    ("view_column_state", CREATE_VIEW_COLUMN_STATE),
    ("app_settings", CREATE_APP_SETTINGS),
]


def create_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all database tables.

    Args:
        conn: DuckDB connection.
    """
    for table_name, create_sql in TABLES:
        try:
            conn.execute(create_sql)
            logger.debug(f"Created table: {table_name}")
        except duckdb.Error as e:
            logger.error(f"Error creating table {table_name}: {e}")
            raise


def initialize_database(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Initialize the database with all tables and record the schema version.

    Args:
        conn: DuckDB connection.
    """
    create_all_tables(conn)
    conn.execute(
        "INSERT OR REPLACE INTO app_settings (key, value) VALUES ('schema_version', ?)",
        [SCHEMA_VERSION],
    )


def get_schema_version(conn: duckdb.DuckDBPyConnection) -> Optional[str]:
    """
    Get the current schema version.

    Args:
        conn: DuckDB connection.

    Returns:
        Schema version string or None.
    """
    try:
        result = conn.execute(
            "SELECT value FROM app_settings WHERE key = 'schema_version'"
        ).fetchone()
        return result[0] if result else None
    except duckdb.Error:
        return None


def drop_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Drop all tables (use with caution!).

    Args:
        conn: DuckDB connection.
    """
    for table_name, _ in reversed(TABLES):
        conn.execute(f"DROP TABLE IF EXISTS {table_name}")
        logger.info(f"Dropped table: {table_name}")
