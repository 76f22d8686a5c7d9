"""Database module for DuckDB operations."""

from .connection import (
    DatabaseConnection,
    get_connection,
    get_memory_connection,
)
from .schema import (
    SCHEMA_VERSION,
    initialize_database,
    create_all_tables,
    get_schema_version,
    drop_all_tables,
)

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_connection",
    "get_memory_connection",
    # Schema
    "SCHEMA_VERSION",
    "initialize_database",
    "create_all_tables",
    "get_schema_version",
    "drop_all_tables",
]
