"""Tests for database module."""

import pytest
import duckdb


class TestDatabaseConnection:
    """Tests for database connection functions."""

    def test_get_memory_connection(self):
        """Test in-memory connection."""
        from src.database import get_memory_connection

        conn = get_memory_connection()
        result = conn.execute("SELECT 1").fetchone()
        assert result[0] == 1

        conn.close()

    def test_get_connection_creates_file(self, view_state_db):
        """Test file-based connection."""
        from src.database import get_connection

        with get_connection(view_state_db) as conn:
            conn.execute("CREATE TABLE test (id INTEGER)")

        assert view_state_db.exists()

    def test_connection_class_context_manager(self, view_state_db):
        from src.database import DatabaseConnection

        with DatabaseConnection(view_state_db) as db:
            assert db.execute("SELECT 42").fetchone()[0] == 42


class TestSchema:
    """Tests for database schema functions."""

    def test_initialize_database(self):
        """Test table creation and schema version."""
        from src.database import SCHEMA_VERSION, get_memory_connection, get_schema_version, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)

        tables = {
            row[0]
            for row in conn.execute(
                "SELECT table_name FROM information_schema.tables WHERE table_schema = 'main'"
            ).fetchall()
        }
        assert {"view_column_state", "app_settings"} <= tables
        assert get_schema_version(conn) == SCHEMA_VERSION

        conn.close()

    def test_initialize_is_idempotent(self):
        from src.database import get_memory_connection, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)
        initialize_database(conn)
        conn.close()

    def test_column_state_primary_key(self):
        """One row per (storage_key, column_id)."""
        from src.database import get_memory_connection, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)
        conn.execute("INSERT INTO view_column_state (storage_key, column_id, visible) VALUES ('A', 'x', true)")

        with pytest.raises(duckdb.Error):
            conn.execute(
                "INSERT INTO view_column_state (storage_key, column_id, visible) VALUES ('A', 'x', false)"
            )
        conn.close()

    def test_schema_version_without_tables(self):
        from src.database import get_memory_connection, get_schema_version

        assert get_schema_version(get_memory_connection()) is None

    def test_drop_all_tables(self):
        from src.database import drop_all_tables, get_memory_connection, get_schema_version, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)
        drop_all_tables(conn)
        assert get_schema_version(conn) is None
        conn.close()


class TestMemoryPath:
    """Tests for the ':memory:' database path."""

    def test_memory_path_touches_no_files(self, tmp_path, monkeypatch):
        from src.database import DatabaseConnection

        monkeypatch.chdir(tmp_path)
        db = DatabaseConnection(":memory:", initialize=True)
        assert db.is_memory

        conn = db.connect()
        assert conn.execute("SELECT COUNT(*) FROM view_column_state").fetchone()[0] == 0
        db.close()
        assert not db.is_open
        assert list(tmp_path.iterdir()) == []

    def test_initialized_memory_connection(self):
        from src.database import SCHEMA_VERSION, get_memory_connection, get_schema_version

        conn = get_memory_connection(initialize=True)
        assert get_schema_version(conn) == SCHEMA_VERSION
        conn.close()
