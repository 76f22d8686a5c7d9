"""Tests for column visibility persistence backends."""

import pytest


class TestInMemoryViewStateStore:
    """Tests for the in-memory backend."""

    def test_save_and_load(self, memory_view_state):
        store, backing = memory_view_state

        store.save("A", "client", False)
        assert store.load("A") == {"client": False}
        assert backing == {"A": {"client": False}}

    def test_load_returns_copy(self, memory_view_state):
        store, _ = memory_view_state
        store.save("A", "client", False)

        loaded = store.load("A")
        loaded["client"] = True
        assert store.load("A") == {"client": False}

    def test_clear_only_touches_one_key(self, memory_view_state):
        store, _ = memory_view_state
        store.save("A", "client", False)
        store.save("B", "client", True)

        store.clear("A")
        assert store.load("A") == {}
        assert store.load("B") == {"client": True}


class TestDuckDBViewStateStore:
    """Tests for the DuckDB backend."""

    def test_save_load_and_reopen(self, view_state_db):
        from src.tables import DuckDBViewStateStore

        store = DuckDBViewStateStore(view_state_db)
        store.save("A", "client", False)
        store.save("A", "client", True)
        store.save("A", "notes", True)
        store.close()

        reopened = DuckDBViewStateStore(view_state_db)
        assert reopened.load("A") == {"client": True, "notes": True}
        reopened.close()

    def test_keys_are_independent(self):
        from src.database import get_memory_connection
        from src.tables import DuckDBViewStateStore

        store = DuckDBViewStateStore(connection=get_memory_connection())
        store.save("A", "client", False)
        store.save("B", "client", True)
        store.clear("B")

        assert store.load("A") == {"client": False}
        assert store.load("B") == {}

    def test_errors_are_wrapped(self):
        from src.database import get_memory_connection
        from src.tables import DuckDBViewStateStore, ViewStateError

        conn = get_memory_connection()
        store = DuckDBViewStateStore(connection=conn)
        conn.close()

        with pytest.raises(ViewStateError):
            store.load("A")


class TestCreateViewStateStore:
    """Tests for backend selection."""

    def test_memory_backend(self):
        from src.tables import InMemoryViewStateStore, create_view_state_store

        assert isinstance(create_view_state_store("memory"), InMemoryViewStateStore)

    def test_unknown_backend_falls_back_to_memory(self):
        from src.tables import InMemoryViewStateStore, create_view_state_store

        assert isinstance(create_view_state_store("redis"), InMemoryViewStateStore)
