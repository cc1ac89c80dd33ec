"""
Name: Database Pool Tests

Responsibilities:
  - Test pool lifecycle (init, get, close, reset)
  - Offline unit tests (no real DB)

Notes:
  - Uses mocking for ConnectionPool
"""

from unittest.mock import MagicMock, patch

import pytest

from user_api.infrastructure.db.pool import (
    _configure_connection,
    close_pool,
    get_pool,
    init_pool,
    reset_pool,
)


@pytest.fixture(autouse=True)
def clean_pool():
    reset_pool()
    yield
    reset_pool()


@pytest.mark.unit
class TestPoolLifecycle:
    def test_init_pool_creates_pool(self):
        with patch("user_api.infrastructure.db.pool.ConnectionPool") as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            result = init_pool("postgresql://test", min_size=2, max_size=10)

            MockPool.assert_called_once()
            kwargs = MockPool.call_args.kwargs
            assert kwargs["conninfo"] == "postgresql://test"
            assert kwargs["min_size"] == 2
            assert kwargs["max_size"] == 10
            assert result is mock_pool
            assert get_pool() is mock_pool

    def test_init_pool_twice_raises_error(self):
        with patch("user_api.infrastructure.db.pool.ConnectionPool"):
            init_pool("postgresql://test", min_size=1, max_size=2)

            with pytest.raises(RuntimeError, match="already initialized"):
                init_pool("postgresql://test", min_size=1, max_size=2)

    def test_get_pool_without_init_raises_error(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_pool()

    def test_close_pool_is_idempotent(self):
        with patch("user_api.infrastructure.db.pool.ConnectionPool") as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool
            init_pool("postgresql://test", min_size=1, max_size=2)

            close_pool()
            close_pool()

            mock_pool.close.assert_called_once()
            with pytest.raises(RuntimeError):
                get_pool()

    def test_reset_pool_discards_pool_even_if_close_fails(self):
        with patch("user_api.infrastructure.db.pool.ConnectionPool") as MockPool:
            mock_pool = MagicMock()
            mock_pool.close.side_effect = Exception("boom")
            MockPool.return_value = mock_pool
            init_pool("postgresql://test", min_size=1, max_size=2)

            reset_pool()

            with pytest.raises(RuntimeError):
                get_pool()


@pytest.mark.unit
def test_configure_connection_sets_statement_timeout():
    conn = MagicMock()

    _configure_connection(conn)

    conn.execute.assert_called_once_with("SET statement_timeout = 30000")
    conn.commit.assert_called_once()
