import sqlite3

import pytest

from taskboard.db import DatabaseError, connect


def test_connect_returns_working_connection():
    conn = connect(lambda: sqlite3.connect(":memory:"))
    try:
        assert conn.execute("SELECT 41 + 1").fetchone() == (42,)
    finally:
        conn.close()


def test_factory_failure_is_wrapped():
    def factory():
        raise sqlite3.OperationalError("refused")

    with pytest.raises(DatabaseError, match="could not connect") as info:
        connect(factory)
    assert isinstance(info.value.__cause__, sqlite3.OperationalError)


class _BrokenCursor:
    def execute(self, sql):
        raise RuntimeError("server gone")

    def fetchone(self):
        return None

    def close(self):
        pass


class _BrokenConnection:
    def __init__(self):
        self.closed = False

    def cursor(self):
        return _BrokenCursor()

    def close(self):
        self.closed = True


def test_ping_failure_closes_connection_and_raises():
    conn = _BrokenConnection()
    with pytest.raises(DatabaseError, match="server gone"):
        connect(lambda: conn)
    assert conn.closed is True