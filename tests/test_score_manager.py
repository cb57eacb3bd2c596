"""Unit tests for the PostgreSQL store using a fake connection."""

from __future__ import annotations

from contextlib import asynccontextmanager

import asyncpg
import pytest

from topscorers.core.exceptions import StoreError
from topscorers.database import ScoreManager, ScoreStore
from topscorers.models import ScoreRecord


class FakeConnection:
    def __init__(self, fail_times=0, rows=None, error=None):
        self.fail_times = fail_times
        self.rows = rows or []
        self.error = error or OSError("connection reset")
        self.executed = []
        self.attempts = 0

    @asynccontextmanager
    async def transaction(self):
        yield

    async def executemany(self, query, args, timeout=None):
        self.attempts += 1
        if self.fail_times:
            self.fail_times -= 1
            raise self.error
        self.executed.extend(args)

    async def fetch(self, query, *args, timeout=None):
        return self.rows

    async def fetchrow(self, query, *args, timeout=None):
        return self.rows[0] if self.rows else None


class FakeDatabase:
    def __init__(self, conn):
        self.conn = conn
        self.timeouts = []

    @asynccontextmanager
    async def acquire(self, timeout=None):
        self.timeouts.append(timeout)
        yield self.conn


def test_satisfies_store_protocol():
    assert isinstance(ScoreManager(FakeDatabase(FakeConnection())), ScoreStore)


@pytest.mark.asyncio
async def test_append_inserts_all_records():
    conn = FakeConnection()
    manager = ScoreManager(FakeDatabase(conn), retry_delay=0)
    await manager.append([ScoreRecord("Dee", "Moore", 56), ScoreRecord("Sipho", "Lolo", 78)])
    assert conn.executed == [("Dee", "Moore", 56), ("Sipho", "Lolo", 78)]


@pytest.mark.asyncio
async def test_append_retries_then_succeeds():
    conn = FakeConnection(fail_times=2)
    manager = ScoreManager(FakeDatabase(conn), max_retries=3, retry_delay=0)
    await manager.append([ScoreRecord("Dee", "Moore", 56)])
    assert conn.executed == [("Dee", "Moore", 56)]


@pytest.mark.asyncio
async def test_append_raises_store_error_after_retries():
    conn = FakeConnection(fail_times=5)
    manager = ScoreManager(FakeDatabase(conn), max_retries=2, retry_delay=0)
    with pytest.raises(StoreError) as exc_info:
        await manager.append([ScoreRecord("Dee", "Moore", 56)])
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.asyncio
async def test_append_does_not_retry_data_errors():
    conn = FakeConnection(
        fail_times=5,
        error=asyncpg.StringDataRightTruncationError("value too long for type character varying(100)"),
    )
    manager = ScoreManager(FakeDatabase(conn), max_retries=3, retry_delay=0)
    with pytest.raises(StoreError) as exc_info:
        await manager.append([ScoreRecord("x" * 101, "Moore", 56)])
    assert conn.attempts == 1
    assert isinstance(exc_info.value.__cause__, asyncpg.StringDataRightTruncationError)


@pytest.mark.asyncio
async def test_append_retries_lost_connections():
    conn = FakeConnection(fail_times=1, error=asyncpg.ConnectionDoesNotExistError("connection was closed"))
    manager = ScoreManager(FakeDatabase(conn), max_retries=3, retry_delay=0)
    await manager.append([ScoreRecord("Dee", "Moore", 56)])
    assert conn.attempts == 2
    assert conn.executed == [("Dee", "Moore", 56)]


@pytest.mark.asyncio
async def test_fetch_top_maps_rows():
    rows = [{"id": 3, "first_name": "Sipho", "second_name": "Lolo", "score": 78}]
    manager = ScoreManager(FakeDatabase(FakeConnection(rows=rows)))
    assert await manager.fetch_top_by_score() == [ScoreRecord("Sipho", "Lolo", 78, id=3)]


@pytest.mark.asyncio
async def test_fetch_by_name_none_when_missing():
    db = FakeDatabase(FakeConnection())
    manager = ScoreManager(db)
    assert await manager.fetch_by_name("No", "One", timeout=4.0) is None
    assert db.timeouts == [4.0]
