"""Shared test doubles for the score store."""

from __future__ import annotations

from topscorers.core.exceptions import StoreError
from topscorers.database import MemoryScoreStore


class RecordingStore(MemoryScoreStore):
    """MemoryScoreStore that remembers every batch handed to append."""

    def __init__(self) -> None:
        super().__init__()
        self.batches = []
        self.timeouts = []

    async def append(self, records, timeout=None):
        self.batches.append(list(records))
        self.timeouts.append(timeout)
        await super().append(records, timeout=timeout)

    async def fetch_top_by_score(self, timeout=None):
        self.timeouts.append(timeout)
        return await super().fetch_top_by_score(timeout=timeout)


class FailingStore:
    """Store whose every operation fails."""

    async def append(self, records, timeout=None):
        raise StoreError("connection refused")

    async def fetch_top_by_score(self, timeout=None):
        raise StoreError("connection refused")

    async def fetch_by_name(self, first_name, second_name, timeout=None):
        raise StoreError("connection refused")
