from itertools import takewhile
from typing import List, Optional
from sortedcontainers import SortedList
from ..models.data import ScoreRecord


class MemoryScoreStore:
    """In-process ScoreStore, kept ordered by score descending then insertion order"""

    def __init__(self):
        self._records = SortedList(key=lambda rec: (-rec.score, rec.id))
        self._next_id = 1

    def __len__(self):
        return len(self._records)

    async def append(self, records: List[ScoreRecord], timeout: Optional[float] = None) -> None:
        for rec in records:
            self._records.add(ScoreRecord(rec.first_name, rec.second_name, rec.score, id=self._next_id))
            self._next_id += 1

    async def fetch_top_by_score(self, timeout: Optional[float] = None) -> List[ScoreRecord]:
        if not self._records:
            return []
        top = self._records[0].score
        return list(takewhile(lambda rec: rec.score == top, self._records))

    async def fetch_by_name(self, first_name: str, second_name: str, timeout: Optional[float] = None) -> Optional[ScoreRecord]:
        first = first_name.lower()
        second = second_name.lower()
        # Highest score first, so the first hit wins among duplicates
        for rec in self._records:
            if rec.first_name.lower() == first and rec.second_name.lower() == second:
                return rec
        return None
