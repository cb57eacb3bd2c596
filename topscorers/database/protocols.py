"""Store contract the score service depends on."""

from typing import List, Optional, Protocol, runtime_checkable
from ..models.data import ScoreRecord


@runtime_checkable
class ScoreStore(Protocol):
    """Durable table of score records keyed by a numeric id.

    ``timeout`` is passed through untouched from the caller. Failures are
    raised as ``StoreError``.
    """

    async def append(self, records: List[ScoreRecord], timeout: Optional[float] = None) -> None: ...

    async def fetch_top_by_score(self, timeout: Optional[float] = None) -> List[ScoreRecord]: ...

    async def fetch_by_name(
        self, first_name: str, second_name: str, timeout: Optional[float] = None
    ) -> Optional[ScoreRecord]: ...
