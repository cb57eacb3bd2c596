from typing import List, Optional
import asyncio
from ..core.exceptions import StoreError
from ..models.data import ScoreRecord
from ..logger import get_logger
from .connection import STORE_ERRORS, TRANSIENT_ERRORS

logger = get_logger()

class ScoreManager:
    """PostgreSQL-backed ScoreStore"""

    def __init__(self, db_connection, max_retries: int = 3, retry_delay: int = 1):
        self.db = db_connection
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay

    async def append(self, records: List[ScoreRecord], timeout: Optional[float] = None) -> None:
        """Insert a batch of scores in a single transaction"""
        retry_count = 0
        while retry_count < self.max_retries:
            try:
                async with self.db.acquire(timeout=timeout) as conn:
                    async with conn.transaction():
                        # Process in smaller chunks to prevent memory issues
                        chunk_size = 50
                        for i in range(0, len(records), chunk_size):
                            chunk = records[i:i + chunk_size]
                            await conn.executemany('''
                                INSERT INTO scores (first_name, second_name, score)
                                VALUES ($1, $2, $3)
                            ''', [(rec.first_name, rec.second_name, rec.score) for rec in chunk], timeout=timeout)
                return
            except TRANSIENT_ERRORS as e:
                retry_count += 1
                logger.error(f"Database error (attempt {retry_count}/{self.max_retries}): {e}")
                if retry_count < self.max_retries:
                    await asyncio.sleep(self.retry_delay * retry_count)
                else:
                    raise StoreError(f"Failed to save {len(records)} scores: {e}") from e
            except STORE_ERRORS as e:
                logger.error(f"Database rejected batch of {len(records)} scores: {e}")
                raise StoreError(f"Failed to save {len(records)} scores: {e}") from e

    async def fetch_top_by_score(self, timeout: Optional[float] = None) -> List[ScoreRecord]:
        """Get every score record sharing the current maximum score"""
        try:
            async with self.db.acquire(timeout=timeout) as conn:
                rows = await conn.fetch('''
                    SELECT id, first_name, second_name, score
                    FROM scores
                    WHERE score = (SELECT MAX(score) FROM scores)
                ''', timeout=timeout)
                return [ScoreRecord.from_dict(dict(row)) for row in rows]
        except STORE_ERRORS as e:
            logger.error(f"Error fetching top scores: {e}")
            raise StoreError(f"Failed to fetch top scores: {e}") from e

    async def fetch_by_name(self, first_name: str, second_name: str, timeout: Optional[float] = None) -> Optional[ScoreRecord]:
        """Get the highest score stored for a name pair, matching names case-insensitively"""
        try:
            async with self.db.acquire(timeout=timeout) as conn:
                row = await conn.fetchrow('''
                    SELECT id, first_name, second_name, score
                    FROM scores
                    WHERE lower(first_name) = lower($1) AND lower(second_name) = lower($2)
                    ORDER BY score DESC, id ASC
                    LIMIT 1
                ''', first_name, second_name, timeout=timeout)
        except STORE_ERRORS as e:
            logger.error(f"Error fetching score for {first_name} {second_name}: {e}")
            raise StoreError(f"Failed to fetch score for {first_name} {second_name}: {e}") from e

        if not row:
            return None
        return ScoreRecord.from_dict(dict(row))
