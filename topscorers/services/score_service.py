from typing import Iterable, Optional
from ..database.protocols import ScoreStore
from ..models.data import IngestResult, ScoreRecord, TopScorers
from ..parsing.csv_parser import CsvParser
from ..logger import get_logger

logger = get_logger()

def _has_names(rec: ScoreRecord) -> bool:
    return bool((rec.first_name or '').strip()) and bool((rec.second_name or '').strip())

def _display_key(rec: ScoreRecord):
    # Ordinal, case-insensitive: compare upper-cased code points, no locale
    return (rec.first_name.upper(), rec.second_name.upper())

class ScoreService:
    """
    Sanitizes incoming scores before they reach the store and answers the
    top-scorer and single-person queries.

    Store failures are not caught here; they reach the caller unchanged.
    """

    def __init__(self, store: ScoreStore, parser: Optional[CsvParser] = None):
        self.store = store
        self.parser = parser or CsvParser()

    async def ingest(self, records: Iterable[ScoreRecord], timeout: Optional[float] = None) -> IngestResult:
        """Store every record that has both names, trimmed, as one batch"""
        records = list(records)
        sanitized = [
            ScoreRecord(rec.first_name.strip(), rec.second_name.strip(), rec.score)
            for rec in records
            if _has_names(rec)
        ]
        skipped = len(records) - len(sanitized)

        if not sanitized:
            logger.info(f"No valid scores to ingest. Skipped {skipped} invalid records")
            return IngestResult(0, skipped)

        await self.store.append(sanitized, timeout=timeout)
        logger.info(f"Successfully ingested {len(sanitized)} scores, skipped {skipped} invalid records")
        return IngestResult(len(sanitized), skipped)

    async def ingest_csv(self, csv_content: Optional[str], timeout: Optional[float] = None) -> IngestResult:
        """Parse raw CSV text and ingest the valid rows; discarded rows count as skipped"""
        parsed = self.parser.parse_detailed(csv_content)
        result = await self.ingest(parsed.records, timeout=timeout)
        return IngestResult(result.ingested, result.skipped + parsed.skipped)

    async def top_scorers(self, timeout: Optional[float] = None) -> TopScorers:
        """Everyone tied for the highest score, ordered by first then second name"""
        top = await self.store.fetch_top_by_score(timeout=timeout)
        people = sorted(top, key=_display_key)
        score = people[0].score if people else None
        return TopScorers(score, people)

    async def lookup(self, first_name: str, second_name: str, timeout: Optional[float] = None) -> Optional[ScoreRecord]:
        return await self.store.fetch_by_name(first_name.strip(), second_name.strip(), timeout=timeout)
