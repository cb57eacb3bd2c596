import re
from typing import List, Optional, Sequence, Union
from ..models.data import ParseResult, RowDiscard, ScoreRecord
from ..logger import get_logger
from .headers import HeaderMap, resolve_headers
from .tokenizer import tokenize_line

logger = get_logger()

# Plain base-10 integer: optional surrounding whitespace and sign, ASCII digits only
INTEGER_PATTERN = re.compile(r'[\t\n\v\f\r ]*([+-]?[0-9]+)[\t\n\v\f\r ]*')
# Scores are stored in a 32-bit INTEGER column
MIN_SCORE = -2**31
MAX_SCORE = 2**31 - 1

REASON_MISSING_NAME = 'missing name values'

def parse_score(value: str) -> Optional[int]:
    """Parse a base-10 integer independently of locale, or return None"""
    match = INTEGER_PATTERN.fullmatch(value)
    if match is None:
        return None
    score = int(match.group(1))
    if score < MIN_SCORE or score > MAX_SCORE:
        return None
    return score

def _field(fields: Sequence[str], index: int) -> str:
    return fields[index] if 0 <= index < len(fields) else ''

class CsvParser:
    """Turns raw CSV text into score records, discarding rows that do not validate"""

    def parse(self, csv_content: Optional[str]) -> List[ScoreRecord]:
        return self.parse_detailed(csv_content).records

    def parse_detailed(self, csv_content: Optional[str]) -> ParseResult:
        if csv_content is None or not csv_content.strip():
            logger.warning("CSV content was empty")
            return ParseResult([], [], 0)

        lines = [line for line in csv_content.replace('\r\n', '\n').split('\n') if line]
        if not lines:
            logger.warning("CSV content did not contain any lines")
            return ParseResult([], [], 0)

        total_rows = len(lines) - 1
        header_map = resolve_headers(tokenize_line(lines[0]))
        if header_map is None:
            logger.warning("CSV headers missing required columns (First Name, Second Name, Score)")
            return ParseResult([], [], total_rows)

        records = []
        discards = []
        for idx in range(1, len(lines)):
            row = idx + 1
            fields = tokenize_line(lines[idx])
            if not fields:
                continue

            try:
                outcome = self._convert_row(fields, header_map, row)
            except Exception as e:
                logger.error(f"Failed to parse row {row}: {e}")
                outcome = RowDiscard(row, f"unexpected error: {e}")

            if isinstance(outcome, RowDiscard):
                logger.warning(f"Skipping row {outcome.row} due to {outcome.reason}")
                discards.append(outcome)
            else:
                records.append(outcome)

        if records:
            logger.info(f"Successfully parsed {len(records)} of {total_rows} data rows from CSV")

        return ParseResult(records, discards, total_rows)

    def _convert_row(self, fields: Sequence[str], header_map: HeaderMap, row: int) -> Union[ScoreRecord, RowDiscard]:
        first_name = _field(fields, header_map.first_name)
        second_name = _field(fields, header_map.second_name)
        score_field = _field(fields, header_map.score)

        if not first_name.strip() or not second_name.strip():
            return RowDiscard(row, REASON_MISSING_NAME)

        score = parse_score(score_field)
        if score is None:
            return RowDiscard(row, f"invalid score value '{score_field}'")

        return ScoreRecord(first_name.strip(), second_name.strip(), score)

def parse_csv(csv_content: Optional[str]) -> List[ScoreRecord]:
    """Parse raw CSV text into score records; never raises"""
    return CsvParser().parse(csv_content)
