from typing import List, Optional


class ScoreRecord:
    __slots__ = ('first_name', 'second_name', 'score', 'id')
    def __init__(self, first_name: str, second_name: str, score: int, id: Optional[int] = None):
        self.first_name = first_name
        self.second_name = second_name
        self.score = int(score)
        self.id = id

    @classmethod
    def from_dict(cls, data: dict) -> 'ScoreRecord':
        return cls(
            first_name=data['first_name'],
            second_name=data['second_name'],
            score=data['score'],
            id=data.get('id')
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.second_name}".strip()

    def to_dict(self):
        data = {
            'first_name': self.first_name,
            'second_name': self.second_name,
            'score': self.score
        }
        if self.id is not None:
            data['id'] = self.id
        return data

    def __eq__(self, other):
        if not isinstance(other, ScoreRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"ScoreRecord({self.first_name!r}, {self.second_name!r}, {self.score!r}, id={self.id!r})"

class RowDiscard:
    """A CSV data row that was left out, with the 1-based line it came from"""
    __slots__ = ('row', 'reason')
    def __init__(self, row: int, reason: str):
        self.row = row
        self.reason = reason

    def __repr__(self):
        return f"RowDiscard(row={self.row}, reason={self.reason!r})"

class ParseResult:
    __slots__ = ('records', 'discards', 'total_rows')
    def __init__(self, records: List[ScoreRecord], discards: List[RowDiscard], total_rows: int):
        self.records = records
        self.discards = discards
        self.total_rows = total_rows

    @property
    def skipped(self) -> int:
        return len(self.discards)

    def __repr__(self):
        return f"ParseResult(records={len(self.records)}, discards={len(self.discards)}, total_rows={self.total_rows})"

class IngestResult:
    __slots__ = ('ingested', 'skipped')
    def __init__(self, ingested: int, skipped: int):
        self.ingested = ingested
        self.skipped = skipped

    def __repr__(self):
        return f"IngestResult(ingested={self.ingested}, skipped={self.skipped})"

class TopScorers:
    __slots__ = ('score', 'people')
    def __init__(self, score: Optional[int], people: List[ScoreRecord]):
        self.score = score
        self.people = people

    @property
    def names(self):
        return [(person.first_name, person.second_name) for person in self.people]
