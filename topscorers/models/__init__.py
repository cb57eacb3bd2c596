from .data import IngestResult, ParseResult, RowDiscard, ScoreRecord, TopScorers

__all__ = ["IngestResult", "ParseResult", "RowDiscard", "ScoreRecord", "TopScorers"]
