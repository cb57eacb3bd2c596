from .csv_parser import CsvParser, parse_csv, parse_score
from .headers import HeaderMap, resolve_headers
from .tokenizer import tokenize_line

__all__ = ["CsvParser", "HeaderMap", "parse_csv", "parse_score", "resolve_headers", "tokenize_line"]
