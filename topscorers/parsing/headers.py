from typing import Optional, Sequence

FIRST_NAME_HEADERS = frozenset({'first name', 'firstname'})
SECOND_NAME_HEADERS = frozenset({'second name', 'secondname', 'surname', 'last name'})
SCORE_HEADERS = frozenset({'score', 'mark', 'points'})

class HeaderMap:
    """Column indices of the three required roles"""
    __slots__ = ('first_name', 'second_name', 'score')
    def __init__(self, first_name: int, second_name: int, score: int):
        self.first_name = first_name
        self.second_name = second_name
        self.score = score

    def __eq__(self, other):
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return (self.first_name, self.second_name, self.score) == (other.first_name, other.second_name, other.score)

    def __repr__(self):
        return f"HeaderMap(first_name={self.first_name}, second_name={self.second_name}, score={self.score})"

def _find_index(headers: Sequence[str], candidates: frozenset) -> int:
    for idx, header in enumerate(headers):
        if header.strip().lower() in candidates:
            return idx
    return -1

def resolve_headers(headers: Sequence[str]) -> Optional[HeaderMap]:
    """Map a tokenized header row onto the required columns, or None if any is missing"""
    first_name = _find_index(headers, FIRST_NAME_HEADERS)
    second_name = _find_index(headers, SECOND_NAME_HEADERS)
    score = _find_index(headers, SCORE_HEADERS)

    if first_name < 0 or second_name < 0 or score < 0:
        return None

    return HeaderMap(first_name, second_name, score)
