from typing import List

QUOTE = '"'
DELIMITER = ','

def tokenize_line(line: str) -> List[str]:
    """
    Split a single CSV line into its fields.

    A double quote opens or closes a quoted span, inside which commas are
    literal and a doubled quote stands for one quote character. Unquoted
    content is kept as-is, untrimmed. An unterminated span simply runs to the
    end of the line. The result always holds at least one field.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append(''.join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append(''.join(current))
    return fields
