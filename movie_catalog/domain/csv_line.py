"""Line tokenizer for the movie CSV format.

Rows look like ``title,"genre1, genre2",year``. The genre cell is quoted at
the line level and split again on commas afterwards, so a genre name can never
contain a comma itself.

This is deliberately not RFC 4180: every ``"`` toggles the quoted state
wherever it appears and ``""`` is not an escaped quote.
"""
from __future__ import annotations

from typing import List

QUOTE = '"'
DELIM = ","


def strip_quotes(token: str) -> str:
    """Trim whitespace and drop one surrounding pair of double quotes."""
    t = token.strip()
    if len(t) >= 2 and t.startswith(QUOTE) and t.endswith(QUOTE):
        return t[1:-1]
    return t


def parse_csv_line(line: str) -> List[str]:
    tokens: List[str] = []
    buf: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == QUOTE:
            in_quotes = not in_quotes
        elif ch == DELIM and not in_quotes:
            tokens.append(strip_quotes("".join(buf)))
            buf = []
        else:
            buf.append(ch)

    tokens.append(strip_quotes("".join(buf)))
    return tokens


def split_genres(cell: str) -> List[str]:
    return [g.strip() for g in cell.split(DELIM)]
