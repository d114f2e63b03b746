from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Iterable, List

GENRE_SEP = ","


@dataclass
class Movie:
    """One movie: title, ordered genre list and release year.

    No validation is done here; an empty title, an empty genre list or a
    negative year are all stored as given.
    """
    title: str
    genres: List[str] = field(default_factory=list)
    year: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def encode_genres(genres: Iterable[str]) -> str:
    """Join genres into the single text column. Embedded commas are not escaped."""
    return GENRE_SEP.join(genres)


def decode_genres(raw: str) -> list[str]:
    # always at least one token, "" decodes to [""]
    return [g.strip() for g in (raw or "").split(GENRE_SEP)]


def has_genre(genres: Iterable[str], genre: str) -> bool:
    """Exact token match, case folded on both sides ("Act" never matches "Action")."""
    wanted = (genre or "").casefold()
    return any(g.casefold() == wanted for g in genres)


def movie_from_row(row) -> Movie:
    return Movie(title=row["title"], genres=decode_genres(row["genres"]), year=int(row["year"]))
