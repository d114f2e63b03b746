from __future__ import annotations

# movie_catalog/services/movie_store.py
import logging
import os
import re
import sqlite3
from typing import List, Optional

from ..db import connect, get_db_path
from ..domain.csv_line import parse_csv_line, split_genres
from ..domain.movie import Movie, encode_genres, has_genre, movie_from_row
from ..errors import (
    CatalogConnectionError,
    CloseError,
    MalformedRowError,
    NotFoundError,
    ParseError,
    ReadError,
    SchemaError,
    UseAfterCloseError,
    WriteError,
)
from ..repository import movie_repo

logger = logging.getLogger(__name__)

MIN_FIELDS = 3
# optional sign + digits only; no "_" separators, no inner spaces
YEAR_RE = re.compile(r"[+-]?\d+")


def parse_movie_row(line: str, line_no: Optional[int] = None) -> Movie:
    """Turn one CSV data line into a Movie.

    Raises MalformedRowError for fewer than 3 fields and ParseError when the
    year cell is not an integer.
    """
    parts = parse_csv_line(line)
    if len(parts) < MIN_FIELDS:
        raise MalformedRowError(f"expected {MIN_FIELDS} fields, got {len(parts)}", line_no)
    title = parts[0]
    genres = split_genres(parts[1])
    raw_year = parts[2].strip()
    if not YEAR_RE.fullmatch(raw_year):
        where = f" on line {line_no}" if line_no is not None else ""
        raise ParseError(f"invalid year {parts[2]!r}{where}", line_no)
    year = int(raw_year)
    return Movie(title=title, genres=genres, year=year)


class MovieStore:
    """SQLite-backed movie store owning a single connection.

    One connection is held for the whole lifetime of the store: a ``:memory:``
    database only lives as long as its connection. Schema is not created on
    open; call :meth:`create_schema` first. Without a location the one
    resolved by ``get_db_path()`` (env / config.yaml) is used.
    """

    def __init__(self, location: Optional[str] = None):
        if location is None:
            location = get_db_path()
        self.location = location
        try:
            self._conn: Optional[sqlite3.Connection] = connect(location)
        except sqlite3.Error as e:
            logger.error(f"Unable to open movie database {location!r}: {e}")
            raise CatalogConnectionError(f"Unable to obtain database connection: {location}") from e
        logger.info(f"Opened movie database {location!r}")

    @classmethod
    def open(cls, location: Optional[str] = None) -> "MovieStore":
        return cls(location)

    def __enter__(self) -> "MovieStore":
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self.closed:
            self.close()

    @property
    def closed(self) -> bool:
        return self._conn is None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise UseAfterCloseError("movie store is closed")
        return self._conn

    def close(self):
        conn = self.connection
        try:
            conn.close()
        except sqlite3.Error as e:
            raise CloseError("Failed to close database connection") from e
        self._conn = None
        logger.info(f"Closed movie database {self.location!r}")

    # ───────────────────────────── schema ──────────────────────────
    def create_schema(self):
        conn = self.connection
        try:
            movie_repo.ensure_schema(conn)
        except sqlite3.Error as e:
            logger.error(f"Failed to create movies table: {e}")
            raise SchemaError("Failed to create movies table") from e

    # ───────────────────────────── writers ──────────────────────────
    def insert(self, movie: Movie):
        conn = self.connection
        try:
            movie_repo.insert(conn, movie.title, encode_genres(movie.genres), movie.year)
        except sqlite3.Error as e:
            logger.error(f"Failed to add movie {movie.title!r}: {e}")
            raise WriteError(f"Failed to add movie: {movie.title}") from e

    def delete_all(self):
        """Remove every row. A store without the movies table is left alone."""
        conn = self.connection
        try:
            n = movie_repo.delete_all(conn)
        except sqlite3.Error as e:
            if movie_repo.is_missing_table(e):
                logger.debug("delete_all: movies table missing, nothing to clear")
                return
            logger.error(f"Failed to clear movies: {e}")
            raise WriteError("Failed to clear movies") from e
        logger.debug(f"delete_all removed {n} rows")

    def delete_by_title(self, title: str) -> int:
        conn = self.connection
        try:
            return movie_repo.delete_by_title(conn, title)
        except sqlite3.Error as e:
            logger.error(f"Failed to delete movie {title!r}: {e}")
            raise WriteError(f"Failed to delete movie: {title}") from e

    # ───────────────────────────── readers ──────────────────────────
    def list_all(self) -> List[Movie]:
        conn = self.connection
        try:
            return [movie_from_row(r) for r in movie_repo.list_all(conn)]
        except (sqlite3.Error, TypeError, ValueError) as e:
            logger.error(f"Failed to fetch movies: {e}")
            raise ReadError("Failed to fetch movies") from e

    def list_by_genre(self, genre: str) -> List[Movie]:
        conn = self.connection
        try:
            movies = [movie_from_row(r) for r in movie_repo.list_all(conn)]
        except (sqlite3.Error, TypeError, ValueError) as e:
            logger.error(f"Failed to fetch movies by genre {genre!r}: {e}")
            raise ReadError(f"Failed to fetch movies by genre: {genre}") from e
        return [m for m in movies if has_genre(m.genres, genre)]

    def count(self) -> int:
        conn = self.connection
        try:
            return movie_repo.count(conn)
        except sqlite3.Error as e:
            raise ReadError("Failed to count movies") from e

    # ───────────────────────────── bulk load ──────────────────────────
    def load_from_file(self, path: str) -> int:
        """Load movies from a CSV file and return how many rows were inserted.

        The first line is a header. Blank lines and rows with fewer than 3
        fields are skipped. A non-integer year raises ParseError and stops the
        load; rows inserted before it stay in the table.
        """
        if self.closed:
            raise UseAfterCloseError("movie store is closed")
        if not os.path.exists(path):
            raise NotFoundError(f"CSV file not found: {path}")

        inserted = 0
        skipped = 0
        try:
            with open(path, "r", encoding="utf-8") as f:
                f.readline()  # header
                for line_no, line in enumerate(f, start=2):
                    trimmed = line.strip()
                    if not trimmed:
                        continue
                    try:
                        movie = parse_movie_row(trimmed, line_no)
                    except MalformedRowError as e:
                        skipped += 1
                        logger.warning(f"{path}:{line_no}: skipping malformed row: {e}")
                        continue
                    self.insert(movie)
                    inserted += 1
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise ReadError(f"Failed to load movies from CSV: {path}") from e

        logger.info(f"Loaded {inserted} movies from {path} (skipped {skipped})")
        return inserted
