"""Movie catalog: SQLite-backed movie store, CSV loader and genre recommender."""
from __future__ import annotations

__version__ = "0.1.0"

from .domain.movie import Movie
from .errors import (
    CatalogError,
    CatalogConnectionError,
    CloseError,
    SchemaError,
    WriteError,
    ReadError,
    NotFoundError,
    ParseError,
    MalformedRowError,
    UseAfterCloseError,
)
from .services.movie_store import MovieStore
from .services.recommender_svc import MovieRecommender
