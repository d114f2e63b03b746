from __future__ import annotations

from typing import List

from ..domain.movie import Movie
from .movie_store import MovieStore


class MovieRecommender:
    """Recommendation entry point backed by a MovieStore.

    Today this only forwards genre queries; ranking belongs here once it exists.
    """

    def __init__(self, store: MovieStore):
        self.store = store

    def recommend_by_genre(self, genre: str) -> List[Movie]:
        return self.store.list_by_genre(genre)
