"""
In-memory data store for the movies API.

``MovieStore`` owns a flat list of :class:`Movie` records. Every lookup
is a linear scan: by ``id`` for point operations, by genre or director
(case-insensitive exact match) or by title substring for the queries.
Nothing is indexed or cached, so the mean rating of a movie is always
recomputed from its ratings.

FastAPI runs synchronous endpoints in a thread pool, so every operation
holds the store lock for its whole duration, and records handed back to
callers are copies.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .errors import (
    DuplicateMovieError,
    InvalidRatingError,
    MissingFieldsError,
    MissingKeywordError,
    MovieNotFoundError,
    NoMoviesError,
    NoMoviesForDirectorError,
    NoMoviesForGenreError,
    NoRatedMoviesError,
)
from .schemas import CreateMovieRequest, Movie, MovieUpdate

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5

REQUIRED_FIELDS = ("id", "title", "director", "release_year", "genre")


def _norm(s: Optional[str]) -> str:
    """Lowercase a string for case-insensitive comparison; whitespace is kept."""
    return (s or "").lower()


class MovieStore:
    def __init__(self) -> None:
        self._movies: List[Movie] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def _find(self, movie_id: str) -> Optional[Movie]:
        return next((m for m in self._movies if m.id == movie_id), None)

    def _require(self, movie_id: str) -> Movie:
        movie = self._find(movie_id)
        if movie is None:
            raise MovieNotFoundError()
        return movie

    def _snapshot(self, movies: List[Movie]) -> List[Movie]:
        return [m.model_copy(deep=True) for m in movies]

    def add_movie(self, req: CreateMovieRequest) -> Movie:
        """Insert a new movie with no ratings.

        A field counts as missing when it is absent or falsy, so an
        empty title or a ``releaseYear`` of ``0`` is rejected as well.

        Raises
        ------
        MissingFieldsError
            One of the required fields is missing or falsy.
        DuplicateMovieError
            A movie with the same ``id`` is already stored.
        """
        if not all(getattr(req, name) for name in REQUIRED_FIELDS):
            raise MissingFieldsError()

        with self._lock:
            if self._find(req.id) is not None:
                raise DuplicateMovieError()
            movie = Movie(
                id=req.id,
                title=req.title,
                director=req.director,
                release_year=req.release_year,
                genre=req.genre,
            )
            self._movies.append(movie)
            logger.info("Added movie %s (%s)", movie.id, movie.title)
            return movie.model_copy(deep=True)

    def update_movie(self, movie_id: str, update: MovieUpdate) -> Movie:
        """Merge the supplied fields of ``update`` onto a stored movie."""
        changes = update.changes()
        with self._lock:
            movie = self._require(movie_id)
            for field, value in changes.items():
                setattr(movie, field, value)
            logger.info("Updated movie %s: %s", movie_id, sorted(changes))
            return movie.model_copy(deep=True)

    def get_movie(self, movie_id: str) -> Movie:
        with self._lock:
            return self._require(movie_id).model_copy(deep=True)

    def delete_movie(self, movie_id: str) -> bool:
        """Remove a movie. Returns ``False`` when no movie had that id."""
        with self._lock:
            before = len(self._movies)
            self._movies = [m for m in self._movies if m.id != movie_id]
            deleted = len(self._movies) < before
        if deleted:
            logger.info("Deleted movie %s", movie_id)
        return deleted

    def add_rating(self, movie_id: str, rating: int) -> None:
        """Append a rating between 1 and 5 inclusive.

        The movie is looked up before the rating is checked, so an
        unknown id is reported as not found whatever the rating.
        """
        with self._lock:
            movie = self._require(movie_id)
            if not MIN_RATING <= rating <= MAX_RATING:
                raise InvalidRatingError()
            movie.ratings.append(rating)
            logger.info("Rated movie %s: %s (%d ratings)", movie_id, rating, len(movie.ratings))

    def average_rating(self, movie_id: str) -> Optional[float]:
        """Mean rating of a movie, or ``None`` if it has not been rated."""
        with self._lock:
            return self._require(movie_id).average_rating

    def top_rated(self) -> List[Movie]:
        """Rated movies, highest mean rating first.

        The order of movies with equal means is not guaranteed.
        """
        with self._lock:
            if not self._movies:
                raise NoMoviesError()
            rated = [m for m in self._movies if m.ratings]
            if not rated:
                raise NoRatedMoviesError()
            rated.sort(key=lambda m: m.average_rating, reverse=True)
            return self._snapshot(rated)

    def by_genre(self, genre: str) -> List[Movie]:
        ngenre = _norm(genre)
        with self._lock:
            found = [m for m in self._movies if _norm(m.genre) == ngenre]
            if not found:
                raise NoMoviesForGenreError()
            return self._snapshot(found)

    def by_director(self, director: str) -> List[Movie]:
        ndirector = _norm(director)
        with self._lock:
            found = [m for m in self._movies if _norm(m.director) == ndirector]
            if not found:
                raise NoMoviesForDirectorError()
            return self._snapshot(found)

    def search(self, keyword: Optional[str]) -> List[Movie]:
        """Movies whose title contains ``keyword``, ignoring case.

        Only an empty keyword is rejected. Surrounding whitespace is
        trimmed before matching, so a blank keyword matches every title.
        An empty store and a search without matches both raise
        ``NoMoviesError``.
        """
        if not keyword:
            raise MissingKeywordError()
        nq = _norm(keyword).strip()

        with self._lock:
            if not self._movies:
                logger.debug("Search for %r on an empty store", nq)
                raise NoMoviesError()
            found = [m for m in self._movies if nq in _norm(m.title)]
            if not found:
                logger.debug("No title matches %r", nq)
                raise NoMoviesError()
            return self._snapshot(found)

    def clear(self) -> None:
        with self._lock:
            self._movies = []


# Process-wide store used by the router.
store = MovieStore()


def get_store() -> MovieStore:
    return store
