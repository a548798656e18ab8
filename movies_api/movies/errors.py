"""
Errors raised by :class:`~movies_api.movies.store.MovieStore`.

The store knows nothing about HTTP. The application maps the two
branches of the hierarchy onto status codes: ``InvalidRequestError`` is
a 400 and ``NotFoundError`` is a 404. Every error carries the message
that is sent back to the client under the ``error`` key.
"""


class MovieStoreError(Exception):
    message = "Movie store error"

    def __init__(self, message=None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidRequestError(MovieStoreError):
    message = "Invalid request"


class NotFoundError(MovieStoreError):
    message = "Not found"


class MissingFieldsError(InvalidRequestError):
    message = "Missing required fields"


class DuplicateMovieError(InvalidRequestError):
    message = "Movie with this ID already exists"


class InvalidRatingError(InvalidRequestError):
    message = "Invalid rating"


class MissingKeywordError(InvalidRequestError):
    message = "Keyword query parameter is required"


class MovieNotFoundError(NotFoundError):
    message = "Movie not found"


class NoMoviesError(NotFoundError):
    message = "No movies found"


class NoRatedMoviesError(NotFoundError):
    message = "No rated movies found"


class NoMoviesForGenreError(NotFoundError):
    message = "No movies found for this genre"


class NoMoviesForDirectorError(NotFoundError):
    message = "No movies found for this director"
