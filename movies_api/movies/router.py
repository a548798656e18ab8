"""
Route definitions for the movies API.

Endpoints:
- POST   /movies                          : add a movie
- PATCH  /movies/{movie_id}               : update a movie
- GET    /movies/{movie_id}               : get one movie
- DELETE /movies/{movie_id}               : delete a movie
- POST   /movies/{movie_id}/rating        : rate a movie (1 to 5)
- GET    /movies/{movie_id}/rating        : average rating (204 when unrated)
- GET    /top-rated                       : rated movies, best first
- GET    /movies/genre/{genre}            : movies of a genre
- GET    /movies/director/{director}      : movies of a director
- GET    /search/{keyword}                : title search

Store errors are not caught here: the application turns them into
``{"error": ...}`` responses (see ``movies_api.main``).
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from .errors import MissingKeywordError
from .schemas import (
    AverageRating,
    CreateMovieRequest,
    ErrorMessage,
    Message,
    Movie,
    MovieUpdate,
    RatingRequest,
)
from .store import MovieStore, get_store

router = APIRouter(
    tags=["movies"],
    responses={400: {"model": ErrorMessage}, 404: {"model": ErrorMessage}},
)


@router.post("/movies", response_model=Message, status_code=status.HTTP_201_CREATED)
def add_movie(req: CreateMovieRequest, store: MovieStore = Depends(get_store)):
    store.add_movie(req)
    return Message(message="Movie added successfully")


@router.patch("/movies/{movie_id}", response_model=Message)
def update_movie(movie_id: str, update: MovieUpdate, store: MovieStore = Depends(get_store)):
    store.update_movie(movie_id, update)
    return Message(message="Movie updated successfully")


@router.get("/movies/{movie_id}", response_model=Movie)
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    return store.get_movie(movie_id)


@router.delete("/movies/{movie_id}", response_model=Message)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Always answers 200; the message tells whether anything was removed."""
    deleted = store.delete_movie(movie_id)
    return Message(message="Movie deleted" if deleted else "Movie not found")


@router.post("/movies/{movie_id}/rating", response_model=Message)
def add_rating(movie_id: str, req: RatingRequest, store: MovieStore = Depends(get_store)):
    store.add_rating(movie_id, req.rating)
    return Message(message="Rating added successfully")


@router.get(
    "/movies/{movie_id}/rating",
    response_model=AverageRating,
    responses={204: {"description": "The movie has no ratings yet"}},
)
def get_average_rating(movie_id: str, store: MovieStore = Depends(get_store)):
    avg = store.average_rating(movie_id)
    if avg is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return AverageRating(average_rating=avg)


# Registered after the rating routes: /movies/genre/rating is the rating
# of the movie with id "genre".
@router.get("/movies/genre/{genre}", response_model=List[Movie])
def movies_by_genre(genre: str, store: MovieStore = Depends(get_store)):
    return store.by_genre(genre)


@router.get("/movies/director/{director}", response_model=List[Movie])
def movies_by_director(director: str, store: MovieStore = Depends(get_store)):
    return store.by_director(director)


@router.get("/top-rated", response_model=List[Movie])
def top_rated(store: MovieStore = Depends(get_store)):
    return store.top_rated()


@router.get("/search", include_in_schema=False)
@router.get("/search/", include_in_schema=False)
def search_without_keyword():
    raise MissingKeywordError()


@router.get("/search/{keyword}", response_model=List[Movie])
def search_movies(keyword: str, store: MovieStore = Depends(get_store)):
    return store.search(keyword)
