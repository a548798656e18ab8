from movies_api.movies.schemas import CreateMovieRequest


def make_movie(movie_id="m1", title="Dune", director="Villeneuve", year=2021, genre="Sci-Fi"):
    return CreateMovieRequest(
        id=movie_id, title=title, director=director, release_year=year, genre=genre
    )
