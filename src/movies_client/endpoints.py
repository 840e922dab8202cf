"""Movies service endpoint templates."""

from typing import Any
from urllib.parse import quote, urlencode

GET_ALL_MOVIES_V1 = "/movieservice/v1/allMovies"
MOVIE_BY_ID_V1 = "/movieservice/v1/movie/{id}"
MOVIE_BY_NAME_V1 = "/movieservice/v1/movieName"
MOVIE_BY_YEAR_V1 = "/movieservice/v1/movieYear"
ADD_MOVIE_V1 = "/movieservice/v1/movie"


def movie_by_id_path(movie_id: int) -> str:
    """
    >>> movie_by_id_path(7)
    '/movieservice/v1/movie/7'
    """
    return MOVIE_BY_ID_V1.format(id=quote(str(movie_id), safe=""))


def with_query(path: str, **params: Any) -> str:
    """
    Append percent-encoded query parameters (spaces become %20).

    Values are passed through as given; None values are dropped.

    >>> with_query(MOVIE_BY_NAME_V1, movie_name="Toy Story 4")
    '/movieservice/v1/movieName?movie_name=Toy%20Story%204'
    """
    query = urlencode({k: v for k, v in params.items() if v is not None}, quote_via=quote)
    if not query:
        return path
    return f"{path}?{query}"
