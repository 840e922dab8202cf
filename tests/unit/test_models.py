"""
Tests for the Movie transfer object.
"""

from datetime import date

import pytest

from movies_client import InvalidResponseError, Movie


class TestMovieDecode:
    """Movie.from_wire / list_from_wire"""

    def test_snake_case_payload(self, load_json):
        movie = Movie.from_wire(load_json("movie.json"))

        assert movie.movie_id == 1
        assert movie.name == "Batman Begins"
        assert movie.release_date == date(2005, 6, 15)
        assert movie.year == 2005

    def test_camel_case_aliases(self):
        movie = Movie.from_wire({"movieId": 3, "releaseDate": "2012-05-04"})

        assert movie.movie_id == 3
        assert movie.release_date == date(2012, 5, 4)

    def test_missing_fields_are_none(self):
        movie = Movie.from_wire({"name": "Heat"})

        assert movie.movie_id is None
        assert movie.cast is None
        assert movie.release_date is None
        assert movie.year is None

    def test_unknown_fields_ignored(self):
        movie = Movie.from_wire({"movie_id": 1, "rating": 9.5})

        assert movie.movie_id == 1
        assert not hasattr(movie, "rating")

    def test_cast_kept_verbatim(self, load_json):
        movie = Movie.from_wire(load_json("avengers.json")[0])

        assert movie.cast == "Robert Downey Jr, Chris Evans , Chris HemsWorth"

    @pytest.mark.parametrize("payload", [[], "movie", 42, None])
    def test_non_object_rejected(self, payload):
        with pytest.raises(InvalidResponseError, match="Expected a JSON object"):
            Movie.from_wire(payload)

    def test_mistyped_field_rejected(self):
        with pytest.raises(InvalidResponseError) as exc_info:
            Movie.from_wire({"year": "last year"})

        assert exc_info.value.cause is not None

    def test_bad_date_rejected(self):
        with pytest.raises(InvalidResponseError):
            Movie.from_wire({"release_date": "2019-13-45"})

    def test_list(self, load_json):
        movies = Movie.list_from_wire(load_json("all-movies.json"))

        assert len(movies) == 10
        assert [m.movie_id for m in movies] == list(range(1, 11))

    def test_list_rejects_object(self, load_json):
        with pytest.raises(InvalidResponseError, match="Expected a JSON array"):
            Movie.list_from_wire(load_json("movie.json"))

    def test_list_rejects_bad_element(self):
        with pytest.raises(InvalidResponseError):
            Movie.list_from_wire([{"movie_id": 1}, "oops"])


class TestMovieEncode:
    """Movie.to_wire"""

    def test_full_movie(self):
        movie = Movie(
            movie_id=11,
            name="Toy Story 4",
            cast="Tom Hanks, Tim Allen",
            release_date=date(2019, 6, 20),
            year=2019,
        )

        assert movie.to_wire() == {
            "movie_id": 11,
            "name": "Toy Story 4",
            "cast": "Tom Hanks, Tim Allen",
            "release_date": "2019-06-20",
            "year": 2019,
        }

    def test_unset_fields_omitted(self):
        assert Movie(cast="ABC").to_wire() == {"cast": "ABC"}

    def test_camel_case_input_emits_snake_case(self):
        wire = Movie.from_wire({"movieId": 5, "releaseDate": "2008-07-18"}).to_wire()

        assert wire == {"movie_id": 5, "release_date": "2008-07-18"}

    def test_decode_of_encoded_is_equal(self, load_json):
        movie = Movie.from_wire(load_json("add-movie.json"))

        assert Movie.from_wire(movie.to_wire()) == movie
