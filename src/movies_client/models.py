"""
Movie transfer object and its JSON wire mapping.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import InvalidResponseError


class Movie(BaseModel):
    """
    Movie as exchanged with the movies service.

    Wire fields are snake_case (movie_id, release_date). The camelCase
    spellings some payloads use (movieId, releaseDate) are accepted on
    decode but never emitted.

    No client-side validation beyond types: missing fields decode to None,
    unknown fields are ignored.

    Example:
        >>> movie = Movie(name="Toy Story 4", cast="Tom Hanks, Tim Allen", year=2019)
        >>> movie.to_wire()
        {'name': 'Toy Story 4', 'cast': 'Tom Hanks, Tim Allen', 'year': 2019}
    """

    model_config = ConfigDict(extra='ignore')

    movie_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices('movie_id', 'movieId'),
        serialization_alias='movie_id',
    )
    name: Optional[str] = None
    cast: Optional[str] = None
    release_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices('release_date', 'releaseDate'),
        serialization_alias='release_date',
    )
    year: Optional[int] = None

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict; unset fields are omitted, dates are ISO strings."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Any) -> 'Movie':
        """
        Decode one JSON object.

        Raises:
            InvalidResponseError: data is not an object or has mistyped fields
        """
        if not isinstance(data, dict):
            raise InvalidResponseError(
                f"Expected a JSON object for Movie, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(f"Invalid Movie payload: {e}", cause=e) from e

    @classmethod
    def list_from_wire(cls, data: Any) -> List['Movie']:
        """
        Decode a JSON array of movies.

        Raises:
            InvalidResponseError: data is not an array or an element is invalid
        """
        if not isinstance(data, list):
            raise InvalidResponseError(
                f"Expected a JSON array of Movie, got {type(data).__name__}"
            )
        return [cls.from_wire(item) for item in data]
