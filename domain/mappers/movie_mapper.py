"""
Movie domain mappers.
Handles transformation between Movie entities and MovieDTO, delegating awards
to the award mapper.
"""

from typing import Optional

from domain.enums import CollectionKind, MissingPolicy
from domain.mappers.award_mapper import AWARD_MAPPER
from domain.mappers.engine import Mapper
from domain.mappers.rules import (
    Collection,
    Computed,
    DateFormat,
    Default,
    Ignore,
    Nested,
    NumberFormat,
)
from domain.models import Movie
from domain.schemas.movie_schemas import MovieDTO

DEFAULT_LANGUAGE = "English"


def director_name(movie: Movie) -> str:
    return str(movie.director)


MOVIE_MAPPER: Mapper[Movie, MovieDTO] = Mapper(
    Movie,
    MovieDTO,
    {
        "release_date": DateFormat(pattern="dd.MM.yyyy"),
        "director": Computed(
            director_name, requires=("director",), on_missing=MissingPolicy.RAISE
        ),
        "soundtrack": Nested("soundtrack.composer"),
        "awards": Collection(AWARD_MAPPER, kind=CollectionKind.SET),
        "runtime": Ignore(),
        "budget": NumberFormat(pattern="$###,###,###"),
        "lang": Default(DEFAULT_LANGUAGE, source="language"),
    },
    name="movie",
)


class MovieMapper:
    """Mapper for movie transformations."""

    mapper = MOVIE_MAPPER

    @staticmethod
    def to_dto(movie: Optional[Movie]) -> Optional[MovieDTO]:
        """
        Convert a Movie entity to MovieDTO.

        Args:
            movie: Movie instance with director, soundtrack and awards set

        Returns:
            MovieDTO with formatted release date and budget

        Raises:
            MissingReferenceError: If the movie has no director
        """
        return MOVIE_MAPPER.map_forward(movie)

    @staticmethod
    def from_dto(movie_dto: Optional[MovieDTO]) -> Optional[Movie]:
        """
        Rebuild a Movie entity from MovieDTO.

        Director, soundtrack and runtime are one-directional and stay unset.

        Raises:
            FormatError: If the release date or budget text is malformed
        """
        return MOVIE_MAPPER.map_inverse(movie_dto)
