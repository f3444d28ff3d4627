"""
Catalogue listing mappers.
"""

from typing import Optional

from domain.mappers.engine import Mapper
from domain.mappers.rules import NumberFormat, Rename
from domain.models import MovieListing
from domain.schemas.movie_schemas import MovieListingDTO

LISTING_MAPPER: Mapper[MovieListing, MovieListingDTO] = Mapper(
    MovieListing,
    MovieListingDTO,
    {
        "year": NumberFormat(pattern="#"),
        "maker": Rename("director"),
    },
    name="listing",
)


class MovieListingMapper:
    """Mapper for catalogue listings; fully invertible."""

    mapper = LISTING_MAPPER

    @staticmethod
    def to_dto(listing: Optional[MovieListing]) -> Optional[MovieListingDTO]:
        return LISTING_MAPPER.map_forward(listing)

    @staticmethod
    def from_dto(listing_dto: Optional[MovieListingDTO]) -> Optional[MovieListing]:
        return LISTING_MAPPER.map_inverse(listing_dto)
