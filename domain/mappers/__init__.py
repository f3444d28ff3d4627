"""
Domain mappers package.
Handles transformation between domain entities and DTOs (Data Transfer Objects)
through rule tables interpreted by a single generic engine.
"""

from domain.mappers.engine import Mapper
from domain.mappers.rules import (
    FieldRule,
    Copy,
    Rename,
    Default,
    DateFormat,
    NumberFormat,
    Computed,
    Nested,
    Ignore,
    Collection,
)
from domain.mappers.award_mapper import AwardMapper, AWARD_MAPPER
from domain.mappers.movie_mapper import MovieMapper, MOVIE_MAPPER
from domain.mappers.listing_mapper import MovieListingMapper, LISTING_MAPPER

__all__ = [
    # Engine and rules
    "Mapper",
    "FieldRule",
    "Copy",
    "Rename",
    "Default",
    "DateFormat",
    "NumberFormat",
    "Computed",
    "Nested",
    "Ignore",
    "Collection",
    # Concrete mappers
    "AwardMapper",
    "AWARD_MAPPER",
    "MovieMapper",
    "MOVIE_MAPPER",
    "MovieListingMapper",
    "LISTING_MAPPER",
]
