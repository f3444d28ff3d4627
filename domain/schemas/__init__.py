"""
Domain schemas package - Pydantic models for transfer objects.
"""

from domain.schemas.movie_schemas import (
    AwardDTO,
    MovieDTO,
    MovieListingDTO,
)

__all__ = [
    # Movie schemas
    "AwardDTO",
    "MovieDTO",
    "MovieListingDTO",
]
