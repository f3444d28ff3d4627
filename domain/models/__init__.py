"""
Domain models package - SQLAlchemy declarative entities and plain records.
"""

from domain.models.database import Base
from domain.models.movie import Movie, Director, Soundtrack, Award
from domain.models.listing import MovieListing

__all__ = [
    "Base",
    # Movie models
    "Movie",
    "Director",
    "Soundtrack",
    "Award",
    # Catalogue records
    "MovieListing",
]
