from pydantic import BaseModel, Field, field_serializer
from typing import List, Optional, Set


class AwardDTO(BaseModel):
    """Award as exposed to clients; hashable so it can live in a set"""

    category: Optional[str] = None
    year: Optional[int] = None

    model_config = {"from_attributes": True, "frozen": True}


class MovieDTO(BaseModel):
    """Flattened movie representation"""

    title: Optional[str] = None
    release_date: Optional[str] = Field(None, description="Release date as dd.MM.yyyy")
    director: Optional[str] = Field(None, description="Director full name")
    soundtrack: Optional[str] = Field(None, description="Composer of the soundtrack")
    awards: Optional[Set[AwardDTO]] = None
    runtime: Optional[str] = None
    budget: Optional[str] = Field(None, description="Budget, e.g. '$185,000,000'")
    lang: Optional[str] = None

    model_config = {"from_attributes": True}

    @field_serializer("awards")
    def serialize_awards(self, awards: Optional[Set[AwardDTO]]) -> Optional[List[AwardDTO]]:
        """Dumped awards become a list; dicts cannot be set members"""
        if awards is None:
            return None
        return sorted(awards, key=lambda a: (a.category or "", a.year or 0))


class MovieListingDTO(BaseModel):
    """Catalogue listing entry"""

    title: Optional[str] = None
    year: Optional[str] = None
    maker: Optional[str] = Field(None, description="Director display name")

    model_config = {"from_attributes": True}
