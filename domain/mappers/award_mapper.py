"""
Award mappers.
Handles transformation between Award entities and AwardDTO.
"""

from typing import Optional

from domain.enums import MissingPolicy
from domain.mappers.engine import Mapper
from domain.mappers.rules import Computed
from domain.models import Award
from domain.schemas.movie_schemas import AwardDTO


def award_year(award: Award) -> int:
    return award.date.year


AWARD_MAPPER: Mapper[Award, AwardDTO] = Mapper(
    Award,
    AwardDTO,
    {
        # An award without a date simply has no year
        "year": Computed(award_year, requires=("date",), on_missing=MissingPolicy.NULL),
    },
    name="award",
)


class AwardMapper:
    """Mapper for award transformations."""

    mapper = AWARD_MAPPER

    @staticmethod
    def to_dto(award: Optional[Award]) -> Optional[AwardDTO]:
        """Convert an Award entity to AwardDTO (year taken from the award date)."""
        return AWARD_MAPPER.map_forward(award)

    @staticmethod
    def from_dto(award_dto: Optional[AwardDTO]) -> Optional[Award]:
        """Rebuild an Award from its DTO; the date cannot be recovered from the year."""
        return AWARD_MAPPER.map_inverse(award_dto)
