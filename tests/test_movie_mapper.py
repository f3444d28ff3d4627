"""
Tests for the movie mapper.

Covers every rule kind on a realistic entity:
- Date and budget formatting
- Director name computed from the nested director
- Soundtrack flattened from the nested soundtrack
- Runtime ignored, language defaulted
- Awards mapped through the award mapper into a set
- Inverse mapping and round trips
"""

import pytest
from datetime import date

from app.exceptions import FormatError, MissingReferenceError
from domain.mappers import MovieMapper, MOVIE_MAPPER
from domain.models import Movie
from domain.schemas.movie_schemas import AwardDTO, MovieDTO
from test_constants import AMELIE, EXPECTED_DARK_KNIGHT_DTO, INCEPTION
from test_fixtures import dark_knight, make_movie


# =============================================================================
# FORWARD MAPPING
# =============================================================================


def test_movie_to_dto(dark_knight: Movie):
    """
    Verifies:
    - Title copied, release date and budget formatted
    - Director and soundtrack flattened to strings
    - Runtime ignored, missing language defaulted
    """
    dto = MovieMapper.to_dto(dark_knight)

    assert dto is not None
    for field, expected in EXPECTED_DARK_KNIGHT_DTO.items():
        assert getattr(dto, field) == expected, field


def test_movie_awards_mapped_into_set(dark_knight: Movie):
    dto = MovieMapper.to_dto(dark_knight)

    assert isinstance(dto.awards, set)
    assert len(dto.awards) == 2
    assert {award.year for award in dto.awards} == {2009}
    assert {award.category for award in dto.awards} == {
        "Best Performance by an Actor in a Supporting Role",
        "Best Achievement in Sound Editing",
    }


def test_duplicate_awards_collapse():
    entry = {"category": "Best Achievement in Sound Editing", "date": date(2009, 2, 22)}
    movie = make_movie(awards=[entry, dict(entry)])

    dto = MovieMapper.to_dto(movie)

    assert dto.awards == {AwardDTO(category=entry["category"], year=2009)}


@pytest.mark.parametrize("runtime", ["152 min", "", None])
def test_runtime_always_ignored(runtime):
    assert MovieMapper.to_dto(make_movie(runtime=runtime)).runtime is None


def test_language_default_only_when_missing():
    assert MovieMapper.to_dto(make_movie(language=None)).lang == "English"
    assert MovieMapper.to_dto(make_movie(base=AMELIE, director="jeunet")).lang == "French"


def test_null_fields_degrade_to_null():
    movie = make_movie(release_date=None, budget=None, soundtrack=None)

    dto = MovieMapper.to_dto(movie)

    assert dto.release_date is None
    assert dto.budget is None
    assert dto.soundtrack is None


def test_movie_without_awards_has_empty_set():
    movie = make_movie()
    movie.awards = []

    assert MovieMapper.to_dto(movie).awards == set()


def test_movie_without_director_fails_every_time():
    movie = make_movie(director=None)

    for _ in range(3):
        with pytest.raises(MissingReferenceError) as exc_info:
            MovieMapper.to_dto(movie)
        assert exc_info.value.field == "director"
        assert exc_info.value.reference == "director"


def test_movie_award_without_date_yields_null_year():
    movie = make_movie(awards=[{"category": "Best Score"}])

    first = MovieMapper.to_dto(movie)
    second = MovieMapper.to_dto(movie)

    assert first.awards == second.awards == {AwardDTO(category="Best Score", year=None)}


def test_forward_mapping_leaves_source_untouched(dark_knight: Movie):
    MovieMapper.to_dto(dark_knight)

    assert dark_knight.runtime == "152 min"
    assert dark_knight.language is None
    assert dark_knight.release_date == date(2008, 7, 18)
    assert len(dark_knight.awards) == 2


# =============================================================================
# INVERSE MAPPING
# =============================================================================


def test_movie_from_dto():
    dto = MovieDTO(
        title="The Dark Knight",
        release_date="18.07.2008",
        director="Christopher Nolan",
        soundtrack="Hans Zimmer",
        awards={AwardDTO(category="Best Achievement in Sound Editing", year=2009)},
        runtime="152 min",
        budget="$185,000,000",
        lang="English",
    )

    movie = MovieMapper.from_dto(dto)

    assert isinstance(movie, Movie)
    assert movie.title == "The Dark Knight"
    assert movie.release_date == date(2008, 7, 18)
    assert movie.budget == 185000000
    assert movie.language == "English"
    assert [award.category for award in movie.awards] == ["Best Achievement in Sound Editing"]
    # one-directional fields stay unset
    assert movie.director is None
    assert movie.soundtrack is None
    assert movie.runtime is None


def test_movie_from_dto_absent_language_stays_absent():
    movie = MovieMapper.from_dto(MovieDTO(title="Untitled"))

    assert movie.language is None
    assert movie.release_date is None
    assert movie.budget is None


def test_movie_from_dto_bad_budget():
    with pytest.raises(FormatError) as exc_info:
        MovieMapper.from_dto(MovieDTO(title="Heat", budget="sixty million"))

    assert exc_info.value.field == "budget"
    assert exc_info.value.raw_value == "sixty million"


def test_movie_from_dto_bad_release_date():
    with pytest.raises(FormatError) as exc_info:
        MovieMapper.from_dto(MovieDTO(title="Heat", release_date="1995-12-15"))

    assert exc_info.value.field == "release_date"


def test_inverse_does_not_mutate_dto():
    dto = MovieDTO(title="Heat", release_date="15.12.1995", budget="$60,000,000")
    before = dto.model_dump()

    MovieMapper.from_dto(dto)

    assert dto.model_dump() == before


# =============================================================================
# ROUND TRIP
# =============================================================================


@pytest.mark.parametrize("base", [INCEPTION, AMELIE])
def test_round_trip_preserves_invertible_fields(base):
    movie = make_movie(base=base)

    restored = MovieMapper.from_dto(MovieMapper.to_dto(movie))

    assert restored.title == movie.title
    assert restored.release_date == movie.release_date
    assert restored.budget == movie.budget
    assert restored.language == movie.language
    assert sorted(a.category for a in restored.awards) == sorted(a.category for a in movie.awards)


def test_movie_rules_are_inspectable():
    assert MOVIE_MAPPER.invertible_fields() == ("title", "release_date", "awards", "budget", "lang")
    assert MOVIE_MAPPER.rules["soundtrack"].describe() == "Nested(soundtrack.composer)"


def test_dto_with_awards_dumps_to_plain_data(dark_knight: Movie):
    dumped = MovieMapper.to_dto(dark_knight).model_dump()

    assert dumped["budget"] == "$185,000,000"
    assert dumped["awards"] == [
        {"category": "Best Achievement in Sound Editing", "year": 2009},
        {"category": "Best Performance by an Actor in a Supporting Role", "year": 2009},
    ]


def test_dto_dump_json_lists_awards(dark_knight: Movie):
    dumped = MovieDTO.model_validate_json(MovieMapper.to_dto(dark_knight).model_dump_json())

    assert dumped.awards == MovieMapper.to_dto(dark_knight).awards


def test_round_trip_early_release_date():
    movie = make_movie(release_date=date(950, 3, 1))

    dto = MovieMapper.to_dto(movie)

    assert dto.release_date == "01.03.0950"
    assert MovieMapper.from_dto(dto).release_date == date(950, 3, 1)
