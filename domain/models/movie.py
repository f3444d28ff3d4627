"""
Movie-related domain models.
"""

from sqlalchemy import BigInteger, Column, Date, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Director(Base):
    """Film director"""

    __tablename__ = "director"

    director_id = Column(Integer, primary_key=True)
    first_name = Column(Text)
    last_name = Column(Text)

    movies = relationship("Movie", back_populates="director")

    def __str__(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class Soundtrack(Base):
    """Original score of a movie"""

    __tablename__ = "soundtrack"

    soundtrack_id = Column(Integer, primary_key=True)
    title = Column(Text)
    composer = Column(Text)

    movies = relationship("Movie", back_populates="soundtrack")


class Award(Base):
    """Award won by a movie"""

    __tablename__ = "award"

    award_id = Column(Integer, primary_key=True)
    movie_id = Column(Integer, ForeignKey("movie.movie_id", ondelete="CASCADE"))
    category = Column(Text, nullable=False)
    date = Column(Date)

    movie = relationship("Movie", back_populates="awards")


class Movie(Base):
    """Movie with its director, soundtrack and awards"""

    __tablename__ = "movie"

    movie_id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    release_date = Column(Date)
    director_id = Column(Integer, ForeignKey("director.director_id"))
    soundtrack_id = Column(Integer, ForeignKey("soundtrack.soundtrack_id"))
    runtime = Column(Text)
    budget = Column(BigInteger)
    language = Column(Text)

    # Relationships
    director = relationship("Director", back_populates="movies")
    soundtrack = relationship("Soundtrack", back_populates="movies")
    awards = relationship(
        "Award", back_populates="movie", cascade="all, delete-orphan"
    )
