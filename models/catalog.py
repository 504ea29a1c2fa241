from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from models.base import Base


class Country(Base):
    """Lookup table of production countries."""
    __tablename__ = "CountriesTb"

    country_id = Column("CountryId", Integer, primary_key=True, autoincrement=True)
    country_name = Column("CountryName", String(100), nullable=False)


class Genre(Base):
    """Lookup table of genres."""
    __tablename__ = "GenresTb"

    genre_id = Column("GenreId", Integer, primary_key=True, autoincrement=True)
    genre_name = Column("GenreName", String(100), nullable=False)


class TvSeries(Base):
    """
    One row per series.

    SeriesName holds the localized name, which is the business key the
    join scripts resolve SeriesId through.
    """
    __tablename__ = "TvSeriesTb"

    series_id = Column("SeriesId", Integer, primary_key=True, autoincrement=True)
    series_name = Column("SeriesName", String(255), nullable=False)
    release_year = Column("ReleaseYear", Integer, nullable=False)
    seasons_amount = Column("SeasonsAmount", Integer, nullable=False)
    status = Column("Status", Boolean, nullable=False)  # 1 = still airing


class TvCountry(Base):
    """Series <-> country join table."""
    __tablename__ = "TvCountryTb"

    series_id = Column("SeriesId", Integer, ForeignKey("TvSeriesTb.SeriesId"), primary_key=True)
    country_id = Column("CountryId", Integer, ForeignKey("CountriesTb.CountryId"), primary_key=True)


class TvGenre(Base):
    """Series <-> genre join table."""
    __tablename__ = "TvGenreTb"

    series_id = Column("SeriesId", Integer, ForeignKey("TvSeriesTb.SeriesId"), primary_key=True)
    genre_id = Column("GenreId", Integer, ForeignKey("GenresTb.GenreId"), primary_key=True)


def column_name(model, attribute: str) -> str:
    """Database column name behind a mapped attribute"""
    return model.__mapper__.columns[attribute].name
