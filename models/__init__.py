"""
SQLAlchemy ORM models describing the target schema.

The generator never opens a database connection; these models are the
single source of table and column names for the emitted scripts, and the
test-suite uses their metadata to build a throwaway SQLite database.

Models:
    base: Declarative base and the Artifact enum (output scripts in order)
    catalog: CountriesTb, GenresTb, TvSeriesTb, TvCountryTb, TvGenreTb

Usage:
    from models.base import Base, Artifact
    from models.catalog import Country, Genre, TvSeries, TvCountry, TvGenre

Relationships:
    - TvSeries <-> Country through TvCountryTb (many-to-many)
    - TvSeries <-> Genre through TvGenreTb (many-to-many)
"""

__all__ = [
    "Base",
    "Artifact",
    "Country",
    "Genre",
    "TvSeries",
    "TvCountry",
    "TvGenre",
]

from models.base import Base, Artifact
from models.catalog import Country, Genre, TvSeries, TvCountry, TvGenre
