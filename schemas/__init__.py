"""
Pydantic schemas for the in-memory entity model.

Schemas:
    series: Series record (name, localized name, year, seasons, airing
            flag, genres, countries)

Countries and genres are plain strings and need no schema.

Usage:
    from schemas.series import Series

Example:
    series = Series(
        name="X",
        localized_name="Y",
        release_year=2020,
        season_count=3,
        airing=True,
        genres=["Drama", "Crime"],
        countries=["USA"]
    )
    assert series.localized_name == "Y"
"""

__all__ = [
    "Series",
]

from schemas.series import Series
