"""
Pydantic entity model for TV series records extracted from the fixtures
"""

from pydantic import BaseModel, Field, validator
from typing import List


class Series(BaseModel):
    """
    One TV series with its genre and country tags.

    Ensures:
    - The localized name (business key) is not blank
    - Year and season count are integers
    - Tag lists keep document order (no dedup)
    """

    name: str
    localized_name: str
    release_year: int
    season_count: int
    airing: bool = False
    genres: List[str] = Field(default_factory=list)
    countries: List[str] = Field(default_factory=list)

    @validator("localized_name")
    def check_localized_name(cls, v):
        """Join rows look the series up by this name"""
        if not v.strip():
            raise ValueError("Localized name cannot be blank")
        return v

    class Config:
        frozen = True

    def summary(self) -> str:
        """Multi-line description used in debug logs"""
        return (
            f"Name:       {self.name}\n"
            f"Locname:    {self.localized_name}\n"
            f"Year:       {self.release_year}\n"
            f"Amount:     {self.season_count}\n"
            f"Status:     {int(self.airing)}\n"
            f"Genres:     {' '.join(self.genres)}\n"
            f"Countries:  {' '.join(self.countries)}"
        )
