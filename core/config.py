"""
Application configuration using Pydantic Settings
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from typing import Optional

from core.collation import AIRING_STATUS, CollationContext


class Settings(BaseSettings):
    """Generator settings with environment variable support"""

    # Input fixtures
    XML_DIR: str = "xml"
    COUNTRIES_FILE: str = "countries.xml"
    GENRES_FILE: str = "genres.xml"
    TVSERIES_FILE: str = "tvseries.xml"

    # Output scripts
    OUTPUT_DIR: str = "."
    OUTPUT_ENCODING: str = "utf-8"

    # Text and collation
    ENCODING: str = "utf-8"
    COLLATION_LOCALE: Optional[str] = None
    AIRING_STATUS: str = AIRING_STATUS

    # Pipeline behaviour
    SHUFFLE_SEED: Optional[int] = None
    SKIP_MISSING_INPUTS: bool = False
    PAUSE_ON_EXIT: bool = True

    # Logging
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def countries_path(self) -> Path:
        return Path(self.XML_DIR) / self.COUNTRIES_FILE

    @property
    def genres_path(self) -> Path:
        return Path(self.XML_DIR) / self.GENRES_FILE

    @property
    def tvseries_path(self) -> Path:
        return Path(self.XML_DIR) / self.TVSERIES_FILE

    def collation_context(self) -> CollationContext:
        """Build the text/collation context injected into the extractors"""
        return CollationContext(
            encoding=self.ENCODING,
            locale_name=self.COLLATION_LOCALE,
            airing_status=self.AIRING_STATUS,
        )


settings = Settings()
