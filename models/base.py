from sqlalchemy.orm import declarative_base
import enum

Base = declarative_base()


# ============================================================================
# ENUMS
# ============================================================================

class Artifact(str, enum.Enum):
    """Generated SQL scripts, declared in execution order"""
    COUNTRIES = "countries"
    GENRES = "genres"
    TVSERIES = "tvseries"
    TVCOUNTRY = "tvcountry"
    TVGENRE = "tvgenre"

    @property
    def ordinal(self) -> int:
        return list(Artifact).index(self) + 1

    @property
    def filename(self) -> str:
        """Numbered script name, e.g. ``1_insert_into_countries_tb.sql``"""
        return f"{self.ordinal}_insert_into_{self.value}_tb.sql"
