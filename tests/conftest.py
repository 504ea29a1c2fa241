"""
Pytest configuration and fixtures
"""

import pytest
from pathlib import Path

from core.collation import CollationContext
from core.config import Settings
from schemas.series import Series


COUNTRIES_XML = """<?xml version="1.0" encoding="utf-8"?>
<countries>
  <country>USA</country>
  <country>UK</country>
</countries>
"""

GENRES_XML = """<?xml version="1.0" encoding="utf-8"?>
<genres>
  <genre>Drama</genre>
  <genre>Crime</genre>
  <genre>Detective</genre>
  <genre>Comedy</genre>
</genres>
"""

TVSERIES_XML = """<?xml version="1.0" encoding="utf-8"?>
<tvseries>
  <tvs name="Breaking Bad" locname="Во все тяжкие" year="2008">
    <info amount="5" status="завершён"/>
    <genres>
      <genre>Drama</genre>
      <genre>Crime</genre>
    </genres>
    <countries>
      <country>USA</country>
    </countries>
  </tvs>
  <tvs name="Sherlock" locname="Шерлок" year="2010">
    <info amount="4" status="снимается"/>
    <genres>
      <genre>Crime</genre>
      <genre>Detective</genre>
    </genres>
    <countries>
      <country>UK</country>
      <country>USA</country>
    </countries>
  </tvs>
  <tvs name="Fargo" locname="Фарго" year="2014">
    <info amount="4" status="снимается"/>
    <genres>
      <genre>Crime</genre>
      <genre>Drama</genre>
      <genre>Comedy</genre>
    </genres>
    <countries>
      <country>USA</country>
    </countries>
  </tvs>
</tvseries>
"""


@pytest.fixture
def countries_xml():
    return COUNTRIES_XML


@pytest.fixture
def genres_xml():
    return GENRES_XML


@pytest.fixture
def tvseries_xml():
    return TVSERIES_XML


@pytest.fixture
def collation_context():
    """Default context: NFC code point comparison, Russian airing status"""
    return CollationContext()


@pytest.fixture
def sample_series():
    """The single series used in the end-to-end examples"""
    return Series(
        name="X",
        localized_name="Y",
        release_year=2020,
        season_count=3,
        airing=True,
        genres=["Drama", "Crime"],
        countries=["USA"]
    )


@pytest.fixture
def xml_dir(tmp_path) -> Path:
    """Directory holding the three fixture files"""
    directory = tmp_path / "xml"
    directory.mkdir()
    (directory / "countries.xml").write_text(COUNTRIES_XML, encoding="utf-8")
    (directory / "genres.xml").write_text(GENRES_XML, encoding="utf-8")
    (directory / "tvseries.xml").write_text(TVSERIES_XML, encoding="utf-8")
    return directory


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "out"


@pytest.fixture
def test_settings(xml_dir, output_dir) -> Settings:
    """Settings pointing at the temporary fixture and output directories"""
    return Settings(
        XML_DIR=str(xml_dir),
        OUTPUT_DIR=str(output_dir),
        SHUFFLE_SEED=1234,
        PAUSE_ON_EXIT=False,
    )
