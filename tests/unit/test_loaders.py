"""
Unit tests for SQL script rendering and writing
"""

import re

import pytest
from core.exceptions import EmptyInputError, OutputWriteError
from models.base import Artifact
from pipeline.loaders.sql_emitter import (
    SQLEmitter,
    quote,
    render_countries,
    render_genres,
    render_insert,
    render_series,
    render_series_countries,
    render_series_genres,
)
from schemas.series import Series

SERIES_LOOKUP = "(SELECT SeriesId FROM TvSeriesTb WHERE SeriesName = '{}')"
GENRE_LOOKUP = "(SELECT GenreId FROM GenresTb WHERE GenreName = '{}')"
COUNTRY_LOOKUP = "(SELECT CountryId FROM CountriesTb WHERE CountryName = '{}')"


def _values(script: str):
    """Parse the single-column literals back out of a VALUES clause"""
    return re.findall(r"^\('(.*)'\)[,;]$", script, flags=re.MULTILINE)


def _series(localized_name: str, genres, countries, airing=False) -> Series:
    return Series(
        name=localized_name,
        localized_name=localized_name,
        release_year=2001,
        season_count=2,
        airing=airing,
        genres=genres,
        countries=countries
    )


class TestRenderInsert:
    """Test statement layout and punctuation"""

    def test_layout(self):
        script = render_insert("T", ["A", "B"], ["(1, 2)", "(3, 4)"])

        assert script == "INSERT INTO T (A, B) VALUES\n(1, 2),\n(3, 4);\n"

    def test_single_row(self):
        assert render_insert("T", ["A"], ["(1)"]) == "INSERT INTO T (A) VALUES\n(1);\n"

    @pytest.mark.parametrize("count", [1, 2, 7])
    def test_separator_counts(self, count):
        script = render_insert("T", ["A"], [f"({i})" for i in range(count)])

        assert script.count(",\n") == count - 1
        assert script.count(";\n") == 1
        assert script.endswith(";\n")

    def test_accepts_generator(self):
        script = render_insert("T", ["A"], (f"({i})" for i in range(3)))

        assert script.count(",\n") == 2

    def test_no_rows(self):
        with pytest.raises(EmptyInputError) as exc_info:
            render_insert("T", ["A"], [], function="render_widgets")

        assert exc_info.value.context["function"] == "render_widgets"
        assert "render_widgets" in str(exc_info.value)


class TestLookupTables:
    """Countries and genres scripts"""

    def test_countries_exact_output(self):
        assert render_countries(["USA", "UK"]) == (
            "INSERT INTO CountriesTb (CountryName) VALUES\n('USA'),\n('UK');\n"
        )

    def test_genres_header(self):
        assert render_genres(["Drama"]) == "INSERT INTO GenresTb (GenreName) VALUES\n('Drama');\n"

    def test_values_round_trip(self):
        names = ["США", "Великобритания", "Drama & Crime", "Sci-Fi"]

        assert _values(render_countries(names)) == names

    def test_order_preserved_without_dedup(self):
        assert _values(render_genres(["b", "a", "b"])) == ["b", "a", "b"]

    def test_quote_does_not_escape(self):
        assert quote("O'Brien") == "'O'Brien'"

    @pytest.mark.parametrize("empty", [None, []])
    def test_empty_countries(self, empty):
        with pytest.raises(EmptyInputError) as exc_info:
            render_countries(empty)

        assert exc_info.value.context["function"] == "render_countries"

    @pytest.mark.parametrize("empty", [None, []])
    def test_empty_genres(self, empty):
        with pytest.raises(EmptyInputError):
            render_genres(empty)


class TestSeriesTables:
    """Series table and the two join tables"""

    def test_single_series_row(self, sample_series):
        assert render_series([sample_series]) == (
            "INSERT INTO TvSeriesTb (SeriesName, ReleaseYear, SeasonsAmount, Status) VALUES\n"
            "('Y', 2020, 3, 1);\n"
        )

    def test_status_as_integer(self):
        script = render_series([_series("A", [], [], airing=False), _series("B", [], [], airing=True)])

        assert "('A', 2001, 2, 0),\n" in script
        assert "('B', 2001, 2, 1);\n" in script
        assert "True" not in script and "False" not in script

    def test_genre_join_rows(self, sample_series):
        assert render_series_genres([sample_series]) == (
            "INSERT INTO TvGenreTb (SeriesId, GenreId) VALUES\n"
            f"({SERIES_LOOKUP.format('Y')}, {GENRE_LOOKUP.format('Drama')}),\n"
            f"({SERIES_LOOKUP.format('Y')}, {GENRE_LOOKUP.format('Crime')});\n"
        )

    def test_country_join_rows(self, sample_series):
        assert render_series_countries([sample_series]) == (
            "INSERT INTO TvCountryTb (SeriesId, CountryId) VALUES\n"
            f"({SERIES_LOOKUP.format('Y')}, {COUNTRY_LOOKUP.format('USA')});\n"
        )

    def test_join_rows_flatten_nested_lists(self):
        """Total rows equal the sum of per-series genre counts"""
        series = [
            _series("A", ["g1", "g2", "g3"], ["c"]),
            _series("B", ["g1"], ["c"]),
            _series("C", ["g2", "g4"], ["c"]),
        ]
        script = render_series_genres(series)
        rows = script.split("\n")[1:-1]

        assert len(rows) == 6
        assert script.count(",\n") == 5
        assert script.count(";\n") == 1
        assert rows[-1] == f"({SERIES_LOOKUP.format('C')}, {GENRE_LOOKUP.format('g4')});"

    def test_terminator_after_last_non_empty_series(self):
        """The last series having no genres does not leave a dangling comma"""
        series = [
            _series("A", ["g1"], ["c"]),
            _series("B", ["g2"], ["c"]),
            _series("C", [], ["c"]),
        ]
        script = render_series_genres(series)

        assert script.endswith(f"({SERIES_LOOKUP.format('B')}, {GENRE_LOOKUP.format('g2')});\n")
        assert script.count(",\n") == 1

    def test_join_rows_follow_series_order(self):
        series = [_series("B", ["g"], ["c"]), _series("A", ["g"], ["c"])]
        rows = render_series_countries(series).split("\n")[1:-1]

        assert SERIES_LOOKUP.format("B") in rows[0]
        assert SERIES_LOOKUP.format("A") in rows[1]

    @pytest.mark.parametrize(
        "render",
        [render_series, render_series_countries, render_series_genres]
    )
    def test_empty_series(self, render):
        with pytest.raises(EmptyInputError) as exc_info:
            render([])

        assert exc_info.value.context["function"] == render.__name__

    def test_series_without_any_genres(self):
        with pytest.raises(EmptyInputError):
            render_series_genres([_series("A", [], ["c"])])


class TestSQLEmitter:
    """Test writing scripts to disk"""

    def test_writes_numbered_files(self, tmp_path, sample_series):
        emitter = SQLEmitter(tmp_path)

        paths = [
            emitter.emit_countries(["USA"]),
            emitter.emit_genres(["Drama", "Crime"]),
            emitter.emit_series([sample_series]),
            emitter.emit_series_countries([sample_series]),
            emitter.emit_series_genres([sample_series]),
        ]

        assert [p.name for p in paths] == [
            "1_insert_into_countries_tb.sql",
            "2_insert_into_genres_tb.sql",
            "3_insert_into_tvseries_tb.sql",
            "4_insert_into_tvcountry_tb.sql",
            "5_insert_into_tvgenre_tb.sql",
        ]
        assert all(p.exists() for p in paths)

    def test_content_is_utf8_with_lf(self, tmp_path):
        path = SQLEmitter(tmp_path).emit_countries(["США", "UK"])

        assert path.read_bytes() == (
            "INSERT INTO CountriesTb (CountryName) VALUES\n('США'),\n('UK');\n"
        ).encode("utf-8")

    def test_overwrites_existing_file(self, tmp_path):
        emitter = SQLEmitter(tmp_path)
        emitter.path_for(Artifact.GENRES).write_text("stale", encoding="utf-8")

        path = emitter.emit_genres(["Drama"])

        assert "stale" not in path.read_text(encoding="utf-8")

    def test_empty_input_writes_nothing(self, tmp_path):
        emitter = SQLEmitter(tmp_path)

        with pytest.raises(EmptyInputError):
            emitter.emit_countries([])

        assert not emitter.path_for(Artifact.COUNTRIES).exists()

    def test_creates_output_directory(self, tmp_path):
        path = SQLEmitter(tmp_path / "nested" / "dir").emit_genres(["Drama"])

        assert path.exists()

    def test_unwritable_target(self, tmp_path):
        emitter = SQLEmitter(tmp_path)
        emitter.path_for(Artifact.COUNTRIES).mkdir()

        with pytest.raises(OutputWriteError) as exc_info:
            emitter.emit_countries(["USA"])

        assert exc_info.value.context["file_path"].endswith("1_insert_into_countries_tb.sql")
