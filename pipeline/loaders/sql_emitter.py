"""
Render the extracted fixtures as INSERT scripts and write them to disk.

Every script has the same shape:

    INSERT INTO <Table> (<columns>) VALUES
    (<row-1>),
    ...
    (<row-N>);

Join tables reference SeriesId, CountryId and GenreId through subqueries on
the name columns, so no surrogate keys are tracked in memory.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union
import logging

from core.exceptions import EmptyInputError, OutputWriteError
from models.base import Artifact
from models.catalog import Country, Genre, TvSeries, TvCountry, TvGenre, column_name
from schemas.series import Series

logger = logging.getLogger(__name__)

ROW_SEPARATOR = ",\n"
TERMINATOR = ";\n"


def quote(value: str) -> str:
    """Single-quoted SQL literal. Embedded quotes are not escaped."""
    return f"'{value}'"


def render_insert(
    table: str,
    columns: Sequence[str],
    rows: Iterable[str],
    function: str = "render_insert"
) -> str:
    """
    Join pre-rendered ``(...)`` value tuples into one INSERT statement.

    Raises:
        EmptyInputError: no rows
    """
    rows = list(rows)
    if not rows:
        raise EmptyInputError(
            f"empty parameter in function {function}()",
            context={"function": function, "table": table}
        )

    header = f"INSERT INTO {table} ({', '.join(columns)}) VALUES\n"
    return header + ROW_SEPARATOR.join(rows) + TERMINATOR


def _require(collection, function: str) -> None:
    if not collection:
        raise EmptyInputError(
            f"empty parameter in function {function}()",
            context={"function": function}
        )


def _lookup(model, id_attribute: str, name_attribute: str, value: str) -> str:
    """``(SELECT <Id> FROM <Table> WHERE <Name> = '<value>')``"""
    return (
        f"(SELECT {column_name(model, id_attribute)} FROM {model.__tablename__} "
        f"WHERE {column_name(model, name_attribute)} = {quote(value)})"
    )


def _series_lookup(series: Series) -> str:
    return _lookup(TvSeries, "series_id", "series_name", series.localized_name)


def render_countries(countries: Optional[List[str]]) -> str:
    _require(countries, "render_countries")
    return render_insert(
        Country.__tablename__,
        [column_name(Country, "country_name")],
        (f"({quote(name)})" for name in countries),
        function="render_countries"
    )


def render_genres(genres: Optional[List[str]]) -> str:
    _require(genres, "render_genres")
    return render_insert(
        Genre.__tablename__,
        [column_name(Genre, "genre_name")],
        (f"({quote(name)})" for name in genres),
        function="render_genres"
    )


def render_series(series: Optional[List[Series]]) -> str:
    """One row per series: localized name, year, seasons and airing as 0/1."""
    _require(series, "render_series")
    columns = [
        column_name(TvSeries, attribute)
        for attribute in ("series_name", "release_year", "seasons_amount", "status")
    ]
    rows = (
        f"({quote(s.localized_name)}, {s.release_year}, {s.season_count}, {int(s.airing)})"
        for s in series
    )
    return render_insert(TvSeries.__tablename__, columns, rows, function="render_series")


def render_series_countries(series: Optional[List[Series]]) -> str:
    """One row per (series, country) pair, flattened across all series."""
    _require(series, "render_series_countries")
    rows = (
        f"({_series_lookup(s)}, {_lookup(Country, 'country_id', 'country_name', country)})"
        for s in series
        for country in s.countries
    )
    return render_insert(
        TvCountry.__tablename__,
        [column_name(TvCountry, "series_id"), column_name(TvCountry, "country_id")],
        rows,
        function="render_series_countries"
    )


def render_series_genres(series: Optional[List[Series]]) -> str:
    """One row per (series, genre) pair, flattened across all series."""
    _require(series, "render_series_genres")
    rows = (
        f"({_series_lookup(s)}, {_lookup(Genre, 'genre_id', 'genre_name', genre)})"
        for s in series
        for genre in s.genres
    )
    return render_insert(
        TvGenre.__tablename__,
        [column_name(TvGenre, "series_id"), column_name(TvGenre, "genre_id")],
        rows,
        function="render_series_genres"
    )


class SQLEmitter:
    """
    Write the numbered INSERT scripts into an output directory.

    Ensures:
    - Nothing is written when rendering fails
    - Existing scripts are overwritten
    - Line breaks are written as ``\\n`` on every platform
    """

    def __init__(self, output_dir: Union[str, Path] = ".", encoding: str = "utf-8"):
        self.output_dir = Path(output_dir)
        self.encoding = encoding

    def path_for(self, artifact: Artifact) -> Path:
        return self.output_dir / artifact.filename

    def write(self, artifact: Artifact, script: str) -> Path:
        path = self.path_for(artifact)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=self.encoding, newline="") as handle:
                handle.write(script)
        except (OSError, UnicodeEncodeError) as e:
            raise OutputWriteError(
                f"Cannot write {path}",
                context={"file_path": str(path)},
                original_exception=e
            )

        logger.info(f"Wrote {path} ({len(script)} characters)")
        return path

    def emit_countries(self, countries: Optional[List[str]]) -> Path:
        return self.write(Artifact.COUNTRIES, render_countries(countries))

    def emit_genres(self, genres: Optional[List[str]]) -> Path:
        return self.write(Artifact.GENRES, render_genres(genres))

    def emit_series(self, series: Optional[List[Series]]) -> Path:
        return self.write(Artifact.TVSERIES, render_series(series))

    def emit_series_countries(self, series: Optional[List[Series]]) -> Path:
        return self.write(Artifact.TVCOUNTRY, render_series_countries(series))

    def emit_series_genres(self, series: Optional[List[Series]]) -> Path:
        return self.write(Artifact.TVGENRE, render_series_genres(series))
