"""
Fixture-to-SQL pipeline components.

Modules:
    base: Abstract XMLSource (read + extract)
    runner: MigrationRunner that runs the five steps in order

Subpackages:
    extractors: Text ingest, XML extraction and the concrete sources
    transformers: Business-key validation and the series shuffler
    loaders: SQL script rendering and writing

Architecture:
    Ingest -> Extract -> (Shuffle series only) -> Emit, repeated for
    countries, genres, series, series-country and series-genre, each into
    its own numbered script so that downstream execution order is fixed.

Usage:
    from core.config import settings
    from pipeline.runner import MigrationRunner

    result = MigrationRunner.from_settings(settings).run()
    print(result["files"])
"""

__all__ = [
    "XMLSource",
    "MigrationRunner",
    "FlatListSource",
    "SeriesSource",
    "SQLEmitter",
    "shuffle_series",
]

from pipeline.base import XMLSource
from pipeline.extractors.sources import FlatListSource, SeriesSource
from pipeline.loaders.sql_emitter import SQLEmitter
from pipeline.transformers.shuffler import shuffle_series
from pipeline.runner import MigrationRunner
