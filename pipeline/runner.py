# ============================================================================
# File: pipeline/runner.py
# Description: Orchestrates extract, shuffle and emit for the five scripts
# ============================================================================
"""
Migration Runner - turns the three XML fixtures into five ordered SQL scripts.

Steps, strictly sequential:
1. countries.xml -> 1_insert_into_countries_tb.sql
2. genres.xml    -> 2_insert_into_genres_tb.sql
3. tvseries.xml  -> validate business keys -> shuffle once ->
   3_insert_into_tvseries_tb.sql, 4_insert_into_tvcountry_tb.sql,
   5_insert_into_tvgenre_tb.sql (all from the same shuffled list)

Any error aborts the remaining steps. A missing input file is the only
error that can be tolerated, and only when ``skip_missing_inputs`` is set.
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from core.config import Settings
from core.exceptions import GenerationError, UnreadableFileError
from models.base import Artifact
from pipeline.base import XMLSource
from pipeline.extractors.sources import SeriesSource, countries_source, genres_source
from pipeline.loaders.sql_emitter import SQLEmitter
from pipeline.transformers.shuffler import shuffle_series
from pipeline.transformers.validation import ensure_unique_localized_names

logger = logging.getLogger(__name__)


class MigrationRunner:
    """
    Fixture-to-SQL orchestrator

    Responsibilities:
    - Run extract -> (shuffle) -> emit for every script in execution order
    - Apply the missing-input policy
    - Report written files, skipped scripts and row counts
    """

    def __init__(
        self,
        countries: XMLSource,
        genres: XMLSource,
        series: XMLSource,
        emitter: SQLEmitter,
        seed: Optional[int] = None,
        skip_missing_inputs: bool = False,
        shuffle: Callable = shuffle_series
    ):
        self.countries = countries
        self.genres = genres
        self.series = series
        self.emitter = emitter
        self.seed = seed
        self.skip_missing_inputs = skip_missing_inputs
        self.shuffle = shuffle

    @classmethod
    def from_settings(cls, settings: Settings) -> "MigrationRunner":
        context = settings.collation_context()
        return cls(
            countries=countries_source(settings.countries_path, context=context),
            genres=genres_source(settings.genres_path, context=context),
            series=SeriesSource(settings.tvseries_path, context=context),
            emitter=SQLEmitter(settings.OUTPUT_DIR, encoding=settings.OUTPUT_ENCODING),
            seed=settings.SHUFFLE_SEED,
            skip_missing_inputs=settings.SKIP_MISSING_INPUTS,
        )

    def _load(self, source: XMLSource, artifacts: List[Artifact], skipped: List[str]) -> Optional[list]:
        """Load a source, or return None when it is missing and may be skipped."""
        try:
            return source.load()
        except UnreadableFileError as e:
            if not self.skip_missing_inputs:
                raise
            logger.warning(
                f"Skipping {', '.join(a.filename for a in artifacts)}: {e.message}"
            )
            skipped.extend(a.filename for a in artifacts)
            return None

    def run(self) -> Dict[str, Any]:
        """
        Generate all scripts.

        Returns:
            Dictionary with run statistics:
            - status: "success" or "partial_success" (some scripts skipped)
            - files: Written script paths, in execution order
            - skipped: Script names whose input was missing
            - rows: Data rows per script name

        Raises:
            GenerationError: any failure; remaining steps are not run
        """
        files = []
        skipped: List[str] = []
        rows: Dict[str, int] = {}

        try:
            # --------------------------------------------------
            # STEP 1-2: LOOKUP TABLES (document order)
            # --------------------------------------------------
            countries = self._load(self.countries, [Artifact.COUNTRIES], skipped)
            if countries is not None:
                files.append(self.emitter.emit_countries(countries))
                rows[Artifact.COUNTRIES.filename] = len(countries)

            genres = self._load(self.genres, [Artifact.GENRES], skipped)
            if genres is not None:
                files.append(self.emitter.emit_genres(genres))
                rows[Artifact.GENRES.filename] = len(genres)

            # --------------------------------------------------
            # STEP 3-5: SERIES AND JOIN TABLES (one shuffle)
            # --------------------------------------------------
            series = self._load(
                self.series,
                [Artifact.TVSERIES, Artifact.TVCOUNTRY, Artifact.TVGENRE],
                skipped
            )
            if series is not None:
                ensure_unique_localized_names(series)
                series = self.shuffle(series, seed=self.seed)

                files.append(self.emitter.emit_series(series))
                rows[Artifact.TVSERIES.filename] = len(series)

                files.append(self.emitter.emit_series_countries(series))
                rows[Artifact.TVCOUNTRY.filename] = sum(len(s.countries) for s in series)

                files.append(self.emitter.emit_series_genres(series))
                rows[Artifact.TVGENRE.filename] = sum(len(s.genres) for s in series)

        except GenerationError as e:
            logger.error(
                f"Generation failed: {e.message}",
                extra={"error_context": e.to_dict()}
            )
            raise

        except Exception as e:
            logger.exception("Unexpected error in generation pipeline")
            raise GenerationError(
                "Unexpected error in generation pipeline",
                context={"files_written": len(files)},
                original_exception=e
            )

        result = {
            "status": "success" if not skipped else "partial_success",
            "files": files,
            "skipped": skipped,
            "rows": rows,
        }

        logger.info(
            f"Generation completed: {result['status']} - "
            f"Written: {len(files)}, Skipped: {len(skipped)}"
        )
        return result
