"""
Concrete fixture sources: flat lookup lists and the series catalogue
"""

from pathlib import Path
from typing import List, Optional, Union

from core.collation import CollationContext
from pipeline.base import XMLSource
from pipeline.extractors.xml_extractor import extract_flat_list, extract_series
from schemas.series import Series


class FlatListSource(XMLSource):
    """
    Extract a list of names from a ``<root><item>TEXT</item>...</root>`` file.
    """

    def __init__(
        self,
        source_name: str,
        file_path: Union[str, Path],
        root_tag: str,
        item_tag: str,
        context: Optional[CollationContext] = None
    ):
        super().__init__(source_name=source_name, file_path=file_path, context=context)
        self.root_tag = root_tag
        self.item_tag = item_tag

    def parse(self, text: str) -> List[str]:
        return extract_flat_list(text, self.root_tag, self.item_tag, source=str(self.file_path))


class SeriesSource(XMLSource):
    """Extract Series records from a ``<tvseries>`` file."""

    def __init__(
        self,
        file_path: Union[str, Path],
        context: Optional[CollationContext] = None
    ):
        super().__init__(source_name="tvseries", file_path=file_path, context=context)

    def parse(self, text: str) -> List[Series]:
        return extract_series(text, context=self.context, source=str(self.file_path))


def countries_source(file_path: Union[str, Path], context: Optional[CollationContext] = None) -> FlatListSource:
    return FlatListSource("countries", file_path, root_tag="countries", item_tag="country", context=context)


def genres_source(file_path: Union[str, Path], context: Optional[CollationContext] = None) -> FlatListSource:
    return FlatListSource("genres", file_path, root_tag="genres", item_tag="genre", context=context)
