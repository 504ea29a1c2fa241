"""
Abstract base class for the XML fixture sources
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Union
import logging

from core.collation import CollationContext
from pipeline.extractors.reader import read_text

logger = logging.getLogger(__name__)


class XMLSource(ABC):
    """
    Abstract base class for all fixture files.

    Responsibilities:
    - Reading the file with the configured encoding
    - Delegating the decoded text to an extractor
    - Logging what was extracted
    """

    def __init__(
        self,
        source_name: str,
        file_path: Union[str, Path],
        context: Optional[CollationContext] = None
    ):
        self.source_name = source_name
        self.file_path = Path(file_path)
        self.context = context or CollationContext()

    @abstractmethod
    def parse(self, text: str) -> List[Any]:
        """
        Extract records from the decoded document.

        Args:
            text: Full file contents

        Returns:
            Records in document order
        """
        pass

    def read(self) -> str:
        return read_text(self.file_path, encoding=self.context.encoding)

    def load(self) -> List[Any]:
        """Read and parse the file. Errors propagate unchanged."""
        logger.info(f"Reading {self.source_name} from {self.file_path}")

        records = self.parse(self.read())

        logger.info(f"Extracted {len(records)} {self.source_name} records")
        return records
