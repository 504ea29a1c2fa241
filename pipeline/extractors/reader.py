"""
Whole-file text ingest for the XML fixtures
"""

from pathlib import Path
from typing import Union
import codecs
import logging

from core.exceptions import UnreadableFileError

logger = logging.getLogger(__name__)


def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a file fully into memory as Unicode text.

    A leading UTF-8 byte order mark is dropped when reading UTF-8.

    Raises:
        UnreadableFileError: file missing, inaccessible or not decodable
    """
    path = Path(path)

    try:
        if codecs.lookup(encoding).name == "utf-8":
            encoding = "utf-8-sig"
    except LookupError as e:
        raise UnreadableFileError(
            f"Unknown encoding: {encoding}",
            context={"file_path": str(path), "encoding": encoding},
            original_exception=e
        )

    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            text = handle.read()
    except FileNotFoundError as e:
        raise UnreadableFileError(
            f"File not found: {path}",
            context={"file_path": str(path)},
            original_exception=e
        )
    except UnicodeDecodeError as e:
        raise UnreadableFileError(
            f"File is not valid {encoding} text: {path}",
            context={"file_path": str(path), "encoding": encoding},
            original_exception=e
        )
    except OSError as e:
        raise UnreadableFileError(
            f"Cannot read file: {path}",
            context={"file_path": str(path)},
            original_exception=e
        )

    logger.debug(f"Read {len(text)} characters from {path}")
    return text
