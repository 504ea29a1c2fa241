"""
Core utilities and configuration for the fixture SQL generator.

Modules:
    config: Settings loaded from the environment / .env file
    collation: Encoding and culture-aware comparison context
    exceptions: Exception hierarchy with structured context
    logging: Logging configuration

Usage:
    from core.config import settings
    from core.collation import CollationContext
    from core.exceptions import ParseError, EmptyInputError
    from core.logging import setup_logging
"""

__all__ = [
    "settings",
    "setup_logging",
    "CollationContext",
    # Exceptions
    "GenerationError",
    "ExtractionError",
    "UnreadableFileError",
    "ParseError",
    "TransformationError",
    "ValidationError",
    "DuplicateBusinessKeyError",
    "EmitError",
    "EmptyInputError",
    "OutputWriteError",
    "ConfigurationError",
]

from core.config import settings
from core.collation import CollationContext
from core.exceptions import (
    GenerationError,
    ExtractionError,
    UnreadableFileError,
    ParseError,
    TransformationError,
    ValidationError,
    DuplicateBusinessKeyError,
    EmitError,
    EmptyInputError,
    OutputWriteError,
    ConfigurationError,
)
from core.logging import setup_logging
