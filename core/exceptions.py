"""
Custom exceptions for the SQL generation pipeline with structured error context.

Each exception carries a context dictionary (file path, element index,
function name...) so that a single line printed at the top level is enough
to locate the failure.

Exception Hierarchy:
    GenerationError (base)
    ├── ExtractionError
    │   ├── UnreadableFileError
    │   └── ParseError
    ├── TransformationError
    │   └── ValidationError
    │       └── DuplicateBusinessKeyError
    ├── EmitError
    │   ├── EmptyInputError
    │   └── OutputWriteError
    └── ConfigurationError
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class GenerationError(Exception):
    """
    Base exception for all generator errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (file path, element, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context on a single line."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            cause = str(self.original_exception).replace("\n", " ")
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {cause}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Extraction Errors
# ============================================================================

class ExtractionError(GenerationError):
    """Base exception for reading and parsing the XML fixtures."""
    pass


class UnreadableFileError(ExtractionError):
    """
    Raised when an input file is missing, inaccessible or cannot be decoded.

    Context should include:
        - file_path: Path to the input file
    """

    @property
    def file_path(self) -> Optional[str]:
        return self.context.get("file_path")


class ParseError(ExtractionError):
    """
    Raised when the text is not well-formed XML or an expected element
    path is absent.

    Context should include:
        - file_path: Path to the XML file (or "<text>")
        - element_index: Index of the offending record (if applicable)
        - element: Element path that was expected
    """

    @property
    def file_path(self) -> Optional[str]:
        return self.context.get("file_path")


# ============================================================================
# Transformation Errors
# ============================================================================

class TransformationError(GenerationError):
    """Base exception for transformations between extract and emit."""
    pass


class ValidationError(TransformationError):
    """Raised when extracted records violate an invariant of the target schema."""
    pass


class DuplicateBusinessKeyError(ValidationError):
    """
    Raised when several series share a localized name, which would make the
    join-table subqueries ambiguous.

    Context should include:
        - duplicates: Sorted list of the duplicated names
    """
    pass


# ============================================================================
# Emit Errors
# ============================================================================

class EmitError(GenerationError):
    """Base exception for SQL script generation failures."""
    pass


class EmptyInputError(EmitError):
    """
    Raised when a script would contain no data rows.

    Context should include:
        - function: Name of the rendering function
    """
    pass


class OutputWriteError(EmitError):
    """
    Raised when a generated script cannot be written.

    Context should include:
        - file_path: Target path
    """
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(GenerationError):
    """Raised when a setting cannot be honoured (e.g. unknown collation locale)."""
    pass
