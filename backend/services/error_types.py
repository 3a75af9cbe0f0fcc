"""
Custom Error Types for INP Analysis

Provides categorized exceptions to distinguish between critical errors
that abort a parse or a baseline analysis and non-critical conditions that
are logged while the remaining work carries on.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class InpAnalysisError(Exception):
    """Base exception for all INP parsing and analysis errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CriticalError(InpAnalysisError):
    """
    Critical errors that should stop processing.

    Examples:
    - Block delimiter with no name line
    - Record that never reaches its terminator
    - Reference table row missing for a project input
    """
    pass


class NonCriticalError(InpAnalysisError):
    """
    Non-critical errors that are logged but don't stop processing.

    Examples:
    - A block an extractor looks for is absent
    - Unknown HVAC system number passed to the efficiency engine
    """
    pass


class StructuralParseError(CriticalError):
    """
    The segmenter or record assembler cannot find an expected delimiter,
    name line or terminator. Aborts the whole-file parse.
    """

    def __init__(self, message: str, line_number: Optional[int] = None,
                 block_name: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if line_number is not None:
            details['line_number'] = line_number
        if block_name is not None:
            details['block_name'] = block_name
        super().__init__(message, details)
        self.line_number = line_number
        self.block_name = block_name


class IncompleteRecordError(StructuralParseError):
    """A block body ended while a record was still open."""
    pass


class UpstreamDependencyError(CriticalError):
    """
    A reference table has no row for the requested key.

    Examples:
    - Zip code not in the zip table
    - No rate row for the state
    - No envelope row for the climate zone number
    """

    def __init__(self, table: str, key: Any, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details.update({'table': table, 'key': key})
        super().__init__(f"No {table} entry for {key!r}", details)
        self.table = table
        self.key = key


class ExtractionWarning(NonCriticalError):
    """
    One extractor could not populate its fields. The result keeps defaults
    for those fields and the other extractors still run.
    """

    def __init__(self, extractor: str, message: str, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details['extractor'] = extractor
        super().__init__(message, details)
        self.extractor = extractor


class UnsupportedConfiguration(NonCriticalError):
    """
    Efficiency engine was given a system number it has no rule for.
    Reported through logging; the engine returns an empty result.
    """

    def __init__(self, hvac_id: Any, engine: str):
        super().__init__(f"Unsupported HVAC system {hvac_id!r} for {engine} efficiency",
                         {'hvac_id': hvac_id, 'engine': engine})
        self.hvac_id = hvac_id
        self.engine = engine


def categorize_exception(e: Exception) -> InpAnalysisError:
    """
    Categorize a generic exception into appropriate error type.

    Args:
        e: Exception to categorize

    Returns:
        Categorized InpAnalysisError
    """
    if isinstance(e, InpAnalysisError):
        return e

    error_message = str(e)
    error_type = type(e).__name__

    # File-related errors
    if isinstance(e, OSError):
        return CriticalError(f"File access error: {error_message}")

    if error_type == 'UnicodeDecodeError':
        return CriticalError(f"File is not valid text: {error_message}")

    # Default to non-critical for unknown errors
    return NonCriticalError(f"Unexpected error: {error_message}", {'original_type': error_type})


def log_error_with_context(error: InpAnalysisError, context: Dict[str, Any]):
    """
    Log error with additional context information.

    Args:
        error: Error to log
        context: Additional context (file name, stage, extractor, etc.)
    """
    log_data = {
        'error_type': type(error).__name__,
        'error_message': error.message,
        'details': error.details,
        'context': context
    }

    if isinstance(error, CriticalError):
        logger.error(f"CRITICAL ERROR: {error.message}", extra=log_data)
    else:
        logger.warning(f"Non-critical error: {error.message}", extra=log_data)
