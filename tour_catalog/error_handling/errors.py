"""
Error types and diagnostics for the tour catalog.

Load failures are reported through CatalogLoadError and logged with their
diagnostic context; they are never retried.
"""

import logging
from datetime import datetime
from typing import Any, Dict


# Configure logging
logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for tour catalog errors."""


class CatalogLoadError(CatalogError):
    """
    Raised when the listing document cannot be fetched or parsed.

    Attributes:
        source: Path or URL the document was loaded from
        reason: Short description of what went wrong
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Unable to load tours from {source}: {reason}")


def build_error_context(source: str, error: BaseException) -> Dict[str, Any]:
    """
    Collect diagnostic data for a load failure.

    Args:
        source: Path or URL that failed to load
        error: The exception that occurred

    Returns:
        Dictionary with timestamp, source and error details
    """
    cause = error.__cause__
    return {
        'timestamp': datetime.now().isoformat(),
        'source': source,
        'error_type': type(error).__name__,
        'error_message': str(error),
        'cause': f"{type(cause).__name__}: {cause}" if cause else 'None',
    }


def log_load_failure(source: str, error: BaseException) -> None:
    """
    Log a load failure with timestamp, context, and diagnostic data.

    Args:
        source: Path or URL that failed to load
        error: The exception that occurred
    """
    context = build_error_context(source, error)

    logger.error(
        f"Error loading tours: {source} | "
        f"Error: {type(error).__name__}: {str(error)}"
    )
    logger.debug(f"Full error context: {context}")
