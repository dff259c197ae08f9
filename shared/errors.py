"""
Unified Error Handling System for the seeding pipeline.

This module provides the exception taxonomy raised by the document store
client and the seeders, error categories, HTTP status code mapping, and
centralized error logging with structured context.

Usage:
    from shared.errors import ErrorCategory, get_error_logger

    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.EXTERNAL_API_ERROR,
        context={"collection": "AGENT", "entity_index": 3},
    )
"""

import logging
import uuid
from datetime import datetime, UTC
from enum import Enum
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class SeedError(Exception):
    """Base class for every error raised by the seeding pipeline."""


class ConfigurationError(SeedError):
    """
    The remote client cannot be used (missing credentials or identifiers,
    unreachable endpoint). Fatal: the run stops before any stage.
    """


class InvalidRangeError(SeedError, ValueError):
    """Random selection bounds are outside the size of the source sequence."""


class RemoteOperationError(SeedError):
    """
    A list/create/delete call against the document store failed.

    Recovered locally by the seeders: logged and skipped, never retried.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.status_code}] {self.message}"
        return self.message


# =============================================================================
# Categories and structured logging
# =============================================================================

class ErrorCategory(str, Enum):
    """Categories of errors for proper handling and logging.

    - VALIDATION_ERROR: Invalid input (bad selection bounds, rejected payload)
    - NOT_FOUND_ERROR: Database or collection does not exist
    - PERMISSION_ERROR: API key lacks the required scope
    - RATE_LIMIT_ERROR: Remote quota exceeded
    - EXTERNAL_API_ERROR: Document store failures
    - CONFIGURATION_ERROR: Missing or invalid configuration
    - UNEXPECTED_ERROR: Unknown/unhandled exceptions
    """
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND_ERROR = "not_found_error"
    PERMISSION_ERROR = "permission_error"
    RATE_LIMIT_ERROR = "rate_limit_error"

    EXTERNAL_API_ERROR = "external_api_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNEXPECTED_ERROR = "unexpected_error"


class ErrorLogger:
    """Centralized error logging with structured context.

    Every logged error gets a unique reference so a failed record in the
    run report can be matched with its log line.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ErrorLogger")

    def _generate_log_ref(self) -> str:
        """Generate unique reference ID for error correlation."""
        return f"err_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_error(
        self,
        error: Exception,
        category: ErrorCategory,
        *,
        collection: str | None = None,
        entity_index: int | None = None,
        context: dict[str, Any] | None = None,
        exc_info: bool = False,
    ) -> str:
        """Log error with full structured context.

        Args:
            error: The exception that occurred
            category: Error category for classification
            collection: Optional collection key the operation targeted
            entity_index: Optional 1-based index of the record being built
            context: Additional context data
            exc_info: Whether to include stack trace

        Returns:
            log_ref: Unique reference ID for this error instance
        """
        log_ref = self._generate_log_ref()

        log_data = {
            "log_ref": log_ref,
            "error_category": category.value,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "collection": collection,
            "entity_index": entity_index,
            "context": context or {},
        }

        if category in [
            ErrorCategory.EXTERNAL_API_ERROR,
            ErrorCategory.RATE_LIMIT_ERROR,
            ErrorCategory.CONFIGURATION_ERROR,
            ErrorCategory.UNEXPECTED_ERROR,
        ]:
            self.logger.error(
                f"[{log_ref}] {category.value}: {error}",
                extra=log_data,
                exc_info=exc_info,
            )
        else:
            self.logger.warning(
                f"[{log_ref}] {category.value}: {error}",
                extra=log_data,
                exc_info=exc_info,
            )

        return log_ref


# Global error logger instance
_error_logger = ErrorLogger()


def get_error_logger() -> ErrorLogger:
    """Get the global error logger instance."""
    return _error_logger


# HTTP status code to ErrorCategory mapping
STATUS_TO_CATEGORY: dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION_ERROR,
    401: ErrorCategory.PERMISSION_ERROR,
    403: ErrorCategory.PERMISSION_ERROR,
    404: ErrorCategory.NOT_FOUND_ERROR,
    409: ErrorCategory.VALIDATION_ERROR,
    429: ErrorCategory.RATE_LIMIT_ERROR,
    500: ErrorCategory.EXTERNAL_API_ERROR,
    502: ErrorCategory.EXTERNAL_API_ERROR,
    503: ErrorCategory.EXTERNAL_API_ERROR,
    504: ErrorCategory.EXTERNAL_API_ERROR,
}


def map_status_to_category(status_code: int | None) -> ErrorCategory:
    """Map HTTP status code to ErrorCategory.

    Args:
        status_code: HTTP status code, or None for transport failures

    Returns:
        Corresponding ErrorCategory
    """
    if status_code is None:
        return ErrorCategory.EXTERNAL_API_ERROR
    return STATUS_TO_CATEGORY.get(status_code, ErrorCategory.EXTERNAL_API_ERROR)


def categorize(error: Exception) -> ErrorCategory:
    """Pick the logging category for an exception raised while seeding."""
    if isinstance(error, RemoteOperationError):
        return map_status_to_category(error.status_code)
    if isinstance(error, InvalidRangeError):
        return ErrorCategory.VALIDATION_ERROR
    if isinstance(error, ConfigurationError):
        return ErrorCategory.CONFIGURATION_ERROR
    return ErrorCategory.UNEXPECTED_ERROR
