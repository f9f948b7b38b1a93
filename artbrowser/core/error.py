"""
Error management module.
"""
import logging
import traceback
from enum import Enum
from typing import Any, Dict, Optional

from .logger import get_logger


class ErrorType(Enum):
    """Error classification types."""
    NETWORK_ERROR = "network_error"
    DECODE_ERROR = "decode_error"
    INVALID_PARAMS = "invalid_params"
    UNKNOWN = "unknown"


class ArtBrowserError(Exception):
    """Base exception for artbrowser errors."""

    default_type = ErrorType.UNKNOWN

    def __init__(self, message: str, error_type: Optional[ErrorType] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type or self.default_type
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error_type": self.error_type.value,
            "message": str(self),
            "details": self.details,
        }


class NetworkError(ArtBrowserError):
    """The collection API was unreachable or answered with a non-success status."""

    default_type = ErrorType.NETWORK_ERROR


class DecodeError(ArtBrowserError):
    """The response could not be interpreted as a result envelope."""

    default_type = ErrorType.DECODE_ERROR


class InvalidQueryError(ArtBrowserError):
    default_type = ErrorType.INVALID_PARAMS


def classify_error(error: Exception) -> ErrorType:
    """
    Classify error type from exception.

    Args:
        error: Exception instance

    Returns:
        ErrorType enum value
    """
    if isinstance(error, ArtBrowserError):
        return error.error_type

    error_str = str(error).lower()
    error_type = type(error).__name__.lower()

    if any(keyword in error_str or keyword in error_type for keyword in ["json", "decode"]):
        return ErrorType.DECODE_ERROR

    if any(keyword in error_str or keyword in error_type for keyword in ["network", "connection", "timeout", "http"]):
        return ErrorType.NETWORK_ERROR

    if any(keyword in error_str for keyword in ["invalid", "validation", "parameter"]):
        return ErrorType.INVALID_PARAMS

    return ErrorType.UNKNOWN


def log_error(
    error: Exception,
    logger: Optional[logging.Logger] = None,
    context: Optional[Dict[str, Any]] = None,
    level: str = "ERROR",
) -> Dict[str, Any]:
    """
    Log error with context and return error info.

    Args:
        error: Exception instance
        logger: Logger instance (if None, uses default)
        context: Additional context information
        level: Logging level

    Returns:
        Dictionary with error information
    """
    if logger is None:
        logger = get_logger()

    error_type = classify_error(error)
    error_info = {
        "error_type": error_type.value,
        "error_class": type(error).__name__,
        "message": str(error),
        "context": context or {},
    }

    log_method = getattr(logger, level.lower(), logger.error)
    log_method(
        f"[{error_type.value}] {type(error).__name__}: {error}",
        extra={"error_info": error_info, "context": context},
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Traceback:\n{traceback.format_exc()}")

    return error_info
