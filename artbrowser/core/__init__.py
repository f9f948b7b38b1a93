"""Core module: configuration, error handling, and logging."""
from .config import (
    APP_TITLE,
    DEFAULT_API_BASE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    VOCABULARY_KINDS,
    get_api_config,
    get_log_level,
    get_page_size,
    get_request_timeout,
)
from .error import (
    ArtBrowserError,
    DecodeError,
    ErrorType,
    InvalidQueryError,
    NetworkError,
    classify_error,
    log_error,
)
from .logger import get_logger, setup_logger

__all__ = [
    # Config
    "APP_TITLE",
    "DEFAULT_API_BASE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "VOCABULARY_KINDS",
    "get_api_config",
    "get_log_level",
    "get_page_size",
    "get_request_timeout",
    # Error handling
    "ArtBrowserError",
    "DecodeError",
    "ErrorType",
    "InvalidQueryError",
    "NetworkError",
    "classify_error",
    "log_error",
    # Logging
    "setup_logger",
    "get_logger",
]
