import os
from typing import Any, Dict, Tuple

DEFAULT_API_BASE = "https://api.harvardartmuseums.org"
DEFAULT_TIMEOUT = 15.0
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Vocabulary endpoints used to populate the search form selects, with their sort key.
VOCABULARY_KINDS: Dict[str, str] = {
    "classification": "name",
    "century": "temporalorder",
}
VOCABULARY_SIZE = 100

APP_TITLE = "The Art Collector"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_api_config() -> Dict[str, Any]:
    """
    API config is read from environment variables.
    - ART_API_BASE: collection API base URL
    - ART_API_KEY: API key (must be set in env, never hardcode)
    """
    return {
        "api_base": (os.getenv("ART_API_BASE", "").strip() or DEFAULT_API_BASE).rstrip("/"),
        "api_key": os.getenv("ART_API_KEY", "").strip() or None,
    }


def get_request_timeout() -> float:
    """
    Get the per-request HTTP timeout in seconds.
    - ART_API_TIMEOUT: seconds per request (default 15)
    """
    try:
        timeout = float(os.getenv("ART_API_TIMEOUT", str(DEFAULT_TIMEOUT)))
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    return max(1.0, timeout)


def get_page_size() -> int:
    """
    Get the number of records requested per page.
    - ART_PAGE_SIZE: records per page, clamped to 1..MAX_PAGE_SIZE (default 10)
    """
    try:
        size = int(os.getenv("ART_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
    except ValueError:
        size = DEFAULT_PAGE_SIZE
    return min(max(1, size), MAX_PAGE_SIZE)


def get_log_level() -> str:
    level = os.getenv("ART_BROWSER_LOG_LEVEL", "INFO").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


def get_server_defaults() -> Tuple[str, int]:
    return "127.0.0.1", 8080
