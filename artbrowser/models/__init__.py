"""Models module: data schemas and types."""
from .schema import (
    PageInfo,
    Record,
    ResultEnvelope,
    SearchQuery,
    build_envelope,
    empty_envelope,
    next_token,
    normalize_info,
    prev_token,
)

__all__ = [
    "PageInfo",
    "Record",
    "ResultEnvelope",
    "SearchQuery",
    "build_envelope",
    "empty_envelope",
    "next_token",
    "normalize_info",
    "prev_token",
]
