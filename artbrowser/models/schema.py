from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TypedDict

from ..core.error import DecodeError, InvalidQueryError

Record = Dict[str, Any]


class PageInfo(TypedDict, total=False):
    totalrecordsperquery: int
    totalrecords: int
    pages: int
    page: int
    next: str
    prev: str


class ResultEnvelope(TypedDict):
    info: PageInfo
    records: List[Record]


@dataclass(frozen=True)
class SearchQuery:
    """One facet lookup, e.g. ``SearchQuery("Culture", "Dutch")``."""

    field: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field.strip():
            raise InvalidQueryError("search field must be a non-empty string", details={"field": self.field})
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidQueryError("search value must be a non-empty string", details={"value": self.value})

    @property
    def param(self) -> str:
        """Request parameter name for this facet."""
        return self.field.strip().lower()


_INT_INFO_KEYS = ("totalrecordsperquery", "totalrecords", "pages", "page")
_TOKEN_INFO_KEYS = ("next", "prev")


def empty_envelope() -> ResultEnvelope:
    return {"info": {}, "records": []}


def normalize_info(raw: Dict[str, Any]) -> PageInfo:
    info: PageInfo = {}
    for key, value in raw.items():
        if key in _INT_INFO_KEYS:
            if isinstance(value, bool) or value is None:
                continue
            try:
                info[key] = int(value)
            except (TypeError, ValueError):
                continue
        elif key in _TOKEN_INFO_KEYS:
            if isinstance(value, str) and value.strip():
                info[key] = value.strip()
        else:
            info[key] = value
    return info


def build_envelope(payload: Any) -> ResultEnvelope:
    """
    Validate a decoded API payload and shape it as a ResultEnvelope.

    Args:
        payload: Decoded JSON body

    Returns:
        ResultEnvelope with normalized pagination info and the records in API order

    Raises:
        DecodeError: If the payload is not an object with a ``records`` list
    """
    if not isinstance(payload, dict):
        raise DecodeError("response body is not a JSON object", details={"type": type(payload).__name__})

    if "error" in payload and "records" not in payload:
        raise DecodeError(f"API returned an error payload: {payload.get('error')}", details={"error": payload.get("error")})

    records = payload.get("records")
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise DecodeError("response has no list of record objects", details={"keys": sorted(payload)})

    info = payload.get("info") or {}
    if not isinstance(info, dict):
        raise DecodeError("response info is not an object", details={"type": type(info).__name__})

    return {"info": normalize_info(info), "records": list(records)}


def next_token(envelope: Optional[ResultEnvelope]) -> Optional[str]:
    if not envelope:
        return None
    return envelope.get("info", {}).get("next") or None


def prev_token(envelope: Optional[ResultEnvelope]) -> Optional[str]:
    if not envelope:
        return None
    return envelope.get("info", {}).get("prev") or None
