from typing import Any, Callable, Dict, Optional

from .templating import render_partial
from ..core.error import InvalidQueryError
from ..core.state import SetBusy, SetFeatured, SetResults
from ..models.schema import Record, ResultEnvelope, next_token, prev_token
from ..retrievers.base import QueryClient
from ..search.facets import is_present
from ..search.searcher import run_lookup

PAGE_ACTION = "/actions/page"
FEATURE_ACTION = "/actions/feature"
MISSING_TITLE = "MISSING INFO"


def _preview(record: Record) -> Dict[str, str]:
    image_url = record.get("primaryimageurl")
    title = record.get("title")
    return {
        "image": str(image_url) if is_present(image_url) else "",
        "alt": str(record.get("description") or ""),
        "heading": str(title) if is_present(title) else MISSING_TITLE,
    }


class ResultPreviewList:
    """Paged list of the current results; picks the featured record."""

    def __init__(
        self,
        client: QueryClient,
        get_results: Callable[[], ResultEnvelope],
        set_busy: SetBusy,
        set_results: SetResults,
        set_featured: SetFeatured,
    ) -> None:
        self._client = client
        self._get_results = get_results
        self._set_busy = set_busy
        self._set_results = set_results
        self._set_featured = set_featured

    def context(self, results: ResultEnvelope) -> Dict[str, Any]:
        return {
            "action": PAGE_ACTION,
            "feature_action": FEATURE_ACTION,
            "has_prev": bool(prev_token(results)),
            "has_next": bool(next_token(results)),
            "previews": [_preview(record) for record in results.get("records", [])],
        }

    def render(self, results: ResultEnvelope) -> str:
        return render_partial("preview.html", **self.context(results))

    async def _turn(self, token: Optional[str], direction: str) -> bool:
        if not token:
            return False
        return await run_lookup(
            lambda: self._client.lookup_page(token),
            self._set_busy,
            self._set_results,
            context={"page": direction},
        )

    async def next_page(self) -> bool:
        return await self._turn(next_token(self._get_results()), "next")

    async def previous_page(self) -> bool:
        return await self._turn(prev_token(self._get_results()), "previous")

    def select(self, index: int) -> Record:
        records = self._get_results().get("records", [])
        if not 0 <= index < len(records):
            raise InvalidQueryError(f"no record at index {index}", details={"index": index, "count": len(records)})
        record = records[index]
        self._set_featured(record)
        return record
