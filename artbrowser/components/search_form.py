from typing import Optional, Sequence

from .templating import render_partial
from ..core.state import SetBusy, SetResults
from ..retrievers.base import QueryClient
from ..search.searcher import run_lookup

SEARCH_ACTION = "/actions/search"


class SearchForm:
    """Keyword / classification / century query form."""

    def __init__(self, client: QueryClient, set_busy: SetBusy, set_results: SetResults) -> None:
        self._client = client
        self._set_busy = set_busy
        self._set_results = set_results

    def render(self, classifications: Sequence[str] = (), centuries: Sequence[str] = ()) -> str:
        return render_partial(
            "search_form.html",
            action=SEARCH_ACTION,
            classifications=list(classifications),
            centuries=list(centuries),
        )

    async def submit(
        self,
        keyword: Optional[str] = None,
        classification: Optional[str] = None,
        century: Optional[str] = None,
    ) -> bool:
        return await run_lookup(
            lambda: self._client.search(keyword=keyword, classification=classification, century=century),
            self._set_busy,
            self._set_results,
            context={"keyword": keyword, "classification": classification, "century": century},
        )
